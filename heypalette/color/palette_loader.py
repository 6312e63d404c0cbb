from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from ..core.errors import ColorParseError, PaletteConfigError
from ..models.color import PaletteEntry
from .palette_data import BRAND_PALETTE
from .parser import parse_color

logger = logging.getLogger(__name__)

PaletteData = Mapping[str, Mapping[str, str]]


class Palette:
    """
    Read-only palette. Iterating yields entries in canonical order: groups in
    declaration order, then colors in declaration order within each group.
    """

    __slots__ = ("_entries", "_by_name", "_groups")

    def __init__(self, entries: Tuple[PaletteEntry, ...]) -> None:
        self._entries = tuple(entries)
        self._by_name = MappingProxyType({e.color_name: e for e in self._entries})
        groups: Dict[str, Dict[str, PaletteEntry]] = {}
        for entry in self._entries:
            groups.setdefault(entry.group_name, {})[entry.color_name] = entry
        self._groups = MappingProxyType({k: MappingProxyType(v) for k, v in groups.items()})

    @classmethod
    def empty(cls) -> "Palette":
        return cls(())

    @property
    def entries(self) -> Tuple[PaletteEntry, ...]:
        return self._entries

    def groups(self) -> Mapping[str, Mapping[str, PaletteEntry]]:
        return self._groups

    def get(self, color_name: str) -> Optional[PaletteEntry]:
        return self._by_name.get(color_name)

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, color_name: object) -> bool:
        return color_name in self._by_name

    def __repr__(self) -> str:
        return f"Palette({len(self._entries)} colors in {len(self._groups)} groups)"


def build_palette(data: PaletteData) -> Palette:
    """Build a palette from ``{group: {name: value}}`` data, validating every entry."""
    entries = []
    seen: Dict[str, str] = {}
    for group_name, colors in data.items():
        if not str(group_name).strip():
            raise PaletteConfigError("Palette group name must not be empty")
        for color_name, value in colors.items():
            if not str(color_name).strip():
                raise PaletteConfigError(f"Empty color name in group {group_name!r}")
            if color_name in seen:
                raise PaletteConfigError(
                    f"Duplicate color name {color_name!r} in groups {seen[color_name]!r} and {group_name!r}"
                )
            try:
                color = parse_color(value)
            except ColorParseError as exc:
                raise PaletteConfigError(f"Invalid value for {group_name}.{color_name}: {exc}") from exc
            seen[color_name] = group_name
            entries.append(
                PaletteEntry(group_name=group_name, color_name=color_name, value=value, color=color)
            )

    palette = Palette(tuple(entries))
    logger.debug("Built %r", palette)
    return palette


@lru_cache(maxsize=1)
def load_palette() -> Palette:
    return build_palette(BRAND_PALETTE)


__all__ = ["Palette", "PaletteData", "build_palette", "load_palette"]
