from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..color.metrics import EUCLIDEAN, DistanceMetric
from ..color.palette_loader import Palette, load_palette
from ..color.palette_matcher import match_percentage, nearest_color
from ..color.parser import parse_color
from ..models.color import MatchResult
from .errors import ColorParseError, EmptyInputError, EmptyPaletteError, PaletteError

logger = logging.getLogger(__name__)


def ensure_query(query: Optional[str]) -> str:
    """Reject missing or blank queries before they reach the parser."""
    if query is None or not query.strip():
        raise EmptyInputError()
    return query


@dataclass(frozen=True)
class MatchOutcome:
    """Either a match or the error that prevented one. Check ``ok`` before reading ``result``."""

    query: Optional[str]
    metric: DistanceMetric
    result: Optional[MatchResult] = None
    error: Optional[PaletteError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None

    @property
    def percentage(self) -> Optional[float]:
        if self.result is None:
            return None
        return match_percentage(self.result.distance, self.metric)

    @property
    def user_message(self) -> Optional[str]:
        return self.error.user_message if self.error is not None else None

    def unwrap(self) -> MatchResult:
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


def parse_and_match(
    query: Optional[str],
    palette: Optional[Palette] = None,
    metric: Optional[DistanceMetric] = None,
) -> MatchOutcome:
    palette = load_palette() if palette is None else palette
    metric = metric or EUCLIDEAN

    try:
        text = ensure_query(query)
        color = parse_color(text)
        result = nearest_color(color, palette, metric)
    except (EmptyInputError, ColorParseError) as exc:
        logger.info("Rejected query %r: %s", query, exc)
        return MatchOutcome(query=query, metric=metric, error=exc)
    except EmptyPaletteError as exc:
        logger.error("Palette is empty, cannot match %r", query)
        return MatchOutcome(query=query, metric=metric, error=exc)

    return MatchOutcome(query=query, metric=metric, result=result)


__all__ = ["MatchOutcome", "ensure_query", "parse_and_match"]
