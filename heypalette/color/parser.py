from __future__ import annotations

import re

from ..core.errors import ColorParseError
from ..models.color import Color

HEX_RE = re.compile(r"^#?(?P<digits>[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
RGB_RE = re.compile(r"^(?P<func>rgba?)\s*\((?P<args>[^()]*)\)$", re.IGNORECASE)
CHANNEL_RE = re.compile(r"^[0-9]{1,3}$")
ALPHA_RE = re.compile(r"^([0-9]+(\.[0-9]*)?|\.[0-9]+)%?$")


def _parse_hex(digits: str) -> Color:
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return Color(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def _parse_channel(raw: str, text: str) -> int:
    if not CHANNEL_RE.match(raw):
        raise ColorParseError(text, f"invalid channel {raw!r}")
    value = int(raw)
    if value > 255:
        raise ColorParseError(text, f"channel {value} out of range")
    return value


def _parse_rgb(func: str, args: str, text: str) -> Color:
    parts = [part.strip() for part in args.split(",")]
    expected = 4 if func == "rgba" else 3
    if len(parts) != expected:
        raise ColorParseError(text, f"{func}() expects {expected} values")

    r, g, b = (_parse_channel(raw, text) for raw in parts[:3])
    if expected == 4 and not ALPHA_RE.match(parts[3]):
        raise ColorParseError(text, f"invalid alpha {parts[3]!r}")
    # alpha is accepted but never compared
    return Color(r=r, g=g, b=b)


def parse_color(text: str) -> Color:
    """
    Parse a user supplied color into a canonical ``Color``.

    Accepts ``#rrggbb``/``rrggbb``, ``#rgb``/``rgb`` and ``rgb(r, g, b)`` /
    ``rgba(r, g, b, a)``. Anything else raises ``ColorParseError``.
    """
    if not isinstance(text, str):
        raise ColorParseError(repr(text), "expected a string")

    candidate = text.strip()
    if not candidate:
        raise ColorParseError(text, "empty color value")

    match = HEX_RE.match(candidate)
    if match:
        return _parse_hex(match.group("digits"))

    match = RGB_RE.match(candidate)
    if match:
        return _parse_rgb(match.group("func").lower(), match.group("args"), text)

    raise ColorParseError(text)


def is_bare_hex(text: str) -> bool:
    """True for hex values typed without the leading ``#``."""
    candidate = text.strip()
    return bool(HEX_RE.match(candidate)) and not candidate.startswith("#")


__all__ = ["parse_color", "is_bare_hex"]
