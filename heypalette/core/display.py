from __future__ import annotations

import re

from ..color.parser import is_bare_hex

_WORD_BOUNDARY_RE = re.compile(r"[_\-\s]+|(?<=[a-z0-9])(?=[A-Z])")


def sentence_case(text: str) -> str:
    """``"darkNeutrals"`` / ``"dark-neutrals"`` -> ``"Dark neutrals"``."""
    words = [w for w in _WORD_BOUNDARY_RE.split(text.strip()) if w]
    if not words:
        return ""
    sentence = " ".join(w.lower() for w in words)
    return sentence[0].upper() + sentence[1:]


def css_variable(color_name: str) -> str:
    return f"brand-{color_name}"


def match_label(percentage: float) -> str:
    if percentage == 100:
        return "exact match"
    return f"{percentage:.2f}% match"


def swatch_value(query: str) -> str:
    # Hex typed without '#' matches fine but is not a valid CSS color.
    candidate = query.strip()
    return f"#{candidate}" if is_bare_hex(candidate) else candidate


__all__ = ["css_variable", "match_label", "sentence_case", "swatch_value"]
