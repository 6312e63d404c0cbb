from __future__ import annotations

import logging
from typing import Optional

from ..core.errors import EmptyPaletteError
from ..models.color import Color, MatchResult
from .metrics import EUCLIDEAN, DistanceMetric
from .palette_loader import Palette

logger = logging.getLogger(__name__)


def nearest_color(
    color: Color,
    palette: Palette,
    metric: Optional[DistanceMetric] = None,
) -> MatchResult:
    """
    Return the palette entry closest to ``color``.

    Scans the whole palette; on equal distances the entry that comes first in
    the palette's canonical order wins.
    """
    metric = metric or EUCLIDEAN
    best = None
    best_distance = float("inf")
    for entry in palette:
        d = metric.distance(color, entry.color)
        if d < best_distance:
            best, best_distance = entry, d
            if d == 0.0:
                break

    if best is None:
        logger.error("Cannot match %s: palette is empty", color.hex)
        raise EmptyPaletteError()

    logger.debug("Nearest to %s is %s (%s=%.4f)", color.hex, best.color_name, metric.name, best_distance)
    return MatchResult(name=best.color_name, value=best.value, color=best.color, distance=best_distance)


def match_percentage(distance: float, metric: Optional[DistanceMetric] = None) -> float:
    """Map a distance onto [0, 100]; 100 is an exact match."""
    metric = metric or EUCLIDEAN
    if distance <= 0:
        return 100.0
    if distance >= metric.max_distance:
        return 0.0
    pct = 100.0 * (1.0 - distance / metric.max_distance)
    return min(100.0, max(0.0, pct))


__all__ = ["nearest_color", "match_percentage"]
