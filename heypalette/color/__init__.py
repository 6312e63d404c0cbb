"""Color parsing, palette storage and nearest-color matching."""

from .metrics import CIE76, EUCLIDEAN, WEIGHTED, DistanceMetric, get_metric
from .palette_loader import Palette, build_palette, load_palette
from .palette_matcher import match_percentage, nearest_color
from .parser import parse_color

__all__ = [
    "CIE76",
    "EUCLIDEAN",
    "WEIGHTED",
    "DistanceMetric",
    "Palette",
    "build_palette",
    "get_metric",
    "load_palette",
    "match_percentage",
    "nearest_color",
    "parse_color",
]
