"""
Distance metrics for palette matching.

Every metric is a plain Euclidean distance in its own feature space. Colors are
projected one at a time, so the same color always lands on the same coordinates
and a distance of zero means the inputs were identical.
"""

from __future__ import annotations

import itertools
import math
from typing import Callable, Dict, Tuple

import numpy as np

from ..core.types import MetricName
from ..models.color import Color

Projection = Callable[[Color], np.ndarray]

# sRGB (D65) -> XYZ
_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ],
    dtype=float,
)
_WHITE_D65 = np.array([0.95047, 1.0, 1.08883], dtype=float)
_LAB_EPSILON = 216 / 24389
_LAB_KAPPA = 24389 / 27

WEIGHTED_CHANNELS: Tuple[float, float, float] = (2.0, 4.0, 3.0)


def _project_rgb(color: Color) -> np.ndarray:
    return np.array(color.as_tuple(), dtype=float)


def _project_weighted(color: Color) -> np.ndarray:
    return _project_rgb(color) * np.sqrt(np.array(WEIGHTED_CHANNELS))


def _srgb_to_linear(channels: np.ndarray) -> np.ndarray:
    c = channels / 255.0
    return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def rgb_to_lab(color: Color) -> np.ndarray:
    """Convert an sRGB color to CIE-L*a*b* under a D65 white point."""
    xyz = _RGB_TO_XYZ @ _srgb_to_linear(_project_rgb(color))
    t = xyz / _WHITE_D65
    f = np.where(t > _LAB_EPSILON, np.cbrt(t), (_LAB_KAPPA * t + 16) / 116)
    return np.array(
        [
            116 * f[1] - 16,
            500 * (f[0] - f[1]),
            200 * (f[1] - f[2]),
        ]
    )


def _corner_spread(project: Projection) -> float:
    corners = [Color.from_tuple(rgb) for rgb in itertools.product((0, 255), repeat=3)]
    points = [project(c) for c in corners]
    return max(float(np.linalg.norm(a - b)) for a, b in itertools.combinations(points, 2))


class DistanceMetric:
    """Euclidean distance between two colors after projecting them."""

    def __init__(self, name: str, project: Projection, max_distance: float | None = None) -> None:
        self.name = name
        self._project = project
        # Widest pair of RGB cube corners, measured the same way distance() is.
        self.max_distance = max_distance if max_distance is not None else _corner_spread(project)

    def project(self, color: Color) -> np.ndarray:
        return self._project(color)

    def distance(self, a: Color, b: Color) -> float:
        if a == b:
            return 0.0
        return float(np.linalg.norm(self._project(a) - self._project(b)))

    def __repr__(self) -> str:
        return f"DistanceMetric({self.name!r}, max_distance={self.max_distance:.4f})"


EUCLIDEAN = DistanceMetric("euclidean", _project_rgb, max_distance=math.sqrt(3 * 255**2))
WEIGHTED = DistanceMetric("weighted", _project_weighted)
CIE76 = DistanceMetric("cie76", rgb_to_lab)

METRICS: Dict[str, DistanceMetric] = {m.name: m for m in (EUCLIDEAN, WEIGHTED, CIE76)}


def get_metric(name: MetricName | str) -> DistanceMetric:
    key = (name or "").strip().lower()
    try:
        return METRICS[key]
    except KeyError:
        raise ValueError(f"Unknown distance metric {name!r} (expected one of {sorted(METRICS)})") from None


__all__ = [
    "DistanceMetric",
    "EUCLIDEAN",
    "WEIGHTED",
    "CIE76",
    "METRICS",
    "get_metric",
    "rgb_to_lab",
]
