"""Common lightweight type aliases used across the matcher."""

from typing import Literal, Tuple

MetricName = Literal["euclidean", "weighted", "cie76"]
RGBTuple = Tuple[int, int, int]

__all__ = ["MetricName", "RGBTuple"]
