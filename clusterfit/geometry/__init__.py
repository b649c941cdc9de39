"""Fit point values and the hit/cluster containers they are built from."""

__version__ = "0.1.0"

from .fit_point import (
    FitPoint,
    FitResult,
    compare_fit_points,
    sort_fit_points,
)
from .cluster import CaloHit, Cluster

__all__ = [
    # fit_point
    "FitPoint",
    "FitResult",
    "compare_fit_points",
    "sort_fit_points",
    # cluster
    "CaloHit",
    "Cluster",
]
