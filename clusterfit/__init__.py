"""
Directed straight line fits to calorimeter clusters.

    from clusterfit import Cluster, CaloHit, fit_full_cluster
    status, result = fit_full_cluster(cluster)
"""

__version__ = "0.1.0"

from .status import StatusCode, StatusCodeError
from .geometry import CaloHit, Cluster, FitPoint, FitResult, sort_fit_points
from .fitting import (
    fit_points,
    perform_linear_fit,
    fit_start,
    fit_end,
    fit_full_cluster,
    fit_layers,
    fit_layer_centroids,
)

__all__ = [
    "StatusCode",
    "StatusCodeError",
    "CaloHit",
    "Cluster",
    "FitPoint",
    "FitResult",
    "sort_fit_points",
    "fit_points",
    "perform_linear_fit",
    "fit_start",
    "fit_end",
    "fit_full_cluster",
    "fit_layers",
    "fit_layer_centroids",
]
