"""Line fit engine and the cluster point selectors that feed it."""

__version__ = "0.1.0"

from .fit import (
    fit_points,
    perform_linear_fit,
    linear_regression,
    layer_slope,
)
from .selection import (
    fit_start,
    fit_end,
    fit_full_cluster,
    fit_layers,
    fit_layer_centroids,
    layer_centroid_point,
)

__all__ = [
    # fit
    "fit_points",
    "perform_linear_fit",
    "linear_regression",
    "layer_slope",
    # selection
    "fit_start",
    "fit_end",
    "fit_full_cluster",
    "fit_layers",
    "fit_layer_centroids",
    "layer_centroid_point",
]
