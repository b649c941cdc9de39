"""Vector helpers built on numpy arrays."""

__version__ = "0.1.0"

from .general import (
    FLOAT_EPS,
    DOUBLE_EPS,
    unit_vector,
    cos_opening_angle,
    rodrigues_matrix,
    rotation_to_axis,
    get_center,
)

__all__ = [
    "FLOAT_EPS",
    "DOUBLE_EPS",
    "unit_vector",
    "cos_opening_angle",
    "rodrigues_matrix",
    "rotation_to_axis",
    "get_center",
]
