"""
fit_point.py - Values consumed and produced by the cluster line fit
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Iterable, List, Optional

import numpy as np

from clusterfit.math_utils.general import FLOAT_EPS, unit_vector
from clusterfit.status import StatusCode, StatusCodeError


def _frozen_vector(vec) -> np.ndarray:
    vec = np.array(vec, dtype=float).reshape(3)
    vec.setflags(write=False)
    return vec


@dataclass(frozen=True, eq=False)
class FitPoint:
    """One 3D sample contributing to a fit."""
    position: np.ndarray            # (x, y, z)
    cell_normal_vector: np.ndarray  # unit vector, normalised on construction
    cell_size: float
    energy: float
    layer: int

    def __post_init__(self):
        if not self.cell_size >= FLOAT_EPS:
            raise StatusCodeError(StatusCode.INVALID_PARAMETER,
                                  f"cell size {self.cell_size} must be positive")
        if self.layer < 0:
            raise StatusCodeError(StatusCode.INVALID_PARAMETER,
                                  f"layer {self.layer} must be non-negative")
        object.__setattr__(self, "position", _frozen_vector(self.position))
        object.__setattr__(self, "cell_normal_vector",
                           _frozen_vector(unit_vector(self.cell_normal_vector)))
        object.__setattr__(self, "cell_size", float(self.cell_size))
        object.__setattr__(self, "energy", float(self.energy))
        object.__setattr__(self, "layer", int(self.layer))

    @classmethod
    def from_hit(cls, hit) -> "FitPoint":
        return cls(hit.position, hit.cell_normal_vector, hit.cell_size, hit.energy, hit.layer)


def compare_fit_points(lhs: FitPoint, rhs: FitPoint) -> int:
    """
    Canonical ordering of fit points, used so the regression sees
        the same input order whatever order the hits arrived in.
    Descending z, then x, then y (coordinates within float32 epsilon
        count as equal), then descending energy.
    Returns -1 if lhs sorts first, 1 if rhs does, 0 if tied.
    """
    delta = rhs.position - lhs.position
    for idx in (2, 0, 1):
        if abs(delta[idx]) > FLOAT_EPS:
            return -1 if delta[idx] < 0 else 1
    if lhs.energy > rhs.energy:
        return -1
    if lhs.energy < rhs.energy:
        return 1
    return 0


def sort_fit_points(points: Iterable[FitPoint]) -> List[FitPoint]:
    return sorted(points, key=cmp_to_key(compare_fit_points))


@dataclass(eq=False)
class FitResult:
    """
    Output of a line fit. Only meaningful when success_flag is set
        and the accompanying status is SUCCESS.
    """
    direction: Optional[np.ndarray] = None
    intercept: Optional[np.ndarray] = None
    chi2: Optional[float] = None
    rms: Optional[float] = None
    radial_direction_cosine: Optional[float] = None
    success_flag: bool = field(default=False)

    def reset(self):
        self.direction = None
        self.intercept = None
        self.chi2 = None
        self.rms = None
        self.radial_direction_cosine = None
        self.success_flag = False
