import numpy as np
from numpy import asarray as arr

from clusterfit.status import StatusCode, StatusCodeError

FLOAT_EPS = float(np.finfo(np.float32).eps)
DOUBLE_EPS = float(np.finfo(np.float64).eps)


def unit_vector(vector):
    """Returns the unit vector of the vector."""
    vector = arr(vector, dtype=float)
    mag = np.linalg.norm(vector)
    if mag < FLOAT_EPS:
        raise StatusCodeError(StatusCode.FAILURE, "cannot normalise a zero length vector")
    return vector / mag


def cos_opening_angle(a, b):
    """Cosine of the angle between vectors a and b"""
    a, b = arr(a, dtype=float), arr(b, dtype=float)
    mags = np.linalg.norm(a) * np.linalg.norm(b)
    if mags < FLOAT_EPS:
        raise StatusCodeError(StatusCode.FAILURE, "opening angle undefined for zero length vector")
    return float(np.clip(np.dot(a, b) / mags, -1.0, 1.0))


def rodrigues_matrix(axis, cos_theta, sin_theta):
    """
    Rotation by theta about the unit vector 'axis'.
    Algorithm from https://en.wikipedia.org/wiki/Rodrigues%27_rotation_formula#Matrix_notation
        R = cI + s[k]x + (1-c)kk^T
    """
    x, y, z = arr(axis, dtype=float)
    # The skew-symmetric cross product matrix of axis
    kx = np.array([[0, -z, y], [z, 0, -x], [-y, x, 0]])
    return (cos_theta * np.eye(3)
            + sin_theta * kx
            + (1 - cos_theta) * np.outer([x, y, z], [x, y, z]))


def rotation_to_axis(direction, reference=(0.0, 0.0, 1.0),
                     parallel_cos=0.99, fallback_axis=(1.0, 0.0, 0.0)):
    """
    Returns matrix R such that R @ direction ~ reference.
    When direction is (anti)parallel to reference the cross product
        is ill defined, so fallback_axis (orthogonal to reference)
        is rotated about instead.
    """
    cos_theta = cos_opening_angle(direction, reference)
    sin_theta = np.sin(np.arccos(cos_theta))
    if abs(cos_theta) > parallel_cos:
        axis = arr(fallback_axis, dtype=float)
    else:
        axis = unit_vector(np.cross(direction, reference))
    return rodrigues_matrix(axis, cos_theta, sin_theta)


def get_center(points, weights=None):
    """
    Average of each coordinate value.
        Optionally weighted.
    """
    points = arr(points, dtype=float)
    if len(points) == 0:
        raise StatusCodeError(StatusCode.NOT_INITIALIZED, "no points to average")
    return np.average(points, axis=0, weights=weights)
