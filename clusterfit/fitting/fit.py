import numpy as np
from numpy import asarray as arr

from clusterfit.set_config import config, log
from clusterfit.status import StatusCode, StatusCodeError
from clusterfit.geometry.fit_point import FitResult, sort_fit_points
from clusterfit.math_utils.general import (
    DOUBLE_EPS,
    FLOAT_EPS,
    get_center,
    rotation_to_axis,
    unit_vector,
)


def fit_points(points, result=None):
    """
    Fits a directed straight line through a list of FitPoints.

    The points are put in canonical order, then their mean position
        and summed cell normals seed perform_linear_fit.
    Returns (StatusCode, FitResult). With fewer than two points
        INVALID_PARAMETER is returned and 'result' is left as it was.
    """
    if result is None:
        result = FitResult()
    points = sort_fit_points(points)
    n_points = len(points)
    log.debug(f"Number of points for fit: {n_points}")

    if n_points < config['fit']['min_fit_points']:
        return StatusCode.INVALID_PARAMETER, result

    result.reset()
    try:
        centroid = get_center([pt.position for pt in points])
        direction = unit_vector(np.sum([pt.cell_normal_vector for pt in points], axis=0))
    except StatusCodeError as err:
        log.warning(f"linear fit to cluster failed: {err}")
        result.success_flag = False
        return err.status_code, result
    return _linear_fit(centroid, direction, points, result)


def linear_regression(r, p, q):
    """
    Closed form unweighted least squares of
        p = a_p*r + b_p and q = a_q*r + b_q.
    Returns (a_p, b_p, a_q, b_q), or None when the r values have
        no spread and the lines are undetermined.
    """
    r, p, q = arr(r, dtype=float), arr(p, dtype=float), arr(q, dtype=float)
    n = float(len(r))
    sum_r, sum_p, sum_q = r.sum(), p.sum(), q.sum()
    sum_pr, sum_qr, sum_rr = (p * r).sum(), (q * r).sum(), (r * r).sum()

    denominator = sum_r * sum_r - n * sum_rr
    if abs(denominator) < DOUBLE_EPS:
        return None

    a_p = (sum_r * sum_p - n * sum_pr) / denominator
    b_p = (sum_p - a_p * sum_r) / n
    a_q = (sum_r * sum_q - n * sum_qr) / denominator
    b_q = (sum_q - a_q * sum_r) / n
    return a_p, b_p, a_q, b_q


def layer_slope(along, layers):
    """
    Slope of the position along the fitted direction against layer.
        None if every point sits on the same layer.
    """
    a, l = arr(along, dtype=float), arr(layers, dtype=float)
    n = float(len(a))
    sum_a, sum_l = a.sum(), l.sum()
    sum_al, sum_ll = (a * l).sum(), (l * l).sum()

    denominator = sum_l * sum_l - n * sum_ll
    if abs(denominator) <= DOUBLE_EPS:
        return None
    return (sum_l * sum_a - n * sum_al) / denominator


def perform_linear_fit(central_position, central_direction, points, result=None):
    """
    Refines an initial line estimate (central_position, central_direction).

    The frame is rotated so central_direction lies along the reference
        axis, and the transverse coordinates (p, q) are regressed against
        the longitudinal one (r). The fitted line is rotated back and
        oriented: first away from the origin, then along increasing layer.
        The layer orientation has the final say.
    """
    if result is None:
        result = FitResult()
    return _linear_fit(central_position, central_direction, sort_fit_points(points), result)


def _linear_fit(central_position, central_direction, points, result):
    """points must already be in sort_fit_points order"""
    fit_cfg = config['fit']
    if len(points) == 0:
        return StatusCode.INVALID_PARAMETER, result
    result.reset()

    central_position = arr(central_position, dtype=float)
    log.debug("Performing linear fit for cluster")
    log.debug(f"  initial position: {central_position}")
    log.debug(f"  initial direction: {central_direction}")

    try:
        rot = rotation_to_axis(central_direction,
                               reference=fit_cfg['reference_axis'],
                               parallel_cos=fit_cfg['parallel_cos_threshold'],
                               fallback_axis=fit_cfg['fallback_rotation_axis'])
    except StatusCodeError as err:
        log.warning(f"linear fit to cluster failed: {err}")
        result.success_flag = False
        return err.status_code, result

    positions = arr([pt.position for pt in points])
    # centroid relative, rotated frame; r runs along central_direction
    p, q, r = ((positions - central_position) @ rot.T).T

    coeffs = linear_regression(r, p, q)
    if coeffs is None:
        log.warning("  fit failed")
        result.success_flag = False
        return StatusCode.FAILURE, result
    a_p, b_p, a_q, b_q = coeffs

    # rot is orthogonal so rot.T undoes it
    direction = rot.T @ unit_vector([a_p, a_q, 1.0])
    intercept = central_position + rot.T @ arr([b_p, b_q, 0.0])

    intercept_mag = np.linalg.norm(intercept)
    dir_cos_r = 0.0
    if intercept_mag > FLOAT_EPS:
        dir_cos_r = float(np.dot(direction, intercept) / intercept_mag)
    if dir_cos_r < 0:
        dir_cos_r = -dir_cos_r
        direction = -direction

    sigma = arr([pt.cell_size for pt in points]) / fit_cfg['resolution_divisor']
    chi_p = (p - a_p * r - b_p) / sigma
    chi_q = (q - a_q * r - b_q) / sigma
    n_points = float(len(points))

    difference = positions - intercept
    perp_sq = np.sum(np.cross(direction, difference) ** 2, axis=1)

    slope = layer_slope(difference @ direction, [pt.layer for pt in points])
    if slope is not None and slope < 0:
        direction = -direction

    result.direction = direction
    result.intercept = intercept
    result.chi2 = float((np.sum(chi_p ** 2) + np.sum(chi_q ** 2)) / n_points)
    result.rms = float(np.sqrt(np.sum(perp_sq) / n_points))
    result.radial_direction_cosine = dir_cos_r
    result.success_flag = True

    log.debug("  fit successful")
    log.debug(f"  final position: {intercept}")
    log.debug(f"  final direction: {direction}")
    log.debug(f"  rms: {result.rms}")
    log.debug(f"  cos(dRdir): {dir_cos_r}")
    return StatusCode.SUCCESS, result
