"""
selection.py - Choosing which hits of a cluster feed the line fit

Each fit_* function walks the cluster's layer -> hits mapping in
    layer order, turns the chosen hits into FitPoints and hands them
    to fit_points. All return (StatusCode, FitResult).
"""
from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from clusterfit.set_config import config, log
from clusterfit.status import StatusCode, StatusCodeError
from clusterfit.geometry.fit_point import FitPoint, FitResult
from clusterfit.fitting.fit import fit_points


def _check_occupancy(ordered_hits) -> Optional[StatusCode]:
    n_layers = len(ordered_hits)
    if n_layers == 0:
        log.debug("cluster has no occupied layers")
        return StatusCode.NOT_INITIALIZED
    if n_layers < config['fit']['min_occupied_layers']:
        log.debug(f"cluster has only {n_layers} occupied layer(s)")
        return StatusCode.OUT_OF_RANGE
    return None


def _fit_hits(layer_hits, result):
    """
    Builds FitPoints for every hit in the (layer, hits) pairs given and fits them.
    """
    try:
        points = [FitPoint.from_hit(hit) for _, hits in layer_hits for hit in hits]
    except StatusCodeError as err:
        log.debug(f"could not build fit point: {err}")
        return err.status_code, result
    return fit_points(points, result)


def _leading_layers(layer_hits, max_occupied_layers):
    selected = []
    for occupied_count, layer_and_hits in enumerate(layer_hits, start=1):
        if occupied_count > max_occupied_layers:
            break
        selected.append(layer_and_hits)
    return selected


def fit_start(cluster, max_occupied_layers: int, result: Optional[FitResult] = None):
    """Fits the hits of the first 'max_occupied_layers' occupied layers"""
    if result is None:
        result = FitResult()
    if max_occupied_layers < config['fit']['min_occupied_layers']:
        return StatusCode.INVALID_PARAMETER, result
    ordered_hits = cluster.ordered_hits
    status = _check_occupancy(ordered_hits)
    if status is not None:
        return status, result

    selected = _leading_layers(ordered_hits.items(), max_occupied_layers)
    return _fit_hits(selected, result)


def fit_end(cluster, max_occupied_layers: int, result: Optional[FitResult] = None):
    """Fits the hits of the last 'max_occupied_layers' occupied layers"""
    if result is None:
        result = FitResult()
    if max_occupied_layers < config['fit']['min_occupied_layers']:
        return StatusCode.INVALID_PARAMETER, result
    ordered_hits = cluster.ordered_hits
    status = _check_occupancy(ordered_hits)
    if status is not None:
        return status, result

    selected = _leading_layers(reversed(list(ordered_hits.items())), max_occupied_layers)
    return _fit_hits(selected, result)


def fit_full_cluster(cluster, result: Optional[FitResult] = None):
    if result is None:
        result = FitResult()
    ordered_hits = cluster.ordered_hits
    status = _check_occupancy(ordered_hits)
    if status is not None:
        return status, result
    return _fit_hits(ordered_hits.items(), result)


def _layers_in_range(ordered_hits, start_layer, end_layer):
    selected = []
    for layer, hits in ordered_hits.items():
        if layer < start_layer:
            continue
        # layers ascend, nothing further can be in range
        if layer > end_layer:
            break
        selected.append((layer, hits))
    return selected


def fit_layers(cluster, start_layer: int, end_layer: int, result: Optional[FitResult] = None):
    """Fits every hit with start_layer <= layer <= end_layer"""
    if result is None:
        result = FitResult()
    if start_layer >= end_layer:
        return StatusCode.INVALID_PARAMETER, result
    ordered_hits = cluster.ordered_hits
    status = _check_occupancy(ordered_hits)
    if status is not None:
        return status, result
    return _fit_hits(_layers_in_range(ordered_hits, start_layer, end_layer), result)


def layer_centroid_point(cluster, layer: int, hits) -> Tuple[StatusCode, Optional[FitPoint]]:
    """
    Collapses one layer into a single FitPoint:
        position - the cluster's centroid for the layer
        normal - sum of the hit normals, normalised
        cell size, energy - means over the layer's hits
    """
    n_hits = len(hits)
    if n_hits == 0:
        log.warning(f"layer {layer} has no hits")
        return StatusCode.FAILURE, None
    try:
        point = FitPoint(
            cluster.centroid_at(layer),
            np.sum([hit.cell_normal_vector for hit in hits], axis=0),
            sum(hit.cell_size for hit in hits) / n_hits,
            sum(hit.energy for hit in hits) / n_hits,
            layer,
        )
    except StatusCodeError as err:
        log.warning(f"could not build centroid for layer {layer}: {err}")
        return StatusCode.FAILURE, None
    return StatusCode.SUCCESS, point


def fit_layer_centroids(cluster, start_layer: int, end_layer: int,
                        result: Optional[FitResult] = None):
    """
    Fits one point per layer in [start_layer, end_layer]
        rather than every hit in those layers.
    """
    if result is None:
        result = FitResult()
    if start_layer >= end_layer:
        return StatusCode.INVALID_PARAMETER, result
    ordered_hits = cluster.ordered_hits
    status = _check_occupancy(ordered_hits)
    if status is not None:
        return status, result

    result.reset()
    points: List[FitPoint] = []
    for layer, hits in _layers_in_range(ordered_hits, start_layer, end_layer):
        status, point = layer_centroid_point(cluster, layer, hits)
        if status is not StatusCode.SUCCESS:
            return status, result
        points.append(point)
    return fit_points(points, result)
