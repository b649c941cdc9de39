"""
cluster.py - Minimal calorimeter hit and cluster containers

The fit helpers only need hits grouped by layer, read in
    ascending layer order, and a per layer centroid.
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

import numpy as np

from clusterfit.math_utils.general import get_center


@dataclass(frozen=True, eq=False)
class CaloHit:
    """A single energy deposit"""
    position: np.ndarray
    cell_normal_vector: np.ndarray
    cell_size: float
    energy: float
    layer: int

    def __post_init__(self):
        object.__setattr__(self, "position", np.asarray(self.position, dtype=float))
        object.__setattr__(self, "cell_normal_vector",
                           np.asarray(self.cell_normal_vector, dtype=float))


class Cluster:
    """Hits keyed by layer. Every stored layer holds at least one hit."""

    def __init__(self, hits: Optional[Iterable[CaloHit]] = None):
        self._hits_by_layer = defaultdict(list)
        for hit in hits or []:
            self.add_hit(hit)

    def add_hit(self, hit: CaloHit):
        self._hits_by_layer[hit.layer].append(hit)

    @property
    def ordered_hits(self) -> Dict[int, Tuple[CaloHit, ...]]:
        """Layer -> hits, ascending by layer"""
        return {layer: tuple(self._hits_by_layer[layer])
                for layer in sorted(self._hits_by_layer)}

    @property
    def n_occupied_layers(self) -> int:
        return len(self._hits_by_layer)

    def centroid_at(self, layer: int) -> np.ndarray:
        """Unweighted mean position of the hits in 'layer'"""
        hits = self._hits_by_layer.get(layer, [])
        return get_center([hit.position for hit in hits])

    def __len__(self):
        return sum(len(hits) for hits in self._hits_by_layer.values())
