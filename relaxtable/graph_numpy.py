"""NumPy views of a weighted graph and its distance table."""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
import numpy.typing as npt

from .engine import RelaxationResult
from .graph import VertexKey, WeightedGraph


def weight_matrix(graph: WeightedGraph) -> Tuple[List[VertexKey], npt.NDArray[np.float64]]:
    """Return vertex keys and a dense weight matrix.

    Row ``i``/column ``j`` holds the weight of the edge ``keys[i] -> keys[j]``
    or ``inf`` if there is none. Parallel edges keep the smallest weight.
    """
    keys = graph.vertex_keys()
    index = {k: i for i, k in enumerate(keys)}
    mat = np.full((len(keys), len(keys)), np.inf, dtype=np.float64)
    for e in graph.edges:
        i, j = index[e.start], index[e.end]
        mat[i, j] = min(mat[i, j], float(e.weight))
    return keys, mat


def distance_vector(
    result: RelaxationResult, keys: Optional[List[VertexKey]] = None
) -> npt.NDArray[np.float64]:
    """Return ``distance_from_start`` for ``keys`` (table order by default)."""
    keys = keys if keys is not None else result.keys()
    return np.array([float(result.distance(k)) for k in keys], dtype=np.float64)


def save_weight_matrix(graph: WeightedGraph, path: str) -> None:
    """Write the weight matrix as CSV with the vertex keys as a header comment."""
    keys, mat = weight_matrix(graph)
    np.savetxt(path, mat, delimiter=",", fmt="%g", header=",".join(keys))
