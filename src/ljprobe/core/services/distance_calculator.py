# src/ljprobe/core/services/distance_calculator.py
"""Euclidean distances between the query point and residue positions."""

from typing import Iterable, List, Sequence, Union

import numpy as np

from ..domain.models.residue import QueryPoint, Residue

PointLike = Union[QueryPoint, Sequence[float], np.ndarray]


def _as_vector(point: PointLike) -> np.ndarray:
    if isinstance(point, QueryPoint):
        return point.as_array()
    vector = np.asarray(point, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"Expected a 3D point, got shape {vector.shape}")
    return vector


def distance(position: PointLike, query: PointLike) -> float:
    """Euclidean distance between two 3D points, in double precision."""
    diff = _as_vector(position) - _as_vector(query)
    return float(np.sqrt(np.sum(diff * diff)))


def distances(positions: Union[Sequence[Sequence[float]], np.ndarray], query: PointLike) -> np.ndarray:
    """
    Distances from every row of an (N, 3) array to the query point.

    Args:
        positions: Residue coordinates with shape [N, 3]
        query: Query point

    Returns:
        Array of N non-negative distances
    """
    coords = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
    diff = coords - _as_vector(query)
    return np.sqrt(np.sum(diff * diff, axis=1))


def assign_distances(residues: Iterable[Residue], query: PointLike) -> List[Residue]:
    residues = list(residues)
    if not residues:
        return []
    values = distances([residue.position for residue in residues], query)
    return [residue.with_distance(d) for residue, d in zip(residues, values)]
