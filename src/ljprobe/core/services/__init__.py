"""Core business logic services."""

from .aggregator import total_potential
from .distance_calculator import assign_distances, distance, distances
from .potential_evaluator import LJ_TERMS, assign_potentials, evaluate
from .potential_service import PotentialService, compute_potential

__all__ = [
    "total_potential",
    "assign_distances",
    "distance",
    "distances",
    "LJ_TERMS",
    "assign_potentials",
    "evaluate",
    "PotentialService",
    "compute_potential",
]
