"""Core domain models, interfaces and services for probe potentials."""

from .config import PotentialConfig
from .domain.models import BLNCategory, PotentialResult, QueryPoint, Residue
from .interfaces.structure_loader import StructureLoader
from .services.potential_service import PotentialService, compute_potential

__all__ = [
    "PotentialConfig",
    "BLNCategory",
    "PotentialResult",
    "QueryPoint",
    "Residue",
    "StructureLoader",
    "PotentialService",
    "compute_potential",
]
