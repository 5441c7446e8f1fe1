"""Domain model classes."""

from .residue import BLNCategory, QueryPoint, Residue
from .potential_result import PotentialResult

__all__ = [
    "BLNCategory",
    "QueryPoint",
    "Residue",
    "PotentialResult",
]
