"""Domain layer: residue models and BLN classification."""

from .bln import classify, classify_residues
from .models import BLNCategory, PotentialResult, QueryPoint, Residue

__all__ = [
    "classify",
    "classify_residues",
    "BLNCategory",
    "PotentialResult",
    "QueryPoint",
    "Residue",
]
