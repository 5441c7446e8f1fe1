"""Lennard-Jones potential of a probe point against protein alpha carbons (BLN model)."""

from .core import (
    BLNCategory,
    PotentialConfig,
    PotentialResult,
    PotentialService,
    QueryPoint,
    Residue,
    compute_potential,
)
from .core.exceptions import (
    ConfigurationError,
    EmptySelectionError,
    FileError,
    LJProbeError,
    NumericDegeneracyError,
    ParseError,
)

__version__ = "0.1.0"

__all__ = [
    "BLNCategory",
    "PotentialConfig",
    "PotentialResult",
    "PotentialService",
    "QueryPoint",
    "Residue",
    "compute_potential",
    "ConfigurationError",
    "EmptySelectionError",
    "FileError",
    "LJProbeError",
    "NumericDegeneracyError",
    "ParseError",
]
