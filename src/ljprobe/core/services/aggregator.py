"""Summation of per-residue contributions."""

import math
from typing import Iterable

from ..domain.models.residue import Residue
from ..exceptions import NumericDegeneracyError


def total_potential(residues: Iterable[Residue]) -> float:
    """Sum of every residue's potential, each counted once."""
    total = 0.0
    for residue in residues:
        if residue.potential is None:
            raise ValueError(f"Residue {residue.index} has no potential assigned")
        total += residue.potential
    if not math.isfinite(total):
        raise NumericDegeneracyError(f"Total potential is not finite ({total})")
    return total
