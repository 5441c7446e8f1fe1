# src/ljprobe/core/services/potential_evaluator.py
"""
Per-residue Lennard-Jones contributions under the BLN model.

Hydrophilic and hydrophobic residues use ``4*eps*((s/d)**12 + (s/d)**6)``,
with the hydrophilic well depth scaled to two thirds of ``epsilon_h``.
Neutral residues keep only the repulsive ``4*eps*(s/d)**12`` term.
"""

import logging
import math
from typing import Dict, Iterable, List, NamedTuple, Optional

from ..config import PotentialConfig
from ..domain.models.residue import BLNCategory, Residue
from ..exceptions import NumericDegeneracyError

logger = logging.getLogger(__name__)


class LJTerm(NamedTuple):
    """Shape of the potential for one BLN category."""

    epsilon_scale: float
    attractive: bool


LJ_TERMS: Dict[BLNCategory, LJTerm] = {
    BLNCategory.HYDROPHILIC: LJTerm(epsilon_scale=2.0 / 3.0, attractive=True),
    BLNCategory.NEUTRAL: LJTerm(epsilon_scale=1.0, attractive=False),
    BLNCategory.HYDROPHOBIC: LJTerm(epsilon_scale=1.0, attractive=True),
}

_missing = set(BLNCategory) - set(LJ_TERMS)
if _missing:
    raise RuntimeError(f"No LJ term defined for {sorted(c.name for c in _missing)}")


def evaluate(
    category: BLNCategory,
    distance: float,
    config: PotentialConfig,
    residue_index: Optional[int] = None,
) -> float:
    """
    Lennard-Jones contribution of one residue.

    Args:
        category: BLN class of the residue
        distance: Distance to the query point (Angstroms)
        config: Well depth and sigma
        residue_index: Reported in the error raised for a degenerate distance

    Returns:
        Potential in kcal/mol

    Raises:
        NumericDegeneracyError: If the distance is zero or the result is not finite
    """
    if distance == 0:
        raise NumericDegeneracyError(
            f"Query point coincides with {_describe(residue_index)}; "
            "potential is undefined at zero distance",
            residue_index=residue_index,
        )

    term = LJ_TERMS[category]
    epsilon = term.epsilon_scale * config.epsilon_h
    try:
        ratio = config.sigma / distance
        repulsive = ratio**12
        if term.attractive:
            value = 4 * epsilon * (repulsive + ratio**6)
        else:
            value = 4 * epsilon * repulsive
    except OverflowError:
        value = math.inf

    if not math.isfinite(value):
        raise NumericDegeneracyError(
            f"Potential of {_describe(residue_index)} at distance {distance} "
            f"with sigma {config.sigma} is not finite",
            residue_index=residue_index,
        )
    return value


def _describe(residue_index: Optional[int]) -> str:
    return f"residue {residue_index}" if residue_index is not None else "a residue"


def assign_potentials(
    residues: Iterable[Residue], config: PotentialConfig
) -> List[Residue]:
    scored = []
    for residue in residues:
        if residue.category is None or residue.distance is None:
            raise ValueError(
                f"Residue {residue.index} needs a category and distance before scoring"
            )
        value = evaluate(residue.category, residue.distance, config, residue.index)
        scored.append(residue.with_potential(value))
    return scored
