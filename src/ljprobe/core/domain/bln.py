# src/ljprobe/core/domain/bln.py
"""BLN (hydrophoBic, hydrophiLic, Neutral) residue classification."""

from typing import FrozenSet, Iterable, List

from .models.residue import BLNCategory, Residue

HYDROPHILIC_RESIDUES: FrozenSet[str] = frozenset(
    {"ARG", "LYS", "ASN", "GLU", "PRO", "ASP"}
)
NEUTRAL_RESIDUES: FrozenSet[str] = frozenset({"THR", "HIS", "GLY", "SER", "GLN"})


def classify(residue_name: str) -> BLNCategory:
    """
    Map a three-letter residue code to its BLN category.

    Codes are matched case-sensitively. Anything outside the hydrophilic and
    neutral sets, non-standard residues included, is hydrophobic.
    """
    if residue_name in HYDROPHILIC_RESIDUES:
        return BLNCategory.HYDROPHILIC
    if residue_name in NEUTRAL_RESIDUES:
        return BLNCategory.NEUTRAL
    return BLNCategory.HYDROPHOBIC


def classify_residues(residues: Iterable[Residue]) -> List[Residue]:
    return [residue.with_category(classify(residue.name)) for residue in residues]
