# src/ljprobe/core/services/potential_service.py
"""Service computing the BLN Lennard-Jones potential at a query point."""

import logging
from typing import Optional

from ..config import DEFAULT_EPSILON_H, DEFAULT_SIGMA, PotentialConfig
from ..domain.bln import classify_residues
from ..domain.models.potential_result import PotentialResult
from ..domain.models.residue import QueryPoint
from ..interfaces.structure_loader import StructureLoader
from .aggregator import total_potential
from .distance_calculator import assign_distances
from .potential_evaluator import assign_potentials

logger = logging.getLogger(__name__)


class PotentialService:
    """
    Runs load -> classify -> distance -> potential -> sum for one query point.

    Each call is independent; nothing is cached between calls.
    """

    def __init__(self, loader: Optional[StructureLoader] = None):
        """
        Initialize service with a structure loader.

        Args:
            loader: Loader for alpha-carbon residues (whitespace table by default)
        """
        if loader is None:
            from ...infrastructure.loaders import WhitespaceTableLoader

            loader = WhitespaceTableLoader()
        self._loader = loader

    def compute(
        self,
        inputfile: str,
        x: float,
        y: float,
        z: float,
        epsilon_h: Optional[float] = None,
        sigma: Optional[float] = None,
    ) -> PotentialResult:
        """
        Compute the total potential and keep the per-residue breakdown.

        Args:
            inputfile: Structure file path
            x, y, z: Query point (Angstroms)
            epsilon_h: Hydrophobic well depth, kcal/mol (default 1)
            sigma: Interaction distance, Angstroms (default 5)

        Returns:
            PotentialResult with the total in kcal/mol
        """
        config = PotentialConfig(
            epsilon_h=DEFAULT_EPSILON_H if epsilon_h is None else epsilon_h,
            sigma=DEFAULT_SIGMA if sigma is None else sigma,
        )
        query = QueryPoint(x, y, z)
        logger.info(
            f"Computing potential at ({query.x}, {query.y}, {query.z}) "
            f"with epsilon_h={config.epsilon_h}, sigma={config.sigma}"
        )

        residues = self._loader.load(inputfile)
        residues = classify_residues(residues)
        residues = assign_distances(residues, query)
        residues = assign_potentials(residues, config)
        total = total_potential(residues)

        logger.info(f"Total potential over {len(residues)} residues: {total} kcal/mol")
        return PotentialResult(
            total=total,
            residues=tuple(residues),
            query_point=query,
            config=config,
            source=str(inputfile),
        )

    def compute_potential(
        self,
        inputfile: str,
        x: float,
        y: float,
        z: float,
        epsilon_h: Optional[float] = None,
        sigma: Optional[float] = None,
    ) -> float:
        """Total potential in kcal/mol."""
        return self.compute(inputfile, x, y, z, epsilon_h, sigma).total


def compute_potential(
    inputfile: str,
    x: float,
    y: float,
    z: float,
    epsilon_h: float = DEFAULT_EPSILON_H,
    sigma: float = DEFAULT_SIGMA,
) -> float:
    """Total BLN Lennard-Jones potential (kcal/mol) of a point against a structure."""
    return PotentialService().compute_potential(inputfile, x, y, z, epsilon_h, sigma)
