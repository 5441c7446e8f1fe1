"""Interface for alpha-carbon structure loaders."""

import logging
from abc import ABC, abstractmethod
from typing import List

from ..domain.models.residue import Residue

logger = logging.getLogger(__name__)


class StructureLoader(ABC):
    """Abstract base class for reading one Residue per alpha carbon."""

    @abstractmethod
    def load(self, path: str) -> List[Residue]:
        """
        Read alpha-carbon residues from a structure file.

        Args:
            path: Path to the structure file

        Returns:
            Unique residues (first occurrence per index), ascending by index

        Raises:
            FileError: File missing, unreadable or empty after the header
            ParseError: A selected row holds a non-numeric index or coordinate
            EmptySelectionError: No ATOM + CA rows were found
        """
        pass

    @staticmethod
    def check_numbering(residues: List[Residue], path: str) -> None:
        """Warn when residue numbering does not run 1..N without gaps."""
        if not residues:
            return
        indices = [residue.index for residue in residues]
        expected = list(range(1, len(indices) + 1))
        if indices != expected:
            logger.warning(
                f"{path}: residue numbering runs {indices[0]}..{indices[-1]} "
                f"over {len(indices)} residues (not contiguous from 1)"
            )
