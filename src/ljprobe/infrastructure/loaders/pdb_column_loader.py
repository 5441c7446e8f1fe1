# src/ljprobe/infrastructure/loaders/pdb_column_loader.py
"""Loader reading fixed-width PDB columns through Biopython."""

import logging
import os
import warnings
from typing import List

from Bio.PDB.PDBExceptions import PDBConstructionException, PDBConstructionWarning
from Bio.PDB.PDBParser import PDBParser

from ...core.domain.models.residue import Residue
from ...core.exceptions import EmptySelectionError, FileError, ParseError
from ...core.interfaces.structure_loader import StructureLoader

logger = logging.getLogger(__name__)


class PDBColumnLoader(StructureLoader):
    """
    Read alpha carbons from a strict PDB file.

    Only the first model is used. Standard residues (ATOM records) holding a
    CA atom contribute one record each; HETATM groups and waters are ignored.
    """

    def __init__(self, permissive: bool = True):
        self._parser = PDBParser(QUIET=True, PERMISSIVE=permissive)

    def load(self, path: str) -> List[Residue]:
        if not os.path.isfile(path):
            raise FileError(f"File '{path}' not found")
        if not self._has_records(path):
            raise FileError(f"'{path}' has no records after the header line")

        try:
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", PDBConstructionWarning)
                structure = self._parser.get_structure("probe", path)
        except (PDBConstructionException, ValueError) as e:
            raise ParseError(f"Could not parse '{path}': {e}")
        except OSError as e:
            raise FileError(f"Could not read '{path}': {e}")

        models = list(structure)
        if not models:
            raise EmptySelectionError(f"No ATOM records with CA atoms in {path}")
        if len(models) > 1:
            logger.info(f"{path} holds {len(models)} models, using the first")

        residues = []
        seen = set()
        for residue in models[0].get_residues():
            hetero_flag, res_seq, _ = residue.id
            if hetero_flag != " " or "CA" not in residue:
                continue
            if res_seq in seen:
                logger.debug(f"Skipping duplicate residue {res_seq} in {path}")
                continue
            seen.add(res_seq)
            x, y, z = (float(c) for c in residue["CA"].get_coord())
            residues.append(
                Residue(index=int(res_seq), name=residue.get_resname(), position=(x, y, z))
            )

        if not residues:
            raise EmptySelectionError(f"No ATOM records with CA atoms in {path}")

        residues.sort(key=lambda r: r.index)
        self.check_numbering(residues, path)
        logger.info(f"Loaded {len(residues)} residues from {path}")
        return residues

    @staticmethod
    def _has_records(path: str) -> bool:
        try:
            with open(path, "r") as f:
                next(f, None)
                return any(line.strip() for line in f)
        except UnicodeDecodeError as e:
            raise FileError(f"'{path}' is not a text file: {e}")
        except OSError as e:
            raise FileError(f"Could not read '{path}': {e}")
