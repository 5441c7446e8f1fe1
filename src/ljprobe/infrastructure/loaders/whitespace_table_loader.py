# src/ljprobe/infrastructure/loaders/whitespace_table_loader.py
"""Loader for whitespace-tokenized PDB-like files."""

import csv
import io
import logging
import math
import re
from typing import List, Tuple

import pandas as pd

from ...core.domain.models.residue import Residue
from ...core.exceptions import EmptySelectionError, FileError, ParseError
from ...core.interfaces.structure_loader import StructureLoader

logger = logging.getLogger(__name__)

# Zero-based token positions in a whitespace-split ATOM record
RECORD_FIELD = 0
ATOM_NAME_FIELD = 2
RESIDUE_NAME_FIELD = 3
RESIDUE_INDEX_FIELD = 5
COORDINATE_FIELDS = (6, 7, 8)
MIN_FIELDS = max(COORDINATE_FIELDS) + 1

INTEGER_PATTERN = re.compile(r"[+-]?\d+")
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class WhitespaceTableLoader(StructureLoader):
    """
    Read alpha carbons by splitting each line on whitespace.

    The first line is a title and is always skipped. The widest line sets the
    column count and shorter lines are padded with empty fields, so ragged
    records (END, TER, REMARK, ...) never break the table.
    """

    def load(self, path: str) -> List[Residue]:
        line_numbers, lines = self._read_body(path)
        table = self._tabulate(line_numbers, lines)

        selected = table[
            (table[RECORD_FIELD] == "ATOM") & (table[ATOM_NAME_FIELD] == "CA")
        ]
        if selected.empty:
            raise EmptySelectionError(f"No ATOM records with CA atoms in {path}")
        logger.debug(f"Selected {len(selected)} ATOM/CA rows from {path}")

        residues = self._coerce(selected)
        n_selected = len(residues)
        residues = self._deduplicate(residues)
        if len(residues) < n_selected:
            logger.info(
                f"Collapsed {n_selected - len(residues)} duplicate CA rows in {path}"
            )

        self.check_numbering(residues, path)
        logger.info(f"Loaded {len(residues)} residues from {path}")
        return residues

    @staticmethod
    def _read_body(path: str) -> Tuple[List[int], List[str]]:
        """Return non-blank lines after the title, with their 1-based line numbers."""
        try:
            with open(path, "r") as f:
                lines = f.readlines()
        except FileNotFoundError:
            raise FileError(f"File '{path}' not found")
        except UnicodeDecodeError as e:
            raise FileError(f"'{path}' is not a text file: {e}")
        except OSError as e:
            raise FileError(f"Could not read '{path}': {e}")

        numbered = [
            (number, line)
            for number, line in enumerate(lines[1:], start=2)
            if line.strip()
        ]
        if not numbered:
            raise FileError(f"'{path}' has no records after the header line")
        line_numbers = [number for number, _ in numbered]
        body = [line if line.endswith("\n") else line + "\n" for _, line in numbered]
        return line_numbers, body

    @staticmethod
    def _tabulate(line_numbers: List[int], lines: List[str]) -> pd.DataFrame:
        n_columns = max(MIN_FIELDS, max(len(line.split()) for line in lines))
        table = pd.read_csv(
            io.StringIO("".join(lines)),
            sep=r"\s+",
            header=None,
            names=list(range(n_columns)),
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
        )
        table.index = line_numbers
        return table.fillna("")

    @staticmethod
    def _coerce(selected: pd.DataFrame) -> List[Residue]:
        residues = []
        for line_number, row in selected.iterrows():
            raw_index = row[RESIDUE_INDEX_FIELD]
            if not INTEGER_PATTERN.fullmatch(raw_index):
                raise ParseError(
                    f"residue index {raw_index!r} is not an integer", line_number
                )

            position = []
            for field in COORDINATE_FIELDS:
                raw = row[field]
                if not NUMBER_PATTERN.fullmatch(raw):
                    raise ParseError(f"coordinate {raw!r} is not a number", line_number)
                value = float(raw)
                if not math.isfinite(value):
                    raise ParseError(f"coordinate {raw!r} is not finite", line_number)
                position.append(value)

            residues.append(
                Residue(
                    index=int(raw_index),
                    name=str(row[RESIDUE_NAME_FIELD]),
                    position=tuple(position),
                )
            )
        return residues

    @staticmethod
    def _deduplicate(residues: List[Residue]) -> List[Residue]:
        unique = {}
        for residue in residues:
            unique.setdefault(residue.index, residue)
        return sorted(unique.values(), key=lambda r: r.index)
