"""Domain model for a completed potential calculation."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import pandas as pd

from ...config import PotentialConfig
from .residue import BLNCategory, QueryPoint, Residue

REPORT_COLUMNS = [
    "index",
    "name",
    "x",
    "y",
    "z",
    "category",
    "distance",
    "potential",
]


@dataclass(frozen=True)
class PotentialResult:
    """Contains the total potential and the scored residues behind it."""

    total: float
    residues: Tuple[Residue, ...]
    query_point: QueryPoint
    config: PotentialConfig
    source: Optional[str] = None

    def category_totals(self) -> Dict[BLNCategory, float]:
        totals = {category: 0.0 for category in BLNCategory}
        for residue in self.residues:
            totals[residue.category] += residue.potential
        return totals

    def category_counts(self) -> Dict[BLNCategory, int]:
        counts = {category: 0 for category in BLNCategory}
        for residue in self.residues:
            counts[residue.category] += 1
        return counts

    def to_frame(self) -> pd.DataFrame:
        """One row per residue, in pipeline order."""
        rows = [
            {
                "index": r.index,
                "name": r.name,
                "x": r.position[0],
                "y": r.position[1],
                "z": r.position[2],
                "category": r.category.name,
                "distance": r.distance,
                "potential": r.potential,
            }
            for r in self.residues
        ]
        return pd.DataFrame(rows, columns=REPORT_COLUMNS)

    def summary(self) -> Dict[str, Any]:
        counts = self.category_counts()
        totals = self.category_totals()
        return {
            "source": self.source,
            "query_point": list(self.query_point.as_tuple()),
            "epsilon_h": self.config.epsilon_h,
            "sigma": self.config.sigma,
            "n_residues": len(self.residues),
            "categories": {
                category.name: {
                    "count": counts[category],
                    "potential": totals[category],
                }
                for category in BLNCategory
            },
            "total_potential": self.total,
        }
