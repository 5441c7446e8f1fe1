#!/usr/bin/env python3
# src/ljprobe/core/domain/models/residue.py

"""
Domain models for alpha-carbon residues and the probe point.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from ...exceptions import ConfigurationError


class BLNCategory(Enum):
    """Coarse-grained BLN residue classes."""

    HYDROPHILIC = "hydrophilic"
    NEUTRAL = "neutral"
    HYDROPHOBIC = "hydrophobic"


@dataclass(frozen=True)
class QueryPoint:
    """Point in space whose potential against the protein is evaluated."""

    x: float
    y: float
    z: float

    def __post_init__(self):
        for axis in ("x", "y", "z"):
            value = getattr(self, axis)
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise ConfigurationError(f"Query {axis} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigurationError(f"Query {axis} must be finite, got {value}")
            object.__setattr__(self, axis, value)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        return np.array(self.as_tuple(), dtype=np.float64)


@dataclass(frozen=True)
class Residue:
    """
    One alpha carbon standing in for its residue.

    ``category``, ``distance`` and ``potential`` are derived along the
    pipeline. Each is filled exactly once by building a new record.
    """

    index: int
    name: str
    position: Tuple[float, float, float]
    category: Optional[BLNCategory] = None
    distance: Optional[float] = None
    potential: Optional[float] = None

    def with_category(self, category: BLNCategory) -> "Residue":
        return self._derive("category", category)

    def with_distance(self, distance: float) -> "Residue":
        return self._derive("distance", float(distance))

    def with_potential(self, potential: float) -> "Residue":
        return self._derive("potential", float(potential))

    @property
    def is_scored(self) -> bool:
        return (
            self.category is not None
            and self.distance is not None
            and self.potential is not None
        )

    def _derive(self, field_name: str, value) -> "Residue":
        if getattr(self, field_name) is not None:
            raise ValueError(
                f"Residue {self.index} ({self.name}) already has {field_name} set"
            )
        return replace(self, **{field_name: value})
