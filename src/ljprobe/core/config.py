# src/ljprobe/core/config.py
"""Potential parameters resolved once per calculation."""

import math
from dataclasses import dataclass
from typing import Any, Dict

from .exceptions import ConfigurationError

DEFAULT_EPSILON_H = 1.0  # kcal/mol
DEFAULT_SIGMA = 5.0  # Angstroms


@dataclass(frozen=True)
class PotentialConfig:
    """
    Lennard-Jones parameters shared by every residue.

    Attributes:
        epsilon_h: Hydrophobic well depth (kcal/mol)
        sigma: Characteristic interaction distance (Angstroms)
    """

    epsilon_h: float = DEFAULT_EPSILON_H
    sigma: float = DEFAULT_SIGMA

    def __post_init__(self):
        for name in ("epsilon_h", "sigma"):
            value = getattr(self, name)
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigurationError(f"{name} must be finite, got {value}")
            object.__setattr__(self, name, value)
        if self.sigma <= 0:
            raise ConfigurationError(f"sigma must be positive, got {self.sigma}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PotentialConfig":
        return cls(
            epsilon_h=d.get("epsilon_h", DEFAULT_EPSILON_H),
            sigma=d.get("sigma", DEFAULT_SIGMA),
        )

    def to_dict(self) -> Dict[str, float]:
        return {"epsilon_h": self.epsilon_h, "sigma": self.sigma}
