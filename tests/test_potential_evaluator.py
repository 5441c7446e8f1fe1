"""Tests for per-residue BLN Lennard-Jones contributions."""

import math

import pytest

from ljprobe.core.config import PotentialConfig
from ljprobe.core.domain.models.residue import BLNCategory, Residue
from ljprobe.core.exceptions import NumericDegeneracyError
from ljprobe.core.services.potential_evaluator import (
    LJ_TERMS,
    assign_potentials,
    evaluate,
)

DEFAULT = PotentialConfig()


def test_neutral_at_sigma():
    assert evaluate(BLNCategory.NEUTRAL, 5.0, DEFAULT) == pytest.approx(4.0)


def test_hydrophobic_at_sigma():
    assert evaluate(BLNCategory.HYDROPHOBIC, 5.0, DEFAULT) == pytest.approx(8.0)


def test_hydrophilic_at_sigma_scales_well_depth():
    config = PotentialConfig(epsilon_h=3.0)
    assert evaluate(BLNCategory.HYDROPHILIC, 5.0, config) == pytest.approx(16.0)


def test_off_sigma_values():
    ratio = 5.0 / 7.5
    assert evaluate(BLNCategory.HYDROPHOBIC, 7.5, DEFAULT) == pytest.approx(
        4 * (ratio**12 + ratio**6)
    )
    assert evaluate(BLNCategory.NEUTRAL, 7.5, DEFAULT) == pytest.approx(4 * ratio**12)
    assert evaluate(BLNCategory.HYDROPHILIC, 7.5, DEFAULT) == pytest.approx(
        4 * (2 / 3) * (ratio**12 + ratio**6)
    )


def test_custom_sigma_and_epsilon():
    config = PotentialConfig(epsilon_h=0.5, sigma=3.0)
    assert evaluate(BLNCategory.HYDROPHOBIC, 3.0, config) == pytest.approx(4.0)
    assert evaluate(BLNCategory.NEUTRAL, 6.0, config) == pytest.approx(2 * 0.5**12)


def test_every_category_has_a_term():
    assert set(LJ_TERMS) == set(BLNCategory)
    assert LJ_TERMS[BLNCategory.NEUTRAL].attractive is False


def test_repeated_evaluation_is_bit_identical():
    config = PotentialConfig(epsilon_h=1.7, sigma=4.2)
    for category in BLNCategory:
        first = evaluate(category, 3.3, config)
        assert all(evaluate(category, 3.3, config) == first for _ in range(10))


def test_contribution_decays_with_distance():
    near = evaluate(BLNCategory.HYDROPHOBIC, 4.0, DEFAULT)
    far = evaluate(BLNCategory.HYDROPHOBIC, 12.0, DEFAULT)
    assert near > far > 0


@pytest.mark.parametrize("category", list(BLNCategory))
def test_zero_distance_raises(category):
    with pytest.raises(NumericDegeneracyError) as excinfo:
        evaluate(category, 0.0, DEFAULT, residue_index=42)
    assert excinfo.value.residue_index == 42
    assert "42" in str(excinfo.value)


def test_small_distance_is_finite():
    value = evaluate(BLNCategory.NEUTRAL, 1e-3, DEFAULT)
    assert math.isfinite(value)
    assert value > 0


@pytest.mark.parametrize("category", list(BLNCategory))
def test_overflowing_distance_raises(category):
    with pytest.raises(NumericDegeneracyError) as excinfo:
        evaluate(category, 1e-30, DEFAULT, residue_index=7)
    assert excinfo.value.residue_index == 7
    assert "not finite" in str(excinfo.value)


def test_huge_sigma_raises_instead_of_returning_inf():
    # (sigma/d)**12 stays below the float limit but 4*epsilon times it does not
    with pytest.raises(NumericDegeneracyError):
        evaluate(BLNCategory.HYDROPHOBIC, 1.0, PotentialConfig(sigma=4.5e25))


def test_assign_potentials():
    residues = [
        Residue(1, "GLY", (0.0, 5.0, 0.0), BLNCategory.NEUTRAL, 5.0),
        Residue(2, "ALA", (5.0, 0.0, 0.0), BLNCategory.HYDROPHOBIC, 5.0),
    ]
    scored = assign_potentials(residues, DEFAULT)

    assert [r.potential for r in scored] == pytest.approx([4.0, 8.0])
    assert all(r.is_scored for r in scored)


def test_assign_potentials_requires_distance():
    residue = Residue(1, "GLY", (0.0, 0.0, 0.0), BLNCategory.NEUTRAL)
    with pytest.raises(ValueError):
        assign_potentials([residue], DEFAULT)


def test_assign_potentials_reports_degenerate_residue():
    residues = [
        Residue(7, "GLY", (1.0, 1.0, 1.0), BLNCategory.NEUTRAL, 2.0),
        Residue(8, "LEU", (0.0, 0.0, 0.0), BLNCategory.HYDROPHOBIC, 0.0),
    ]
    with pytest.raises(NumericDegeneracyError) as excinfo:
        assign_potentials(residues, DEFAULT)
    assert excinfo.value.residue_index == 8
