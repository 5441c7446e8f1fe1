"""Tests for query point distances."""

import math

import numpy as np
import pytest

from ljprobe.core.domain.models.residue import QueryPoint, Residue
from ljprobe.core.exceptions import ConfigurationError
from ljprobe.core.services.distance_calculator import (
    assign_distances,
    distance,
    distances,
)

POINTS = [
    (0.0, 0.0, 0.0),
    (3.0, 4.0, 0.0),
    (-12.345, 7.5, 0.001),
    (1e3, -1e3, 250.25),
    (0.1, 0.2, 0.3),
]


def test_pythagorean_distance():
    assert distance((3.0, 4.0, 0.0), (0.0, 0.0, 0.0)) == 5.0
    assert distance((1.0, 2.0, 2.0), QueryPoint(0, 0, 0)) == 3.0


@pytest.mark.parametrize("p", POINTS)
@pytest.mark.parametrize("q", POINTS)
def test_symmetric_and_non_negative(p, q):
    d = distance(p, q)
    assert d == distance(q, p)
    assert d >= 0.0


@pytest.mark.parametrize("p", POINTS)
def test_distance_to_self_is_zero(p):
    assert distance(p, p) == 0.0


def test_matches_textbook_formula():
    p, q = (1.5, -2.25, 3.0), (-0.5, 4.0, 1.125)
    expected = math.sqrt((1.5 + 0.5) ** 2 + (-2.25 - 4.0) ** 2 + (3.0 - 1.125) ** 2)
    assert distance(p, q) == pytest.approx(expected, rel=1e-15)


def test_batch_distances_match_single():
    query = QueryPoint(1.0, -1.0, 2.0)
    batch = distances(POINTS, query)

    assert isinstance(batch, np.ndarray)
    assert batch.shape == (len(POINTS),)
    for p, d in zip(POINTS, batch):
        assert d == pytest.approx(distance(p, query))


def test_rejects_non_3d_points():
    with pytest.raises(ValueError):
        distance((1.0, 2.0), (0.0, 0.0, 0.0))


def test_assign_distances():
    residues = [
        Residue(index=1, name="ALA", position=(5.0, 0.0, 0.0)),
        Residue(index=2, name="GLY", position=(0.0, 0.0, 10.0)),
    ]
    measured = assign_distances(residues, QueryPoint(0.0, 0.0, 0.0))

    assert [r.distance for r in measured] == [5.0, 10.0]
    assert all(isinstance(r.distance, float) for r in measured)
    assert assign_distances([], QueryPoint(0.0, 0.0, 0.0)) == []


@pytest.mark.parametrize("bad", [math.nan, math.inf, "abc", None])
def test_query_point_rejects_non_finite_coordinates(bad):
    with pytest.raises(ConfigurationError):
        QueryPoint(0.0, bad, 0.0)


def test_query_point_coerces_to_float():
    query = QueryPoint(1, "2", 3)
    assert (query.x, query.y, query.z) == (1.0, 2.0, 3.0)
