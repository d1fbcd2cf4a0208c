# tests/test_basis.py
import math

import numpy as np
import pytest

from nexus.basis import SIMPLE_BASIS, Basis, default_basis, petrie_basis, simple_basis


@pytest.mark.parametrize("rank", [2, 4, 6, 7, 8])
def test_petrie_shape(rank):
    basis = petrie_basis(rank)
    assert len(basis.x) == 8
    assert len(basis.y) == 8


def test_petrie_rank_eight():
    basis = petrie_basis(8)
    assert basis.x[0] == 1.0
    assert basis.y[0] == 0.0
    assert math.isclose(basis.x[4], -1.0)
    assert math.isclose(basis.y[2], 1.0)


def test_petrie_wraps_for_low_rank():
    # rank 2 alternates between angle 0 and pi across all 8 slots
    basis = petrie_basis(2)
    assert np.allclose(basis.x, [1, -1, 1, -1, 1, -1, 1, -1])
    assert np.allclose(basis.y, 0.0, atol=1e-12)


def test_petrie_rank_seven_is_not_truncated():
    basis = petrie_basis(7)
    # slot 7 wraps back to angle 2*pi
    assert math.isclose(basis.x[7], 1.0)
    assert abs(basis.y[7]) < 1e-12


def test_petrie_rejects_nonpositive_rank():
    with pytest.raises(ValueError):
        petrie_basis(0)


def test_default_basis_follows_group():
    assert default_basis("G2") == petrie_basis(2)
    assert default_basis("F4") == petrie_basis(4)
    assert default_basis("E6") == petrie_basis(8)
    assert default_basis("E8") == petrie_basis(8)


class TestBasisValue:
    def test_length_enforced(self):
        with pytest.raises(ValueError):
            Basis([1.0] * 7, [0.0] * 8)
        basis = simple_basis()
        with pytest.raises(ValueError):
            basis.y = [0.0] * 9

    def test_value_equality(self):
        a = petrie_basis(8)
        b = petrie_basis(8)
        assert a == b
        b.set_coefficient("x", 3, 0.25)
        assert a != b
        assert b.x[3] == 0.25

    def test_copy_is_independent(self):
        a = simple_basis()
        b = a.copy()
        b.set_coefficient("y", 0, 2.0)
        assert a.y[0] == 0.0

    def test_set_coefficient_validation(self):
        basis = simple_basis()
        with pytest.raises(ValueError):
            basis.set_coefficient("z", 0, 1.0)
        with pytest.raises(IndexError):
            basis.set_coefficient("x", 8, 1.0)

    def test_non_orthogonal_allowed(self):
        basis = Basis([1.0] * 8, [1.0] * 8)
        assert basis.as_array().shape == (2, 8)

    def test_from_rows(self):
        basis = Basis.from_rows(SIMPLE_BASIS.tolist())
        assert basis == simple_basis()
        with pytest.raises(ValueError):
            Basis.from_rows([[0.0] * 8])

    def test_rows_cannot_be_resized(self):
        basis = petrie_basis(8)
        with pytest.raises(AttributeError):
            basis.x.append(1.0)
        with pytest.raises(ValueError):
            del basis.y[0]
        with pytest.raises(ValueError):
            basis.x = [0.0] * 9
        basis.set_coefficient("x", 7, 3.0)
        assert basis.x.shape == (8,)
        assert basis.y.shape == (8,)

    def test_rows_are_copied_on_assignment(self):
        row = np.zeros(8)
        basis = Basis(row, np.ones(8))
        row[0] = 5.0
        assert basis.x[0] == 0.0

    def test_key_for_caching(self):
        a = petrie_basis(4)
        cache = {a.key(): "projected"}
        assert cache[a.copy().key()] == "projected"
        a.set_coefficient("y", 2, 9.0)
        assert a.key() not in cache
        with pytest.raises(TypeError):
            hash(a)
