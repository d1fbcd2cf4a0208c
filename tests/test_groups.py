# tests/test_groups.py
import dataclasses

import numpy as np
import pytest

from nexus.groups import (
    LIE_GROUPS,
    SUBGROUPS,
    LieGroupType,
    ParticleCategory,
    RootVector,
    as_root,
    basis_rank_for_group,
    filter_by_subgroup,
    get_group_info,
    get_subgroup,
)
from nexus.roots import generate_roots


def test_descriptor_table():
    ranks = {g.id: g.rank for g in LIE_GROUPS}
    assert ranks == {
        LieGroupType.G2: 2,
        LieGroupType.F4: 4,
        LieGroupType.E6: 6,
        LieGroupType.E7: 7,
        LieGroupType.E8: 8,
    }
    assert get_group_info("E8").dimension == 248
    assert get_group_info("B3") is None


def test_basis_rank_for_group():
    assert basis_rank_for_group("G2") == 2
    assert basis_rank_for_group(LieGroupType.F4) == 4
    assert basis_rank_for_group("E6") == 8
    assert basis_rank_for_group("E7") == 8


def test_category_closed_set():
    assert {c.value for c in ParticleCategory} == {
        "Strong", "Weak", "Electromagnetic", "Fermion", "Gravitational",
        "Massive", "Broken", "Entangled", "TensorNode", "None",
    }


class TestRootVector:
    def test_requires_eight_coords(self):
        with pytest.raises(ValueError):
            RootVector([1, 0, 0])

    def test_immutable(self):
        r = RootVector([1, 1, 0, 0, 0, 0, 0, 0], ParticleCategory.WEAK)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.category = ParticleCategory.STRONG
        with pytest.raises(ValueError):
            r.coords[0] = 2.0

    def test_category_from_string(self):
        r = RootVector(np.zeros(8), "Fermion")
        assert r.category is ParticleCategory.FERMION

    def test_identity_equality(self):
        a = RootVector(np.ones(8))
        b = RootVector(np.ones(8))
        assert a != b
        assert a == a

    def test_as_root(self):
        r = RootVector(np.ones(8))
        assert as_root(r) is r
        assert as_root([0.5] * 8).category is ParticleCategory.NONE


def test_subgroup_filter(e8_roots):
    fermions = filter_by_subgroup(e8_roots, get_subgroup("fermions"))
    assert len(fermions) == 128
    sm = filter_by_subgroup(e8_roots, get_subgroup("sm"))
    assert len(sm) == 4 + 52 + 36
    assert get_subgroup("nope") is None
    assert len(SUBGROUPS) == 4


def test_subgroup_on_g2():
    roots = generate_roots("G2")
    assert len(filter_by_subgroup(roots, get_subgroup("su3"))) == 6
    assert len(filter_by_subgroup(roots, get_subgroup("su2"))) == 6
