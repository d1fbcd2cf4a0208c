# nexus/groups.py
"""
Static data model for the exceptional Lie groups.

Holds the closed category set used to tag roots, the immutable 8D root
record, and the fixed descriptor tables for groups and highlightable
subgroups.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .config import DIM


class ParticleCategory(str, Enum):
    STRONG = "Strong"
    WEAK = "Weak"
    ELECTROMAGNETIC = "Electromagnetic"
    FERMION = "Fermion"
    GRAVITATIONAL = "Gravitational"
    MASSIVE = "Massive"
    BROKEN = "Broken"
    ENTANGLED = "Entangled"
    TENSOR_NODE = "TensorNode"
    NONE = "None"


class LieGroupType(str, Enum):
    G2 = "G2"
    F4 = "F4"
    E6 = "E6"
    E7 = "E7"
    E8 = "E8"


GroupLike = Union[LieGroupType, str]


def parse_group(group: GroupLike) -> Optional[LieGroupType]:
    """Resolve an enum member or its string value; None if unrecognized."""
    if isinstance(group, LieGroupType):
        return group
    try:
        return LieGroupType(str(group))
    except ValueError:
        return None


@dataclass(frozen=True, eq=False)
class RootVector:
    """
    A point in the 8D root space plus its force category.

    Coordinates are stored as a read-only float array. Equality is identity:
    projections hand back the very object they were given.
    """
    coords: np.ndarray
    category: ParticleCategory = ParticleCategory.NONE

    def __post_init__(self):
        arr = np.array(self.coords, dtype=np.float64).reshape(-1)
        if arr.shape[0] != DIM:
            raise ValueError(f"RootVector needs {DIM} coordinates, got {arr.shape[0]}")
        arr.setflags(write=False)
        object.__setattr__(self, "coords", arr)
        object.__setattr__(self, "category", ParticleCategory(self.category))

    def dot(self, other: "RootVector") -> float:
        return float(np.dot(self.coords, other.coords))

    @property
    def norm_sq(self) -> float:
        return float(np.dot(self.coords, self.coords))

    def to_dict(self) -> dict:
        return {
            "coords": [float(c) for c in self.coords],
            "category": self.category.value,
        }

    def __repr__(self) -> str:
        coords = ", ".join(f"{c:g}" for c in self.coords)
        return f"RootVector([{coords}], {self.category.value})"


@dataclass(frozen=True)
class GroupInfo:
    id: LieGroupType
    name: str
    rank: int
    dimension: int
    root_count: int
    description: str

    def to_dict(self) -> dict:
        return {
            "id": self.id.value,
            "name": self.name,
            "rank": self.rank,
            "dimension": self.dimension,
            "root_count": self.root_count,
            "description": self.description,
        }


LIE_GROUPS: Tuple[GroupInfo, ...] = (
    GroupInfo(
        LieGroupType.G2, "G₂", 2, 14, 12,
        "The smallest exceptional group, describing symmetries of octonions.",
    ),
    GroupInfo(
        LieGroupType.F4, "F₄", 4, 52, 48,
        "The symmetry group of the 24-cell, a self-dual regular polychoron.",
    ),
    GroupInfo(
        LieGroupType.E6, "E₆", 6, 78, 72,
        "Often used in Grand Unified Theories (GUTs) as a precursor to E8.",
    ),
    GroupInfo(
        LieGroupType.E7, "E₇", 7, 133, 126,
        "A large subgroup of E8 with complex quaternary structures.",
    ),
    GroupInfo(
        LieGroupType.E8, "E₈", 8, 248, 240,
        "The ultimate exceptional group, centerpiece of the Theory of Everything.",
    ),
)


def get_group_info(group: GroupLike) -> Optional[GroupInfo]:
    gt = parse_group(group)
    for info in LIE_GROUPS:
        if info.id is gt:
            return info
    return None


def basis_rank_for_group(group: GroupLike) -> int:
    """Rank used for the default Petrie basis when a group is (re)selected."""
    gt = parse_group(group)
    if gt is LieGroupType.G2:
        return 2
    if gt is LieGroupType.F4:
        return 4
    return 8


@dataclass(frozen=True)
class Subgroup:
    id: str
    name: str
    description: str
    categories: Tuple[ParticleCategory, ...]

    def contains(self, root: RootVector) -> bool:
        return root.category in self.categories


SUBGROUPS: Tuple[Subgroup, ...] = (
    Subgroup(
        "sm", "Standard Model",
        "The SU(3)xSU(2)xU(1) gauge groups describing strong, weak, and electromagnetic forces.",
        (ParticleCategory.STRONG, ParticleCategory.WEAK, ParticleCategory.ELECTROMAGNETIC),
    ),
    Subgroup(
        "su3", "Strong (SU(3))",
        "The 8 gluons mediating the strong nuclear force between quarks.",
        (ParticleCategory.STRONG,),
    ),
    Subgroup(
        "su2", "Weak (SU(2))",
        "The W and Z bosons mediating the weak interaction.",
        (ParticleCategory.WEAK,),
    ),
    Subgroup(
        "fermions", "Fermions",
        "Quarks and leptons (matter particles) embedded in the E8 lattice.",
        (ParticleCategory.FERMION,),
    ),
)


def get_subgroup(subgroup_id: str) -> Optional[Subgroup]:
    for sg in SUBGROUPS:
        if sg.id == subgroup_id:
            return sg
    return None


def filter_by_subgroup(roots: Iterable[RootVector], subgroup: Subgroup) -> List[RootVector]:
    return [r for r in roots if subgroup.contains(r)]


def as_root(vec: Union[RootVector, Sequence[float]]) -> RootVector:
    """Accept a RootVector or a bare coordinate sequence."""
    if isinstance(vec, RootVector):
        return vec
    return RootVector(coords=np.asarray(vec, dtype=np.float64))
