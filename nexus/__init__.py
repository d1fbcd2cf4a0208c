"""Public package interface for exceptional Lie group projections."""

from .basis import Basis, default_basis, petrie_basis
from .decay import DecayInteraction, find_decay_pair, resolve_decay
from .groups import LIE_GROUPS, LieGroupType, ParticleCategory, RootVector
from .projection import ProjectedPoint, project, project_one
from .roots import generate_roots

__all__ = [
    "Basis",
    "DecayInteraction",
    "LIE_GROUPS",
    "LieGroupType",
    "ParticleCategory",
    "ProjectedPoint",
    "RootVector",
    "default_basis",
    "find_decay_pair",
    "generate_roots",
    "petrie_basis",
    "project",
    "project_one",
    "resolve_decay",
]
