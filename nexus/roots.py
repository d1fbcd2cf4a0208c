# nexus/roots.py
"""
Root system generation for the exceptional groups.

E8 is built from its two standard families (112 integer roots, 128
half-integer roots). E6 and E7 are linear slices of that set; F4 and G2
are enumerated directly in the leading coordinate slots. Every root is
tagged with a force category at construction time.

The E6/E7 slices and the F4/G2 lists are a reproducible geometric
construction, not a verified classification; counts are pinned by tests.
"""
from __future__ import annotations

import logging
from itertools import combinations
from typing import List

import numpy as np

from .config import Config, DIM
from .groups import GroupLike, LieGroupType, ParticleCategory, RootVector, parse_group

logger = logging.getLogger(__name__)

SIGNS = (1.0, -1.0)

_G2_STRONG = (
    (1, -1, 0), (-1, 1, 0),
    (1, 0, -1), (-1, 0, 1),
    (0, 1, -1), (0, -1, 1),
)
_G2_WEAK = (
    (2, -1, -1), (-2, 1, 1),
    (1, -2, 1), (-1, 2, -1),
    (1, 1, -2), (-1, -1, 2),
)


def _has_half(coords: np.ndarray) -> bool:
    return bool(np.any(np.abs(coords) == 0.5))


def _e8_raw() -> List[np.ndarray]:
    """All 240 E8 roots as bare coordinate arrays, integer family first."""
    out: List[np.ndarray] = []
    # (±1, ±1, 0^6) over every pair of slots
    for i, j in combinations(range(DIM), 2):
        for s1 in SIGNS:
            for s2 in SIGNS:
                c = np.zeros(DIM)
                c[i] = s1
                c[j] = s2
                out.append(c)
    # (±1/2)^8 with an even number of minus signs; bit j set means slot j is negative
    for mask in range(1 << DIM):
        bits = [(mask >> j) & 1 for j in range(DIM)]
        if sum(bits) % 2 == 0:
            out.append(np.array([-0.5 if b else 0.5 for b in bits]))
    return out


def classify_e8(coords: np.ndarray) -> ParticleCategory:
    """First matching rule wins."""
    if _has_half(coords):
        return ParticleCategory.FERMION
    if coords[0] != 0 and coords[1] != 0:
        return ParticleCategory.WEAK
    if coords[2] != 0 or coords[3] != 0:
        return ParticleCategory.STRONG
    if coords[4] != 0 or coords[5] != 0:
        return ParticleCategory.ELECTROMAGNETIC
    return ParticleCategory.GRAVITATIONAL


def classify_fermion_or_strong(coords: np.ndarray) -> ParticleCategory:
    return ParticleCategory.FERMION if _has_half(coords) else ParticleCategory.STRONG


def _e8_roots() -> List[RootVector]:
    return [RootVector(c, classify_e8(c)) for c in _e8_raw()]


def _e7_roots() -> List[RootVector]:
    tol = Config.core.TOLERANCE
    return [
        RootVector(c, classify_fermion_or_strong(c))
        for c in _e8_raw()
        if abs(c[0] + c[1]) < tol
    ]


def _e6_roots() -> List[RootVector]:
    tol = Config.core.TOLERANCE
    return [
        RootVector(c, classify_fermion_or_strong(c))
        for c in _e8_raw()
        if abs(c[0] + c[1]) < tol and abs(c[1] + c[2]) < tol
    ]


def _f4_roots() -> List[RootVector]:
    roots: List[RootVector] = []
    # 24 long roots (±1, ±1, 0, 0)
    for i, j in combinations(range(4), 2):
        for s1 in SIGNS:
            for s2 in SIGNS:
                c = np.zeros(DIM)
                c[i] = s1
                c[j] = s2
                roots.append(RootVector(c, ParticleCategory.STRONG))
    # 8 short roots (±1, 0, 0, 0)
    for i in range(4):
        for s in SIGNS:
            c = np.zeros(DIM)
            c[i] = s
            roots.append(RootVector(c, ParticleCategory.WEAK))
    # 16 short roots (±1/2)^4
    for mask in range(16):
        c = np.zeros(DIM)
        for j in range(4):
            c[j] = -0.5 if (mask >> j) & 1 else 0.5
        roots.append(RootVector(c, ParticleCategory.FERMION))
    return roots


def _g2_roots() -> List[RootVector]:
    def pad(triple):
        c = np.zeros(DIM)
        c[:3] = triple
        return c

    return (
        [RootVector(pad(t), ParticleCategory.STRONG) for t in _G2_STRONG]
        + [RootVector(pad(t), ParticleCategory.WEAK) for t in _G2_WEAK]
    )


_BUILDERS = {
    LieGroupType.G2: _g2_roots,
    LieGroupType.F4: _f4_roots,
    LieGroupType.E6: _e6_roots,
    LieGroupType.E7: _e7_roots,
    LieGroupType.E8: _e8_roots,
}


def generate_roots(group_type: GroupLike) -> List[RootVector]:
    """
    Return a fresh list of tagged roots for `group_type`.

    An unrecognized group yields an empty list rather than an error.
    """
    gt = parse_group(group_type)
    if gt is None:
        logger.warning(f"Unknown group type {group_type!r}; returning no roots")
        return []
    roots = _BUILDERS[gt]()
    logger.debug(f"Generated {len(roots)} roots for {gt.value}")
    return roots
