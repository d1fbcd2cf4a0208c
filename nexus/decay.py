# nexus/decay.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

import numpy as np

from .config import Config
from .groups import ParticleCategory, RootVector

logger = logging.getLogger(__name__)

# alpha = beta + gamma with |gamma|^2 = 2 requires alpha . beta = 1 for E8-normalized roots
TARGET_DOT = 1.0
TARGET_NORM_SQ = 2.0


def find_decay_pair(
    alpha: RootVector,
    all_roots: Sequence[RootVector],
) -> Optional[Tuple[RootVector, RootVector]]:
    """
    Split `alpha` into (beta, gamma) with beta taken from `all_roots`.

    Candidates are scanned in the given order and the first valid beta wins.
    gamma is alpha - beta, tagged Fermion if any coordinate is +-0.5 and
    Strong otherwise. Returns None when no channel exists.
    """
    a = alpha.coords
    tol = Config.core.TOLERANCE
    for beta in all_roots:
        dot = float(np.dot(a, beta.coords))
        if abs(dot - TARGET_DOT) >= tol:
            continue

        gamma_coords = a - beta.coords
        norm_sq = float(np.dot(gamma_coords, gamma_coords))
        if abs(norm_sq - TARGET_NORM_SQ) < tol:
            category = (
                ParticleCategory.FERMION
                if np.any(np.abs(gamma_coords) == 0.5)
                else ParticleCategory.STRONG
            )
            return beta, RootVector(gamma_coords, category)
    return None


@dataclass
class DecayInteraction:
    parent: RootVector
    children: Tuple[RootVector, RootVector]
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> dict:
        return {
            "parent": self.parent.to_dict(),
            "children": [c.to_dict() for c in self.children],
            "timestamp": self.timestamp,
        }


def resolve_decay(alpha: RootVector, all_roots: Sequence[RootVector]) -> Optional[DecayInteraction]:
    """Wrap a found decay pair into an interaction record."""
    pair = find_decay_pair(alpha, all_roots)
    if pair is None:
        logger.debug(f"No decay channel for {alpha!r}")
        return None
    logger.debug(f"{alpha!r} -> {pair[0]!r} + {pair[1]!r}")
    return DecayInteraction(parent=alpha, children=pair)
