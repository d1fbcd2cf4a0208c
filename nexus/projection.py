# nexus/projection.py
"""
8D -> 2D projection of root sets.

Per root, in order:
1. blend the target basis with the two-axis reference basis by `progress`
2. apply the Wick drift c + c * sin(universe_time + idx) * wick * WICK_SCALE
3. take inner products with both basis rows
4. rotate the plane by `angle`

The drift is a cosmetic animation term, not an analytic continuation.
Display-only effects (thermal jitter, radial clamping, defect repulsion)
belong to the renderer and are not applied here.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .basis import SIMPLE_BASIS, Basis
from .config import Config, DIM
from .groups import RootVector

BasisLike = Union[Basis, Sequence[Sequence[float]], np.ndarray]


@dataclass(frozen=True)
class ProjectedPoint:
    id: int
    x: float
    y: float
    original: RootVector

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "original": self.original.to_dict(),
        }


def _basis_array(basis: BasisLike) -> np.ndarray:
    if isinstance(basis, Basis):
        return basis.as_array()
    arr = np.asarray(basis, dtype=np.float64)
    if arr.shape != (2, DIM):
        raise ValueError(f"basis must be 2x{DIM}, got shape {arr.shape}")
    return arr


def interpolate_basis(basis: BasisLike, progress: float = 1.0) -> np.ndarray:
    """(1 - progress) * reference + progress * target, per coefficient."""
    target = _basis_array(basis)
    return (1.0 - progress) * SIMPLE_BASIS + progress * target


def _project_coords(
    coords: np.ndarray,
    drift_index: np.ndarray,
    angle: float,
    basis: BasisLike,
    progress: float,
    wick_rotation: float,
    universe_time: float,
) -> np.ndarray:
    eff = interpolate_basis(basis, progress)

    drift = np.sin(universe_time + drift_index) * wick_rotation * Config.projection.WICK_SCALE
    evolved = coords + coords * drift[:, None]

    xy = evolved @ eff.T
    x, y = xy[:, 0], xy[:, 1]

    cos_a, sin_a = np.cos(angle), np.sin(angle)
    rx = x * cos_a - y * sin_a
    ry = x * sin_a + y * cos_a
    return np.stack([rx, ry], axis=1)


def project(
    roots: Sequence[RootVector],
    angle: float,
    basis: BasisLike,
    progress: float = 1.0,
    wick_rotation: float = 0.0,
    universe_time: float = 0.0,
) -> List[ProjectedPoint]:
    """Project every root; output index i always refers to roots[i]."""
    if len(roots) == 0:
        return []
    coords = np.stack([r.coords for r in roots]).astype(np.float64)
    idx = np.arange(len(roots), dtype=np.float64)
    xy = _project_coords(coords, idx, angle, basis, progress, wick_rotation, universe_time)
    return [
        ProjectedPoint(id=i, x=float(xy[i, 0]), y=float(xy[i, 1]), original=root)
        for i, root in enumerate(roots)
    ]


def project_one(
    vector: RootVector,
    angle: float,
    basis: BasisLike,
    progress: float = 1.0,
    wick_rotation: float = 0.0,
    universe_time: float = 0.0,
) -> Tuple[float, float]:
    """Single-vector projection; the drift index is fixed at 0."""
    coords = np.asarray(vector.coords, dtype=np.float64)[None, :]
    xy = _project_coords(coords, np.zeros(1), angle, basis, progress, wick_rotation, universe_time)
    return float(xy[0, 0]), float(xy[0, 1])


def root_edges(
    roots: Sequence[RootVector],
    threshold: Optional[float] = None,
) -> List[Tuple[int, int]]:
    """Index pairs (i < j) whose inner product is within `threshold` of 1."""
    if threshold is None:
        threshold = Config.projection.EDGE_THRESHOLD
    if len(roots) < 2:
        return []
    mat = np.stack([r.coords for r in roots])
    gram = mat @ mat.T
    ii, jj = np.nonzero(np.triu(np.abs(gram - 1.0) < threshold, k=1))
    return [(int(i), int(j)) for i, j in zip(ii, jj)]
