# nexus/basis.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Sequence, Tuple, Union

import numpy as np

from .config import DIM
from .groups import GroupLike, basis_rank_for_group


def _row(values: Sequence[float], name: str) -> np.ndarray:
    try:
        row = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Basis row '{name}' must be {DIM} numbers: {e}")
    if row.shape != (DIM,):
        raise ValueError(f"Basis row '{name}' needs {DIM} entries, got shape {row.shape}")
    return row


@dataclass(eq=False)
class Basis:
    """
    2x8 projection matrix from root space onto the display plane.

    Rows are fixed-length float arrays: coefficients are freely editable and
    need not be orthogonal or normalized, but a row can never be resized.
    Compares by value; being mutable it is unhashable, use `key()` to cache.
    """
    x: np.ndarray = field(default_factory=lambda: np.zeros(DIM))
    y: np.ndarray = field(default_factory=lambda: np.zeros(DIM))

    def __setattr__(self, name: str, value: Any):
        if name in ("x", "y"):
            value = _row(value, name)
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Basis):
            return NotImplemented
        return bool(np.array_equal(self.x, other.x) and np.array_equal(self.y, other.y))

    __hash__ = None

    def key(self) -> Tuple[Tuple[float, ...], Tuple[float, ...]]:
        """Hashable snapshot of the 16 coefficients."""
        return tuple(self.x.tolist()), tuple(self.y.tolist())

    def set_coefficient(self, row: str, index: int, value: float):
        """Edit a single coefficient in place."""
        if row not in ("x", "y"):
            raise ValueError(f"Unknown basis row {row!r}")
        if not 0 <= index < DIM:
            raise IndexError(f"Basis index {index} out of range")
        getattr(self, row)[index] = float(value)

    def copy(self) -> "Basis":
        return Basis(self.x.copy(), self.y.copy())

    def as_array(self) -> np.ndarray:
        return np.stack([self.x, self.y])

    def to_dict(self) -> dict:
        return {"x": self.x.tolist(), "y": self.y.tolist()}

    @classmethod
    def from_rows(cls, rows: Union["Basis", Sequence[Sequence[float]]]) -> "Basis":
        if isinstance(rows, Basis):
            return rows
        if len(rows) != 2:
            raise ValueError(f"Basis needs exactly 2 rows, got {len(rows)}")
        return cls(rows[0], rows[1])


def simple_basis() -> Basis:
    """Reference basis: the first two coordinate axes."""
    x = [0.0] * DIM
    y = [0.0] * DIM
    x[0] = 1.0
    y[1] = 1.0
    return Basis(x, y)


SIMPLE_BASIS = simple_basis().as_array()
SIMPLE_BASIS.setflags(write=False)


def petrie_basis(rank: int) -> Basis:
    """
    Circular basis sampled at 8 points with step 2*pi/rank.

    The loop always runs over all 8 slots, so for rank < 8 the angle wraps
    around more than once.
    """
    if rank <= 0:
        raise ValueError(f"rank must be positive, got {rank}")
    x = []
    y = []
    for i in range(DIM):
        angle = 2 * math.pi * i / rank
        x.append(math.cos(angle))
        y.append(math.sin(angle))
    return Basis(x, y)


def default_basis(group: GroupLike) -> Basis:
    return petrie_basis(basis_rank_for_group(group))
