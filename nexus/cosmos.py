# nexus/cosmos.py
"""
Cosmic-era and tensor-network state that drives the physics panels.

Temperature is normalized: 0 is the present day, 1 is the Big Bang.
"""
import math
from dataclasses import dataclass, asdict
from typing import List, Tuple

# (lower bound, era, unification), checked top-down with strict >
ERAS: Tuple[Tuple[float, str, float], ...] = (
    (0.9, "Planck Epoch", 1.0),
    (0.7, "GUT Era", 0.8),
    (0.4, "Electroweak", 0.5),
    (0.2, "Q-Plasma", 0.2),
)
CURRENT_ERA = "Current Era"


@dataclass(frozen=True)
class CosmicState:
    temperature: float
    era: str
    unification: float

    def to_dict(self) -> dict:
        return asdict(self)


def cosmic_state(temperature: float) -> CosmicState:
    if not 0.0 <= temperature <= 1.0:
        raise ValueError(f"temperature must lie in [0, 1], got {temperature}")
    for bound, era, unification in ERAS:
        if temperature > bound:
            return CosmicState(temperature, era, unification)
    return CosmicState(temperature, CURRENT_ERA, 0.0)


@dataclass
class MeraState:
    is_active: bool = False
    renormalization_scale: float = 0.4  # depth of the tree, 0..1
    bulk_curvature: float = 0.8


def entropy_curve(state: MeraState, samples: int = 20) -> List[Tuple[float, float]]:
    """Entanglement entropy S(x) = log(1 + 10x) * curvature * 20 over x in [0, 1]."""
    if samples < 1:
        raise ValueError("samples must be >= 1")
    points = []
    for i in range(samples + 1):
        x = i / samples
        points.append((x, math.log(1 + x * 10) * state.bulk_curvature * 20))
    return points
