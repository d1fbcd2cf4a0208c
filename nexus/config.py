import os
from dataclasses import dataclass, fields
from typing import Dict, Any, Iterator, Tuple

# Ambient root space; fixed by the lattice constructions, not configurable
DIM = 8

ENV_PREFIX = "NEXUS_"


@dataclass
class CoreConfig:
    # Absolute tolerance for every float comparison in root slicing and decay
    TOLERANCE: float = 1e-3
    SEED: int = 13
    DEBUG: bool = os.getenv("NEXUS_DEBUG", "0") == "1"


@dataclass
class ProjectionConfig:
    # Strength of the cosmetic time drift per unit of wick rotation
    WICK_SCALE: float = 0.4
    # |dot - 1| below this draws a neighbour edge
    EDGE_THRESHOLD: float = 0.05
    DEFAULT_GROUP: str = os.getenv("NEXUS_DEFAULT_GROUP", "E8")


@dataclass
class ServerConfig:
    HOST: str = os.getenv("NEXUS_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("NEXUS_PORT", "8000"))
    RELOAD: bool = os.getenv("NEXUS_RELOAD", "0") == "1"


@dataclass
class SweepConfig:
    EXPERT_URL: str = os.getenv("NEXUS_EXPERT_URL", "")
    EXPERT_TIMEOUT: float = 30.0
    # Fallback stability scores are drawn from [FALLBACK_MIN, FALLBACK_MAX)
    FALLBACK_MIN: int = 60
    FALLBACK_MAX: int = 100


def _coerce(current: Any, value: Any) -> Any:
    """Convert `value` to the type of the field's current value."""
    if isinstance(current, bool):
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    return value


class Config:
    """Centralized configuration; keys are flat 'section.FIELD' strings."""
    core = CoreConfig()
    projection = ProjectionConfig()
    server = ServerConfig()
    sweep = SweepConfig()

    _SECTIONS = ("core", "projection", "server", "sweep")

    @classmethod
    def items(cls) -> Iterator[Tuple[str, Any, str]]:
        """Yield (key, section object, field name) for every setting."""
        for section_name in cls._SECTIONS:
            section = getattr(cls, section_name)
            for f in fields(section):
                yield f"{section_name}.{f.name}", section, f.name

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        return {key: getattr(section, name) for key, section, name in cls.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], apply_env_overrides: bool = True):
        """
        Update known keys from a flat dictionary; unknown keys are ignored.
        With apply_env_overrides, a set NEXUS_<FIELD> variable keeps its value.
        """
        for key, section, name in cls.items():
            if key not in data:
                continue
            if apply_env_overrides and f"{ENV_PREFIX}{name}" in os.environ:
                continue
            setattr(section, name, _coerce(getattr(section, name), data[key]))

    @classmethod
    def diff(cls, other_dict: Dict[str, Any]) -> Dict[str, tuple]:
        """{key: (current, other)} for every key whose values differ."""
        current = cls.to_dict()
        return {
            key: (current.get(key), other_dict.get(key))
            for key in current.keys() | other_dict.keys()
            if current.get(key) != other_dict.get(key)
        }
