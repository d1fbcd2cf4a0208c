"""Batch parameter sweeps evaluated by an external expert service.

This module exposes:

* Provider abstractions (`ExpertProvider`, `MockExpertProvider`,
  `RemoteExpertProvider`). The service is a collaborator: its reply is shown
  verbatim and only mined for a stability score.
* `ParameterSweep` describing a linear schedule over one physics knob.
* `run_sweep` producing one `EvaluationLog` per step. Logs are returned to
  the caller, never persisted here.
"""

from __future__ import annotations

import logging
import re
import time
import uuid
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Protocol

import numpy as np
import requests

from .config import Config

logger = logging.getLogger(__name__)

SWEEP_PARAMETERS = ("temperature", "renormalization", "wick")
_SCORE_RE = re.compile(r"Score:?\s*(\d+)", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Provider abstractions
# ---------------------------------------------------------------------------
class ExpertProvider(Protocol):
    """Minimal protocol for text-generation backends."""

    def generate(self, messages: List[Dict[str, str]]) -> str:
        """Return the reply given a list of {role, content} messages."""


MOCK_RESPONSES = (
    "The E8 root system exhibits 240 roots organized within an 8-dimensional lattice. "
    "Your interaction pattern suggests a gauge transformation consistent with SU(2) reduction.",
    "The Gosset 4_21 polytope represents the even coordinate system of E8. This projection "
    "breaks the 248-dimensional symmetry into observable subgroups.",
    "MERA describes how entanglement patterns encode bulk geometry. Each lattice layer "
    "represents a renormalization group flow.",
    "The topological defect breaks discrete symmetry within the lattice. Its strength "
    "modulates the coupling to the vacuum expectation value.",
    "The Petrie projection reveals the quasicrystalline structure underlying the lattice: "
    "long-range order without translational symmetry.",
)


class MockExpertProvider:
    """Offline provider returning canned commentary, chosen by a seeded RNG."""

    def __init__(self, seed: Optional[int] = None, responses=MOCK_RESPONSES):
        self.rng = np.random.default_rng(Config.core.SEED if seed is None else seed)
        self.responses = tuple(responses)

    def generate(self, messages: List[Dict[str, str]]) -> str:
        return self.responses[int(self.rng.integers(len(self.responses)))]


class RemoteExpertProvider:
    """POSTs the message list as JSON and reads back a `reply` field."""

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        self.url = url or Config.sweep.EXPERT_URL
        if not self.url:
            raise ValueError("RemoteExpertProvider needs a URL (set NEXUS_EXPERT_URL)")
        self.timeout = timeout if timeout is not None else Config.sweep.EXPERT_TIMEOUT

    def generate(self, messages: List[Dict[str, str]]) -> str:
        response = requests.post(self.url, json={"messages": messages}, timeout=self.timeout)
        response.raise_for_status()
        return str(response.json().get("reply", "")).strip()


def resolve_provider(url: Optional[str] = None) -> ExpertProvider:
    """Use the remote service when a URL is configured, else the mock."""
    target = url or Config.sweep.EXPERT_URL
    if target:
        return RemoteExpertProvider(target)
    logger.info("No expert URL configured; using mock provider")
    return MockExpertProvider()


# ---------------------------------------------------------------------------
# Sweep model
# ---------------------------------------------------------------------------
@dataclass
class ParameterSweep:
    parameter: str = "temperature"
    start: float = 0.0
    end: float = 1.0
    steps: int = 5

    def __post_init__(self):
        if self.parameter not in SWEEP_PARAMETERS:
            raise ValueError(f"Unknown sweep parameter {self.parameter!r}")
        if self.steps < 1:
            raise ValueError("steps must be >= 1")

    def values(self) -> List[float]:
        if self.steps == 1:
            return [self.start]
        step = (self.end - self.start) / (self.steps - 1)
        return [self.start + i * step for i in range(self.steps)]


def sweep_parameters(parameter: str, value: float) -> Dict[str, float]:
    """Physics settings for one sweep step; untouched knobs keep their defaults."""
    return {
        "temp": value if parameter == "temperature" else 0.0,
        "mera": value if parameter == "renormalization" else 0.5,
        "wick": value if parameter == "wick" else 0.0,
    }


def build_sweep_prompt(sweep: ParameterSweep, step: int, value: float) -> str:
    return (
        f"Perform a batch stability evaluation of the E8 lattice structure at "
        f"{sweep.parameter} = {value:.3f}.\n"
        f"Context: This is step {step + 1} of a {sweep.steps}-step gradient sweep.\n"
        f"Analyze: Symmetry retention, force separation, and potential vacuum stability.\n"
        f"Provide a brief analysis and a numeric Stability Score (0-100)."
    )


def extract_stability_score(text: str, rng: np.random.Generator) -> int:
    """First 'Score: N' in the text, or a random fallback in the configured range."""
    match = _SCORE_RE.search(text or "")
    if match:
        return int(match.group(1))
    return int(rng.integers(Config.sweep.FALLBACK_MIN, Config.sweep.FALLBACK_MAX))


@dataclass
class EvaluationLog:
    parameters: Dict[str, float]
    analysis: str
    stability_score: int
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:9])
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> dict:
        return asdict(self)


def run_sweep(
    sweep: ParameterSweep,
    provider: ExpertProvider,
    rng: Optional[np.random.Generator] = None,
) -> List[EvaluationLog]:
    """Evaluate each step of the sweep in order."""
    if rng is None:
        rng = np.random.default_rng(Config.core.SEED)
    logs: List[EvaluationLog] = []
    for i, value in enumerate(sweep.values()):
        prompt = build_sweep_prompt(sweep, i, value)
        analysis = provider.generate([{"role": "user", "content": prompt}])
        score = extract_stability_score(analysis, rng)
        logger.info(f"[Sweep] {sweep.parameter}={value:.3f} step {i + 1}/{sweep.steps} score={score}")
        logs.append(
            EvaluationLog(
                parameters=sweep_parameters(sweep.parameter, value),
                analysis=analysis,
                stability_score=score,
            )
        )
    return logs
