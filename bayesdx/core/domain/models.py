"""Domain models for diagnostic reasoning.

Responsibilities:
  - Define immutable value objects for tests, observations, and engine results.

Inputs/Outputs:
  - Produced fresh per call by core.engine; owned by the caller afterwards.

Invariants:
  - Models must be deterministic containers with no behavior.
  - UNBOUNDED marks a likelihood ratio (or NND) whose denominator was exactly zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

UNBOUNDED = math.inf


@dataclass(frozen=True)
class DiagnosticTest:
    name: str
    sensitivity: float
    specificity: float


@dataclass(frozen=True)
class TestObservation:
    __test__ = False  # not a pytest test class

    test: DiagnosticTest
    is_positive: bool


@dataclass(frozen=True)
class UpdateStep:
    test_name: str
    is_positive: bool
    prior_probability: float
    likelihood_ratio: float
    post_probability: float
    delta: float
    interpretation: str


@dataclass(frozen=True)
class SequentialAnalysis:
    initial_probability: float
    final_probability: float
    total_change: float
    steps: list[UpdateStep]
    confidence: str


@dataclass(frozen=True)
class TestPerformance:
    __test__ = False

    ppv: float
    npv: float
    number_needed_to_diagnose: int | float  # int, or UNBOUNDED
    interpretation: str


@dataclass(frozen=True)
class Recommendation:
    chosen_test: Optional[DiagnosticTest]
    expected_utility: float
    lr_positive: Optional[float]
    lr_negative: Optional[float]
    probability_range: str
    recommendation: str
    rationale: str
