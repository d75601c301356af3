"""Probability/odds conversion and likelihood ratios.

Responsibilities:
  - Convert between probability and odds.
  - Derive LR+ / LR- from sensitivity and specificity.

Invariants:
  - A zero denominator yields UNBOUNDED instead of raising.
  - 0/0 (a result the test can never produce) yields the neutral ratio 1.0.
"""

from __future__ import annotations

import math

from ..domain.models import UNBOUNDED
from .validation import require_probability


def to_odds(probability: float) -> float:
    if probability >= 1.0:
        return UNBOUNDED
    return probability / (1.0 - probability)


def from_odds(odds: float) -> float:
    if math.isinf(odds):
        return 1.0
    return odds / (1.0 + odds)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0.0:
        return 1.0 if numerator == 0.0 else UNBOUNDED
    return numerator / denominator


def likelihood_ratio(sensitivity: float, specificity: float, is_positive: bool = True) -> float:
    sensitivity = require_probability(sensitivity, "sensitivity")
    specificity = require_probability(specificity, "specificity")
    if is_positive:
        return _ratio(sensitivity, 1.0 - specificity)
    return _ratio(1.0 - sensitivity, specificity)
