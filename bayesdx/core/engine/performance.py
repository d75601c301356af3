"""Diagnostic test performance at a given prevalence.

Responsibilities:
  - Compute PPV, NPV, and number needed to diagnose (NND).

Invariants:
  - Independent of the sequential chain; shares only sensitivity/specificity inputs.
  - A predictive value whose denominator is zero is reported as 0.0.
"""

from __future__ import annotations

import math

from ..domain.models import UNBOUNDED, TestPerformance
from .validation import require_probability

# 1/ppv is rounded before ceil so 1/0.49999999999999994 still diagnoses in 2.
_NND_DECIMALS = 9


def _safe_ratio(numerator: float, denominator: float) -> float:
    if denominator == 0.0:
        return 0.0
    return numerator / denominator


def number_needed_to_diagnose(ppv: float) -> int | float:
    if ppv <= 0.0:
        return UNBOUNDED
    inverse = 1.0 / ppv
    if math.isinf(inverse):
        return UNBOUNDED
    return math.ceil(round(inverse, _NND_DECIMALS))


def describe_nnd(nnd: int | float) -> str:
    if math.isinf(nnd):
        return "No positive result identifies a true case at this prevalence"
    return f"Need to test {nnd} patients with positive result to find 1 true case"


def analyze_test_performance(sensitivity: float, specificity: float, prevalence: float) -> TestPerformance:
    sens = require_probability(sensitivity, "sensitivity")
    spec = require_probability(specificity, "specificity")
    prev = require_probability(prevalence, "prevalence")

    true_pos = sens * prev
    false_pos = (1.0 - spec) * (1.0 - prev)
    true_neg = spec * (1.0 - prev)
    false_neg = (1.0 - sens) * prev

    ppv = _safe_ratio(true_pos, true_pos + false_pos)
    npv = _safe_ratio(true_neg, true_neg + false_neg)
    nnd = number_needed_to_diagnose(ppv)
    return TestPerformance(
        ppv=ppv,
        npv=npv,
        number_needed_to_diagnose=nnd,
        interpretation=describe_nnd(nnd),
    )
