"""Encode engine results into JSON-safe response payloads.

Responsibilities:
  - Produce the response shapes returned by the reasoning HTTP routes.
  - Encode UNBOUNDED values as the string "unbounded" so output is strict JSON.
Must not:
  - Implement business logic.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from bayesdx.core.domain.models import Recommendation, SequentialAnalysis, TestPerformance, UpdateStep

UNBOUNDED_LABEL = "unbounded"


def encode_number(value: Optional[float]) -> float | int | str | None:
    if value is not None and math.isinf(value):
        return UNBOUNDED_LABEL
    return value


def encode_update(step: UpdateStep) -> dict[str, Any]:
    return {
        "test_name": step.test_name,
        "prior_probability": step.prior_probability,
        "likelihood_ratio": encode_number(step.likelihood_ratio),
        "post_probability": step.post_probability,
        "change": step.delta,
        "interpretation": step.interpretation,
    }


def encode_sequential(analysis: SequentialAnalysis) -> dict[str, Any]:
    return {
        "initial_probability": analysis.initial_probability,
        "final_probability": analysis.final_probability,
        "total_change": analysis.total_change,
        "updates": [encode_update(step) for step in analysis.steps],
        "confidence_level": analysis.confidence,
    }


def encode_performance(performance: TestPerformance) -> dict[str, Any]:
    return {
        "positive_predictive_value": performance.ppv,
        "negative_predictive_value": performance.npv,
        "number_needed_to_diagnose": encode_number(performance.number_needed_to_diagnose),
        "interpretation": performance.interpretation,
    }


def encode_recommendation(recommendation: Recommendation) -> dict[str, Any]:
    details = None
    if recommendation.chosen_test is not None:
        test = recommendation.chosen_test
        details = {
            "test_name": test.name,
            "sensitivity": test.sensitivity,
            "specificity": test.specificity,
            "expected_utility": recommendation.expected_utility,
            "lr_plus": encode_number(recommendation.lr_positive),
            "lr_minus": encode_number(recommendation.lr_negative),
        }
    return {
        "recommendation": recommendation.recommendation,
        "reasoning": recommendation.rationale,
        "test_details": details,
        "probability_range": recommendation.probability_range,
    }
