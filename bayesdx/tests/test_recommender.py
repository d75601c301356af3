"""Tests for next-test recommendation."""

from __future__ import annotations

import pytest

from bayesdx.core.domain.models import DiagnosticTest
from bayesdx.core.engine.recommender import (
    CLINICAL_JUDGMENT,
    HIGH_CONFIDENCE_RATIONALE,
    LOW_CONFIDENCE_RATIONALE,
    NO_FURTHER_TESTING,
    expected_utility,
    recommend_next_test,
)
from bayesdx.core.engine.updater import posterior_probability

TROPONIN = DiagnosticTest("Troponin", 0.9, 0.95)
ECG = DiagnosticTest("ECG", 0.6, 0.7)
CTA = DiagnosticTest("CT angiography", 0.95, 0.85)


@pytest.mark.parametrize(
    "probability,rationale",
    [(0.95, HIGH_CONFIDENCE_RATIONALE), (0.05, LOW_CONFIDENCE_RATIONALE)],
)
def test_terminal_probabilities_skip_evaluation(probability: float, rationale: str) -> None:
    # Out-of-domain candidate proves candidates are never evaluated.
    broken = DiagnosticTest("broken", 5.0, -1.0)
    result = recommend_next_test(probability, [TROPONIN, broken])

    assert result.chosen_test is None
    assert result.recommendation == NO_FURTHER_TESTING
    assert result.rationale == rationale
    assert result.lr_positive is None
    assert result.lr_negative is None


def test_boundary_probabilities_are_not_terminal() -> None:
    assert recommend_next_test(0.90, [TROPONIN]).chosen_test == TROPONIN
    assert recommend_next_test(0.10, [TROPONIN]).chosen_test == TROPONIN


def test_picks_largest_possible_shift() -> None:
    result = recommend_next_test(0.4, [ECG, TROPONIN, CTA])
    utilities = {t.name: expected_utility(0.4, t)[0] for t in (ECG, TROPONIN, CTA)}
    best_name = max(utilities, key=lambda name: utilities[name])

    assert result.chosen_test is not None
    assert result.chosen_test.name == best_name
    assert result.recommendation == best_name
    assert result.expected_utility == pytest.approx(utilities[best_name])
    assert result.probability_range == "low (possible)"
    assert "highest potential" in result.rationale


def test_utility_is_max_of_both_outcomes() -> None:
    utility, lr_pos, lr_neg = expected_utility(0.4, TROPONIN)
    shift_pos = abs(posterior_probability(0.4, lr_pos) - 0.4)
    shift_neg = abs(posterior_probability(0.4, lr_neg) - 0.4)

    assert utility == max(shift_pos, shift_neg)
    assert lr_pos == pytest.approx(18.0)
    assert lr_neg == pytest.approx(0.1 / 0.95)


def test_tie_keeps_first_candidate() -> None:
    first = DiagnosticTest("first", 0.8, 0.9)
    second = DiagnosticTest("second", 0.8, 0.9)

    result = recommend_next_test(0.5, [first, second])

    assert result.chosen_test is first


def test_uninformative_candidates_need_clinical_judgment() -> None:
    coin_flip = DiagnosticTest("coin flip", 0.5, 0.5)
    result = recommend_next_test(0.5, [coin_flip])

    assert result.chosen_test is None
    assert result.expected_utility == 0.0
    assert result.recommendation == CLINICAL_JUDGMENT
    assert result.probability_range == "low (possible)"


def test_no_candidates_need_clinical_judgment() -> None:
    result = recommend_next_test(0.5, [])
    assert result.chosen_test is None
    assert result.recommendation == CLINICAL_JUDGMENT


def test_unbounded_candidate_reports_ratio() -> None:
    biopsy = DiagnosticTest("biopsy", 0.7, 1.0)
    result = recommend_next_test(0.5, [ECG, biopsy])

    assert result.chosen_test is biopsy
    assert result.expected_utility == pytest.approx(0.5)
    assert result.lr_positive == float("inf")


def test_unnamed_winner_falls_back_to_clinical_judgment_label() -> None:
    unnamed = DiagnosticTest("", 0.9, 0.9)
    result = recommend_next_test(0.5, [unnamed])

    assert result.chosen_test is unnamed
    assert result.recommendation == CLINICAL_JUDGMENT
