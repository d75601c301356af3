"""Next-test recommendation by simulated outcome.

Responsibilities:
  - Short-circuit when the current probability is already terminal.
  - Simulate both outcomes of each candidate and pick the largest possible shift.

Invariants:
  - Ties keep the first candidate in input order (strict > against the running best).
  - A candidate must shift probability by more than zero to be chosen.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..domain.labels import classify_confidence
from ..domain.models import DiagnosticTest, Recommendation
from .odds import likelihood_ratio
from .updater import posterior_probability
from .validation import require_probability

CONFIRMED_THRESHOLD = 0.90
RULED_OUT_THRESHOLD = 0.10

NO_FURTHER_TESTING = "No further testing needed"
CLINICAL_JUDGMENT = "Clinical judgment needed"
HIGH_CONFIDENCE_RATIONALE = "Diagnosis is highly likely (>90%). Proceed with treatment."
LOW_CONFIDENCE_RATIONALE = "Diagnosis is highly unlikely (<10%). Consider alternative diagnoses."
NO_INFORMATIVE_TEST_RATIONALE = "No available test can change the probability; rely on clinical judgment."


def _terminal(current: float, rationale: str) -> Recommendation:
    return Recommendation(
        chosen_test=None,
        expected_utility=0.0,
        lr_positive=None,
        lr_negative=None,
        probability_range=classify_confidence(current),
        recommendation=NO_FURTHER_TESTING,
        rationale=rationale,
    )


def expected_utility(current_probability: float, test: DiagnosticTest) -> tuple[float, float, float]:
    """Return (utility, LR+, LR-) for ``test`` at ``current_probability``."""
    lr_pos = likelihood_ratio(test.sensitivity, test.specificity, True)
    lr_neg = likelihood_ratio(test.sensitivity, test.specificity, False)
    shift_pos = abs(posterior_probability(current_probability, lr_pos) - current_probability)
    shift_neg = abs(posterior_probability(current_probability, lr_neg) - current_probability)
    return max(shift_pos, shift_neg), lr_pos, lr_neg


def recommend_next_test(
    current_probability: float, candidates: Sequence[DiagnosticTest]
) -> Recommendation:
    current = require_probability(current_probability, "current_probability")
    if current > CONFIRMED_THRESHOLD:
        return _terminal(current, HIGH_CONFIDENCE_RATIONALE)
    if current < RULED_OUT_THRESHOLD:
        return _terminal(current, LOW_CONFIDENCE_RATIONALE)

    best: Optional[DiagnosticTest] = None
    best_utility = 0.0
    best_lrs: tuple[Optional[float], Optional[float]] = (None, None)
    for test in candidates:
        utility, lr_pos, lr_neg = expected_utility(current, test)
        if utility > best_utility:
            best = test
            best_utility = utility
            best_lrs = (lr_pos, lr_neg)

    if best is None:
        return Recommendation(
            chosen_test=None,
            expected_utility=0.0,
            lr_positive=None,
            lr_negative=None,
            probability_range=classify_confidence(current),
            recommendation=CLINICAL_JUDGMENT,
            rationale=NO_INFORMATIVE_TEST_RATIONALE,
        )

    return Recommendation(
        chosen_test=best,
        expected_utility=best_utility,
        lr_positive=best_lrs[0],
        lr_negative=best_lrs[1],
        probability_range=classify_confidence(current),
        recommendation=best.name or CLINICAL_JUDGMENT,
        rationale=(
            "This test has the highest potential to change probability "
            f"(±{best_utility * 100:.1f}%)"
        ),
    )
