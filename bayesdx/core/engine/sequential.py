"""Sequential Bayesian analysis over ordered test results.

Responsibilities:
  - Fold observations left to right, threading each posterior forward as the next prior.
  - Label each step by its delta and the final probability by confidence band.

Inputs/Outputs:
  - Inputs: initial probability and observations in clinical/chronological order.
  - Outputs: SequentialAnalysis with an immutable, ordered list of UpdateStep.

Invariants:
  - Caller order is preserved; it is never used as a sort key.
  - The final probability does not depend on observation order (odds multiply),
    the per-step deltas do. Exception: once a step reaches 0 or 1 the chain is
    absorbed, so contradictory certain results (an unbounded LR and a zero LR)
    end at whichever came first.
"""

from __future__ import annotations

from functools import reduce
from typing import Sequence

from ..domain.labels import classify_confidence, interpret_change
from ..domain.models import DiagnosticTest, SequentialAnalysis, TestObservation, UpdateStep
from .odds import likelihood_ratio
from .updater import posterior_probability
from .validation import require_probability


def single_update(prior_probability: float, test: DiagnosticTest, is_positive: bool) -> UpdateStep:
    prior = require_probability(prior_probability, "prior_probability")
    lr = likelihood_ratio(test.sensitivity, test.specificity, is_positive)
    post = posterior_probability(prior, lr)
    delta = post - prior
    return UpdateStep(
        test_name=test.name,
        is_positive=is_positive,
        prior_probability=prior,
        likelihood_ratio=lr,
        post_probability=post,
        delta=delta,
        interpretation=interpret_change(delta),
    )


def _fold_step(
    acc: tuple[float, tuple[UpdateStep, ...]], observation: TestObservation
) -> tuple[float, tuple[UpdateStep, ...]]:
    current, steps = acc
    step = single_update(current, observation.test, observation.is_positive)
    return step.post_probability, steps + (step,)


def analyze_sequential_tests(
    initial_probability: float, observations: Sequence[TestObservation]
) -> SequentialAnalysis:
    initial = require_probability(initial_probability, "initial_probability")
    final, steps = reduce(_fold_step, observations, (initial, ()))
    return SequentialAnalysis(
        initial_probability=initial,
        final_probability=final,
        total_change=final - initial,
        steps=list(steps),
        confidence=classify_confidence(final),
    )
