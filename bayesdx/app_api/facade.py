"""Application facade for the reasoning routes.

Responsibilities:
  - Decode request payloads, run the engine, and encode response payloads.
  - Emit one debug line per handled request when a debug sink is configured.
Must not:
  - Hold per-request state; an instance is safe to share across threads.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from bayesdx.core.engine.explain import explain_update
from bayesdx.core.engine.performance import analyze_test_performance
from bayesdx.core.engine.recommender import recommend_next_test
from bayesdx.core.engine.sequential import analyze_sequential_tests, single_update
from bayesdx.core.engine.updater import DEFAULT_PRIOR_GRID, posterior_curve
from .dto import (
    BayesianCalculateRequest,
    RecommendTestRequest,
    SequentialTestsRequest,
    TestPerformanceRequest,
)
from .ports import CandidateTestProvider
from .serialize import (
    encode_number,
    encode_performance,
    encode_recommendation,
    encode_sequential,
)


class ReasoningApplication:
    def __init__(
        self,
        catalog: Optional[CandidateTestProvider] = None,
        debug: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._catalog = catalog
        self._debug = debug

    def _dbg(self, msg: str) -> None:
        if self._debug is not None:
            self._debug(msg)

    def bayesian_calculate(self, payload: Any) -> dict[str, Any]:
        request = BayesianCalculateRequest.from_payload(payload)
        step = single_update(request.prior_probability, request.test, request.test_positive)
        self._dbg(
            f"bayesian_calculate prior={step.prior_probability} "
            f"lr={step.likelihood_ratio} post={step.post_probability}"
        )
        return {
            "prior_probability": step.prior_probability,
            "likelihood_ratio": encode_number(step.likelihood_ratio),
            "post_probability": step.post_probability,
            "change": step.delta,
            "interpretation": step.interpretation,
            "explanation": explain_update(step),
        }

    def sequential_tests(self, payload: Any) -> dict[str, Any]:
        request = SequentialTestsRequest.from_payload(payload)
        analysis = analyze_sequential_tests(request.initial_probability, request.observations)
        self._dbg(
            f"sequential_tests steps={len(analysis.steps)} "
            f"initial={analysis.initial_probability} final={analysis.final_probability}"
        )
        return encode_sequential(analysis)

    def recommend_test(self, payload: Any) -> dict[str, Any]:
        request = RecommendTestRequest.from_payload(payload)
        candidates = request.available_tests
        if candidates is None:
            candidates = self._catalog.get_candidates() if self._catalog is not None else []
        recommendation = recommend_next_test(request.current_probability, candidates)
        self._dbg(
            f"recommend_test candidates={len(candidates)} "
            f"chosen={recommendation.recommendation!r} utility={recommendation.expected_utility:.4f}"
        )
        return encode_recommendation(recommendation)

    def test_performance(self, payload: Any) -> dict[str, Any]:
        request = TestPerformanceRequest.from_payload(payload)
        performance = analyze_test_performance(
            request.sensitivity, request.specificity, request.prevalence
        )
        self._dbg(f"test_performance ppv={performance.ppv} npv={performance.npv}")
        return encode_performance(performance)

    def posterior_curve(self, likelihood_ratio: float, priors: Optional[list[float]] = None) -> list[dict[str, Any]]:
        posts = posterior_curve(likelihood_ratio, priors)
        grid = DEFAULT_PRIOR_GRID if priors is None else priors
        points = [
            {"prior_probability": float(prior), "post_probability": float(post)}
            for prior, post in zip(grid, posts)
        ]
        self._dbg(f"posterior_curve lr={likelihood_ratio} points={len(points)}")
        return points
