"""Teaching explanation for a single Bayesian update."""

from __future__ import annotations

import math

from ..domain.labels import describe_lr_strength
from ..domain.models import UpdateStep


def format_lr(lr: float) -> str:
    if math.isinf(lr):
        return "unbounded"
    return f"{lr:.2f}"


def explain_update(step: UpdateStep) -> str:
    prior_pct = f"{step.prior_probability * 100:.1f}"
    post_pct = f"{step.post_probability * 100:.1f}"
    lines = [
        "**Bayesian Reasoning:**",
        "",
        f"1. **Pre-test probability:** {prior_pct}% (based on clinical presentation)",
        f"2. **Likelihood ratio:** {format_lr(step.likelihood_ratio)} "
        "(how much this test result changes the odds)",
        f"3. **Post-test probability:** {post_pct}% (updated probability after test)",
        "",
        describe_lr_strength(step.likelihood_ratio),
    ]
    return "\n".join(lines) + "\n"
