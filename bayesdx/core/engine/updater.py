"""Single-step Bayesian update.

Responsibilities:
  - Apply one likelihood ratio to one prior probability.
  - Provide a vectorized posterior curve over a grid of priors.

Invariants:
  - Priors of exactly 0 or 1 are absorbing and returned unchanged.
  - Results are clamped to [0, 1] and never NaN.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from ..domain.errors import ValidationError
from .odds import from_odds, to_odds
from .validation import require_likelihood_ratio, require_probability

DEFAULT_PRIOR_GRID = np.linspace(0.0, 1.0, 11)
DEFAULT_PRIOR_GRID.setflags(write=False)


def posterior_probability(prior_probability: float, likelihood_ratio: float) -> float:
    prior = require_probability(prior_probability, "prior_probability")
    lr = require_likelihood_ratio(likelihood_ratio)
    if prior == 0.0 or prior == 1.0:
        return prior
    if math.isinf(lr):
        return 1.0
    post_odds = to_odds(prior) * lr
    return min(max(from_odds(post_odds), 0.0), 1.0)


def posterior_curve(
    likelihood_ratio: float, priors: Optional[Sequence[float]] = None
) -> np.ndarray:
    """Post-test probability for each prior in ``priors`` (default 0.0..1.0 step 0.1).

    The tabular form of a Fagan nomogram for one test result.
    """
    lr = require_likelihood_ratio(likelihood_ratio)
    grid = DEFAULT_PRIOR_GRID if priors is None else np.asarray(priors, dtype=float)
    if grid.ndim != 1:
        raise ValidationError("priors must be a one-dimensional sequence")
    if np.any(np.isnan(grid)) or np.any((grid < 0.0) | (grid > 1.0)):
        raise ValidationError("priors must be within [0, 1]")

    out = grid.copy()
    interior = (grid > 0.0) & (grid < 1.0)
    if math.isinf(lr):
        out[interior] = 1.0
        return out

    p = grid[interior]
    with np.errstate(over="ignore"):
        post_odds = p / (1.0 - p) * lr
    finite = np.isfinite(post_odds)
    post = np.ones_like(post_odds)
    post[finite] = post_odds[finite] / (1.0 + post_odds[finite])
    out[interior] = np.clip(post, 0.0, 1.0)
    return out
