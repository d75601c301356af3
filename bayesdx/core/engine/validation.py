"""Input domain checks for engine operations.

Responsibilities:
  - Reject non-numeric, boolean, NaN, and out-of-range inputs before arithmetic.

Invariants:
  - Probabilities, sensitivities, and specificities all live in [0, 1].
    Exactly 0 is accepted for sensitivity/specificity and flows into the
    unbounded or zero likelihood ratio paths.
"""

from __future__ import annotations

import math

from ..domain.errors import ValidationError


def require_probability(value: object, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field} must be a number")
    number = float(value)
    if math.isnan(number):
        raise ValidationError(f"{field} must not be NaN")
    if number < 0.0 or number > 1.0:
        raise ValidationError(f"{field} must be within [0, 1], got {number}")
    return number


def require_likelihood_ratio(value: object, field: str = "likelihood_ratio") -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field} must be a number")
    number = float(value)
    if math.isnan(number) or number < 0.0:
        raise ValidationError(f"{field} must be >= 0, got {number}")
    return number
