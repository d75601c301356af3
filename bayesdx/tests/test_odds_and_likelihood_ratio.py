from __future__ import annotations

import math

import pytest

from bayesdx.core.domain.errors import ValidationError
from bayesdx.core.domain.models import UNBOUNDED
from bayesdx.core.engine.odds import from_odds, likelihood_ratio, to_odds


def test_odds_round_trip_values() -> None:
    assert to_odds(0.5) == pytest.approx(1.0)
    assert to_odds(0.2) == pytest.approx(0.25)
    assert from_odds(0.25) == pytest.approx(0.2)
    assert from_odds(UNBOUNDED) == 1.0


def test_troponin_positive_likelihood_ratio() -> None:
    assert likelihood_ratio(0.9, 0.95, True) == pytest.approx(18.0)


def test_negative_likelihood_ratio() -> None:
    assert likelihood_ratio(0.7, 0.9, False) == pytest.approx(0.3 / 0.9)


def test_perfect_specificity_positive_is_unbounded() -> None:
    assert math.isinf(likelihood_ratio(0.9, 1.0, True))


def test_zero_specificity_negative_is_unbounded() -> None:
    assert math.isinf(likelihood_ratio(0.9, 0.0, False))


def test_zero_sensitivity_gives_zero_positive_ratio() -> None:
    assert likelihood_ratio(0.0, 0.5, True) == 0.0


def test_impossible_result_is_neutral_not_nan() -> None:
    assert likelihood_ratio(0.0, 1.0, True) == 1.0
    assert likelihood_ratio(1.0, 0.0, False) == 1.0


@pytest.mark.parametrize(
    "sensitivity,specificity",
    [(1.2, 0.9), (0.9, -0.1), (float("nan"), 0.9), (True, 0.9), ("0.9", 0.9)],
)
def test_out_of_domain_characteristics_rejected(sensitivity, specificity) -> None:
    with pytest.raises(ValidationError):
        likelihood_ratio(sensitivity, specificity, True)


def test_validation_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="sensitivity"):
        likelihood_ratio(1.5, 0.9, True)
