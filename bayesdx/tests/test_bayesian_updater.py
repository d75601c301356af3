from __future__ import annotations

import math

import numpy as np
import pytest

from bayesdx.core.domain.errors import ValidationError
from bayesdx.core.domain.models import UNBOUNDED
from bayesdx.core.engine.updater import DEFAULT_PRIOR_GRID, posterior_curve, posterior_probability


@pytest.mark.parametrize("prior", [0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0])
def test_neutral_lr_leaves_probability_unchanged(prior: float) -> None:
    assert posterior_probability(prior, 1.0) == pytest.approx(prior, abs=1e-12)


def test_troponin_reference_scenario() -> None:
    assert posterior_probability(0.3, 18.0) == pytest.approx(0.8852, abs=1e-4)


def test_extreme_ratios_are_clamped() -> None:
    high = posterior_probability(0.5, 1e12)
    low = posterior_probability(0.5, 1e-12)
    assert high <= 1.0
    assert low >= 0.0


def test_overflowing_odds_resolve_to_one() -> None:
    assert posterior_probability(0.999999, 1e308) == 1.0


def test_unbounded_ratio_rules_in() -> None:
    assert posterior_probability(0.3, UNBOUNDED) == 1.0


def test_zero_ratio_rules_out() -> None:
    assert posterior_probability(0.3, 0.0) == 0.0


@pytest.mark.parametrize("prior", [0.0, 1.0])
@pytest.mark.parametrize("lr", [0.0, 0.5, 18.0, UNBOUNDED])
def test_absorbing_priors_are_returned_unchanged(prior: float, lr: float) -> None:
    result = posterior_probability(prior, lr)
    assert result == prior
    assert not math.isnan(result)


@pytest.mark.parametrize("prior,lr", [(-0.1, 2.0), (1.1, 2.0), (float("nan"), 2.0), (0.5, -1.0), (0.5, float("nan"))])
def test_invalid_inputs_rejected(prior: float, lr: float) -> None:
    with pytest.raises(ValidationError):
        posterior_probability(prior, lr)


def test_posterior_curve_default_grid_matches_scalar_updates() -> None:
    curve = posterior_curve(4.5)
    assert curve.shape == (11,)
    assert curve[0] == 0.0
    assert curve[-1] == 1.0
    for prior, post in zip(np.linspace(0.0, 1.0, 11), curve):
        assert post == pytest.approx(posterior_probability(float(prior), 4.5), abs=1e-12)


def test_posterior_curve_unbounded_ratio() -> None:
    curve = posterior_curve(UNBOUNDED, [0.0, 0.2, 0.7, 1.0])
    assert curve.tolist() == [0.0, 1.0, 1.0, 1.0]


def test_posterior_curve_huge_ratio_has_no_nan() -> None:
    curve = posterior_curve(1e308, [0.5, 0.999999])
    assert not np.any(np.isnan(curve))
    assert np.all(curve <= 1.0)


def test_posterior_curve_rejects_out_of_range_priors() -> None:
    with pytest.raises(ValidationError):
        posterior_curve(2.0, [0.2, 1.5])


def test_default_prior_grid_is_read_only() -> None:
    with pytest.raises(ValueError):
        DEFAULT_PRIOR_GRID[1] = 0.55

    assert posterior_curve(2.0)[1] == pytest.approx(2.0 / 9.0 / (1.0 + 2.0 / 9.0))


def test_posterior_curve_output_is_writable_copy() -> None:
    curve = posterior_curve(2.0)
    curve[1] = 0.55

    assert posterior_curve(2.0)[1] != 0.55
