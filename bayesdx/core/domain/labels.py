"""Ordered label tables for qualitative interpretation.

Responsibilities:
  - Map probability deltas, probabilities, and likelihood ratios to stable labels.
  - Keep thresholds as data: ordered (predicate, label) pairs, first match wins.

Invariants:
  - Every table ends with a catch-all band, so lookups are total.
  - Labels are user-facing strings and must remain stable.
"""

from __future__ import annotations

from typing import Callable

Band = tuple[Callable[[float], bool], str]

# Evaluated on the raw signed delta (post - prior).
INTERPRETATION_BANDS: list[Band] = [
    (lambda d: d > 0.30, "significantly more likely"),
    (lambda d: d > 0.10, "moderately more likely"),
    (lambda d: d > 0.02, "slightly more likely"),
    (lambda d: d > -0.02, "essentially unchanged"),
    (lambda d: d > -0.10, "slightly less likely"),
    (lambda d: d > -0.30, "moderately less likely"),
    (lambda d: True, "significantly less likely (likely ruled out)"),
]

CONFIDENCE_BANDS: list[Band] = [
    (lambda p: p > 0.90, "very high (diagnosis confirmed)"),
    (lambda p: p > 0.75, "high (likely diagnosis)"),
    (lambda p: p > 0.50, "moderate (probable)"),
    (lambda p: p > 0.25, "low (possible)"),
    (lambda p: p > 0.10, "very low (unlikely)"),
    (lambda p: True, "negligible (effectively ruled out)"),
]

LR_STRENGTH_BANDS: list[Band] = [
    (
        lambda lr: lr > 10,
        "This is a **very strong positive** test result (LR > 10), "
        "substantially increasing disease probability.",
    ),
    (
        lambda lr: lr > 5,
        "This is a **strong positive** test result (LR > 5), "
        "significantly increasing disease probability.",
    ),
    (
        lambda lr: lr > 2,
        "This is a **moderate positive** test result (LR > 2), "
        "moderately increasing disease probability.",
    ),
    (
        lambda lr: lr > 1,
        "This is a **weak positive** test result (LR > 1), "
        "slightly increasing disease probability.",
    ),
    (
        lambda lr: lr < 0.1,
        "This is a **very strong negative** test result (LR < 0.1), "
        "substantially decreasing disease probability.",
    ),
    (
        lambda lr: lr < 0.2,
        "This is a **strong negative** test result (LR < 0.2), "
        "significantly decreasing disease probability.",
    ),
    (
        lambda lr: lr < 0.5,
        "This is a **moderate negative** test result (LR < 0.5), "
        "moderately decreasing disease probability.",
    ),
    (lambda lr: True, "This test result has minimal impact on disease probability."),
]


def first_match(bands: list[Band], value: float) -> str:
    for predicate, label in bands:
        if predicate(value):
            return label
    raise ValueError(f"No band matched value {value!r}")


def interpret_change(delta: float) -> str:
    return first_match(INTERPRETATION_BANDS, delta)


def classify_confidence(probability: float) -> str:
    return first_match(CONFIDENCE_BANDS, probability)


def describe_lr_strength(lr: float) -> str:
    return first_match(LR_STRENGTH_BANDS, lr)


_open = [
    name
    for name, bands in (
        ("INTERPRETATION_BANDS", INTERPRETATION_BANDS),
        ("CONFIDENCE_BANDS", CONFIDENCE_BANDS),
        ("LR_STRENGTH_BANDS", LR_STRENGTH_BANDS),
    )
    if not bands[-1][0](float("nan"))
]
if _open:
    raise RuntimeError(f"Label tables without catch-all band: {_open}")
