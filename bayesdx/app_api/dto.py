"""DTO definitions for app-level data exchange.

Responsibilities:
  - Define stable, typed structures for request payloads.
  - Decode JSON-shaped dicts into engine inputs, rejecting missing or ill-typed fields.
Must not:
  - Implement business logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from bayesdx.core.domain.errors import ValidationError
from bayesdx.core.domain.models import DiagnosticTest, TestObservation
from bayesdx.core.engine.validation import require_probability


def _require_keys(payload: Any, *keys: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationError("request body must be a JSON object")
    missing = [k for k in keys if payload.get(k) is None]
    if missing:
        joined = ", ".join(missing)
        verb = "is" if len(missing) == 1 else "are"
        raise ValidationError(f"{joined} {verb} required")
    return payload


def _optional_bool(payload: dict[str, Any], key: str, default: bool) -> bool:
    value = payload.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"{key} must be a boolean")
    return value


def _decode_test(entry: Any, where: str) -> DiagnosticTest:
    entry = _require_keys(entry, "sensitivity", "specificity")
    name = entry.get("test_name") or ""
    if not isinstance(name, str):
        raise ValidationError(f"{where}.test_name must be a string")
    return DiagnosticTest(
        name=name,
        sensitivity=require_probability(entry["sensitivity"], f"{where}.sensitivity"),
        specificity=require_probability(entry["specificity"], f"{where}.specificity"),
    )


def _require_list(payload: dict[str, Any], key: str) -> list[Any]:
    value = payload[key]
    if not isinstance(value, list):
        raise ValidationError(f"{key} must be a list")
    return value


@dataclass(frozen=True)
class BayesianCalculateRequest:
    prior_probability: float
    test: DiagnosticTest
    test_positive: bool = True

    @classmethod
    def from_payload(cls, payload: Any) -> "BayesianCalculateRequest":
        body = _require_keys(payload, "prior_probability", "sensitivity", "specificity")
        return cls(
            prior_probability=require_probability(body["prior_probability"], "prior_probability"),
            test=_decode_test(body, "request"),
            test_positive=_optional_bool(body, "test_positive", True),
        )


@dataclass(frozen=True)
class SequentialTestsRequest:
    initial_probability: float
    observations: list[TestObservation]

    @classmethod
    def from_payload(cls, payload: Any) -> "SequentialTestsRequest":
        body = _require_keys(payload, "initial_probability", "test_results")
        observations = []
        for idx, entry in enumerate(_require_list(body, "test_results")):
            where = f"test_results[{idx}]"
            test = _decode_test(entry, where)
            observations.append(
                TestObservation(
                    test=test,
                    is_positive=_optional_bool(entry, "result_positive", True),
                )
            )
        return cls(
            initial_probability=require_probability(body["initial_probability"], "initial_probability"),
            observations=observations,
        )


@dataclass(frozen=True)
class RecommendTestRequest:
    current_probability: float
    available_tests: Optional[list[DiagnosticTest]] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "RecommendTestRequest":
        body = _require_keys(payload, "current_probability")
        tests: Optional[list[DiagnosticTest]] = None
        if body.get("available_tests") is not None:
            tests = [
                _decode_test(entry, f"available_tests[{idx}]")
                for idx, entry in enumerate(_require_list(body, "available_tests"))
            ]
        return cls(
            current_probability=require_probability(body["current_probability"], "current_probability"),
            available_tests=tests,
        )


@dataclass(frozen=True)
class TestPerformanceRequest:
    __test__ = False

    sensitivity: float
    specificity: float
    prevalence: float

    @classmethod
    def from_payload(cls, payload: Any) -> "TestPerformanceRequest":
        body = _require_keys(payload, "sensitivity", "specificity", "prevalence")
        return cls(
            sensitivity=require_probability(body["sensitivity"], "sensitivity"),
            specificity=require_probability(body["specificity"], "specificity"),
            prevalence=require_probability(body["prevalence"], "prevalence"),
        )
