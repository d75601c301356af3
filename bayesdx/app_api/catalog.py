"""JSON-backed catalog of candidate diagnostic tests.

File shape:
  {"tests": [{"test_name": "Troponin", "sensitivity": 0.9, "specificity": 0.95}, ...]}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bayesdx.core.domain.models import DiagnosticTest
from bayesdx.core.engine.validation import require_probability


def _require(payload: dict[str, Any], key: str, expected_type: type, where: str) -> Any:
    if key not in payload:
        raise ValueError(f"Missing required field '{key}' in {where}")
    value = payload[key]
    if expected_type is float:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ValueError(f"Field '{key}' in {where} must be float")
        return float(value)
    if not isinstance(value, expected_type):
        raise ValueError(f"Field '{key}' in {where} must be {expected_type.__name__}")
    return value


def parse_catalog(payload: Any) -> list[DiagnosticTest]:
    if not isinstance(payload, dict):
        raise ValueError("Test catalog must be a JSON object")
    entries = _require(payload, "tests", list, "catalog")

    tests: list[DiagnosticTest] = []
    for idx, entry in enumerate(entries):
        where = f"tests[{idx}]"
        if not isinstance(entry, dict):
            raise ValueError(f"{where} must be a JSON object")
        name = _require(entry, "test_name", str, where).strip()
        if not name:
            raise ValueError(f"Field 'test_name' in {where} must be non-empty")
        tests.append(
            DiagnosticTest(
                name=name,
                sensitivity=require_probability(_require(entry, "sensitivity", float, where), f"{where}.sensitivity"),
                specificity=require_probability(_require(entry, "specificity", float, where), f"{where}.specificity"),
            )
        )
    return tests


def load_test_catalog(path: str | Path) -> list[DiagnosticTest]:
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise ValueError(f"Test catalog not found: {catalog_path}")
    try:
        text = catalog_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Test catalog not readable: {catalog_path}: {exc}") from exc
    payload = json.loads(text)
    return parse_catalog(payload)


@dataclass(frozen=True)
class StaticTestCatalog:
    tests: tuple[DiagnosticTest, ...]

    def get_candidates(self) -> list[DiagnosticTest]:
        return list(self.tests)

    @classmethod
    def from_file(cls, path: str | Path) -> "StaticTestCatalog":
        return cls(tests=tuple(load_test_catalog(path)))
