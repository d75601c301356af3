"""Port definitions for app-level dependencies.

Responsibilities:
  - Define interface contracts for candidate test sources.
Must not:
  - Implement logic; interfaces only.
"""

from __future__ import annotations

from typing import Protocol

from bayesdx.core.domain.models import DiagnosticTest


class CandidateTestProvider(Protocol):
    def get_candidates(self) -> list[DiagnosticTest]:
        ...
