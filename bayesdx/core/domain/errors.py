"""Domain error types.

Responsibilities:
  - Define the single hard failure surfaced by the engine.

Invariants:
  - Unbounded likelihood ratios and absorbing priors are values, not errors.
"""

from __future__ import annotations


class ValidationError(ValueError):
    """Input outside the numeric domain of an engine operation."""
