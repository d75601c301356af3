"""Bayesian diagnostic-reasoning engine.

Responsibilities:
  - Provide pure, synchronous functions for likelihood ratios, posterior updates,
    sequential analysis, test performance, and next-test recommendation.
  - Must not perform I/O or retain state between calls.
"""
