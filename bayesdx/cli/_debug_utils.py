from __future__ import annotations

import argparse


def _debug_enabled(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "debug", False))


def _dbg(args: argparse.Namespace, msg: str) -> None:
    if _debug_enabled(args):
        print(f"[debug] {msg}")


def debug_sink(args: argparse.Namespace):
    """Return a callable for ReasoningApplication(debug=...), or None when --debug is off."""
    if not _debug_enabled(args):
        return None
    return lambda msg: _dbg(args, msg)
