"""Post-test probability across a grid of pre-test probabilities.

Example:
  - python -m bayesdx.cli.run_posterior_curve --sensitivity 0.9 --specificity 0.95
  - python -m bayesdx.cli.run_posterior_curve --lr 0.1 --priors 0.05,0.2,0.5
"""

from __future__ import annotations

import argparse
import sys

from bayesdx.app_api.facade import ReasoningApplication
from bayesdx.core.domain.errors import ValidationError
from bayesdx.core.engine.odds import likelihood_ratio
from bayesdx.cli._debug_utils import _dbg, debug_sink
from bayesdx.cli._json_utils import print_response


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tabulate post-test probability over pre-test probabilities")
    parser.add_argument("--lr", type=float, default=None, help="Likelihood ratio")
    parser.add_argument("--sensitivity", type=float, default=None, help="Derive LR from sensitivity")
    parser.add_argument("--specificity", type=float, default=None, help="Derive LR from specificity")
    parser.add_argument("--negative", action="store_true", help="Use LR- instead of LR+")
    parser.add_argument("--priors", default=None, help="Comma-separated priors (default 0.0..1.0 step 0.1)")
    parser.add_argument("--debug", action="store_true", help="Print debug lines")
    return parser.parse_args(argv)


def _parse_priors(raw: str | None) -> list[float] | None:
    if raw is None:
        return None
    try:
        return [float(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise SystemExit(f"ERROR: --priors must be comma-separated numbers: {raw}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    derive = args.sensitivity is not None or args.specificity is not None
    if args.lr is not None and derive:
        raise SystemExit("ERROR: use either --lr OR --sensitivity/--specificity")
    if args.lr is None and not derive:
        raise SystemExit("ERROR: provide --lr OR --sensitivity and --specificity")
    if derive and (args.sensitivity is None or args.specificity is None):
        raise SystemExit("ERROR: --sensitivity and --specificity must be given together")

    priors = _parse_priors(args.priors)
    app = ReasoningApplication(debug=debug_sink(args))
    try:
        lr = args.lr
        if lr is None:
            lr = likelihood_ratio(args.sensitivity, args.specificity, not args.negative)
            _dbg(args, f"derived lr={lr}")
        points = app.posterior_curve(lr, priors)
    except ValidationError as exc:
        print(f"ERROR: {exc}")
        return 2
    print_response(points)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
