"""Single post-test probability update from the command line.

Example:
  - python -m bayesdx.cli.run_bayesian_update --prior 0.3 --sensitivity 0.9 --specificity 0.95
"""

from __future__ import annotations

import argparse
import sys

from bayesdx.app_api.facade import ReasoningApplication
from bayesdx.core.domain.errors import ValidationError
from bayesdx.cli._debug_utils import debug_sink
from bayesdx.cli._json_utils import print_response


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute post-test probability for one test result")
    parser.add_argument("--prior", type=float, required=True, help="Pre-test probability in [0, 1]")
    parser.add_argument("--sensitivity", type=float, required=True, help="Test sensitivity in [0, 1]")
    parser.add_argument("--specificity", type=float, required=True, help="Test specificity in [0, 1]")
    parser.add_argument("--negative", action="store_true", help="Result was negative (default positive)")
    parser.add_argument("--no-explain", action="store_true", help="Omit teaching explanation text")
    parser.add_argument("--debug", action="store_true", help="Print debug lines")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    app = ReasoningApplication(debug=debug_sink(args))
    try:
        response = app.bayesian_calculate(
            {
                "prior_probability": args.prior,
                "sensitivity": args.sensitivity,
                "specificity": args.specificity,
                "test_positive": not args.negative,
            }
        )
    except ValidationError as exc:
        print(f"ERROR: {exc}")
        return 2
    if args.no_explain:
        response.pop("explanation", None)
    print_response(response)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
