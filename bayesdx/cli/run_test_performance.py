from __future__ import annotations

import argparse
import sys

from bayesdx.app_api.facade import ReasoningApplication
from bayesdx.core.domain.errors import ValidationError
from bayesdx.cli._debug_utils import debug_sink
from bayesdx.cli._json_utils import print_response


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute PPV, NPV and number needed to diagnose")
    parser.add_argument("--sensitivity", type=float, required=True, help="Test sensitivity in [0, 1]")
    parser.add_argument("--specificity", type=float, required=True, help="Test specificity in [0, 1]")
    parser.add_argument("--prevalence", type=float, required=True, help="Disease prevalence in [0, 1]")
    parser.add_argument("--debug", action="store_true", help="Print debug lines")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    app = ReasoningApplication(debug=debug_sink(args))
    try:
        response = app.test_performance(
            {
                "sensitivity": args.sensitivity,
                "specificity": args.specificity,
                "prevalence": args.prevalence,
            }
        )
    except ValidationError as exc:
        print(f"ERROR: {exc}")
        return 2
    print_response(response)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
