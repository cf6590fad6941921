"""Command-line entry point for checking deliveries against a path.

Usage:
    delivery-checker '[[1,3],[2,5]]' '[1,2,3,4,5]'
    delivery-checker --persist '[[1,3]]' '[1,3]'

Exit Codes:
    0: A result document was printed (success or a check error)
    1: Wrong number of positional arguments
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import settings
from .models.domain import ErrorCode
from .services.outputs.formatter import render_json, result_to_json
from .services.validation.service import check_deliveries, save_check_outputs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="delivery-checker",
        description="Validate pickup/dropoff deliveries against an ordered path.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="JSON",
        help="Serialized deliveries followed by the serialized path",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help=f"Logging level written to stderr (default: {settings.log_level})",
    )
    parser.add_argument(
        "--persist",
        action="store_true",
        help="Also write summary.json/steps.csv under the data root",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args, unknown = build_parser().parse_known_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level or settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # unrecognized option-like tokens still count as arguments
    if unknown or len(args.inputs) != 2:
        error = {
            "status": "error",
            "error_code": ErrorCode.INVALID_ARGUMENTS.value,
            "error_message": "Expected exactly 2 arguments: deliveries and path",
        }
        print(render_json(error, indent=None))
        return 1

    deliveries_text, path_text = args.inputs
    result = check_deliveries(deliveries_text, path_text)

    if args.persist:
        try:
            save_check_outputs(result)
        except OSError as exc:
            logging.error(f"Failed to save delivery check outputs: {exc}")

    print(render_json(result_to_json(result), indent=settings.json_indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
