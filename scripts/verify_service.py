#!/usr/bin/env python3
"""Check the EGM96 interpolation service against NGA's published test points."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from geoid_height import constants
from geoid_height.api.intpt_client import IntptClient
from geoid_height.qa.reference_check import all_passed, check_reference_points

log = logging.getLogger(__name__)


def _format_status(ok: bool) -> str:
    return "OK" if ok else "FAIL"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate the EGM96 geoid service against outintpt.dat.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of human-readable table.",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=constants.REFERENCE_TOLERANCE_M,
        help="Allowed deviation in meters (default: %(default)s).",
    )
    parser.add_argument("--url", default=None, help="Service URL override.")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds.")
    return parser.parse_args(argv)


def render_table(rows: List[dict]) -> None:
    print(f"{'Latitude':>12} {'Longitude':>12} {'Expected':>10} {'Actual':>10}  Status  Message")
    print("-" * 80)
    for row in rows:
        actual = "-" if row["actual_m"] is None else f"{row['actual_m']:.3f}"
        status = _format_status(row["status"] == "pass")
        print(
            f"{row['lat']:>12.6f} {row['lng']:>12.6f} {row['expected_m']:>10.3f} {actual:>10}  "
            f"{status:<6}  {row['message']}"
        )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    try:
        client = IntptClient(url=args.url, timeout=args.timeout)
    except ValueError as exc:
        log.error("Invalid configuration: %s", exc)
        return 2
    with client:
        checks = check_reference_points(client, tolerance_m=args.tolerance)
    rows = [check.to_row() for check in checks]
    if args.json:
        print(json.dumps(rows, indent=2))
    else:
        render_table(rows)
    return 0 if all_passed(checks) else 1


if __name__ == "__main__":
    sys.exit(main())
