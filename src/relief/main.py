"""Command-line entry point for relief planning."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from .config import settings
from .data.scenario_repository import build_request, load_request
from .interactive import prompt_request
from .models.errors import ReliefError
from .schemas.relief import ReliefRequest
from .services.outputs.formatter import relief_report_to_json, relief_report_to_text
from .services.routing.models import Algorithm
from .services.routing.service import plan_relief


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="relief-route",
        description=f"{settings.app_name}: rank flood-affected beneficiaries and route aid from a supply city.",
    )
    parser.add_argument("--scenario", type=Path, help="JSON document with beneficiaries, network and source.")
    parser.add_argument("--beneficiaries", type=Path, help="CSV/XLSX register with Name, Age, Gender, City.")
    parser.add_argument("--roads", type=Path, help="CSV/XLSX road list with From, To, Distance.")
    parser.add_argument("--source", help="Supply city aid is dispatched from.")
    parser.add_argument("--destination", help="City used to compare the shortest-path algorithms.")
    parser.add_argument(
        "--algorithm",
        choices=[algorithm.value for algorithm in Algorithm],
        help=f"Algorithm used to route beneficiaries (default: {settings.default_algorithm}).",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON.")
    return parser


def _resolve_request(args: argparse.Namespace) -> ReliefRequest:
    if args.scenario:
        request = load_request(args.scenario)
        if args.algorithm:
            request = request.model_copy(update={"algorithm": Algorithm(args.algorithm)})
        return request
    if args.beneficiaries or args.roads:
        if not args.source:
            raise ValueError("--source is required when loading beneficiaries and roads from files.")
        return build_request(
            source=args.source,
            destination=args.destination,
            beneficiaries_file=args.beneficiaries,
            roads_file=args.roads,
            algorithm=Algorithm(args.algorithm) if args.algorithm else None,
        )
    return prompt_request()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger().setLevel(settings.log_level.upper())
        request = _resolve_request(args)
        report = plan_relief(request)
    except EOFError:
        print("Error: input ended before the scenario was complete.", file=sys.stderr)
        return 1
    except (ReliefError, ValidationError, ValueError, FileNotFoundError) as exc:
        logging.error(f"Relief planning failed: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(relief_report_to_json(report), ensure_ascii=False, indent=2))
    else:
        print(relief_report_to_text(report), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
