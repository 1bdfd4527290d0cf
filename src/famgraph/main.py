"""
Command-line entry point.

1) Read a JSON document holding `people`, `relations` and optional `couples`
   record lists (and an optional `settings` block).
2) Build the family graph: couples, blood status, depths and positions.
3) Report validation warnings.
4) Write the node/edge JSON and optionally render a plot.
"""

import argparse
import json
import logging
from pathlib import Path
import sys

from famgraph.builder import build_family_graph
from famgraph.classify import BLOOD_STRATEGIES
from famgraph.config import BuildSettings
from famgraph.errors import FamGraphError

MAX_WARNINGS_SHOWN = 10


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="famgraph",
        description="Build a positioned family graph from person and relation records.",
    )
    parser.add_argument("input_json", type=Path, help="JSON file with people, relations and couples.")
    parser.add_argument("-o", "--output", type=Path, help="Write the graph JSON here (default: stdout).")
    parser.add_argument("--plot", type=Path, help="Render the layout to a PNG, SVG or PDF file.")
    parser.add_argument(
        "--strategy",
        choices=sorted(BLOOD_STRATEGIES),
        help="Blood / in-law classification rule (default: paternal).",
    )
    parser.add_argument(
        "--no-separate-components",
        action="store_true",
        help="Leave people unconnected to the pivot at depth 0 instead of laying them out apart.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every build stage.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    return parser.parse_args(argv)


def load_settings(data: dict, args: argparse.Namespace) -> BuildSettings:
    overrides = dict(data.get("settings") or {})
    if args.strategy:
        overrides["blood_strategy"] = args.strategy
    if args.no_separate_components:
        overrides["separate_components"] = False
    return BuildSettings.from_mapping(overrides)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        data = json.loads(args.input_json.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{args.input_json} must hold a JSON object")
        settings = load_settings(data, args)
        result = build_family_graph(
            data.get("people"),
            data.get("relations"),
            data.get("couples"),
            settings,
        )
    except (FamGraphError, ValueError, OSError) as e:
        # JSONDecodeError is a ValueError
        print(f"Error: {e}", file=sys.stderr)
        return 1

    stats = result.stats
    print(
        f"Built graph: {stats.people_count} people, {stats.relation_count} relations, "
        f"pivot {result.pivot_id}",
        file=sys.stderr,
    )

    if result.warnings:
        print(f"  Found {len(result.warnings)} validation warnings:", file=sys.stderr)
        for w in result.warnings[:MAX_WARNINGS_SHOWN]:
            print(f"    - {w}", file=sys.stderr)
        if len(result.warnings) > MAX_WARNINGS_SHOWN:
            print(f"    ... and {len(result.warnings) - MAX_WARNINGS_SHOWN} more", file=sys.stderr)

    payload = json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(payload + "\n", encoding="utf-8")
        print(f"Graph saved to {args.output}", file=sys.stderr)
    else:
        print(payload)

    if args.plot:
        from famgraph.plotting import plot_result

        plot_result(result, args.plot)
        print(f"Plot saved to {args.plot}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
