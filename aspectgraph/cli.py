"""Command-line interface for aspectgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

import jsonschema
import yaml

from aspectgraph.config import SOLVER_CONFIG
from aspectgraph.logging import configure_cli_logging, get_logger
from aspectgraph.planning import PlannedSolution, solve_research_path
from aspectgraph.solver import ResearchSolver

logger = get_logger(__name__)

# Errors reported for unreadable recipe tables and rejected research paths
_INPUT_ERRORS = (ValueError, jsonschema.ValidationError, yaml.YAMLError)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width
        max_col_width: Clip cells longer than this, ending them with "..."

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = []
    for col_idx in range(len(clipped_headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(clipped_headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in clipped_rows:
        lines.append(format_row(row))

    return "\n".join(lines)


def _format_weight(value: Any) -> str:
    """Return weight formatted with up to three decimals.

    Trims trailing zeros and the decimal point when not needed. Falls back to
    ``str(value)`` if the input cannot be parsed as a float.

    Examples:
        4 -> "4"; 2.5 -> "2.5"; 1234.5678 -> "1,234.568".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _format_solution_line(planned: PlannedSolution) -> str:
    """Render one solved problem as ``a → b → c (weight)``."""
    solution = planned.solution
    if not solution.path:
        return "No solution found"
    return f"{' → '.join(solution.path)} ({_format_weight(solution.weight)})"


def _load_solver(recipes: Optional[Path]) -> ResearchSolver:
    if recipes is None:
        return ResearchSolver.default()
    return ResearchSolver.from_file(recipes)


def _solve_path(
    nodes: List[str],
    recipes: Optional[Path] = None,
    prefer: Optional[List[str]] = None,
    spacer: Optional[str] = None,
    strategy: Optional[str] = None,
    as_json: bool = False,
) -> None:
    """Solve a research path given on the command line and print the results.

    Args:
        nodes: Research path slots; spacer entries mark empty slots.
        recipes: Recipe file; the packaged table is used when None.
        prefer: Aspects that weigh 0 during the search.
        spacer: Empty-slot marker override.
        strategy: Search strategy override.
        as_json: Print a JSON document instead of text lines.
    """
    _start_time = perf_counter()
    try:
        solver = _load_solver(recipes)
        results = solve_research_path(
            solver,
            nodes,
            preferred=frozenset(prefer or ()),
            spacer=spacer,
            strategy=strategy,  # type: ignore[arg-type]
        )
    except FileNotFoundError:
        logger.error(f"Recipe file not found: {recipes}")
        print(f"❌ ERROR: Recipe file not found: {recipes}")
        sys.exit(1)
    except _INPUT_ERRORS as e:
        logger.error(f"Failed to solve research path: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to solve research path: {type(e).__name__}: {e}")
        sys.exit(1)

    if as_json:
        payload = {
            "nodes": list(nodes),
            "preferred": sorted(prefer or ()),
            "solutions": [r.to_dict() for r in results],
        }
        print(json.dumps(payload, indent=2))
    elif not results:
        print("Nothing to solve: the research path needs at least two aspects")
    else:
        for planned in results:
            print(_format_solution_line(planned))

    found = sum(1 for r in results if r.solution.found)
    logger.debug(
        f"Solved {found}/{len(results)} {_plural(len(results), 'problem')} "
        f"in {_format_duration(perf_counter() - _start_time)}"
    )


def _inspect_recipes(recipes: Optional[Path] = None, detail: bool = False) -> None:
    """Validate a recipe table and show its aspects, weights and connections.

    Args:
        recipes: Recipe file; the packaged table is used when None.
        detail: Also list each aspect's recipe.
    """
    source = str(recipes) if recipes is not None else "packaged aspect table"
    logger.info(f"Inspecting recipes from: {source}")

    try:
        solver = _load_solver(recipes)
    except FileNotFoundError:
        print(f"❌ ERROR: Recipe file not found: {recipes}")
        sys.exit(1)
    except _INPUT_ERRORS as e:
        logger.error(f"Failed to inspect recipes: {e}")
        print("❌ ERROR: Failed to inspect recipes")
        print(f"  {type(e).__name__}: {e}")
        sys.exit(1)

    stats = solver.describe()
    print("\n" + "=" * 60)
    print("RECIPE TABLE")
    print("=" * 60)
    print(f"   Primal Aspects: {stats['primal']:,}")
    print(f"   Compound Aspects: {stats['compound']:,}")
    print(f"   Graph Nodes: {stats['nodes']:,}")
    print(f"   Graph Edges: {stats['edges']:,}")

    undeclared = solver.recipes.undeclared()
    if undeclared:
        print(
            f"   Undeclared {_plural(len(undeclared), 'aspect')}: "
            f"{', '.join(undeclared)}"
        )

    primal = set(solver.recipes.primal)
    rows: List[List[str]] = []
    for aspect in [*solver.aspects, *undeclared]:
        if aspect in primal:
            kind = "primal"
        elif solver.is_valid_aspect(aspect):
            kind = "compound"
        else:
            kind = "undeclared"
        row = [
            aspect,
            kind,
            _format_weight(solver.weights.get(aspect, 0)),
            str(len(solver.connections(aspect))),
        ]
        if detail:
            row.append(" + ".join(solver.recipes.combinations.get(aspect, ())) or "-")
        rows.append(row)

    headers = ["Aspect", "Kind", "Weight", "Degree"]
    if detail:
        headers.append("Recipe")
    print("\n   Aspects:")
    print(_format_table(headers, rows, max_col_width=48))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``aspectgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="aspectgraph",
        description="Plan lightest aspect combination paths.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,inspect}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser(
        "solve", help="Solve every gap of a research path"
    )
    solve_parser.add_argument(
        "nodes",
        nargs="+",
        help=(
            "Research path slots in order; use the spacer marker"
            f" (default '{SOLVER_CONFIG.spacer}') for an empty slot"
        ),
    )
    solve_parser.add_argument(
        "--prefer",
        "-p",
        action="append",
        default=None,
        metavar="ASPECT",
        help="Aspect treated as free (weight 0) during the search; repeat for more",
    )
    solve_parser.add_argument(
        "--spacer",
        default=None,
        help="Marker for an empty slot in the research path",
    )
    solve_parser.add_argument(
        "--strategy",
        choices=["dfs", "layered"],
        default=None,
        help="Search strategy (default: dfs)",
    )
    solve_parser.add_argument(
        "--json",
        action="store_true",
        help="Print solutions as JSON",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a recipe table and list aspect weights"
    )
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Include each aspect's recipe",
    )

    for p in (solve_parser, inspect_parser):
        p.add_argument(
            "--recipes",
            "-r",
            type=Path,
            default=None,
            help="Recipe table (YAML or JSON); defaults to the packaged aspect table",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if configure_cli_logging(args.verbose, args.quiet) == logging.DEBUG:
        logger.debug("Debug logging enabled")

    if args.command == "solve":
        _solve_path(
            args.nodes,
            recipes=args.recipes,
            prefer=args.prefer,
            spacer=args.spacer,
            strategy=args.strategy,
            as_json=args.json,
        )
    elif args.command == "inspect":
        _inspect_recipes(args.recipes, args.detail)


if __name__ == "__main__":
    main()
