"""Profile the tiling search on a batch of boards.

Run with::

    PYTHONPATH=src python examples/profile_solver.py

Pass ``--help`` to see options for repeating runs and adjusting the logged
summary.
"""

from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Sequence, Tuple

from tetrafill.solver import SolveResult, TilingSolver


LOGGER = logging.getLogger(__name__)

# (height, width, I J L O S T Z)
CASES: Tuple[Tuple[int, int, Tuple[int, ...]], ...] = (
    (2, 2, (0, 0, 0, 1, 0, 0, 0)),
    (2, 4, (0, 2, 0, 0, 0, 0, 0)),
    (4, 4, (4, 0, 0, 0, 0, 0, 0)),
    (6, 6, (8, 1, 1, 0, 0, 0, 0)),
)


def run_cases(cases: Sequence[Tuple[int, int, Sequence[int]]]) -> List[Tuple[str, SolveResult]]:
    results: List[Tuple[str, SolveResult]] = []
    for height, width, pieces in cases:
        solver = TilingSolver.for_size(height, width)
        results.append((f"{height}x{width}", solver.solve(pieces)))
    return results


def _format_summary(rows: List[Dict[str, float | int | str]], limit: int = 10) -> str:
    if not rows:
        return "No searches recorded."
    parts: List[str] = []
    for row in rows[:limit]:
        parts.append(
            f"{row['name']}: {row['message']}, nodes={int(row['nodes'])}, "
            f"elapsed={float(row['elapsed']) * 1000.0:.3f}ms"
        )
    return "; ".join(parts)


def summarise(results: List[Tuple[str, SolveResult]]) -> List[Dict[str, float | int | str]]:
    rows: List[Dict[str, float | int | str]] = []
    for name, result in results:
        row: Dict[str, float | int | str] = {"name": name, "message": result.message}
        row.update(result.stats.as_dict())
        rows.append(row)
    rows.sort(key=lambda item: item["elapsed"], reverse=True)
    return rows


def log_summary(results: List[Tuple[str, SolveResult]], *, limit: int, index: int) -> List[Dict[str, float | int | str]]:
    summary = summarise(results)
    limit = max(0, limit)
    limited_summary = summary[:limit] if limit else []
    message = _format_summary(limited_summary, limit=limit)
    LOGGER.info("Run %d: %s", index, message)
    return limited_summary


def print_summary(rows: List[Dict[str, float | int | str]]) -> None:
    if not rows:
        print("No searches recorded.")
        return
    width = max(len(str(row["name"])) for row in rows)
    header = f"{'Board':<{width}}  {'Result':<10}  {'Nodes':>9}  {'Backtracks':>10}  Time (ms)"
    print(header)
    print("-" * len(header))
    for row in rows:
        print(
            f"{row['name']:<{width}}  {row['message']:<10}  {int(row['nodes']):9d}"
            f"  {int(row['backtracks']):10d}  {float(row['elapsed']) * 1000.0:9.3f}"
        )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--runs", type=int, default=1, help="How many times to solve every case.")
    parser.add_argument(
        "--summary-limit",
        type=int,
        default=10,
        help="Maximum number of boards to include in logged summaries.",
    )
    parser.add_argument(
        "--no-table",
        dest="print_table",
        action="store_false",
        help="Skip printing the final tabular summary (logging only).",
    )
    parser.set_defaults(print_table=True)
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    last_summary: List[Dict[str, float | int | str]] = []
    for run_idx in range(1, args.runs + 1):
        results = run_cases(CASES)
        last_summary = log_summary(results, limit=args.summary_limit, index=run_idx)

    if args.print_table and last_summary:
        print_summary(last_summary)


if __name__ == "__main__":
    main()
