"""
Command line front end for gridpath.

Builds a board, applies endpoints and obstacles given as ROW,COL pairs, runs
one or both representations and prints the board and timings.

Run: python -m gridpath --width 12 --height 8 --source 0,0 --destination 7,11 \
        --obstacle 3,4 --obstacle 4,4 --representation both
"""

import argparse
import sys
from typing import List, Optional, Tuple

from .board import Board
from .config import Config
from .errors import InvalidCellIdError, PreconditionViolationError
from .logging_utils import (
    log_error,
    log_info,
    log_success,
    log_warning,
    LOG_TAG_ERROR,
    LOG_TAG_INFO,
    LOG_TAG_SUCCESS,
    LOG_TAG_UNREACHABLE,
)
from .schemas import PathResult


def parse_coord(text: str) -> Tuple[int, int]:
    """Parse ``"ROW,COL"`` into a tuple of ints."""
    try:
        row_text, col_text = text.split(",")
        return int(row_text), int(col_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got '{text}'") from None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gridpath",
        description="Shortest path by BFS on an 8-connected grid, map vs linked list",
    )
    parser.add_argument("--width", type=int, default=Config.GRID_WIDTH, help="Tiles per row")
    parser.add_argument("--height", type=int, default=Config.GRID_HEIGHT, help="Number of rows")
    parser.add_argument("--source", type=parse_coord, required=True, help="Source tile as ROW,COL")
    parser.add_argument("--destination", type=parse_coord, required=True, help="Destination tile as ROW,COL")
    parser.add_argument(
        "--obstacle",
        type=parse_coord,
        action="append",
        default=[],
        help="Obstacle tile as ROW,COL (repeatable)",
    )
    parser.add_argument(
        "--representation",
        choices=["map", "linked_list", "both"],
        default=Config.DEFAULT_REPRESENTATION,
        help="Graph representation to search",
    )
    parser.add_argument("--no-render", action="store_true", help="Skip printing the board")
    parser.add_argument("--verbose", action="store_true", help="Print per-query log lines")
    return parser.parse_args(argv)


def _report(result: PathResult) -> None:
    label = f"[{result.representation.value}]"
    if result.reachable:
        log_success(f"{LOG_TAG_SUCCESS} {label} Shortest path: {result.length} tiles")
    else:
        log_warning(f"{LOG_TAG_UNREACHABLE} {label} No path exists between the source and destination.")
    log_info(f"{LOG_TAG_INFO} {label} Time taken: {result.elapsed_ms:.2f} ms")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        board = Board(width=args.width, height=args.height, verbose=args.verbose)
        for row, col in args.obstacle:
            board.set_obstacle(board.cell_at(row, col), True)
        board.set_source(board.cell_at(*args.source))
        board.set_destination(board.cell_at(*args.destination))

        if args.representation == "both":
            comparison = board.compare_representations()
            _report(comparison.map_result)
            _report(comparison.linked_result)
            log_info(comparison.describe())
        else:
            _report(board.find_shortest_path(args.representation))
    except (InvalidCellIdError, PreconditionViolationError, ValueError) as exc:
        log_error(f"{LOG_TAG_ERROR} {exc}")
        return 1

    if not args.no_render:
        print()
        print(board.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
