"""
Wall with a single gap

Builds a board split by a vertical wall with one opening, compares the map and
linked list representations, then closes the gap and shows the unreachable
result.

Run: python examples/wall_gap/run.py --width 40 --height 20
"""

import argparse

from gridpath import Board
from gridpath.logging_utils import log_info, log_success, log_warning


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Wall-with-gap comparison")
    parser.add_argument("--width", type=int, default=20, help="Tiles per row")
    parser.add_argument("--height", type=int, default=10, help="Number of rows")
    parser.add_argument("--verbose", action="store_true", help="Print per-query log lines")
    return parser.parse_args()


def main(args: argparse.Namespace) -> None:
    board = Board(width=args.width, height=args.height, verbose=args.verbose)
    wall_col = args.width // 2
    gap_row = args.height // 2
    for row in range(args.height):
        if row != gap_row:
            board.set_obstacle(board.cell_at(row, wall_col), True)

    board.set_source(board.cell_at(0, 0))
    board.set_destination(board.cell_at(args.height - 1, args.width - 1))

    comparison = board.compare_representations()
    log_success(comparison.map_result.describe())
    log_info(comparison.describe())
    print(board.render())

    board.set_obstacle(board.cell_at(gap_row, wall_col), True)
    closed = board.find_shortest_path("linked_list")
    log_warning(closed.describe())


if __name__ == "__main__":
    main(parse_args())
