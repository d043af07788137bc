"""Exceptions raised by the gridpath core.

Unreachable destinations are not errors; they come back as a ``PathResult``
whose ``path`` is ``None``.
"""

from typing import Optional


class InvalidCellIdError(IndexError):
    """Raised when a cell identifier or coordinate falls outside the grid.

    The core never clamps out-of-range input to the nearest cell.
    """

    def __init__(self, *, cell_id: int, cell_count: int, coords: Optional[tuple] = None) -> None:
        self.cell_id = cell_id
        self.cell_count = cell_count
        self.coords = coords
        if coords is not None:
            message = f"Cell {coords} is outside the grid (valid ids are 0..{cell_count - 1})"
        else:
            message = f"Cell id {cell_id} is outside the grid (valid ids are 0..{cell_count - 1})"
        super().__init__(message)


class PreconditionViolationError(ValueError):
    """Raised when a request breaks a registry invariant or query precondition.

    Examples: querying before a source or destination is selected, querying
    with an obstacle endpoint, or marking the selected source as an obstacle.
    """

    def __init__(self, *, reason: str, cell_id: Optional[int] = None) -> None:
        self.reason = reason
        self.cell_id = cell_id
        message = reason if cell_id is None else f"{reason} (cell {cell_id})"
        message += (
            "\n\nRemediation tips:\n"
            "  - Select both a source and a destination before running a query\n"
            "  - Source and destination cells cannot be obstacles\n"
            "  - Clear an obstacle before selecting its cell as an endpoint"
        )
        super().__init__(message)
