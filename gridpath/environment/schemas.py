"""Pydantic schemas for grid state.

These models mirror the dataclasses in ``grid.py`` but keep snapshots handed
to a presentation layer serializable.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Representation(str, Enum):
    """Graph representation a query runs against."""

    MAP = "map"
    LINKED_LIST = "linked_list"


class CellState(BaseModel):
    """Serializable view of a single cell."""

    cell_id: int = Field(..., ge=0)
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    is_obstacle: bool = False
    is_source: bool = False
    is_destination: bool = False


class GridState(BaseModel):
    """Dimensions and selections of a grid, with obstacles listed sparsely."""

    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)
    obstacles: List[int] = Field(
        default_factory=list,
        description="Sorted ids of obstacle cells",
    )
    source: Optional[int] = Field(None, description="Selected source cell id, if any")
    destination: Optional[int] = Field(None, description="Selected destination cell id, if any")
