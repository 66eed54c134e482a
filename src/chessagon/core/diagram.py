"""Plain-text hex-grid diagrams.

Each tile is drawn as one character. Ranks run from 20 (top, black's corner)
down to 0 (bottom, white's corner) and a tile sits in column ``2 * file``, so
neighbouring ranks interleave like the hexagons they describe::

              .
            .   .
          .   .   .
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from chessagon.core.coordinate import (
    MAX_FILE,
    MAX_RANK,
    Position,
    min_valid_coordinate_for_rank,
    rank_width,
)

T = TypeVar("T")


def visualize_tile_property(
    tile_property: Callable[[Position], T],
    to_char: Callable[[T], str],
) -> str:
    """Render ``to_char(tile_property(position))`` for every tile."""
    rows: list[str] = []
    for rank in range(MAX_RANK, -1, -1):
        cells = [" "] * (2 * MAX_FILE + 1)
        first_y = min_valid_coordinate_for_rank(rank)
        for y in range(first_y, first_y + rank_width(rank)):
            position = Position(rank - y, y)
            cells[2 * position.file] = to_char(tile_property(position))
        rows.append("".join(cells).rstrip())
    return "\n".join(rows)
