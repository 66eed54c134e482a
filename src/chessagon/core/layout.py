"""Initial piece layout and pawn home tiles.

Only white's tiles are listed; black's are the same tiles rotated with
:meth:`Position.flipped`.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from chessagon.core.coordinate import Position
from chessagon.core.enums import Color, PieceType

WHITE_PAWN_TILES: Final = (
    Position(4, 0),
    Position(4, 1),
    Position(4, 2),
    Position(4, 3),
    Position(4, 4),
    Position(3, 4),
    Position(2, 4),
    Position(1, 4),
    Position(0, 4),
)

WHITE_LAYOUT: Final[dict[PieceType, tuple[Position, ...]]] = {
    PieceType.PAWN: WHITE_PAWN_TILES,
    PieceType.KNIGHT: (Position(0, 2), Position(2, 0)),
    # One bishop per tile color.
    PieceType.BISHOP: (Position(0, 0), Position(1, 1), Position(2, 2)),
    PieceType.ROOK: (Position(0, 3), Position(3, 0)),
    PieceType.QUEEN: (Position(1, 0),),
    PieceType.KING: (Position(0, 1),),
}

_HOME_TILES: Final[dict[Color, dict[int, Position]]] = {
    Color.WHITE: {tile.file: tile for tile in WHITE_PAWN_TILES},
    Color.BLACK: {tile.flipped().file: tile.flipped() for tile in WHITE_PAWN_TILES},
}


def initial_tiles(piece_type: PieceType, color: Color) -> tuple[Position, ...]:
    """Starting tiles of *color*'s pieces of *piece_type*."""
    tiles = WHITE_LAYOUT[piece_type]
    if color == Color.WHITE:
        return tiles
    return tuple(tile.flipped() for tile in tiles)


def initial_configuration() -> Iterator[tuple[PieceType, Position, Color]]:
    """Every ``(piece_type, position, color)`` triple of the starting setup."""
    for color in Color:
        for piece_type in PieceType:
            for position in initial_tiles(piece_type, color):
                yield piece_type, position, color


def is_pawn_home_tile(position: Position, color: Color) -> bool:
    """Whether a *color* pawn on *position* may still advance two tiles."""
    if color == Color.WHITE:
        return (position.x == 4 and position.y <= 4) or (
            position.y == 4 and position.x <= 4
        )
    return (position.x == 6 and position.y >= 6) or (
        position.y == 6 and position.x >= 6
    )


def pawn_home_tile(file: int, color: Color) -> Position | None:
    """The home tile of *color*'s pawn on *file* (``None`` on files 0 and 10)."""
    return _HOME_TILES[color].get(file)
