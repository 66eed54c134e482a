"""Per-piece movement geometry.

Each rule has the signature ``rule(origin, destination, board, color)`` and
either returns a :class:`RegularMove` or raises a :class:`MoveError`. The
rules only check geometry, obstruction and capture targets; whether the move
leaves the mover's own king exposed is decided by
:class:`~chessagon.core.move_generator.MoveGenerator`.

Preconditions shared by every rule: *origin* holds a *color* piece of the
matching kind and ``origin != destination``. Rules never mutate the board.

Stride sets, from ``(0, 0)``::

    rook    (0, 1)  (1, 1)  (1, 0)  (0, -1)  (-1, -1)  (-1, 0)
    bishop  (1, -1) (2, 1)  (1, 2)  (-1, 1)  (-2, -1)  (-1, -2)

A knight jumps to every tile within distance 3 that is neither rook- nor
bishop-reachable (12 tiles), a king takes one rook or bishop stride
(12 tiles), and a queen moves as a rook or as a bishop.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Final

from chessagon.core.coordinate import Delta, Position, get_stride
from chessagon.core.enums import Color, PieceType
from chessagon.core.errors import (
    BishopLikeMovement,
    Blocked,
    ChangeOfTileColor,
    InvalidDirection,
    MoveError,
    NoPieceToCapture,
    QueenMovementError,
    RookLikeMovement,
    TooFarAway,
)
from chessagon.core.layout import is_pawn_home_tile
from chessagon.core.move import RegularMove

if TYPE_CHECKING:
    from chessagon.core.board import Board

MovementRule = Callable[[Position, Position, "Board", Color], RegularMove]

ROOK_STRIDES: Final = (
    Delta(0, 1),
    Delta(1, 1),
    Delta(1, 0),
    Delta(0, -1),
    Delta(-1, -1),
    Delta(-1, 0),
)

BISHOP_STRIDES: Final = (
    Delta(1, -1),
    Delta(2, 1),
    Delta(1, 2),
    Delta(-1, 1),
    Delta(-2, -1),
    Delta(-1, -2),
)

KING_DELTAS: Final = ROOK_STRIDES + BISHOP_STRIDES

KNIGHT_MAX_DISTANCE: Final = 3


# ── Direction tests ──────────────────────────────────────────────────────────


def rook_valid_stride(stride: Delta) -> bool:
    return (
        (stride.x == 0 and abs(stride.y) == 1)
        or (abs(stride.x) == 1 and stride.y == 0)
        or (abs(stride.x) == 1 and stride.x == stride.y)
    )


def rook_valid_delta(delta: Delta) -> bool:
    """Whether *delta* lies on one of the three straight axes."""
    return delta.x == 0 or delta.y == 0 or delta.x == delta.y


def bishop_valid_stride(stride: Delta) -> bool:
    return (
        abs(stride.x) in (1, 2)
        and abs(stride.y) in (1, 2)
        and (stride.x + stride.y) % 3 == 0
    )


def knight_valid_delta(delta: Delta) -> None:
    """Raise unless *delta* is one of the twelve knight jumps."""
    distance = delta.length()
    if distance > KNIGHT_MAX_DISTANCE:
        raise TooFarAway(PieceType.KNIGHT, distance, KNIGHT_MAX_DISTANCE)
    if rook_valid_delta(delta):
        raise RookLikeMovement()
    # Every remaining same-tile-color delta is also a bishop direction.
    if (delta.x + delta.y) % 3 == 0:
        raise BishopLikeMovement()


def pawn_advance_stride(stride: Delta, color: Color) -> bool:
    d = color.direction
    return stride.x == d and stride.y == d


def pawn_capture_stride(stride: Delta, color: Color) -> bool:
    d = color.direction
    return (stride.x == 0 and stride.y == d) or (stride.x == d and stride.y == 0)


# ── Obstruction helpers ──────────────────────────────────────────────────────


def check_any_blocker(position: Position, board: Board) -> None:
    """Raise :class:`Blocked` if any piece stands on *position*."""
    occupant = board.get_either(position)
    if occupant is not None:
        piece_type, color = occupant
        raise Blocked(position, piece_type, color)


def check_color_blocker(position: Position, board: Board, color: Color) -> None:
    """Raise :class:`Blocked` if a *color* piece stands on *position*."""
    piece_type = board.get(position, color)
    if piece_type is not None:
        raise Blocked(position, piece_type, color)


def check_blockers(origin: Position, stride: Delta, distance: int, board: Board) -> None:
    """Raise :class:`Blocked` if a tile strictly between the endpoints is taken."""
    for step in range(1, distance):
        check_any_blocker(origin + stride * step, board)


def _landing(
    origin: Position, destination: Position, board: Board, color: Color
) -> RegularMove:
    check_color_blocker(destination, board, color)
    captures = board.get(destination, color.opposite) is not None
    return RegularMove(origin, destination, captures)


# ── Rules ────────────────────────────────────────────────────────────────────


def rook_move(
    origin: Position, destination: Position, board: Board, color: Color
) -> RegularMove:
    stride, distance = get_stride(destination - origin)
    if not rook_valid_stride(stride):
        raise InvalidDirection(PieceType.ROOK, stride)

    check_blockers(origin, stride, distance, board)
    return _landing(origin, destination, board, color)


def bishop_move(
    origin: Position, destination: Position, board: Board, color: Color
) -> RegularMove:
    if origin.tile_color != destination.tile_color:
        raise ChangeOfTileColor(origin.tile_color, destination.tile_color)

    stride, distance = get_stride(destination - origin)
    if not bishop_valid_stride(stride):
        raise InvalidDirection(PieceType.BISHOP, stride)

    check_blockers(origin, stride, distance, board)
    return _landing(origin, destination, board, color)


def knight_move(
    origin: Position, destination: Position, board: Board, color: Color
) -> RegularMove:
    knight_valid_delta(destination - origin)
    return _landing(origin, destination, board, color)


def queen_move(
    origin: Position, destination: Position, board: Board, color: Color
) -> RegularMove:
    try:
        return rook_move(origin, destination, board, color)
    except MoveError as rook_error:
        try:
            return bishop_move(origin, destination, board, color)
        except MoveError as bishop_error:
            raise QueenMovementError(rook_error, bishop_error) from None


def king_move(
    origin: Position, destination: Position, board: Board, color: Color
) -> RegularMove:
    stride, distance = get_stride(destination - origin)
    if distance > 1:
        raise TooFarAway(PieceType.KING, distance, 1)
    if not (rook_valid_stride(stride) or bishop_valid_stride(stride)):
        raise InvalidDirection(PieceType.KING, stride)

    return _landing(origin, destination, board, color)


def pawn_move(
    origin: Position, destination: Position, board: Board, color: Color
) -> RegularMove:
    delta = destination - origin
    stride, distance = get_stride(delta)

    if pawn_advance_stride(stride, color):
        max_distance = 2 if is_pawn_home_tile(origin, color) else 1
        if distance > max_distance:
            raise TooFarAway(PieceType.PAWN, distance, max_distance)
        check_blockers(origin, stride, distance, board)
        check_any_blocker(destination, board)
        return RegularMove(origin, destination, captures=False)

    if pawn_capture_stride(stride, color):
        if distance > 1:
            raise TooFarAway(PieceType.PAWN, distance, 1)
        if board.get(destination, color.opposite) is None:
            raise NoPieceToCapture(destination)
        return RegularMove(origin, destination, captures=True)

    raise InvalidDirection(PieceType.PAWN, delta)


MOVEMENT_RULES: Final[dict[PieceType, MovementRule]] = {
    PieceType.PAWN: pawn_move,
    PieceType.KNIGHT: knight_move,
    PieceType.BISHOP: bishop_move,
    PieceType.ROOK: rook_move,
    PieceType.QUEEN: queen_move,
    PieceType.KING: king_move,
}
