"""Typed move rejections.

A :class:`MoveError` means "this candidate move is illegal"; callers catch it
and try something else. :class:`BoardStateError` is different: it signals a
broken board invariant (an engine bug) and is never caught by the library.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessagon.core.enums import Color, PieceType

if TYPE_CHECKING:
    from chessagon.core.coordinate import Delta, Position
    from chessagon.core.move import Move, RegularMove


class BoardStateError(RuntimeError):
    """The board violates one of its standing invariants."""


class MoveError(Exception):
    """Base class of every rejection of a candidate move."""


# ── Addressing ───────────────────────────────────────────────────────────────


class AddressingError(MoveError):
    """The origin does not hold a piece the mover may move."""


class PieceNotPresent(AddressingError):
    def __init__(self, position: Position) -> None:
        self.position = position
        super().__init__(f"There is no piece to move at {position}")


class NotYourPiece(AddressingError):
    def __init__(self, position: Position, color: Color) -> None:
        self.position = position
        self.color = color
        super().__init__(
            f"The piece at {position} is {color}, you're not allowed to move it"
        )


class NullMovement(AddressingError):
    def __init__(self) -> None:
        super().__init__("The origin and the destination can't be the same tile")


# ── Geometry ─────────────────────────────────────────────────────────────────


class GeometryError(MoveError):
    """The piece cannot travel along this delta at all."""

    def __init__(self, piece_type: PieceType, message: str) -> None:
        self.piece_type = piece_type
        super().__init__(message)


class InvalidDirection(GeometryError):
    def __init__(self, piece_type: PieceType, stride: Delta) -> None:
        self.stride = stride
        super().__init__(
            piece_type, f"A {piece_type} can't move with stride {stride}"
        )


class TooFarAway(GeometryError):
    def __init__(self, piece_type: PieceType, distance: int, max_distance: int) -> None:
        self.distance = distance
        self.max_distance = max_distance
        super().__init__(
            piece_type,
            f"Target is {distance} tiles away, but a {piece_type} can only "
            f"move {max_distance} from here",
        )


class RookLikeMovement(GeometryError):
    def __init__(self) -> None:
        super().__init__(PieceType.KNIGHT, "Knight movement is rook-like")


class BishopLikeMovement(GeometryError):
    def __init__(self) -> None:
        super().__init__(PieceType.KNIGHT, "Knight movement is bishop-like")


class ChangeOfTileColor(GeometryError):
    def __init__(self, origin_index: int, destination_index: int) -> None:
        self.origin_index = origin_index
        self.destination_index = destination_index
        super().__init__(
            PieceType.BISHOP,
            "Bishops can only move on same-color tiles (tried to move from tile "
            f"color {origin_index} to {destination_index})",
        )


# ── Obstruction / capture ────────────────────────────────────────────────────


class ObstructionError(MoveError):
    """Another piece is in the way."""


class Blocked(ObstructionError):
    def __init__(self, position: Position, piece_type: PieceType, color: Color) -> None:
        self.position = position
        self.piece_type = piece_type
        self.color = color
        super().__init__(f"Blocked by {color} {piece_type} on {position}")


class CaptureError(MoveError):
    """A capture was required but is not possible."""


class NoPieceToCapture(CaptureError):
    def __init__(self, position: Position) -> None:
        self.position = position
        super().__init__(f"Pawns only move sideways to capture, {position} is empty")


class QueenMovementError(MoveError):
    """Neither the rook-like nor the bishop-like reading of a queen move works."""

    def __init__(self, rook_error: MoveError, bishop_error: MoveError) -> None:
        self.rook_error = rook_error
        self.bishop_error = bishop_error
        super().__init__(
            f"Can't do rook-like movement ({rook_error}) "
            f"nor bishop-like movement ({bishop_error})"
        )


# ── King safety ──────────────────────────────────────────────────────────────


class KingSafetyError(MoveError):
    """The move would leave the mover's king capturable."""


class KingIsUnprotected(KingSafetyError):
    def __init__(self, capturing_move: RegularMove) -> None:
        self.capturing_move = capturing_move
        super().__init__(
            f"Move leaves king unprotected (could be captured by {capturing_move})"
        )


# ── Unsupported moves ────────────────────────────────────────────────────────


class UnsupportedMove(MoveError):
    """The rules cannot play this kind of move yet."""

    def __init__(self, move: Move) -> None:
        self.move = move
        super().__init__(f"{type(move).__name__} moves are not supported ({move})")
