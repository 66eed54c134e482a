"""Core domain layer: hexagonal chess rules with zero external dependencies.

Quick start::

    from chessagon.core import Board, Color, Position

    board = Board.initial()
    for move in board.possible_moves(Color.WHITE):
        print(move)

    board.try_move(Position(4, 3), Position(6, 5), Color.WHITE)
    print(board)
"""

from chessagon.core.board import Board, BoardSnapshot
from chessagon.core.coordinate import (
    CENTER,
    MAX,
    NUMBER_OF_TILES,
    WIDTH,
    Delta,
    Position,
    distance,
    get_stride,
    is_valid,
)
from chessagon.core.diagram import visualize_tile_property
from chessagon.core.enums import Color, DrawReason, GameResult, PieceType, Side, WinReason
from chessagon.core.errors import (
    AddressingError,
    BishopLikeMovement,
    Blocked,
    BoardStateError,
    CaptureError,
    ChangeOfTileColor,
    GeometryError,
    InvalidDirection,
    KingIsUnprotected,
    KingSafetyError,
    MoveError,
    NoPieceToCapture,
    NotYourPiece,
    NullMovement,
    ObstructionError,
    PieceNotPresent,
    QueenMovementError,
    RookLikeMovement,
    TooFarAway,
    UnsupportedMove,
)
from chessagon.core.move import EnPassantMove, Move, MoveMeta, PromotionMove, RegularMove
from chessagon.core.move_generator import MoveGenerator
from chessagon.core.piece import Piece
from chessagon.core.rules import Rules

__all__ = [
    # Enums
    "Color",
    "DrawReason",
    "GameResult",
    "PieceType",
    "Side",
    "WinReason",
    # Coordinates
    "CENTER",
    "MAX",
    "NUMBER_OF_TILES",
    "WIDTH",
    "Delta",
    "Position",
    "distance",
    "get_stride",
    "is_valid",
    # Domain objects
    "Board",
    "BoardSnapshot",
    "EnPassantMove",
    "Move",
    "MoveGenerator",
    "MoveMeta",
    "Piece",
    "PromotionMove",
    "RegularMove",
    "Rules",
    "visualize_tile_property",
    # Errors
    "AddressingError",
    "BishopLikeMovement",
    "Blocked",
    "BoardStateError",
    "CaptureError",
    "ChangeOfTileColor",
    "GeometryError",
    "InvalidDirection",
    "KingIsUnprotected",
    "KingSafetyError",
    "MoveError",
    "NoPieceToCapture",
    "NotYourPiece",
    "NullMovement",
    "ObstructionError",
    "PieceNotPresent",
    "QueenMovementError",
    "RookLikeMovement",
    "TooFarAway",
    "UnsupportedMove",
]
