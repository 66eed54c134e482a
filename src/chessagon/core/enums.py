"""Core enumerations for the hexagonal chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def direction(self) -> int:
        """Sign of a forward step: ``1`` for white, ``-1`` for black."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Closed set of piece kinds, ordered by conventional value."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5

    def __str__(self) -> str:
        return self.name.lower()


class Side(IntEnum):
    """Wing of the board a pawn captures towards."""

    KING = 0
    QUEEN = 1

    @property
    def other(self) -> Side:
        return Side(1 - self.value)

    def __str__(self) -> str:
        return "king's" if self == Side.KING else "queen's"


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS


class WinReason(IntEnum):
    """How a decisive game was won."""

    CHECKMATE = 1
    RESIGNATION = 2
    TIMEOUT = 3


class DrawReason(IntEnum):
    """How a game ended in a draw."""

    STALEMATE = 1
    AGREEMENT = 2
