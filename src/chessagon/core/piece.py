"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessagon.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

# Material value; the king is invaluable.
_VALUES: dict[PieceType, int | None] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: None,
}

_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    **{letter: (Color.WHITE, pt) for pt, letter in _LETTERS.items()},
    **{letter.lower(): (Color.BLACK, pt) for pt, letter in _LETTERS.items()},
}


def piece_value(piece_type: PieceType) -> int | None:
    """Material value of *piece_type* (``None`` for the king)."""
    return _VALUES[piece_type]


def piece_symbol(piece_type: PieceType, color: Color) -> str:
    """Unicode glyph of *piece_type* in *color*."""
    return _UNICODE[(color, piece_type)]


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a colored piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Letter (uppercase = white, lowercase = black)."""
        return self.letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def letter(self) -> str:
        letter = _LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def name(self) -> str:
        return f"{self.color} {self.piece_type}"

    @property
    def value(self) -> int | None:
        return _VALUES[self.piece_type]
