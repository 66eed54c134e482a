"""Board - piece placement on the 91-tile hexagonal board."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final

from chessagon.core.coordinate import (
    MAX_RANK,
    NUMBER_OF_TILES,
    Position,
    min_valid_coordinate_for_rank,
    rank_width,
)
from chessagon.core.diagram import visualize_tile_property
from chessagon.core.enums import Color, PieceType
from chessagon.core.errors import BoardStateError, UnsupportedMove
from chessagon.core.layout import initial_configuration
from chessagon.core.move import Move, MoveMeta, RegularMove
from chessagon.core.move_generator import MoveGenerator
from chessagon.core.piece import Piece, piece_symbol, piece_value

_LOGGER = logging.getLogger(__name__)

_COLOR_COUNT = 2

# Number of tiles on all ranks strictly below the given one.
_TILES_BEFORE_RANK: Final = tuple(
    sum(rank_width(r) for r in range(rank)) for rank in range(MAX_RANK + 2)
)


def _walk_index(index: int) -> Position:
    rank = 0
    while _TILES_BEFORE_RANK[rank + 1] <= index:
        rank += 1
    y = index - _TILES_BEFORE_RANK[rank] + min_valid_coordinate_for_rank(rank)
    return Position(rank - y, y)


_POSITIONS: Final = tuple(_walk_index(i) for i in range(NUMBER_OF_TILES))

Table = list[PieceType | None]


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Immutable copy of everything a :class:`Board` holds."""

    white: tuple[PieceType | None, ...]
    black: tuple[PieceType | None, ...]
    last_move: Move | None


class Board:
    """Mutable hexagonal board: one 91-slot table per color.

    Slots are addressed by :meth:`index`. The board trusts its callers: it
    never checks legality on :meth:`apply_move_unchecked` and does not stop a
    tile from being claimed by both colors. Keeping those invariants is the
    job of :class:`~chessagon.core.move_generator.MoveGenerator`.
    """

    __slots__ = ("_pieces", "last_move")

    def __init__(self) -> None:
        self._pieces: list[Table] = [
            [None] * NUMBER_OF_TILES for _ in range(_COLOR_COUNT)
        ]
        self.last_move: Move | None = None

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for piece_type, position, color in initial_configuration():
            b.place(position, piece_type, color)
        return b

    @classmethod
    def minimal(cls, white_king: Position, black_king: Position) -> Board:
        """A board holding nothing but the two kings."""
        b = cls()
        b.place(white_king, PieceType.KING, Color.WHITE)
        b.place(black_king, PieceType.KING, Color.BLACK)
        return b

    # -- Indexing -----------------------------------------------------------

    @staticmethod
    def index(position: Position) -> int:
        """Storage slot of *position*: rank-major, then ``y`` within the rank."""
        rank = position.rank
        return _TILES_BEFORE_RANK[rank] + position.y - min_valid_coordinate_for_rank(
            rank
        )

    @staticmethod
    def index_to_position(index: int) -> Position:
        """Inverse of :meth:`index`."""
        if not 0 <= index < NUMBER_OF_TILES:
            raise ValueError(f"Invalid tile index: {index}")
        return _POSITIONS[index]

    # -- Element access -----------------------------------------------------

    def get(self, position: Position, color: Color) -> PieceType | None:
        """The *color* piece on *position*, if any."""
        return self._pieces[color][self.index(position)]

    def get_either(self, position: Position) -> tuple[PieceType, Color] | None:
        """The piece on *position* together with its color, if any."""
        idx = self.index(position)
        for color in Color:
            piece_type = self._pieces[color][idx]
            if piece_type is not None:
                return piece_type, color
        return None

    def piece_at(self, position: Position) -> Piece | None:
        occupant = self.get_either(position)
        if occupant is None:
            return None
        piece_type, color = occupant
        return Piece(color, piece_type)

    def is_empty(self, position: Position) -> bool:
        return self.get_either(position) is None

    def place(self, position: Position, piece_type: PieceType, color: Color) -> None:
        """Put a piece on an empty tile (position setup only)."""
        occupant = self.get_either(position)
        if occupant is not None:
            raise ValueError(f"{position} is already occupied by {occupant[1]} {occupant[0]}")
        self._pieces[color][self.index(position)] = piece_type

    def remove(self, position: Position) -> tuple[PieceType, Color] | None:
        """Take whatever stands on *position* off the board (position setup only)."""
        occupant = self.get_either(position)
        if occupant is not None:
            self._pieces[occupant[1]][self.index(position)] = None
        return occupant

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> Iterator[PieceType]:
        """Piece kinds of *color*, in storage order."""
        return (piece_type for piece_type in self._pieces[color] if piece_type is not None)

    def piece_positions(self, color: Color) -> Iterator[tuple[Position, PieceType]]:
        """``(position, piece_type)`` pairs of *color*, in storage order."""
        for idx, piece_type in enumerate(self._pieces[color]):
            if piece_type is not None:
                yield _POSITIONS[idx], piece_type

    def all_piece_positions(self) -> Iterator[tuple[Position, PieceType, Color]]:
        """``(position, piece_type, color)`` for every piece, white first."""
        for color in Color:
            for position, piece_type in self.piece_positions(color):
                yield position, piece_type, color

    def total_piece_value(self, color: Color) -> int:
        """Summed material of *color* (the king counts as zero)."""
        return sum(piece_value(piece_type) or 0 for piece_type in self.pieces(color))

    def find_king(self, color: Color) -> Position:
        """Position of *color*'s king."""
        for position, piece_type in self.piece_positions(color):
            if piece_type == PieceType.KING:
                return position
        raise BoardStateError(f"No {color.name} king on board")

    # -- Moves --------------------------------------------------------------

    def get_move(
        self, origin: Position, destination: Position, color: Color
    ) -> tuple[RegularMove, MoveMeta]:
        """The legal move from *origin* to *destination* (raises ``MoveError``)."""
        return MoveGenerator(self).get_move(origin, destination, color)

    def check_move(self, move: Move, color: Color) -> RegularMove:
        """Validate *move* for *color* and return its canonical form.

        Only regular moves can be played; any other variant is rejected with
        :class:`UnsupportedMove`.
        """
        if not isinstance(move, RegularMove):
            raise UnsupportedMove(move)
        legal, _meta = self.get_move(move.origin_of(color), move.destination_of(color), color)
        return legal

    def apply_move(self, move: Move, color: Color) -> PieceType | None:
        """Validate and apply *move*. Returns the captured piece, if any."""
        legal = self.check_move(move, color)
        captured = self.apply_move_unchecked(legal, color)
        _LOGGER.debug("%s plays %s (captured: %s)", color, legal, captured)
        return captured

    def try_move(
        self, origin: Position, destination: Position, color: Color
    ) -> PieceType | None:
        """Validate and apply the move from *origin* to *destination*."""
        move, meta = self.get_move(origin, destination, color)
        return self.apply_move_unchecked(move, meta.color)

    def apply_move_unchecked(self, move: Move, color: Color) -> PieceType | None:
        """Apply *move* without any legality check.

        Only safe for moves produced by :meth:`possible_moves` or validated
        with :meth:`check_move`. Returns the captured piece, if any.
        """
        if not isinstance(move, RegularMove):
            raise NotImplementedError(f"Applying {type(move).__name__} is not implemented")

        origin_idx = self.index(move.origin)
        destination_idx = self.index(move.destination)
        captured: PieceType | None = None

        if move.captures:
            theirs = self._pieces[color.opposite]
            captured = theirs[destination_idx]
            if captured is None:
                raise BoardStateError(
                    f"{move} is a capture but there is no piece on {move.destination}"
                )
            theirs[destination_idx] = None

        own = self._pieces[color]
        own[origin_idx], own[destination_idx] = own[destination_idx], own[origin_idx]

        self.last_move = move
        return captured

    def possible_moves(self, color: Color) -> Iterator[RegularMove]:
        """Every legal move *color* can play, lazily."""
        return MoveGenerator(self).generate_legal_moves(color)

    def in_check(self, color: Color) -> RegularMove | None:
        """A move with which the opponent could capture *color*'s king, if any."""
        return MoveGenerator(self).in_check(color)

    # -- Copying / snapshots ------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._pieces = [table.copy() for table in self._pieces]
        b.last_move = self.last_move
        return b

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            white=tuple(self._pieces[Color.WHITE]),
            black=tuple(self._pieces[Color.BLACK]),
            last_move=self.last_move,
        )

    @classmethod
    def from_snapshot(cls, snapshot: BoardSnapshot) -> Board:
        b = cls()
        b.restore(snapshot)
        return b

    def restore(self, snapshot: BoardSnapshot) -> None:
        """Overwrite the whole board with *snapshot*."""
        self._pieces = [list(snapshot.white), list(snapshot.black)]
        self.last_move = snapshot.last_move

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        def glyph(position: Position) -> str:
            occupant = self.get_either(position)
            if occupant is None:
                return "."
            piece_type, color = occupant
            return piece_symbol(piece_type, color)

        return visualize_tile_property(glyph, lambda char: char)

    def __repr__(self) -> str:
        white = sum(1 for _ in self.pieces(Color.WHITE))
        black = sum(1 for _ in self.pieces(Color.BLACK))
        return f"Board(white={white} pieces, black={black} pieces, last_move={self.last_move})"
