"""Legality filter, attack detection and legal move enumeration."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from chessagon.core.coordinate import Position
from chessagon.core.enums import Color, PieceType
from chessagon.core.errors import (
    BoardStateError,
    KingIsUnprotected,
    MoveError,
    NotYourPiece,
    NullMovement,
    PieceNotPresent,
)
from chessagon.core.move import MoveMeta, RegularMove
from chessagon.core.movement import MOVEMENT_RULES

if TYPE_CHECKING:
    from chessagon.core.board import Board


class MoveGenerator:
    """Validates and enumerates moves on a :class:`Board`.

    Two entry points exist for a single move:

    * :meth:`get_move_no_checks`: geometry, obstruction and capture rules
      only. Attack detection uses this one.
    * :meth:`get_move`: the above plus the king-safety filter, which
      simulates the move on a copy of the board and asks whether the
      opponent could then capture the mover's king.

    The king-safety filter must not recurse into itself for the opponent's
    replies, otherwise legality checking never terminates.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Single move --------------------------------------------------------

    def get_move(
        self, origin: Position, destination: Position, color: Color
    ) -> tuple[RegularMove, MoveMeta]:
        """The legal move from *origin* to *destination* for *color*.

        Raises the matching :class:`MoveError` when the move is illegal.
        """
        board = self._board
        move, meta = self.get_move_no_checks(origin, destination, color)

        if board.get(destination, color) is not None:
            raise BoardStateError(f"{move} would capture a piece of its own color")
        if board.get(destination, color.opposite) == PieceType.KING:
            raise BoardStateError(f"{move} would capture the {color.opposite} king")

        simulated = board.copy()
        simulated.apply_move_unchecked(move, color)
        capturing_move = MoveGenerator(simulated).in_check(color)
        if capturing_move is not None:
            raise KingIsUnprotected(capturing_move)

        return move, meta

    def get_move_no_checks(
        self, origin: Position, destination: Position, color: Color
    ) -> tuple[RegularMove, MoveMeta]:
        """Like :meth:`get_move` but without the king-safety filter."""
        occupant = self._board.get_either(origin)
        if occupant is None:
            raise PieceNotPresent(origin)

        piece_type, owner = occupant
        if owner != color:
            raise NotYourPiece(origin, owner)

        if origin == destination:
            raise NullMovement()

        rule = MOVEMENT_RULES[piece_type]
        return rule(origin, destination, self._board, color), MoveMeta(color)

    def is_legal(self, origin: Position, destination: Position, color: Color) -> bool:
        try:
            self.get_move(origin, destination, color)
        except MoveError:
            return False
        return True

    # -- Attack detection ---------------------------------------------------

    def in_check(self, color: Color) -> RegularMove | None:
        """A move with which the opponent could capture *color*'s king, if any."""
        board = self._board
        king_position = board.find_king(color)
        opponent = color.opposite

        for origin, _piece_type in board.piece_positions(opponent):
            try:
                move, _meta = self.get_move_no_checks(origin, king_position, opponent)
            except MoveError:
                continue
            return move
        return None

    # -- Enumeration --------------------------------------------------------

    def generate_legal_moves(self, color: Color) -> Iterator[RegularMove]:
        """Every legal move of *color*, lazily.

        Tries each of the 91 x 91 origin/destination pairs; call again to
        restart.
        """
        for origin in Position.iter():
            yield from self.legal_moves_from(origin, color)

    def legal_moves_from(self, origin: Position, color: Color) -> Iterator[RegularMove]:
        """Every legal move of the *color* piece standing on *origin*."""
        if self._board.get(origin, color) is None:
            return
        for destination in Position.iter():
            try:
                move, _meta = self.get_move(origin, destination, color)
            except MoveError:
                continue
            yield move

    def has_legal_move(self, color: Color) -> bool:
        return next(self.generate_legal_moves(color), None) is not None
