"""High-level rules: check, checkmate, stalemate and result classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessagon.core.enums import Color, GameResult
from chessagon.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessagon.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board` and a side to move."""

    # Draw policy: stalemate is the only automatic draw. Agreement is handled
    # by the game layer; there is no move-count or repetition rule.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).in_check(color) is not None

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not MoveGenerator(board).has_legal_move(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not MoveGenerator(board).has_legal_move(color)

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """Determine the game result from the board alone."""
        if MoveGenerator(board).has_legal_move(side_to_move):
            return GameResult.IN_PROGRESS
        if Rules.is_in_check(board, side_to_move):
            return GameResult.win_for(side_to_move.opposite)
        return GameResult.DRAW
