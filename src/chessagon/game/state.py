"""Game state machine: tracks turn order, move history and the result."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from dataclasses import dataclass, field

from chessagon.core.board import Board, BoardSnapshot
from chessagon.core.coordinate import Position
from chessagon.core.enums import Color, DrawReason, GameResult, PieceType, WinReason
from chessagon.core.errors import BoardStateError
from chessagon.core.move import Move, RegularMove
from chessagon.core.rules import Rules
from chessagon.game.clock import TimeSource
from chessagon.game.interfaces import DrawOffer, GamePhase

_LOGGER = logging.getLogger(__name__)


# ── Errors ───────────────────────────────────────────────────────────────────


class GameError(Exception):
    """An action that the current game flow does not allow."""


class GameIsFinished(GameError):
    def __init__(self) -> None:
        super().__init__("Game is finished, no more actions are possible")


class NotYourTurn(GameError):
    def __init__(self, color: Color) -> None:
        self.color = color
        super().__init__(f"It is not {color}'s turn")


class DrawNotOffered(GameError):
    def __init__(self, color: Color) -> None:
        self.color = color
        super().__init__(f"The opponent of {color} has not offered a draw")


# ── History ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    move: RegularMove
    color: Color
    board_before: BoardSnapshot
    played_at: float
    captured: PieceType | None = None
    was_check: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, move history, draw offers.

    This is a pure data/logic class with no clock and no threading. Every
    move stores a snapshot of the board it was played on, so undo restores
    the exact previous board, and the *time_source* reading at which it was
    played.
    """

    time_source: TimeSource = field(default=time.monotonic, repr=False, compare=False)
    board: Board = field(init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    win_reason: WinReason | None = field(default=None, init=False)
    draw_reason: DrawReason | None = field(default=None, init=False)
    draw_offer: DrawOffer = field(default=DrawOffer.NONE, init=False)
    draw_offer_by: Color | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    first_to_move: Color = field(default=Color.WHITE, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, first_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game, from the initial setup by default.

        Raises :class:`~chessagon.core.errors.BoardStateError` if
        *first_to_move* could capture the opposing king right away. A board
        that is already checkmate or stalemate ends the game immediately.
        """
        board = board.copy() if board is not None else Board.initial()
        exposed = board.in_check(first_to_move.opposite)
        if exposed is not None:
            raise BoardStateError(
                f"{first_to_move.opposite} king can be captured at once ({exposed})"
            )

        self.board = board
        self.first_to_move = first_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self._clear_result()
        self.draw_offer = DrawOffer.NONE
        self.draw_offer_by = None
        self.move_history.clear()
        _LOGGER.debug("Game set up, %s to move", first_to_move)
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move, color: Color | None = None) -> MoveRecord:
        """Validate and apply *move* for the side to move.

        Raises :class:`GameIsFinished`, :class:`NotYourTurn` or the
        :class:`~chessagon.core.errors.MoveError` explaining why the move is
        illegal; the board is unchanged when anything is raised.
        """
        if self.is_game_over:
            raise GameIsFinished()
        mover = self.side_to_move
        if color is not None and color != mover:
            raise NotYourTurn(color)

        before = self.board.snapshot()
        captured = self.board.apply_move(move, mover)
        played = self.board.last_move
        assert isinstance(played, RegularMove)

        record = MoveRecord(
            move=played,
            color=mover,
            board_before=before,
            played_at=self.time_source(),
            captured=captured,
            was_check=self.board.in_check(mover.opposite) is not None,
        )
        self.move_history.append(record)
        _LOGGER.debug("Ply %d: %s plays %s", self.ply_count, mover, played)

        self.draw_offer = DrawOffer.NONE  # any move cancels a pending offer
        self.draw_offer_by = None
        self._check_game_over()
        return record

    def play(self, origin: Position, destination: Position) -> MoveRecord:
        """Shorthand for applying the regular move *origin* -> *destination*."""
        return self.apply_move(RegularMove(origin, destination))

    def undo_last_move(self) -> RegularMove | None:
        """Undo the last move. Returns the undone move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.board.restore(record.board_before)

        # Reset result if we undid a game-ending move
        if self.result != GameResult.IN_PROGRESS:
            self._clear_result()
            self.phase = GamePhase.AWAITING_MOVE
            self.draw_offer = DrawOffer.NONE
            self.draw_offer_by = None

        _LOGGER.debug("Undid %s", record.move)
        return record.move

    # ── Resignation / draw ───────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        if self.is_game_over:
            raise GameIsFinished()
        self._finish_win(color.opposite, WinReason.RESIGNATION)

    def offer_draw(self, color: Color) -> None:
        """Offer a draw; replaces any offer the opponent had made."""
        if self.is_game_over:
            raise GameIsFinished()
        self.draw_offer = DrawOffer.OFFERED
        self.draw_offer_by = color

    def retract_draw(self, color: Color) -> None:
        """Withdraw *color*'s own draw offer (no-op if there is none)."""
        if self.draw_offer == DrawOffer.OFFERED and self.draw_offer_by == color:
            self.draw_offer = DrawOffer.NONE
            self.draw_offer_by = None

    def accept_draw(self, color: Color) -> None:
        if self.is_game_over:
            raise GameIsFinished()
        if self.draw_offer != DrawOffer.OFFERED or self.draw_offer_by in (None, color):
            raise DrawNotOffered(color)
        self.draw_offer = DrawOffer.ACCEPTED
        self._finish_draw(DrawReason.AGREEMENT)

    def flag_fall(self, color: Color) -> None:
        """Time ran out for *color*."""
        if self.is_game_over:
            raise GameIsFinished()
        self._finish_win(color.opposite, WinReason.TIMEOUT)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        if self.ply_count % 2 == 0:
            return self.first_to_move
        return self.first_to_move.opposite

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        """The winning color, or None while in progress and for draws."""
        if self.result == GameResult.WHITE_WINS:
            return Color.WHITE
        if self.result == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def last_move(self) -> RegularMove | None:
        return self.move_history[-1].move if self.move_history else None

    def moves_from(self, color: Color) -> Iterator[MoveRecord]:
        """History entries of the moves *color* played."""
        return (record for record in self.move_history if record.color == color)

    def legal_moves(self) -> list[RegularMove]:
        """Legal moves in the current position."""
        return list(self.board.possible_moves(self.side_to_move))

    def move_duration(self, ply: int) -> float | None:
        """Seconds spent on the move with index *ply* (both colors counted).

        Each side's first move counts as zero. For the move currently being
        thought about (``ply == ply_count``) this is the time spent so far.
        Returns None for a move that has not been reached yet.
        """
        history = self.move_history
        if ply < 2:
            return 0.0 if ply < len(history) else None
        if ply > len(history):
            return None
        start = history[ply - 1].played_at
        end = history[ply].played_at if ply < len(history) else self.time_source()
        return abs(end - start)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        to_move = self.side_to_move
        result = Rules.game_result(self.board, to_move)
        if result == GameResult.DRAW:
            self._finish_draw(DrawReason.STALEMATE)
        elif result != GameResult.IN_PROGRESS:
            self._finish_win(to_move.opposite, WinReason.CHECKMATE)

    def _finish_win(self, winner: Color, reason: WinReason) -> None:
        self.result = GameResult.win_for(winner)
        self.win_reason = reason
        self.phase = GamePhase.GAME_OVER
        _LOGGER.info("Game over: %s wins by %s", winner, reason.name.lower())

    def _finish_draw(self, reason: DrawReason) -> None:
        self.result = GameResult.DRAW
        self.draw_reason = reason
        self.phase = GamePhase.GAME_OVER
        _LOGGER.info("Game over: draw by %s", reason.name.lower())

    def _clear_result(self) -> None:
        self.result = GameResult.IN_PROGRESS
        self.win_reason = None
        self.draw_reason = None
