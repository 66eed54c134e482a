"""GameController: the central orchestrator of a game.

Coordinates players, clock and :class:`GameState`, and publishes events
through plain callbacks so front ends and tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessagon.core.board import Board
from chessagon.core.enums import Color, GameResult
from chessagon.core.errors import MoveError
from chessagon.core.move import Move
from chessagon.game.clock import Clock, ClockSnapshot
from chessagon.game.interfaces import (
    DrawOffer,
    GamePhase,
    IGameController,
    IPlayer,
    TimeControl,
)
from chessagon.game.state import DrawNotOffered, GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, manages the clock,
    switches turns and notifies listeners.

    Meant to be driven from a single thread. Engine answers arrive through
    :meth:`submit_move` like human moves do.
    """

    __slots__ = (
        "_state",
        "_players",
        "_clock",
        "_clock_history",
        "events",
    )

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self._clock: Clock | None = None
        self._clock_history: list[ClockSnapshot] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def clock(self) -> Clock | None:
        return self._clock

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        time_control: TimeControl | None = None,
        board: Board | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Start a game; *clock* overrides the one built from *time_control*."""
        self._players = {Color.WHITE: white, Color.BLACK: black}

        if clock is not None:
            self._clock = clock
        elif time_control is not None:
            self._clock = Clock(time_control)
        else:
            self._clock = None
        self._clock_history = []

        if self._clock is not None:
            self._state = GameState(time_source=self._clock.time_source)
        else:
            self._state = GameState()
        self._state.setup(board)
        _LOGGER.info("New game: %s vs %s", white.name, black.name)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            _LOGGER.warning("Rejected %s: the game is over", move)
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        color = self._state.side_to_move
        try:
            self._state.board.check_move(move, color)
        except MoveError as exc:
            _LOGGER.warning("Rejected %s for %s: %s", move, color, exc)
            return False

        # Clock: freeze mover's time, check flag, then apply increment.
        clock_snapshot: ClockSnapshot | None = None
        if self._clock is not None:
            clock_snapshot = self._clock.snapshot()
            self._clock.stop()
            if self._clock.is_flag_fallen(color):
                self._state.flag_fall(color)
                self._emit_game_over(self._state.result)
                return False
            self._clock.add_increment(color)

        record = self._state.apply_move(move)
        if clock_snapshot is not None:
            self._clock_history.append(clock_snapshot)
        mover = self._players.get(color)
        if mover is not None:
            mover.move_played(record.move)

        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return True

        if self._clock is not None:
            self._clock.switch()

        self._prompt_current_player()
        return True

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._cancel_engine()
        if self._clock:
            self._clock.stop()
        self._state.resign(color)
        self._emit_game_over(self._state.result)

    def offer_draw(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        if self._state.draw_offer == DrawOffer.OFFERED and self._state.draw_offer_by == color:
            return
        self._state.offer_draw(color)

    def retract_draw(self, color: Color) -> None:
        self._state.retract_draw(color)

    def accept_draw(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        try:
            self._state.accept_draw(color)
        except DrawNotOffered as exc:
            _LOGGER.warning("%s", exc)
            return
        self._cancel_engine()
        if self._clock:
            self._clock.stop()
        self._emit_game_over(GameResult.DRAW)

    def check_time(self) -> bool:
        """End the game if the side to move has run out of time.

        Returns True when the flag fell. Meant to be polled by a front end.
        """
        if self._clock is None or self._state.is_game_over:
            return False
        color = self._state.side_to_move
        if not self._clock.is_flag_fallen(color):
            return False
        self._cancel_engine()
        self._clock.stop()
        self._state.flag_fall(color)
        self._emit_game_over(self._state.result)
        return True

    def undo_move(self) -> bool:
        if self._state.is_game_over or not self._state.move_history:
            return False

        self._cancel_engine()

        self._state.undo_last_move()
        if self._clock is not None:
            self._clock.stop()
            if self._clock_history:
                self._clock.restore(self._clock_history.pop())
        self._prompt_current_player()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _cancel_engine(self) -> None:
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if self._clock and not self._clock.is_running:
            self._clock.start(cp.color)

        if cp.is_human:
            self._set_phase(GamePhase.AWAITING_MOVE)
        else:
            self._set_phase(GamePhase.THINKING)
            cp.request_move(self._state.board)

    def _set_phase(self, phase: GamePhase) -> None:
        self._state.phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_phase_changed:
            cb(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)
