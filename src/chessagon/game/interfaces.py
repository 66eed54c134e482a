"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on the concrete player and clock
implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Final

from chessagon.core.enums import Color

if TYPE_CHECKING:
    from chessagon.core.board import Board
    from chessagon.core.move import Move, RegularMove


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states of a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # engine is computing
    GAME_OVER = auto()


class DrawOffer(IntEnum):
    """Draw offer status between players."""

    NONE = 0
    OFFERED = auto()
    ACCEPTED = auto()


# ── Time control ─────────────────────────────────────────────────────────────

# Number of moves a game is assumed to last when comparing time controls.
CANONICAL_MOVE_COUNT: Final = 40


@dataclass(frozen=True, slots=True)
class TimeControl:
    """Immutable time-control definition.

    Args:
        initial_seconds: Starting time per player.
        increment_seconds: Per-move increment (Fischer).
        black_initial_seconds: Black's starting time, if it differs.
        black_increment_seconds: Black's increment, if it differs.
    """

    initial_seconds: float
    increment_seconds: float = 0.0
    black_initial_seconds: float | None = None
    black_increment_seconds: float | None = None

    # Common presets
    @classmethod
    def bullet(cls) -> TimeControl:
        """1+0"""
        return cls(60, 0)

    @classmethod
    def blitz(cls) -> TimeControl:
        """3+2"""
        return cls(180, 2)

    @classmethod
    def rapid(cls) -> TimeControl:
        """10+5"""
        return cls(600, 5)

    @classmethod
    def unlimited(cls) -> TimeControl:
        """No time limit."""
        return cls(float("inf"), 0)

    def initial_for(self, color: Color) -> float:
        if color == Color.BLACK and self.black_initial_seconds is not None:
            return self.black_initial_seconds
        return self.initial_seconds

    def increment_for(self, color: Color) -> float:
        if color == Color.BLACK and self.black_increment_seconds is not None:
            return self.black_increment_seconds
        return self.increment_seconds

    @property
    def is_unlimited(self) -> bool:
        return all(self.initial_for(color) == float("inf") for color in Color)

    def canonical_duration(self) -> float:
        """Average expected seconds per player over a 40-move game."""
        total = sum(
            self.initial_for(color) + self.increment_for(color) * CANONICAL_MOVE_COUNT
            for color in Color
        )
        return total / len(Color)

    def __repr__(self) -> str:
        if self.is_unlimited:
            return "TimeControl(unlimited)"
        white = _format_budget(self.initial_for(Color.WHITE), self.increment_for(Color.WHITE))
        black = _format_budget(self.initial_for(Color.BLACK), self.increment_for(Color.BLACK))
        if white == black:
            return f"TimeControl({white})"
        return f"TimeControl(white={white}, black={black})"


def _format_budget(initial: float, increment: float) -> str:
    if initial == float("inf"):
        return "unlimited"
    mins = initial / 60
    if increment:
        return f"{mins:g}m+{increment:g}s"
    return f"{mins:g}m"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or engine)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board) -> None:
        """Begin the move-selection process.

        Both kinds of player are handed the legal moves of *board*. Human
        moves still arrive through the controller; an engine passes the
        request to its callback.
        """

    def move_played(self, move: RegularMove) -> None:
        """Called once *move*, this player's answer, has been applied."""

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (engine only, no-op for human)."""


class IClock(ABC):
    """Interface for a game clock."""

    @abstractmethod
    def start(self, color: Color) -> None:
        """Start the clock for *color*."""

    @abstractmethod
    def stop(self) -> None:
        """Pause the running clock."""

    @abstractmethod
    def switch(self) -> None:
        """Switch to the other player's clock."""

    @abstractmethod
    def remaining(self, color: Color) -> float:
        """Seconds remaining for *color*."""

    @abstractmethod
    def is_flag_fallen(self, color: Color) -> bool:
        """Has *color* run out of time?"""

    @abstractmethod
    def add_increment(self, color: Color) -> None:
        """Add Fischer increment after a move."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        time_control: TimeControl | None = None,
        board: Board | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def resign(self, color: Color) -> None:
        """Player of *color* resigns."""

    @abstractmethod
    def offer_draw(self, color: Color) -> None:
        """Player offers a draw."""

    @abstractmethod
    def accept_draw(self, color: Color) -> None:
        """Opponent accepts the draw offer."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
