"""Game clock with Fischer increment support."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from chessagon.core.enums import Color
from chessagon.game.interfaces import IClock, TimeControl

TimeSource = Callable[[], float]


@dataclass(frozen=True, slots=True)
class ClockSnapshot:
    """Clock state used to restore time after undo."""

    white_remaining: float
    black_remaining: float
    active_color: Color | None
    is_running: bool


class Clock(IClock):
    """Dual clock tracking remaining time for both players.

    Reads *time_source* (``time.monotonic`` by default) and never the wall
    clock. Remaining time is clamped at zero.
    """

    __slots__ = (
        "_time_control",
        "_time_source",
        "_remaining",
        "_active_color",
        "_last_tick",
        "_running",
    )

    def __init__(
        self, time_control: TimeControl, time_source: TimeSource = time.monotonic
    ) -> None:
        self._time_control = time_control
        self._time_source = time_source
        self._remaining: dict[Color, float] = {
            color: time_control.initial_for(color) for color in Color
        }
        self._active_color: Color | None = None
        self._last_tick: float = 0.0
        self._running: bool = False

    # ── IClock implementation ────────────────────────────────────────────

    def start(self, color: Color) -> None:
        self._active_color = color
        self._last_tick = self._time_source()
        self._running = True

    def stop(self) -> None:
        if self._running:
            self._consume_elapsed()
            self._running = False

    def switch(self) -> None:
        """Stop the current player's time and start the opponent's."""
        if self._active_color is None:
            return
        if self._running:
            self._consume_elapsed()
        self._active_color = self._active_color.opposite
        self._last_tick = self._time_source()

    def remaining(self, color: Color) -> float:
        if self._running and self._active_color == color:
            elapsed = self._time_source() - self._last_tick
            return max(0.0, self._remaining[color] - elapsed)
        return max(0.0, self._remaining[color])

    def is_flag_fallen(self, color: Color) -> bool:
        return self.remaining(color) <= 0.0

    def add_increment(self, color: Color) -> None:
        self._remaining[color] += self._time_control.increment_for(color)

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def time_source(self) -> TimeSource:
        return self._time_source

    @property
    def is_unlimited(self) -> bool:
        return self._time_control.is_unlimited

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def active_color(self) -> Color | None:
        return self._active_color

    def snapshot(self) -> ClockSnapshot:
        return ClockSnapshot(
            white_remaining=self.remaining(Color.WHITE),
            black_remaining=self.remaining(Color.BLACK),
            active_color=self._active_color,
            is_running=self._running,
        )

    def restore(self, snapshot: ClockSnapshot) -> None:
        """Restore clock state previously captured with :meth:`snapshot`."""
        self._remaining[Color.WHITE] = snapshot.white_remaining
        self._remaining[Color.BLACK] = snapshot.black_remaining
        self._active_color = snapshot.active_color
        self._running = snapshot.is_running and snapshot.active_color is not None
        self._last_tick = self._time_source()

    # ── Internal ─────────────────────────────────────────────────────────

    def _consume_elapsed(self) -> None:
        if self._active_color is None:
            return
        now = self._time_source()
        spent = now - self._last_tick
        self._remaining[self._active_color] = max(
            0.0, self._remaining[self._active_color] - spent
        )
        self._last_tick = now
