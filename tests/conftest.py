"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessagon.core.board import Board
from chessagon.core.coordinate import Position

# Kings tucked into the corners, off every ray through the centre.
WHITE_CORNER_KING = Position(0, 1)
BLACK_CORNER_KING = Position(10, 9)


class FakeTime:
    """Manually advanced replacement for ``time.monotonic``."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def empty_board() -> Board:
    """A board with only the two kings, in opposite corners."""
    return Board.minimal(WHITE_CORNER_KING, BLACK_CORNER_KING)


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()
