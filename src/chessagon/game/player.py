"""Players: who answers when the controller asks for a move."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessagon.core.enums import Color
from chessagon.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chessagon.core.board import Board
    from chessagon.core.coordinate import Position
    from chessagon.core.move import RegularMove


@dataclass(frozen=True, slots=True)
class MoveRequest:
    """What a player is handed when it is asked to move.

    *board* is a private copy; *legal_moves* is every move *color* may play
    on it, in generation order.
    """

    board: Board
    color: Color
    legal_moves: tuple[RegularMove, ...]

    @classmethod
    def for_board(cls, board: Board, color: Color) -> MoveRequest:
        return cls(board.copy(), color, tuple(board.possible_moves(color)))

    def destinations_from(self, origin: Position) -> list[Position]:
        return [move.destination for move in self.legal_moves if move.origin == origin]


class HumanPlayer(IPlayer):
    """A human participant.

    Moves arrive through ``GameController.submit_move``. While it is this
    player's turn, :attr:`pending` holds the legal moves so a front end can
    highlight them.
    """

    __slots__ = ("_color", "_name", "_pending")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"
        self._pending: MoveRequest | None = None

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    @property
    def pending(self) -> MoveRequest | None:
        return self._pending

    def request_move(self, board: Board) -> None:
        self._pending = MoveRequest.for_board(board, self._color)

    def cancel(self) -> None:
        self._pending = None

    def move_played(self, move: RegularMove) -> None:
        self._pending = None


class EnginePlayer(IPlayer):
    """A computer participant that delegates move selection to a callback.

    No search is bundled: *on_request_move* receives a :class:`MoveRequest`
    and is expected to answer later through ``GameController.submit_move``
    with one of its legal moves.

    Args:
        color: Side the engine plays.
        name: Display name.
        on_request_move: ``(MoveRequest) -> None``, called when the
            controller asks the engine to start thinking.
        on_cancel: ``() -> None``, called to abort a running search.
    """

    __slots__ = ("_color", "_name", "_on_request_move", "_on_cancel", "_thinking_on")

    def __init__(
        self,
        color: Color,
        name: str = "Engine",
        on_request_move: Callable[[MoveRequest], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel
        self._thinking_on: MoveRequest | None = None

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def is_thinking(self) -> bool:
        return self._thinking_on is not None

    def request_move(self, board: Board) -> None:
        request = MoveRequest.for_board(board, self._color)
        self._thinking_on = request
        if self._on_request_move is not None:
            self._on_request_move(request)

    def cancel(self) -> None:
        """Abort the running search; a no-op when the engine is idle."""
        if self._thinking_on is None:
            return
        self._thinking_on = None
        if self._on_cancel is not None:
            self._on_cancel()

    def move_played(self, move: RegularMove) -> None:
        self._thinking_on = None
