"""Tests for Player implementations."""

from chessagon.core.board import Board
from chessagon.core.coordinate import Position
from chessagon.core.enums import Color, PieceType
from chessagon.core.move import RegularMove
from chessagon.game.player import EnginePlayer, HumanPlayer, MoveRequest

OPENING = RegularMove(Position(4, 3), Position(6, 5))


class TestMoveRequest:
    def test_for_board(self, initial_board: Board) -> None:
        request = MoveRequest.for_board(initial_board, Color.WHITE)
        assert request.color == Color.WHITE
        assert request.board == initial_board
        assert request.board is not initial_board
        assert request.legal_moves == tuple(initial_board.possible_moves(Color.WHITE))
        assert OPENING in request.legal_moves

    def test_destinations_from(self, empty_board: Board) -> None:
        empty_board.place(Position(5, 5), PieceType.KNIGHT, Color.WHITE)
        request = MoveRequest.for_board(empty_board, Color.WHITE)
        destinations = request.destinations_from(Position(5, 5))
        assert len(destinations) == 12
        assert Position(6, 8) in destinations
        assert request.destinations_from(Position(3, 3)) == []


class TestHumanPlayer:
    def test_properties(self) -> None:
        p = HumanPlayer(Color.WHITE, "Alice")
        assert p.color == Color.WHITE
        assert p.name == "Alice"
        assert p.is_human is True

    def test_default_name(self) -> None:
        p = HumanPlayer(Color.BLACK)
        assert "black" in p.name.lower()

    def test_request_move_exposes_legal_moves(self, initial_board: Board) -> None:
        p = HumanPlayer(Color.WHITE)
        assert p.pending is None
        p.request_move(initial_board)
        assert p.pending is not None
        assert OPENING in p.pending.legal_moves

    def test_move_played_clears_pending(self, initial_board: Board) -> None:
        p = HumanPlayer(Color.WHITE)
        p.request_move(initial_board)
        p.move_played(OPENING)
        assert p.pending is None

    def test_cancel_clears_pending(self, initial_board: Board) -> None:
        p = HumanPlayer(Color.WHITE)
        p.request_move(initial_board)
        p.cancel()
        assert p.pending is None


class TestEnginePlayer:
    def test_properties(self) -> None:
        p = EnginePlayer(Color.BLACK, "Hexbot")
        assert p.color == Color.BLACK
        assert p.name == "Hexbot"
        assert p.is_human is False
        assert not p.is_thinking

    def test_request_move_calls_callback(self, initial_board: Board) -> None:
        requests: list[MoveRequest] = []
        p = EnginePlayer(Color.BLACK, on_request_move=requests.append)
        p.request_move(initial_board)
        assert len(requests) == 1
        assert requests[0].color == Color.BLACK
        assert requests[0].board == initial_board
        assert requests[0].board is not initial_board
        assert all(
            initial_board.get(move.origin, Color.BLACK) is not None
            for move in requests[0].legal_moves
        )
        assert p.is_thinking

    def test_cancel_while_thinking(self, initial_board: Board) -> None:
        cancelled: list[bool] = []
        p = EnginePlayer(Color.BLACK, on_cancel=lambda: cancelled.append(True))
        p.request_move(initial_board)
        p.cancel()
        assert cancelled == [True]
        assert not p.is_thinking

    def test_cancel_when_idle_is_noop(self) -> None:
        cancelled: list[bool] = []
        p = EnginePlayer(Color.BLACK, on_cancel=lambda: cancelled.append(True))
        p.cancel()
        assert cancelled == []

    def test_move_played_ends_thinking(self, initial_board: Board) -> None:
        cancelled: list[bool] = []
        p = EnginePlayer(Color.WHITE, on_cancel=lambda: cancelled.append(True))
        p.request_move(initial_board)
        p.move_played(OPENING)
        assert not p.is_thinking
        p.cancel()
        assert cancelled == []

    def test_no_callbacks(self, initial_board: Board) -> None:
        p = EnginePlayer(Color.WHITE)
        p.request_move(initial_board)
        p.cancel()
