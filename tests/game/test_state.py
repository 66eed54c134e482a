"""Tests for GameState: the game-lifecycle state machine."""

import pytest

from chessagon.core.board import Board
from chessagon.core.coordinate import Position
from chessagon.core.enums import Color, DrawReason, GameResult, PieceType, Side, WinReason
from chessagon.core.errors import Blocked, BoardStateError, MoveError, UnsupportedMove
from chessagon.core.move import EnPassantMove, PromotionMove, RegularMove
from chessagon.game.interfaces import DrawOffer, GamePhase
from chessagon.game.state import (
    DrawNotOffered,
    GameIsFinished,
    GameState,
    NotYourTurn,
)

OPENING = RegularMove(Position(4, 3), Position(6, 5))
REPLY = RegularMove(Position(6, 7), Position(4, 5))


def _new_state(board: Board | None = None, first_to_move: Color = Color.WHITE) -> GameState:
    state = GameState()
    state.setup(board, first_to_move)
    return state


def _mate_in_one() -> Board:
    """Black to play queen (3, 4) -> (2, 2), mating the king on (0, 0)."""
    board = Board.minimal(Position(0, 0), Position(10, 10))
    board.place(Position(3, 4), PieceType.QUEEN, Color.BLACK)
    return board


def _stalemate_in_one() -> Board:
    """Black to play queen (4, 3) -> (2, 3), leaving white without moves."""
    board = Board.minimal(Position(0, 0), Position(10, 10))
    board.place(Position(4, 3), PieceType.QUEEN, Color.BLACK)
    board.place(Position(1, 5), PieceType.ROOK, Color.BLACK)
    return board


class TestSetup:
    def test_initial(self) -> None:
        state = _new_state()
        assert state.phase == GamePhase.AWAITING_MOVE
        assert state.result == GameResult.IN_PROGRESS
        assert state.side_to_move == Color.WHITE
        assert state.ply_count == 0
        assert state.board == Board.initial()

    def test_custom_board_is_copied(self) -> None:
        board = _mate_in_one()
        state = _new_state(board, Color.BLACK)
        assert state.board == board
        assert state.board is not board
        assert state.side_to_move == Color.BLACK

    def test_capturable_king_rejected(self) -> None:
        board = Board.minimal(Position(0, 1), Position(5, 5))
        board.place(Position(2, 2), PieceType.ROOK, Color.WHITE)
        with pytest.raises(BoardStateError):
            _new_state(board, Color.WHITE)
        # Black to move may stand in check.
        assert _new_state(board, Color.BLACK).side_to_move == Color.BLACK

    def test_already_stalemated(self) -> None:
        board = Board.minimal(Position(0, 0), Position(10, 10))
        board.place(Position(2, 3), PieceType.QUEEN, Color.BLACK)
        board.place(Position(1, 5), PieceType.ROOK, Color.BLACK)
        state = _new_state(board)
        assert state.is_game_over
        assert state.draw_reason == DrawReason.STALEMATE

    def test_already_checkmated(self) -> None:
        board = Board.minimal(Position(0, 0), Position(10, 10))
        board.place(Position(2, 2), PieceType.QUEEN, Color.BLACK)
        state = _new_state(board)
        assert state.result == GameResult.BLACK_WINS
        assert state.win_reason == WinReason.CHECKMATE


class TestMoves:
    def test_apply_move(self) -> None:
        state = _new_state()
        record = state.apply_move(OPENING)
        assert record.move == OPENING
        assert record.color == Color.WHITE
        assert not record.was_capture
        assert state.side_to_move == Color.BLACK
        assert state.last_move == OPENING

    def test_play(self) -> None:
        state = _new_state()
        state.play(Position(4, 3), Position(6, 5))
        state.play(Position(6, 7), Position(4, 5))
        assert state.ply_count == 2
        assert state.side_to_move == Color.WHITE

    def test_illegal_move_leaves_board_untouched(self) -> None:
        state = _new_state()
        before = state.board.snapshot()
        with pytest.raises(Blocked):
            state.play(Position(4, 4), Position(6, 6))
        assert state.board.snapshot() == before
        assert state.ply_count == 0

    def test_not_your_turn(self) -> None:
        state = _new_state()
        with pytest.raises(NotYourTurn):
            state.apply_move(REPLY, Color.BLACK)

    @pytest.mark.parametrize(
        "move",
        [
            EnPassantMove(3, Side.KING),
            EnPassantMove(0, Side.KING),
            PromotionMove(3, None, PieceType.QUEEN),
        ],
    )
    def test_unsupported_move_is_a_move_error(self, move) -> None:
        state = _new_state()
        with pytest.raises(UnsupportedMove):
            state.apply_move(move)
        assert state.ply_count == 0
        assert state.board == Board.initial()

    def test_wrong_side_piece(self) -> None:
        state = _new_state()
        with pytest.raises(MoveError):
            state.apply_move(REPLY)

    def test_moves_from(self) -> None:
        state = _new_state()
        state.apply_move(OPENING)
        state.apply_move(REPLY)
        assert [r.move for r in state.moves_from(Color.WHITE)] == [OPENING]
        assert [r.move for r in state.moves_from(Color.BLACK)] == [REPLY]

    def test_legal_moves_for_side_to_move(self) -> None:
        state = _new_state()
        assert OPENING in state.legal_moves()
        state.apply_move(OPENING)
        assert all(
            state.board.get(m.origin, Color.BLACK) is not None for m in state.legal_moves()
        )


class TestUndo:
    def test_undo_restores_exact_board(self) -> None:
        state = _new_state()
        start = state.board.snapshot()
        state.apply_move(OPENING)
        assert state.undo_last_move() == OPENING
        assert state.board.snapshot() == start
        assert state.board.last_move is None
        assert state.side_to_move == Color.WHITE

    def test_undo_capture(self, empty_board: Board) -> None:
        empty_board.place(Position(5, 5), PieceType.ROOK, Color.WHITE)
        empty_board.place(Position(5, 8), PieceType.KNIGHT, Color.BLACK)
        state = _new_state(empty_board)
        start = state.board.snapshot()

        record = state.play(Position(5, 5), Position(5, 8))
        assert record.captured == PieceType.KNIGHT
        assert record.move.captures
        assert state.board.get(Position(5, 8), Color.BLACK) is None

        assert state.undo_last_move() == record.move
        assert state.board.snapshot() == start
        assert state.board.get(Position(5, 8), Color.BLACK) == PieceType.KNIGHT
        assert state.board.get(Position(5, 5), Color.WHITE) == PieceType.ROOK

    def test_undo_after_several_moves(self) -> None:
        state = _new_state()
        state.apply_move(OPENING)
        after_opening = state.board.snapshot()
        state.apply_move(REPLY)
        state.undo_last_move()
        assert state.board.snapshot() == after_opening
        assert state.board.last_move == OPENING

    def test_undo_empty(self) -> None:
        assert _new_state().undo_last_move() is None

    def test_undo_checkmate(self) -> None:
        state = _new_state(_mate_in_one(), Color.BLACK)
        state.play(Position(3, 4), Position(2, 2))
        assert state.is_game_over
        state.undo_last_move()
        assert state.result == GameResult.IN_PROGRESS
        assert state.win_reason is None
        assert state.phase == GamePhase.AWAITING_MOVE


class TestMoveDuration:
    def test_durations(self, fake_time) -> None:
        state = GameState(time_source=fake_time)
        state.setup()
        assert state.move_duration(0) is None

        state.apply_move(OPENING)
        assert state.move_duration(0) == 0.0
        assert state.move_duration(1) is None

        fake_time.advance(4)
        state.apply_move(REPLY)
        assert state.move_duration(1) == 0.0
        assert state.move_duration(2) == 0.0

        fake_time.advance(3)
        assert state.move_duration(2) == 3.0
        state.apply_move(state.legal_moves()[0])
        fake_time.advance(2)
        assert state.move_duration(2) == 3.0
        assert state.move_duration(3) == 2.0
        assert state.move_duration(4) is None

    def test_played_at(self, fake_time) -> None:
        state = GameState(time_source=fake_time)
        state.setup()
        fake_time.advance(12.5)
        record = state.apply_move(OPENING)
        assert record.played_at == 1012.5

    def test_undo_drops_timestamp(self, fake_time) -> None:
        state = GameState(time_source=fake_time)
        state.setup()
        state.apply_move(OPENING)
        state.apply_move(REPLY)
        state.undo_last_move()
        fake_time.advance(5)
        assert state.move_duration(1) is None


class TestGameEnd:
    def test_checkmate(self) -> None:
        state = _new_state(_mate_in_one(), Color.BLACK)
        record = state.play(Position(3, 4), Position(2, 2))
        assert record.was_check
        assert state.result == GameResult.BLACK_WINS
        assert state.win_reason == WinReason.CHECKMATE
        assert state.winner == Color.BLACK
        assert state.is_game_over

    def test_stalemate(self) -> None:
        state = _new_state(_stalemate_in_one(), Color.BLACK)
        record = state.play(Position(4, 3), Position(2, 3))
        assert not record.was_check
        assert state.result == GameResult.DRAW
        assert state.draw_reason == DrawReason.STALEMATE
        assert state.winner is None

    def test_no_moves_after_game_over(self) -> None:
        state = _new_state()
        state.resign(Color.WHITE)
        with pytest.raises(GameIsFinished):
            state.apply_move(OPENING)

    def test_resign(self) -> None:
        state = _new_state()
        state.resign(Color.WHITE)
        assert state.result == GameResult.BLACK_WINS
        assert state.win_reason == WinReason.RESIGNATION
        with pytest.raises(GameIsFinished):
            state.resign(Color.BLACK)

    def test_flag_fall(self) -> None:
        state = _new_state()
        state.flag_fall(Color.BLACK)
        assert state.winner == Color.WHITE
        assert state.win_reason == WinReason.TIMEOUT


class TestDrawOffers:
    def test_accept(self) -> None:
        state = _new_state()
        state.offer_draw(Color.WHITE)
        assert state.draw_offer == DrawOffer.OFFERED
        state.accept_draw(Color.BLACK)
        assert state.result == GameResult.DRAW
        assert state.draw_reason == DrawReason.AGREEMENT
        assert state.draw_offer_by == Color.WHITE

    def test_cannot_accept_own_offer(self) -> None:
        state = _new_state()
        state.offer_draw(Color.WHITE)
        with pytest.raises(DrawNotOffered):
            state.accept_draw(Color.WHITE)

    def test_cannot_accept_without_offer(self) -> None:
        with pytest.raises(DrawNotOffered):
            _new_state().accept_draw(Color.BLACK)

    def test_retract(self) -> None:
        state = _new_state()
        state.offer_draw(Color.WHITE)
        state.retract_draw(Color.BLACK)
        assert state.draw_offer == DrawOffer.OFFERED
        state.retract_draw(Color.WHITE)
        assert state.draw_offer == DrawOffer.NONE
        with pytest.raises(DrawNotOffered):
            state.accept_draw(Color.BLACK)

    def test_counter_offer_replaces(self) -> None:
        state = _new_state()
        state.offer_draw(Color.WHITE)
        state.offer_draw(Color.BLACK)
        assert state.draw_offer_by == Color.BLACK
        state.accept_draw(Color.WHITE)
        assert state.result == GameResult.DRAW

    def test_move_cancels_offer(self) -> None:
        state = _new_state()
        state.offer_draw(Color.BLACK)
        state.apply_move(OPENING)
        assert state.draw_offer == DrawOffer.NONE
        with pytest.raises(DrawNotOffered):
            state.accept_draw(Color.BLACK)
