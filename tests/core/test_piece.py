"""Tests for Piece, enums and the move vocabulary."""

import pytest

from chessagon.core.coordinate import Position
from chessagon.core.enums import Color, GameResult, PieceType, Side
from chessagon.core.layout import initial_tiles, is_pawn_home_tile, pawn_home_tile
from chessagon.core.move import EnPassantMove, PromotionMove, RegularMove
from chessagon.core.piece import Piece


class TestPiece:
    def test_letters(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.KNIGHT)) == "n"

    def test_from_char(self) -> None:
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_values(self) -> None:
        assert Piece(Color.WHITE, PieceType.PAWN).value == 1
        assert Piece(Color.WHITE, PieceType.QUEEN).value == 9
        assert Piece(Color.WHITE, PieceType.KING).value is None

    def test_name_and_symbol(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK)
        assert piece.name == "white rook"
        assert piece.symbol == "♖"


class TestEnums:
    def test_color(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.WHITE.direction == 1
        assert Color.BLACK.direction == -1

    def test_side(self) -> None:
        assert Side.KING.other == Side.QUEEN

    def test_win_for(self) -> None:
        assert GameResult.win_for(Color.BLACK) == GameResult.BLACK_WINS


class TestLayout:
    def test_black_is_flipped_white(self) -> None:
        for piece_type in PieceType:
            white = initial_tiles(piece_type, Color.WHITE)
            black = initial_tiles(piece_type, Color.BLACK)
            assert black == tuple(p.flipped() for p in white)

    def test_pawn_home_tiles(self) -> None:
        for tile in initial_tiles(PieceType.PAWN, Color.WHITE):
            assert is_pawn_home_tile(tile, Color.WHITE)
            assert is_pawn_home_tile(tile.flipped(), Color.BLACK)
        assert not is_pawn_home_tile(Position(5, 5), Color.WHITE)

    def test_pawn_home_tile_by_file(self) -> None:
        assert pawn_home_tile(5, Color.WHITE) == Position(4, 4)
        assert pawn_home_tile(5, Color.BLACK) == Position(6, 6)
        assert pawn_home_tile(0, Color.WHITE) is None


class TestMoves:
    def test_regular_str(self) -> None:
        assert str(RegularMove(Position(4, 3), Position(6, 5))) == "(4, 3)-(6, 5)"
        assert "x" in str(RegularMove(Position(4, 3), Position(5, 4), captures=True))

    def test_en_passant_origin(self) -> None:
        move = EnPassantMove(3, Side.QUEEN)
        assert move.origin_of(Color.WHITE) == Position(4, 2)
        with pytest.raises(NotImplementedError):
            move.destination_of(Color.WHITE)

    def test_en_passant_without_home_tile(self) -> None:
        with pytest.raises(ValueError):
            EnPassantMove(10, Side.KING).origin_of(Color.WHITE)

    def test_promotion_not_implemented(self) -> None:
        move = PromotionMove(4, None, PieceType.QUEEN)
        with pytest.raises(NotImplementedError):
            move.origin_of(Color.BLACK)
