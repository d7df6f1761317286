"""Tests for BoardState."""

import pytest

from chesspane.core.board import STARTING_PLACEMENT, BoardState
from chesspane.core.enums import Color, PieceKind
from chesspane.core.piece import Piece
from chesspane.core.types import Coordinate, parse_square

E2 = parse_square("e2")
E4 = parse_square("e4")


class TestStartingBoard:
    def test_black_back_rank_is_rank_zero(self) -> None:
        board = BoardState.starting()
        assert board[Coordinate(0, 4)] == Piece(
            Coordinate(0, 4), PieceKind.KING, Color.BLACK
        )
        assert all(p.color == Color.BLACK for p in board.squares[0])

    def test_white_pawns_on_rank_six(self) -> None:
        board = BoardState.starting()
        row = board.squares[6]
        assert all(p.kind == PieceKind.PAWN and p.color == Color.WHITE for p in row)

    def test_middle_is_empty(self) -> None:
        board = BoardState.starting()
        for rank in range(2, 6):
            assert all(p.is_empty for p in board.squares[rank])

    def test_turn_zero_white_to_move(self) -> None:
        board = BoardState.starting()
        assert board.turn == 0
        assert board.active_color == Color.WHITE

    def test_matches_starting_placement(self) -> None:
        assert BoardState.starting() == BoardState.from_placement(STARTING_PLACEMENT)

    def test_piece_counts(self) -> None:
        board = BoardState.starting()
        assert sum(1 for p in board if p.color == Color.WHITE) == 16
        assert sum(1 for p in board if p.color == Color.BLACK) == 16
        assert board.has_king(Color.WHITE) and board.has_king(Color.BLACK)


class TestValidation:
    def test_negative_turn(self) -> None:
        with pytest.raises(ValueError):
            BoardState(BoardState.starting().squares, turn=-1)

    def test_wrong_shape(self) -> None:
        squares = BoardState.starting().squares[:7]
        with pytest.raises(ValueError):
            BoardState(squares)

    def test_coordinate_mismatch(self) -> None:
        grid = [list(row) for row in BoardState.starting().squares]
        grid[3][3] = Piece.empty(Coordinate(0, 0))
        with pytest.raises(ValueError):
            BoardState.from_pieces(grid)

    @pytest.mark.parametrize(
        "placement",
        ["8/8/8", "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX", "9/8/8/8/8/8/8/8"],
    )
    def test_bad_placement(self, placement: str) -> None:
        with pytest.raises(ValueError):
            BoardState.from_placement(placement)

    def test_off_board_lookup(self) -> None:
        with pytest.raises(IndexError):
            BoardState.starting()[Coordinate(8, 0)]


class TestDerivation:
    def test_with_move_relocates_and_advances_turn(self) -> None:
        before = BoardState.starting()
        after = before.with_move(E2, E4)

        assert after.turn == 1
        assert after.active_color == Color.BLACK
        assert after[E2].is_empty
        assert after[E4] == Piece(E4, PieceKind.PAWN, Color.WHITE)
        # Source board is untouched
        assert before[E2].kind == PieceKind.PAWN
        assert before.turn == 0

    def test_changed_squares(self) -> None:
        before = BoardState.starting()
        after = before.with_move(E2, E4)
        assert before.changed_squares(after) == {E2, E4}
        assert before.changed_squares(before) == frozenset()

    def test_capture_removes_king(self) -> None:
        board = BoardState.from_placement("4k3/8/8/8/8/8/8/4R2K")
        after = board.with_move(parse_square("e1"), parse_square("e8"))
        assert not after.has_king(Color.BLACK)

    def test_str_rows(self) -> None:
        lines = str(BoardState.starting()).splitlines()
        assert lines[0] == "r n b q k b n r"
        assert lines[7] == "R N B Q K B N R"
