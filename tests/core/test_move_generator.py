"""Tests for MoveGenerator: simple pieces and flying kings."""

from checkie.core.board import Board
from checkie.core.enums import Color, Rank
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator, generate_moves
from checkie.core.piece import Piece

EMPTY_ROW = "........"


def _board(*rows: str) -> Board:
    return Board.from_rows(rows)


def _targets(moves: list[Move]) -> set[tuple[int, int]]:
    return {m.to_sq for m in moves}


class TestSimpleFromStart:
    def test_red_edge_piece(self) -> None:
        moves = generate_moves(Board.initial(), (5, 0))
        assert moves == [Move((5, 0), (4, 1))]

    def test_black_walks_down(self) -> None:
        moves = generate_moves(Board.initial(), (2, 1))
        assert _targets(moves) == {(3, 0), (3, 2)}
        assert not any(m.is_capture for m in moves)

    def test_back_row_piece_is_blocked(self) -> None:
        assert generate_moves(Board.initial(), (7, 0)) == []

    def test_empty_square(self) -> None:
        assert generate_moves(Board.initial(), (4, 3)) == []


class TestSimpleCaptures:
    def test_forward_capture_and_walk_both_generated(self) -> None:
        board = _board(
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
            "..b.....",
            "...r....",
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
        )
        moves = generate_moves(board, (4, 3))
        assert set(moves) == {
            Move((4, 3), (2, 1), captured=(3, 2)),
            Move((4, 3), (3, 4)),
        }

    def test_backward_capture_allowed(self) -> None:
        board = _board(
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
            "...r....",
            "....b...",
            EMPTY_ROW, EMPTY_ROW,
        )
        captures = MoveGenerator(board).captures((4, 3))
        assert captures == [Move((4, 3), (6, 5), captured=(5, 4))]

    def test_backward_walk_not_allowed(self) -> None:
        board = _board(
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
            "...r....",
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
        )
        assert _targets(generate_moves(board, (4, 3))) == {(3, 2), (3, 4)}

    def test_black_captures_upward(self) -> None:
        board = _board(
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
            "..b.....",
            "...r....",
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
        )
        moves = generate_moves(board, (3, 2))
        assert Move((3, 2), (5, 4), captured=(4, 3)) in moves
        assert _targets([m for m in moves if not m.is_capture]) == {(4, 1)}

    def test_landing_off_board(self) -> None:
        board = _board(
            ".b......",
            "r.......",
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
        )
        assert generate_moves(board, (1, 0)) == []

    def test_landing_occupied(self) -> None:
        board = _board(
            EMPTY_ROW, EMPTY_ROW,
            ".b......",
            "..b.....",
            "...r....",
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
        )
        assert not MoveGenerator(board).has_capture((4, 3))

    def test_friendly_piece_not_captured(self) -> None:
        board = _board(
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
            "..r.....",
            "...r....",
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
        )
        assert MoveGenerator(board).captures((4, 3)) == []


class TestFlyingKing:
    def test_open_board_reach(self) -> None:
        board = _board(
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
            "...R....",
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
        )
        moves = generate_moves(board, (4, 3))
        assert len(moves) == 13
        assert not any(m.is_capture for m in moves)
        assert (0, 7) in _targets(moves)
        assert (7, 0) in _targets(moves)

    def test_long_capture_lands_anywhere_beyond(self) -> None:
        board = _board(
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
            "...b....",
            EMPTY_ROW, EMPTY_ROW,
            "R.......",
        )
        moves = generate_moves(board, (7, 0))
        captures = [m for m in moves if m.is_capture]
        assert _targets(captures) == {(3, 4), (2, 5), (1, 6), (0, 7)}
        assert {m.captured for m in captures} == {(4, 3)}
        assert _targets([m for m in moves if not m.is_capture]) == {(6, 1), (5, 2)}

    def test_no_two_pieces_on_one_line(self) -> None:
        board = _board(
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
            "....b...",
            EMPTY_ROW,
            "..b.....",
            EMPTY_ROW,
            "R.......",
        )
        captures = MoveGenerator(board).captures((7, 0))
        assert captures == [Move((7, 0), (4, 3), captured=(5, 2))]

    def test_adjacent_enemies_block(self) -> None:
        board = _board(
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
            "..b.....",
            ".b......",
            "R.......",
        )
        assert generate_moves(board, (7, 0)) == []

    def test_friendly_piece_blocks_ray(self) -> None:
        board = _board(
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
            "....b...",
            EMPTY_ROW,
            "..r.....",
            EMPTY_ROW,
            "R.......",
        )
        assert generate_moves(board, (7, 0)) == [Move((7, 0), (6, 1))]

    def test_black_king_captures_red(self) -> None:
        board = _board(
            ".B......",
            EMPTY_ROW,
            "...r....",
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
        )
        captures = MoveGenerator(board).captures((0, 1))
        assert _targets(captures) == {(3, 4), (4, 5), (5, 6), (6, 7)}

    def test_captures_in_several_directions(self) -> None:
        board = _board(
            EMPTY_ROW, EMPTY_ROW,
            ".b...b..",
            EMPTY_ROW,
            "...R....",
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
        )
        captures = MoveGenerator(board).captures((4, 3))
        assert {m.captured for m in captures} == {(2, 1), (2, 5)}

    def test_piece_override_uses_king_moves(self) -> None:
        board = _board(
            "...r....",
            EMPTY_ROW,
            ".....b..",
            EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
        )
        gen = MoveGenerator(board)
        assert gen.captures((0, 3)) == []
        as_king = gen.captures((0, 3), Piece(Color.RED, Rank.KING))
        assert _targets(as_king) == {(3, 6), (4, 7)}
