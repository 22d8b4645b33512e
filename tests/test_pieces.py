import pytest

from clickchess.pieces import (
    Board,
    Color,
    Piece,
    PieceType,
    in_bounds,
    initial_board,
)


def _all_squares():
    return [(r, c) for r in range(8) for c in range(8)]


def test_piece_type_values_match_encoding():
    assert [t.value for t in PieceType] == [0, 1, 2, 3, 4, 5]
    assert PieceType(5) is PieceType.KING


def test_color_values_and_opponent():
    assert Color.WHITE.value == 1
    assert Color.BLACK.value == -1
    assert Color.WHITE.opponent() is Color.BLACK
    assert Color.BLACK.opponent() is Color.WHITE


def test_opponent_is_involution():
    assert Color.WHITE.opponent().opponent() is Color.WHITE
    assert Color.BLACK.opponent().opponent() is Color.BLACK
    assert Color(1).opponent() is Color(-1)


def test_piece_defaults_unmoved():
    piece = Piece(PieceType.ROOK, Color.WHITE)
    assert piece.moved == 0


def test_in_bounds_edges():
    assert in_bounds(0, 0)
    assert in_bounds(7, 7)
    assert not in_bounds(-1, 0)
    assert not in_bounds(0, 8)
    assert not in_bounds(8, 3)


def test_initial_back_ranks():
    board = initial_board()
    order = [
        PieceType.ROOK,
        PieceType.KNIGHT,
        PieceType.BISHOP,
        PieceType.QUEEN,
        PieceType.KING,
        PieceType.BISHOP,
        PieceType.KNIGHT,
        PieceType.ROOK,
    ]
    assert [board[0, c] for c in range(8)] == [Piece(t, Color.BLACK) for t in order]
    assert [board[7, c] for c in range(8)] == [Piece(t, Color.WHITE) for t in order]


def test_initial_pawns_and_empty_middle():
    board = initial_board()
    for c in range(8):
        assert board[1, c] == Piece(PieceType.PAWN, Color.BLACK)
        assert board[6, c] == Piece(PieceType.PAWN, Color.WHITE)
        for r in range(2, 6):
            assert board.is_empty((r, c))


def test_initial_board_is_symmetric_between_colours():
    board = initial_board()
    for r, c in _all_squares():
        top = board[r, c]
        bottom = board[7 - r, c]
        assert (top is None) == (bottom is None)
        if top is not None:
            assert top.type == bottom.type
            assert top.color is bottom.color.opponent()


def test_find_king_on_initial_board():
    board = initial_board()
    assert board.find_king(Color.WHITE) == (7, 4)
    assert board.find_king(Color.BLACK) == (0, 4)


def test_find_king_absent_returns_none():
    board = Board()
    board[3, 3] = Piece(PieceType.QUEEN, Color.WHITE)
    assert board.find_king(Color.WHITE) is None


def test_empty_board_has_no_pieces():
    board = Board()
    assert all(board.is_empty(pos) for pos in _all_squares())


def test_set_and_get_round_trip():
    board = Board()
    knight = Piece(PieceType.KNIGHT, Color.BLACK)
    board[2, 5] = knight
    assert board[2, 5] == knight
    assert not board.is_empty((2, 5))
    board[2, 5] = None
    assert board.is_empty((2, 5))


def test_move_empties_source_and_returns_capture():
    board = initial_board()
    pawn = board[6, 4]
    assert board.move((6, 4), (4, 4)) is None
    assert board.is_empty((6, 4))
    assert board[4, 4] == pawn

    victim = board[1, 3]
    queen = board[7, 3]
    captured = board.move((7, 3), (1, 3))
    assert captured == victim
    assert board[1, 3] == queen
    assert board.is_empty((7, 3))


def test_move_and_back_restores_board():
    board = initial_board()
    before = board.copy()
    board.move((7, 6), (5, 5))
    assert board != before
    board.move((5, 5), (7, 6))
    assert board == before


def test_copy_is_independent():
    board = initial_board()
    duplicate = board.copy()
    assert duplicate == board
    duplicate.move((6, 0), (5, 0))
    assert board[6, 0] == Piece(PieceType.PAWN, Color.WHITE)
    assert board.is_empty((5, 0))
    assert duplicate != board


def test_out_of_bounds_access_raises():
    board = initial_board()
    with pytest.raises(IndexError):
        board[8, 0]
    with pytest.raises(IndexError):
        board[0, -1]
    with pytest.raises(IndexError):
        board[-1, 0] = None
    with pytest.raises(IndexError):
        board.move((0, 0), (0, 8))


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        Board([[None] * 8 for _ in range(7)])
    with pytest.raises(ValueError):
        Board([[None] * 7 for _ in range(8)])


def test_non_piece_rejected():
    board = Board()
    with pytest.raises(TypeError):
        board[0, 0] = "rook"
    rows = [[None] * 8 for _ in range(8)]
    rows[0][0] = 1
    with pytest.raises(TypeError):
        Board(rows)


def test_board_from_squares_does_not_alias_input():
    rows = [[None] * 8 for _ in range(8)]
    board = Board(rows)
    rows[0][0] = Piece(PieceType.KING, Color.WHITE)
    assert board.is_empty((0, 0))