import pytest

from clickchess.app import main, piece_glyph, square_at, status_text, winner_text
from clickchess.pieces import SIZE, Color, Piece, PieceType


def test_piece_glyph_empty_square():
    assert piece_glyph(None) == ""


@pytest.mark.parametrize(
    "kind, color, glyph",
    [
        (PieceType.PAWN, Color.BLACK, "\u265f"),
        (PieceType.PAWN, Color.WHITE, "\u2659"),
        (PieceType.KING, Color.BLACK, "\u265a"),
        (PieceType.KING, Color.WHITE, "\u2654"),
        (PieceType.QUEEN, Color.WHITE, "\u2655"),
        (PieceType.KNIGHT, Color.BLACK, "\u265e"),
    ],
)
def test_piece_glyph_values(kind, color, glyph):
    assert piece_glyph(Piece(kind, color)) == glyph


def test_piece_glyphs_are_distinct_single_characters():
    glyphs = {piece_glyph(Piece(kind, color)) for kind in PieceType for color in Color}
    assert len(glyphs) == 12
    assert all(len(g) == 1 for g in glyphs)


def test_piece_glyph_ignores_move_count():
    assert piece_glyph(Piece(PieceType.ROOK, Color.WHITE, 3)) == piece_glyph(
        Piece(PieceType.ROOK, Color.WHITE)
    )


def test_status_text():
    assert status_text(Color.WHITE) == "Round:White"
    assert status_text(Color.BLACK) == "Round:Black"


def test_winner_text():
    assert winner_text(Color.BLACK) == "Checkmate!\nBlack win"
    assert winner_text(Color.WHITE) == "Checkmate!\nWhite win"


@pytest.mark.parametrize("size", [1, 37, 80])
def test_square_at_round_trips_corners_and_centres(size):
    for row in range(SIZE):
        for col in range(SIZE):
            assert square_at(col * size, row * size, size) == (row, col)
            far = size - 1
            assert square_at(col * size + far, row * size + far, size) == (row, col)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (8 * 80, 0), (0, 8 * 80), (12 * 80, 5)])
def test_square_at_off_board(x, y):
    assert square_at(x, y, 80) is None


@pytest.mark.parametrize("size", [0, -5])
def test_square_at_rejects_bad_size(size):
    with pytest.raises(ValueError):
        square_at(10, 10, size)


def test_main_rejects_bad_square_size():
    with pytest.raises(SystemExit) as info:
        main(["--square-size", "0"])
    assert info.value.code == 2