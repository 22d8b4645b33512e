"""Pieces, colours and the 8x8 board they stand on."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Sequence, Tuple

Position = Tuple[int, int]

SIZE = 8


class PieceType(IntEnum):
    """Kind of a chess piece."""

    PAWN = 0
    ROOK = 1
    KNIGHT = 2
    BISHOP = 3
    QUEEN = 4
    KING = 5


class Color(IntEnum):
    """Side a piece belongs to; also the side whose turn it is."""

    WHITE = 1
    BLACK = -1

    def opponent(self) -> "Color":
        """Return the other side."""
        return Color(-self.value)


@dataclass(frozen=True)
class Piece:
    """A piece with the number of times it has moved."""

    type: PieceType
    color: Color
    moved: int = 0


def in_bounds(row: int, col: int) -> bool:
    """Tell whether (row, col) lies on the board."""
    return 0 <= row < SIZE and 0 <= col < SIZE


class Board:
    """An 8x8 grid of squares, each holding a Piece or None.

    Squares are addressed as (row, col); row 0 is Black's back rank.
    """

    def __init__(self, squares: Optional[Iterable[Sequence[Optional[Piece]]]] = None) -> None:
        if squares is None:
            self._squares = [[None] * SIZE for _ in range(SIZE)]
            return
        rows = [list(row) for row in squares]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"a board needs {SIZE} rows of {SIZE} squares")
        for row in rows:
            for square in row:
                if square is not None and not isinstance(square, Piece):
                    raise TypeError(f"square holds {square!r}, not a Piece or None")
        self._squares = rows

    @staticmethod
    def _check(pos: Position) -> Position:
        row, col = pos
        if not in_bounds(row, col):
            raise IndexError(f"square {pos!r} is off the board")
        return row, col

    def __getitem__(self, pos: Position) -> Optional[Piece]:
        row, col = self._check(pos)
        return self._squares[row][col]

    def __setitem__(self, pos: Position, piece: Optional[Piece]) -> None:
        row, col = self._check(pos)
        if piece is not None and not isinstance(piece, Piece):
            raise TypeError(f"cannot place {piece!r} on the board")
        self._squares[row][col] = piece

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        return f"Board({self._squares!r})"

    def move(self, src: Position, dst: Position) -> Optional[Piece]:
        """Move whatever stands on src to dst, emptying src.

        Returns the piece that stood on dst before the move, if any.
        """
        self._check(src)
        self._check(dst)
        piece = self[src]
        captured = self[dst]
        self[src] = None
        self[dst] = piece
        return captured

    def copy(self) -> "Board":
        """Return an independent copy of the board."""
        return Board(self._squares)

    def find_king(self, color: Color) -> Optional[Position]:
        """Return the square of the king of the given colour, or None."""
        return next(
            (
                (row, col)
                for row, squares in enumerate(self._squares)
                for col, piece in enumerate(squares)
                if piece is not None
                and piece.type is PieceType.KING
                and piece.color is color
            ),
            None,
        )

    def is_empty(self, pos: Position) -> bool:
        """Tell whether no piece stands on the square."""
        return self[pos] is None


_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def initial_board() -> Board:
    """Return a board set up for the start of a game."""
    empty = [None] * SIZE
    return Board(
        [
            [Piece(kind, Color.BLACK) for kind in _BACK_RANK],
            [Piece(PieceType.PAWN, Color.BLACK) for _ in range(SIZE)],
            empty,
            empty,
            empty,
            empty,
            [Piece(PieceType.PAWN, Color.WHITE) for _ in range(SIZE)],
            [Piece(kind, Color.WHITE) for kind in _BACK_RANK],
        ]
    )