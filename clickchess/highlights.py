"""Squares a selected piece may move to or capture on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Set

from clickchess.pieces import Board, Color, Piece, PieceType, Position, in_bounds
from clickchess.rules import is_attacked

_ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_ALL_DIRECTIONS = _DIAGONAL + _ORTHOGONAL
_KNIGHT_JUMPS = ((-2, 1), (-2, -1), (-1, 2), (1, 2), (2, 1), (2, -1), (1, -2), (-1, -2))

_SLIDERS = {
    PieceType.ROOK: _ORTHOGONAL,
    PieceType.BISHOP: _DIAGONAL,
    PieceType.QUEEN: _ALL_DIRECTIONS,
}


@dataclass
class Highlights:
    """Quiet moves and captures offered to the selected piece."""

    moves: Set[Position] = field(default_factory=set)
    attacks: Set[Position] = field(default_factory=set)

    def clear(self) -> None:
        """Forget every highlighted square."""
        self.moves.clear()
        self.attacks.clear()

    def is_target(self, pos: Position) -> bool:
        """Tell whether a click on pos would move the selected piece."""
        return pos in self.moves or pos in self.attacks


def _ray(row: int, col: int, dr: int, dc: int) -> Iterator[Position]:
    r, c = row + dr, col + dc
    while in_bounds(r, c):
        yield r, c
        r, c = r + dr, c + dc


def _pawn(board: Board, row: int, col: int, piece: Piece,
          pawn_two: Optional[int], marks: Highlights) -> None:
    step = -1 if piece.color is Color.WHITE else 1
    one = (row + step, col)
    two = (row + 2 * step, col)
    if piece.moved == 0 and in_bounds(*two) and board.is_empty(two) and board.is_empty(one):
        marks.moves.update((one, two))
    elif in_bounds(*one) and board.is_empty(one):
        marks.moves.add(one)

    for target_col in (col - 1, col + 1):
        target = (row + step, target_col)
        if in_bounds(*target):
            occupant = board[target]
            if occupant is not None and occupant.color is not piece.color:
                marks.attacks.add(target)

    en_passant_row = 3 if piece.color is Color.WHITE else 4
    if row != en_passant_row or pawn_two is None or pawn_two < 0:
        return
    for target_col in (col - 1, col + 1):
        if target_col != pawn_two or not in_bounds(row, target_col):
            continue
        victim = board[(row, target_col)]
        landing = (row + step, target_col)
        if (
            victim is not None
            and victim.type is PieceType.PAWN
            and victim.color is piece.color.opponent()
            and board.is_empty(landing)
        ):
            marks.moves.add(landing)
            marks.attacks.add((row, target_col))


def _slider(board: Board, row: int, col: int, piece: Piece, marks: Highlights) -> None:
    for dr, dc in _SLIDERS[piece.type]:
        for pos in _ray(row, col, dr, dc):
            occupant = board[pos]
            if occupant is None:
                marks.moves.add(pos)
                continue
            if occupant.color is not piece.color:
                marks.attacks.add(pos)
            break


def _knight(board: Board, row: int, col: int, piece: Piece, marks: Highlights) -> None:
    for dr, dc in _KNIGHT_JUMPS:
        pos = (row + dr, col + dc)
        if not in_bounds(*pos):
            continue
        occupant = board[pos]
        if occupant is None:
            marks.moves.add(pos)
        elif occupant.color is not piece.color:
            marks.attacks.add(pos)


def _next_to_enemy_king(board: Board, pos: Position, color: Color) -> bool:
    row, col = pos
    for dr, dc in _ALL_DIRECTIONS:
        near = (row + dr, col + dc)
        if in_bounds(*near):
            occupant = board[near]
            if (
                occupant is not None
                and occupant.type is PieceType.KING
                and occupant.color is color.opponent()
            ):
                return True
    return False


def _king(board: Board, row: int, col: int, piece: Piece, marks: Highlights) -> None:
    def safe(dst: Position) -> bool:
        trial = board.copy()
        trial.move((row, col), dst)
        return not is_attacked(trial, dst[0], dst[1], piece.color)

    for dr, dc in _ALL_DIRECTIONS:
        pos = (row + dr, col + dc)
        if not in_bounds(*pos) or _next_to_enemy_king(board, pos, piece.color):
            continue
        occupant = board[pos]
        if occupant is not None and occupant.color is piece.color:
            continue
        if not safe(pos):
            continue
        (marks.moves if occupant is None else marks.attacks).add(pos)


def highlights_for(board: Board, row: int, col: int, pawn_two: Optional[int]) -> Highlights:
    """Return the squares the piece on (row, col) may move to or capture on.

    ``pawn_two`` is the column of a pawn that has just advanced two squares,
    or -1 / None when there is none.
    """
    piece = board[(row, col)]
    if piece is None:
        raise ValueError(f"no piece stands on {(row, col)!r}")
    marks = Highlights()
    if piece.type is PieceType.PAWN:
        _pawn(board, row, col, piece, pawn_two, marks)
    elif piece.type in _SLIDERS:
        _slider(board, row, col, piece, marks)
    elif piece.type is PieceType.KNIGHT:
        _knight(board, row, col, piece, marks)
    else:
        _king(board, row, col, piece, marks)
    return marks