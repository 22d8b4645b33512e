"""Click-driven game state: selecting pieces, moving them and ending the game."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional

from clickchess.highlights import Highlights, highlights_for
from clickchess.pieces import Board, Color, Piece, PieceType, Position, in_bounds, initial_board
from clickchess.rules import is_checkmate

PromotionChooser = Callable[[Color], Optional[PieceType]]

_PROMOTION_CHOICES = (PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN)


def _always_queen(color: Color) -> Optional[PieceType]:
    return PieceType.QUEEN


class Game:
    """A two-player game driven by clicks on board squares.

    A click on one of the side-to-move's pieces selects it and highlights its
    targets; a click on a highlighted square moves the selected piece there.
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        choose_promotion: Optional[PromotionChooser] = None,
    ) -> None:
        self.board = initial_board() if board is None else board
        self.choose_promotion = choose_promotion or _always_queen
        self.turn = Color.WHITE
        self.pawn_two: Optional[int] = None
        self.selected: Optional[Position] = None
        self.highlights = Highlights()
        self._winner: Optional[Color] = None

    def winner(self) -> Optional[Color]:
        """Return the side that delivered checkmate, or None while play goes on."""
        return self._winner

    def cancel(self) -> None:
        """Drop the current selection and its highlights."""
        self.highlights.clear()
        self.selected = None

    def click(self, row: int, col: int) -> None:
        """Handle a click on the square (row, col)."""
        if self._winner is not None:
            raise RuntimeError("the game is over")
        if not in_bounds(row, col):
            return
        dst = (row, col)
        if self.selected is not None and self.highlights.is_target(dst):
            self._play(dst)
            if self._winner is not None:
                return
        piece = self.board[dst]
        if piece is not None and piece.color is self.turn:
            self.highlights = highlights_for(self.board, row, col, self.pawn_two)
            self.selected = dst

    def _play(self, dst: Position) -> None:
        src = self.selected
        assert src is not None
        row, col = dst
        src_row, src_col = src
        piece = self.board[src]
        moved = False
        promote_to: Optional[Color] = None

        if piece is not None and piece.type is PieceType.PAWN:
            if (
                src_col != col
                and src_row != row
                and self.board.is_empty(dst)
                and col == self.pawn_two
            ):
                for landing_row, victim_row in ((2, 3), (5, 4)):
                    if row == landing_row and (victim_row, col) in self.highlights.attacks:
                        self.board.move(src, dst)
                        self.board[(victim_row, col)] = None
                        moved = True
                        break
            if not moved and src_row != row:
                self.board.move(src, dst)
                if row == 0:
                    promote_to = Color.WHITE
                elif row == 7:
                    promote_to = Color.BLACK
                self.pawn_two = col if abs(src_row - row) == 2 else None
                moved = True
            else:
                self.pawn_two = None
        else:
            self.pawn_two = None
            self.board.move(src, dst)
            moved = True

        if moved:
            landed = self.board[dst]
            if landed is not None:
                self.board[dst] = replace(landed, moved=landed.moved + 1)
            self.cancel()
            self.turn = self.turn.opponent()

        if promote_to is not None:
            self.board[dst] = Piece(self._promotion_choice(promote_to), promote_to, 0)

        if moved and is_checkmate(self.board, self.turn, self.pawn_two):
            self._winner = self.turn.opponent()

    def _promotion_choice(self, color: Color) -> PieceType:
        choice = self.choose_promotion(color)
        if choice is None:
            return PieceType.QUEEN
        choice = PieceType(choice)
        if choice not in _PROMOTION_CHOICES:
            raise ValueError(f"a pawn cannot be promoted to {choice.name.lower()}")
        return choice