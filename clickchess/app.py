"""Full-screen window that shows the board and turns mouse clicks into moves."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from clickchess.game import Game
from clickchess.pieces import SIZE, Color, Piece, PieceType, Position

LIGHT = "#eeeed2"
DARK = "#769656"
SELECTED_OUTLINE = "#ffff00"
ATTACK_OUTLINE = "#ff0000"
MOVE_FILL = "#000000"

_GLYPHS = {
    (PieceType.PAWN, Color.BLACK): "\u265f",
    (PieceType.PAWN, Color.WHITE): "\u2659",
    (PieceType.ROOK, Color.BLACK): "\u265c",
    (PieceType.ROOK, Color.WHITE): "\u2656",
    (PieceType.KNIGHT, Color.BLACK): "\u265e",
    (PieceType.KNIGHT, Color.WHITE): "\u2658",
    (PieceType.BISHOP, Color.BLACK): "\u265d",
    (PieceType.BISHOP, Color.WHITE): "\u2657",
    (PieceType.QUEEN, Color.BLACK): "\u265b",
    (PieceType.QUEEN, Color.WHITE): "\u2655",
    (PieceType.KING, Color.BLACK): "\u265a",
    (PieceType.KING, Color.WHITE): "\u2654",
}

_PROMOTION_ORDER = (PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN)


def piece_glyph(piece: Optional[Piece]) -> str:
    """Return the chess symbol drawn for a piece, or an empty string for no piece."""
    if piece is None:
        return ""
    return _GLYPHS[(PieceType(piece.type), Color(piece.color))]


def status_text(turn: Color) -> str:
    """Return the banner naming the side to move."""
    return "Round:White" if Color(turn) is Color.WHITE else "Round:Black"


def winner_text(winner: Color) -> str:
    """Return the message shown when ``winner`` has delivered checkmate."""
    side = "White" if Color(winner) is Color.WHITE else "Black"
    return f"Checkmate!\n{side} win"


def square_at(x: int, y: int, square_size: int) -> Optional[Position]:
    """Return the (row, col) under pixel (x, y), or None when it is off the board."""
    if square_size <= 0:
        raise ValueError("square size must be positive")
    if x < 0 or y < 0:
        return None
    row, col = y // square_size, x // square_size
    if row >= SIZE or col >= SIZE:
        return None
    return row, col


class ChessApp:
    """Draws a Game on a canvas and feeds it the user's clicks.

    Left click selects or moves, right click drops the selection and Escape
    closes the window.
    """

    def __init__(self, root, square_size: Optional[int] = None) -> None:
        import tkinter as tk

        self.root = root
        if square_size is None:
            square_size = max(root.winfo_screenheight() // SIZE, 1)
        if square_size <= 0:
            raise ValueError("square size must be positive")
        self.square_size = square_size
        self.game = Game(choose_promotion=self._ask_promotion)
        self.canvas = tk.Canvas(
            root,
            width=13 * square_size,
            height=SIZE * square_size,
            highlightthickness=0,
        )
        self.canvas.pack(fill="both", expand=True)
        self.canvas.bind("<Button-1>", self._on_left_click)
        self.canvas.bind("<Button-3>", self._on_right_click)
        root.bind("<Escape>", lambda _event: root.destroy())
        self.redraw()

    def _on_left_click(self, event) -> None:
        if self.game.winner() is not None:
            return
        pos = square_at(event.x, event.y, self.square_size)
        if pos is not None:
            self.game.click(*pos)
        self.redraw()
        winner = self.game.winner()
        if winner is not None:
            from tkinter import messagebox

            messagebox.showinfo("Gameover", winner_text(winner), parent=self.root)
            self.root.destroy()

    def _on_right_click(self, _event) -> None:
        self.game.cancel()
        self.redraw()

    def _ask_promotion(self, color: Color) -> PieceType:
        import tkinter as tk

        self.redraw()
        dialog = tk.Toplevel(self.root)
        dialog.title("Promotion")
        dialog.transient(self.root)
        choice = {"piece": PieceType.QUEEN}

        def pick(kind: PieceType) -> None:
            choice["piece"] = kind
            dialog.destroy()

        for kind in _PROMOTION_ORDER:
            tk.Button(
                dialog,
                text=f"{piece_glyph(Piece(kind, color))} {kind.name.title()}",
                command=lambda k=kind: pick(k),
            ).pack(fill="x", padx=8, pady=2)
        dialog.protocol("WM_DELETE_WINDOW", dialog.destroy)
        dialog.bind("<Escape>", lambda _event: dialog.destroy())
        dialog.grab_set()
        self.root.wait_window(dialog)
        return choice["piece"]

    def redraw(self) -> None:
        """Repaint the whole board, highlights and captions."""
        size = self.square_size
        canvas = self.canvas
        canvas.delete("all")

        canvas.create_text(
            10.5 * size,
            0.5 * size,
            text=status_text(self.game.turn),
            font=("TkDefaultFont", -max(size // 2, 1)),
        )
        canvas.create_text(
            12 * size,
            8 * size,
            text="Press ESC to close",
            anchor="s",
            font=("TkDefaultFont", -max(size // 5, 1)),
        )

        piece_font = ("TkDefaultFont", -max(int(size * 0.8), 1))
        for row in range(SIZE):
            for col in range(SIZE):
                left, top = col * size, row * size
                fill = LIGHT if (row + col) % 2 == 0 else DARK
                piece = self.game.board[(row, col)]
                if self.game.selected == (row, col) and piece is not None:
                    canvas.create_rectangle(
                        left + 1, top + 1, left + size - 1, top + size - 1,
                        fill=fill, outline=SELECTED_OUTLINE, width=3,
                    )
                else:
                    canvas.create_rectangle(
                        left, top, left + size, top + size, fill=fill, outline=fill
                    )
                glyph = piece_glyph(piece)
                if glyph:
                    canvas.create_text(
                        left + size / 2, top + size / 2, text=glyph, font=piece_font
                    )

        marks = self.game.highlights
        for row, col in marks.moves:
            cx, cy = col * size + size / 2, row * size + size / 2
            canvas.create_oval(cx - 10, cy - 10, cx + 10, cy + 10, fill=MOVE_FILL, outline=MOVE_FILL)
        radius = size / 2 - 1
        for row, col in marks.attacks:
            cx, cy = col * size + size / 2, row * size + size / 2
            canvas.create_oval(
                cx - radius, cy - radius, cx + radius, cy + radius,
                outline=ATTACK_OUTLINE, width=3,
            )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the chess window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="clickchess", description="Two-player chess on one screen.")
    parser.add_argument(
        "--square-size",
        type=int,
        default=None,
        help="side of a board square in pixels (default: screen height / 8)",
    )
    parser.add_argument("--windowed", action="store_true", help="do not take the whole screen")
    args = parser.parse_args(argv)
    if args.square_size is not None and args.square_size <= 0:
        parser.error("--square-size must be positive")

    import tkinter as tk

    root = tk.Tk()
    root.title("Chess")
    if not args.windowed:
        root.attributes("-fullscreen", True)
    ChessApp(root, args.square_size)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())