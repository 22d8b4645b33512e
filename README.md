# clickchess

This is a chess board for two players who share one screen. Click a piece to see where it can go, then click a marked square to move it there. The window uses tkinter from the standard library and needs no other packages.

## Running

```
clickchess
```

The board opens full screen. The panel to the right of the board shows which side is to move.

Options:

- `--square-size N` sets the side of a board square to N pixels. By default a square is one eighth of the screen height.
- `--windowed` opens a normal window instead of a full-screen one.

Controls:

- **Left click** on one of your pieces to select it. Quiet moves are shown as black dots and captures as red rings.
- **Left click** on a marked square to make the move.
- **Right click** to drop the current selection.
- **Esc** closes the window.

Pawns may advance two squares on their first move, and they may capture en passant. When a pawn reaches the far rank, a dialog asks which piece it becomes: rook, knight, bishop or queen. If you close that dialog, the pawn becomes a queen. When a move leaves the other side checkmated, a message names the winner and the window closes.

## Using the rules from Python

The board logic works without a window:

```python
from clickchess.game import Game
from clickchess.pieces import initial_board

game = Game(initial_board(), choose_promotion=lambda color: None)
game.click(6, 4)   # select the white pawn in front of the king
game.click(4, 4)   # push it two squares
print(game.turn, game.winner())
```

Rows are numbered from 0 at Black's back rank to 7 at White's back rank. Columns are numbered 0 to 7 from left to right.

- `clickchess.pieces` has the following:
  - `PieceType`, `Color` (`WHITE = 1`, `BLACK = -1`, with `opponent()`) and the frozen `Piece` dataclass.
  - `Board`, indexed by `(row, col)`, with `move`, `copy`, `find_king` and `is_empty`.
  - `initial_board()` and `in_bounds(row, col)`.
- `clickchess.rules` has `is_attacked(board, row, col, turn)`, `has_escape(board, turn, pawn_two)` and `is_checkmate(board, turn, pawn_two)`.
- `clickchess.highlights.highlights_for(board, row, col, pawn_two)` returns a `Highlights` object for the selected piece. Its `moves` and `attacks` sets hold the squares the piece may move to and capture on.
- `clickchess.game.Game` keeps the board, the side to move (`turn`), the selection (`selected`, `highlights`) and the column of a pawn that has just advanced two squares (`pawn_two`). It also has the following:
  - `click(row, col)` handles a click on a square.
  - `cancel()` drops the selection.
  - `winner()` returns the side that delivered checkmate.
  - `choose_promotion` is called with the promoting side's colour. It may return a `PieceType` or `None`, and `None` means a queen.
- `clickchess.app` has the following:
  - `main`, which starts the `clickchess` command.
  - The `ChessApp` canvas widget.
  - `piece_glyph`, `status_text`, `winner_text` and `square_at`.

## What it does not do

- It has no castling.
- It does not detect stalemate or other draws.
- Moves other than the king's are not checked for leaving your own king in check.
- It has no computer opponent.
- It has no move history or undo.
- It cannot save or load games.

## Tests

```
pip install -e .[test]
pytest
```