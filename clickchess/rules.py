"""Attack detection and checkmate rules."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from clickchess.pieces import Board, Color, Piece, PieceType, Position, SIZE, in_bounds

_ORTHOGONAL = ((-1, 0), (0, 1), (1, 0), (0, -1))
_DIAGONAL = ((-1, 1), (1, 1), (1, -1), (-1, -1))
_ALL_DIRECTIONS = _ORTHOGONAL + _DIAGONAL
_KNIGHT_JUMPS = ((-2, 1), (-2, -1), (-1, 2), (1, 2), (2, 1), (2, -1), (1, -2), (-1, -2))

_SLIDERS = {
    PieceType.ROOK: _ORTHOGONAL,
    PieceType.BISHOP: _DIAGONAL,
    PieceType.QUEEN: _ALL_DIRECTIONS,
}
_STEPPERS = {
    PieceType.KNIGHT: _KNIGHT_JUMPS,
    PieceType.KING: _ALL_DIRECTIONS,
}

Move = Tuple[Position, Position, Optional[Position]]


def _is_enemy(piece: Optional[Piece], turn: Color) -> bool:
    return piece is not None and piece.color is not turn


def _ray(row: int, col: int, dr: int, dc: int) -> Iterator[Position]:
    r, c = row + dr, col + dc
    while in_bounds(r, c):
        yield r, c
        r, c = r + dr, c + dc


def is_attacked(board: Board, row: int, col: int, turn: Color) -> bool:
    """Tell whether a piece not of colour ``turn`` attacks (row, col)."""
    turn = Color(turn)

    def enemy_of_kind(pos: Position, kinds: Tuple[PieceType, ...]) -> bool:
        piece = board[pos]
        return _is_enemy(piece, turn) and piece.type in kinds

    for dr, dc in _KNIGHT_JUMPS:
        pos = (row + dr, col + dc)
        if in_bounds(*pos) and enemy_of_kind(pos, (PieceType.KNIGHT,)):
            return True

    for directions, kinds in (
        (_ORTHOGONAL, (PieceType.ROOK, PieceType.QUEEN)),
        (_DIAGONAL, (PieceType.BISHOP, PieceType.QUEEN)),
    ):
        for dr, dc in directions:
            blocker = next(
                (pos for pos in _ray(row, col, dr, dc) if board[pos] is not None), None
            )
            if blocker is not None and enemy_of_kind(blocker, kinds):
                return True

    pawn_row = row + (1 if turn is Color.WHITE else -1)
    if 0 <= pawn_row < SIZE:
        for pawn_col in (col - 1, col + 1):
            if 0 <= pawn_col < SIZE and enemy_of_kind((pawn_row, pawn_col), (PieceType.PAWN,)):
                return True

    for dr, dc in _ALL_DIRECTIONS:
        pos = (row + dr, col + dc)
        if in_bounds(*pos) and enemy_of_kind(pos, (PieceType.KING,)):
            return True

    return False


def _pawn_moves(
    board: Board, row: int, col: int, piece: Piece, turn: Color, pawn_two: Optional[int]
) -> Iterator[Move]:
    step = -1 if turn is Color.WHITE else 1
    src = (row, col)
    forward = row + step
    if 0 <= forward < SIZE:
        if board.is_empty((forward, col)):
            yield src, (forward, col), None
            two = row + 2 * step
            if piece.moved == 0 and 0 <= two < SIZE and board.is_empty((two, col)):
                yield src, (two, col), None
        for target_col in (col - 1, col + 1):
            if 0 <= target_col < SIZE and _is_enemy(board[(forward, target_col)], turn):
                yield src, (forward, target_col), None

    en_passant_row = 3 if turn is Color.WHITE else 4
    if row != en_passant_row or pawn_two is None:
        return
    for target_col in (col - 1, col + 1):
        if not (0 <= target_col < SIZE) or target_col != pawn_two:
            continue
        victim = board[(row, target_col)]
        landing = (row + step, target_col)
        if (
            victim is not None
            and victim.type is PieceType.PAWN
            and victim.color is turn.opponent()
            and board.is_empty(landing)
        ):
            yield src, landing, (row, target_col)


def _piece_moves(
    board: Board, row: int, col: int, piece: Piece, turn: Color, pawn_two: Optional[int]
) -> Iterator[Move]:
    src = (row, col)
    if piece.type is PieceType.PAWN:
        yield from _pawn_moves(board, row, col, piece, turn, pawn_two)
    elif piece.type in _SLIDERS:
        for dr, dc in _SLIDERS[piece.type]:
            for dst in _ray(row, col, dr, dc):
                target = board[dst]
                if target is None:
                    yield src, dst, None
                    continue
                if target.color is not turn:
                    yield src, dst, None
                break
    else:
        for dr, dc in _STEPPERS[piece.type]:
            dst = (row + dr, col + dc)
            if in_bounds(*dst) and (board[dst] is None or board[dst].color is not turn):
                yield src, dst, None


def _survives(board: Board, move: Move, turn: Color) -> bool:
    src, dst, captured_en_passant = move
    trial = board.copy()
    trial.move(src, dst)
    if captured_en_passant is not None:
        trial[captured_en_passant] = None
    king = trial.find_king(turn)
    return king is not None and not is_attacked(trial, king[0], king[1], turn)


def has_escape(board: Board, turn: Color, pawn_two: Optional[int]) -> bool:
    """Tell whether side ``turn`` has any move that leaves its king unattacked.

    ``pawn_two`` is the column of a pawn that has just advanced two squares,
    or -1 / None when there is none; it enables en passant captures.
    """
    turn = Color(turn)
    return any(
        _survives(board, move, turn)
        for row in range(SIZE)
        for col in range(SIZE)
        if (piece := board[(row, col)]) is not None and piece.color is turn
        for move in _piece_moves(board, row, col, piece, turn, pawn_two)
    )


def is_checkmate(board: Board, turn: Color, pawn_two: Optional[int]) -> bool:
    """Tell whether the king of side ``turn`` is attacked and cannot escape."""
    turn = Color(turn)
    king = board.find_king(turn)
    if king is None:
        return False
    if not is_attacked(board, king[0], king[1], turn):
        return False
    return not has_escape(board, turn, pawn_two)