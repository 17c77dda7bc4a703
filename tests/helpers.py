from ttt_core.board import Board, Mark


def board_from_rows(*rows: str) -> Board:
    """Build a board from rows such as "XO_"; "_" marks an empty cell."""
    board = Board()
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell != "_":
                board.place(r, c, Mark(cell))
    return board
