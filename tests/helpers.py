from connect_four.game.board import Board


def play(board: Board, columns):
    """Drop into each column in turn and return every DropResult."""
    return [board.drop_piece(col) for col in columns]


def _paired(a, b):
    # a is filled 1,2,1,2,... from the bottom, b the opposite
    return [a, b, b, a] * 3


# Fills a 6x7 board without any four-in-a-row; the last drop ties.
# Column types from left to right: A A B B A A B, where A holds
# seat 1 on rows 5, 3, 1 and B holds seat 2 there.
TIE_SEQUENCE = _paired(0, 2) + _paired(1, 3) + _paired(4, 6) + [5] * 6
