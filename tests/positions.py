"""Shared move sequences for the test suite."""

# Fills all 42 cells with no four-in-a-row. Even columns stack X,O,O,X,X,O
# from the bottom and odd columns O,X,X,O,O,X.
DRAW_MOVES = (
    [0, 0, 6, 0, 0, 1, 0, 0, 1, 6, 1, 6, 6, 1, 6, 1, 1, 6]
    + [2, 3, 3, 2, 3, 2, 2, 3, 2, 3, 3, 2]
    + [4, 5, 5, 4, 5, 4, 4, 5, 4, 5, 5, 4]
)
