"""
Constraint construction: cell indexing, one-hot linear rows, and the
Sudoku rule and clue encoders.
"""
