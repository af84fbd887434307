"""
Solver module for the Sudoku encoding layer.

This module provides the solving-context contract, the PuLP and Z3
backends that implement it, and the decoder that turns a model back
into a grid.
"""
