"""
Core grid types and error classes shared by the encoder and the solver backends.
"""
