"""
End-to-end solve entrypoints and result structures.
"""
