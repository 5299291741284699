"""
mineboard - a Minesweeper board engine with text and Gymnasium front ends.
"""
__version__ = "0.1.0"
