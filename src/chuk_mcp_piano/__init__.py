"""
CHUK Piano - correctly spelled notes, intervals and scales, drawn on a keyboard.
"""

__version__ = "0.1.0"
