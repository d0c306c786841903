"""
GRAL: a library for statistical charts rendered with Qt.
"""
__version__ = "0.1.0"
