"""
termfour.interfaces - User interfaces for termfour

This package contains the ANSI terminal adapters for the turn engine's
input and render ports, and the command-line interface.
"""

# Don't import anything here so `show` works without a terminal
__all__ = []
