"""
termfour - Terminal Connect Four

This package provides a Connect Four game for the terminal: a board model
with gravity placement, win detection, a turn engine driven by abstract
input commands, and ANSI terminal adapters for rendering and key input.
"""

# Version number
__version__ = '0.1.0'
