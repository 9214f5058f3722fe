#!/usr/bin/env python3
"""
run.py - Main entry point for termfour

Examples:

    # Play on the standard 7x6 board
    python run.py play

    # Play on a wider board without colors, logging to a file
    python run.py play --width 9 --no-color --debug_level debug --log_file termfour.log

    # Inspect a position (row 0 is the top row)
    python run.py show --position 0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,1,1,1,2,2,2
"""

import os
import sys

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from termfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
