"""
Main entry point for explaining a position from the command line.

Usage:
    python -m imbalance_engine --fen "<FEN>" --style positional
"""

import sys

from imbalance_engine.cli import main

if __name__ == "__main__":
    sys.exit(main())
