#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Examples:
    python run.py play --p1-color green --p2-color yellow
    python run.py simulate --games 500 --seed 7
"""

import sys

from connect_four.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
