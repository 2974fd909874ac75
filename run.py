#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

Examples:
    python run.py play --mode ai --depth 4
    python run.py analyze --moves 3,3,4,4,2
    python run.py --debug benchmark --iterations 50
"""

import sys

from c4engine.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
