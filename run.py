#!/usr/bin/env python3
"""
run.py - Main entry point for two-player terminal Connect Four
"""

import sys

from connect4cli.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
