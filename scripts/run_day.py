#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Run a puzzle day
================
Entry script, runs the solution of the day given on the command line

Usage:
    python scripts/run_day.py 5
"""

import sys
from pathlib import Path

# put the project root on the Python path
PROJECT_ROOT = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(PROJECT_ROOT))

from src.main import main

if __name__ == '__main__':
    sys.exit(main())
