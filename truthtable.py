#!/usr/bin/env python3
"""
truthtable.py - run the proplogic CLI from a source checkout.

    python truthtable.py -e "(A & B) | !C"
    python truthtable.py -t "001, 011, 101, 111"
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from proplogic.cli import main

if __name__ == "__main__":
    sys.exit(main())
