#!/usr/bin/env python3
"""
Airport Roster

Main entry point for the flight registry and seat allocation engine.
"""

import sys
from pathlib import Path

# Ensure the package is in the path
sys.path.insert(0, str(Path(__file__).parent))

from api.cli.main import main

if __name__ == "__main__":
    main()
