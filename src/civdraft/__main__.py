"""
Run the civdraft CLI.

Usage:
    python -m civdraft replay events.json --preset simple
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
