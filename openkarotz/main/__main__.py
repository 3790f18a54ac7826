"""
Main module entry point.

This allows running the command-line client as: python -m openkarotz.main
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
