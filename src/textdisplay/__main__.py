"""
Run with: python -m textdisplay
"""
import sys

from textdisplay.main import main

if __name__ == "__main__":
    sys.exit(main())
