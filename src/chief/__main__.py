"""
Main entry point for Chief.

This module allows Chief to be run as:
    python -m chief
"""

from .cli import main

if __name__ == "__main__":
    main()
