"""
Main entry point for the MedRefer CLI.

This module serves as the entry point when running the package as a module:
    python -m medrefer

or after installation:
    medrefer
"""

from .cli import main

if __name__ == "__main__":
    main()
