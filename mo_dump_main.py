#!/usr/bin/env python3
"""
Entry point for the mo-dump CLI binary.
This module is used by PyInstaller to create the standalone executable.
"""

from modump.cli import main

if __name__ == "__main__":
    main()
