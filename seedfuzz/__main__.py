#!/usr/bin/env python3
"""
SeedFuzz - Main Entry Point

This module provides the main entry point for running SeedFuzz via 'python -m seedfuzz'.
"""

import sys

from seedfuzz.cli import main

if __name__ == "__main__":
    sys.exit(main())
