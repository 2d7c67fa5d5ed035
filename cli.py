#!/usr/bin/env python3
"""Command-line interface for prompt-generator."""

import sys


def main():
    """Console script entry point."""
    from main import main as run_main

    sys.exit(run_main())


if __name__ == "__main__":
    main()
