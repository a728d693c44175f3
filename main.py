#!/usr/bin/env python3
"""Egg Timer — entry point.

Run with:
    python main.py
    python -m eggtimer
"""

from eggtimer.__main__ import main


if __name__ == "__main__":
    main()
