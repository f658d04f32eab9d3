#!/usr/bin/env python3
"""
Descriptive Statistics — Command-line Report
============================================
Thin entry-point. All logic lives in src.stats.

Usage:
  python3 compute_stats.py samples.txt
  python3 compute_stats.py -s median -s l2 samples.txt
  printf '1 2 3 4' | python3 compute_stats.py --json
"""

from src.stats.cli import main

if __name__ == "__main__":
    main()
