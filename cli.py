#!/usr/bin/env python3
"""CLI entry point for the mock location hiding hooks.

This is the command-line interface for the attach report.
For library usage, import from the `hidemock` module directly.

Usage:
    python cli.py <package|apk_path> [options]
    
Examples:
    python cli.py com.example.ridehailing
    python cli.py app.apk --sdk 31 --simulate --verbose
"""
import sys
import os

# Ensure mock_hider is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from hidemock import main


if __name__ == "__main__":
    main()
