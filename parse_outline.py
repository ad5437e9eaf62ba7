#!/usr/bin/env python3
"""
PDF Outline - Simple Interface

Builds the outline tree of a PDF from its bookmarks and saves it as JSON.

Usage:
    python parse_outline.py data/manual.pdf -o data/outline.json --level 1

Configuration:
    Defaults for --level and --inter-level-text come from the
    PDF_OUTLINE_* environment variables (see .env)
"""
import sys

from pdf_outline.cli import main

if __name__ == "__main__":
    sys.exit(main())
