#!/usr/bin/env python3
"""Recursively count a keyword in the text files of a directory tree."""

from findword.cli import main


if __name__ == "__main__":
    main()
