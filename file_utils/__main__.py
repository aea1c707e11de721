#!/usr/bin/env python3
"""
Main entry point for file-utils when run as a module.

This allows the package to be executed with: python -m file_utils
"""

from .cli import main

if __name__ == '__main__':
    main()
