"""
Entry point for running the package as a module.

Usage: python -m movefile [arguments]
"""

from .cli import main

if __name__ == "__main__":
    main()
