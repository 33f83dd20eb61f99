"""
Package entry point.

Allows running the application via:

    python -m campuslife

This simply forwards execution to campuslife.cli.main().
"""

from campuslife.cli import main

if __name__ == "__main__":
    main()
