"""
Package entry point.

Allows running the application via:

    python -m fieldtrips

This simply forwards execution to fieldtrips.cli.main().
"""

from fieldtrips.cli import main

if __name__ == "__main__":
    main()
