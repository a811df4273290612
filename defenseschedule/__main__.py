"""
Package entry point.

Allows running the application via:

    python -m defenseschedule

This simply forwards execution to defenseschedule.cli.main().
"""

from defenseschedule.cli import main

if __name__ == "__main__":
    main()
