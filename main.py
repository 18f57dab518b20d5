"""Command-line entrypoint.

Runs the batch from the current working directory (``Bets/`` -> ``Results/``)
without installing the console script.
"""

from check_matches.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
