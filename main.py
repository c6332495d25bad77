"""CLI entrypoint for the nonogram line engine."""

from __future__ import annotations

from picross.cli import main


if __name__ == "__main__":  # pragma: no cover
    main()
