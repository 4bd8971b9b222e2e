"""Module entrypoint for running limace as ``python -m limace``."""

from __future__ import annotations

from limace.cli import main


if __name__ == "__main__":
    main()
