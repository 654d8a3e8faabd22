"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    """Report that the program runs and exit successfully."""
    parser = argparse.ArgumentParser(prog="ucdmesh")
    parser.parse_args(argv)
    print("Funziona")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())