"""Ruff wrappers covering every source tree of the project."""

import sys

from cli._runner import run

SOURCES = ["txn_service", "cli", "scripts", "tests"]


def main() -> None:
    """Check the sources with ruff."""
    sys.exit(run(["uv", "run", "ruff", "check", *SOURCES, *sys.argv[1:]]))


def format() -> None:
    """Format the sources in place with ruff."""
    sys.exit(run(["uv", "run", "ruff", "format", *SOURCES, *sys.argv[1:]]))
