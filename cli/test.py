"""Test runners for the transaction service suite."""

import sys

from cli._runner import run


def _pytest(*args: str) -> None:
    sys.exit(run(["uv", "run", "pytest", *args]))


def main() -> None:
    """Run the whole suite, forwarding extra arguments to pytest."""
    _pytest(*sys.argv[1:])


def test_v() -> None:
    """Run the whole suite verbosely."""
    _pytest("-v", *sys.argv[1:])


def test_unit() -> None:
    """Run the unit tests, skipping the ASGI-driven API tests."""
    _pytest("tests/unit", *sys.argv[1:])


def test_integration() -> None:
    """Run only the tests marked ``integration``."""
    _pytest("-m", "integration", *sys.argv[1:])
