"""Subprocess helper shared by the console scripts."""

import subprocess


def run(cmd: list[str]) -> int:
    """Run ``cmd`` and return its exit code."""
    return subprocess.run(cmd, check=False).returncode  # nosec
