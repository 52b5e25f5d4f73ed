"""Export the Transaction Log API OpenAPI document."""

import sys

from cli._runner import run


def main() -> None:
    """Write the OpenAPI document, forwarding arguments to the export script."""
    sys.exit(run(["uv", "run", "python", "scripts/generate_openapi.py", *sys.argv[1:]]))
