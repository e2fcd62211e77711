"""Entry point for running Todd as a module.

This allows the CLI to be executed using:
    python -m todd prepare-next
"""

from todd.cli.cli import app

if __name__ == "__main__":
    app()
