"""
styleforge CLI package.

- main.py: Typer application and commands
- utils.py: Shared console, logging and config helpers
"""

from styleforge.cli.main import app, main

__all__ = ["app", "main"]
