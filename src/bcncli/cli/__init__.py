"""Command-line interface for bcncli."""

from .typer_app import app

__all__ = ["app"]
