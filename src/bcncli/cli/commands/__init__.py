"""Command groups of the bcncli application, one Typer sub-app per module."""
