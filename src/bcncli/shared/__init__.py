"""bcncli Shared Module.

This package contains constants, error types, models and formatting
helpers used across bcncli.
"""

__all__ = ["constants", "errors", "formatting", "game_data", "models"]
