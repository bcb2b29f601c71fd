"""
bcncli - command-line client for the bconomy game API

Builds request payloads, POSTs them to the bconomy data endpoint and
prints the JSON responses, either raw or as tables.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
