"""
bcncli Constants Module

This module provides centralized constants for the bcncli application.
"""

from .api import APIConfig, CacheDefaults, HTTPStatusCodes, IdTypes, RequestTypes
from .cli import CLICommands, CLIDefaults, CLIHelp, CLIOptions, TableStyles
from .system import ConfigFiles, Logging

__all__ = [
    "APIConfig",
    "CLICommands",
    "CLIDefaults",
    "CLIHelp",
    "CLIOptions",
    "CacheDefaults",
    "ConfigFiles",
    "HTTPStatusCodes",
    "IdTypes",
    "Logging",
    "RequestTypes",
    "TableStyles",
]
