"""Services module for bcncli.

This module contains the API client and the item catalog cache.
"""

from .client import BconomyClient
from .item_catalog import ItemCatalogLoader
from .request_descriptor import RequestDescriptor

__all__ = [
    "BconomyClient",
    "ItemCatalogLoader",
    "RequestDescriptor",
]
