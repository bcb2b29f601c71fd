"""API configuration model.

This module contains the configuration model for the bconomy data
endpoint: the API key, the endpoint URL and the request timeout.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from bcncli.shared.constants import APIConfig


class APISettings(BaseModel):
    """bconomy API configuration.

    Security: api_key is masked in __repr__ to prevent accidental
    exposure in logs.
    """

    # API authentication (sensitive - hidden from repr)
    api_key: str = Field(
        default="",
        repr=False,
        description="bconomy API key sent as the x-api-key header",
    )

    url: str = Field(
        default=APIConfig.URL,
        description="Data endpoint URL",
    )

    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds (unset waits indefinitely)",
    )

    def __repr__(self) -> str:
        masked_key = "****" if self.api_key else "[empty]"
        return f"APISettings(api_key={masked_key}, url={self.url!r}, timeout={self.timeout})"


__all__ = ["APISettings"]
