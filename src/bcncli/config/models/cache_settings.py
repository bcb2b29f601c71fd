"""Item catalog cache configuration model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from bcncli.shared.constants import CacheDefaults


class CacheSettings(BaseModel):
    """Item catalog cache configuration.

    Relative ``file_name`` values are resolved against ``base_dir``; when
    ``base_dir`` is unset the directory of the running executable (or the
    working directory) is used.
    """

    file_name: str = Field(
        default=CacheDefaults.FILE_NAME,
        description="Item catalog cache file",
    )
    freshness: int = Field(
        default=CacheDefaults.FRESHNESS_SECONDS,
        ge=0,
        description="Maximum cache age in seconds (0 always refetches)",
    )
    base_dir: Path | None = Field(
        default=None,
        description="Directory relative cache paths are resolved against",
    )


__all__ = ["CacheSettings"]
