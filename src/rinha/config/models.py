"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rinha.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from rinha.infrastructure.repositories.people import SEARCH_LIMIT


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    url: str | None = None
    search_limit: int = Field(default=SEARCH_LIMIT, gt=0)

