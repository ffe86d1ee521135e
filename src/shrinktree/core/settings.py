from __future__ import annotations

"""Default search and inspection budgets."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

FUEL_ENV = "SHRINKTREE_FUEL"
DEPTH_ENV = "SHRINKTREE_DEPTH"


class ShrinkSettings(BaseModel):
    """
    Budgets used when a caller does not pass its own.

    Negative values mean unbounded for both fields.
    """

    fuel: int = Field(default=-1, description="Children a search may inspect")
    depth: int = Field(default=3, description="Levels materialized by force() for display")

    @field_validator("fuel", "depth", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ShrinkSettings:
        """Read overrides from SHRINKTREE_FUEL / SHRINKTREE_DEPTH."""
        env = os.environ if environ is None else environ
        values = {}
        if env.get(FUEL_ENV):
            values["fuel"] = env[FUEL_ENV]
        if env.get(DEPTH_ENV):
            values["depth"] = env[DEPTH_ENV]
        return cls(**values)


__all__ = ["ShrinkSettings", "FUEL_ENV", "DEPTH_ENV"]
