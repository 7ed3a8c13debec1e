"""Shared base for API records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class VkObject(BaseModel):
    """Immutable record; fields the API adds later are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
