"""Shared base model definitions for vidkit value objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class VidkitBaseModel(BaseModel):
    """Immutable base model; every vidkit value object is a read-only snapshot."""

    model_config = ConfigDict(extra="forbid", frozen=True)


__all__ = ["VidkitBaseModel"]
