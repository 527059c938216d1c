"""Shared base for OpenF1 record models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Flat, immutable API record. Unknown fields in the payload are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")
