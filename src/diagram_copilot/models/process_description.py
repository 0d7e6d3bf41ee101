"""Pydantic model for the pipeline input."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ProcessDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
