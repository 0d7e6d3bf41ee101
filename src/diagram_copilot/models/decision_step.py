"""Pydantic model for a branch point."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DecisionStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["decision"] = "decision"
    condition: str
    branches: tuple[str, ...] = Field(min_length=1)
