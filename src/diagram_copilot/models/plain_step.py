"""Pydantic model for a sequential action."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class PlainStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["plain"] = "plain"
    text: str
