"""Pydantic model for parsing and rendering configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DiagramSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    direction: Literal["TD", "TB", "BT", "LR", "RL"] = "TD"
    step_delimiter: str = Field(default=" -> ", min_length=1)
    decision_marker: str = Field(default="If", min_length=1)
    condition_delimiter: str = Field(default=", ", min_length=1)
    branch_delimiter: str = Field(default=",", min_length=1)
    node_prefix: str = Field(default="N", min_length=1)
    node_width: int = Field(default=2, ge=1)
    start_label: str = "Start"
    explanation_header: str = "Explanation of the diagram:"
    line_terminator: str = ";"
