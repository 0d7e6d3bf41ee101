"""Pydantic model for the paired pipeline output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MermaidDiagram(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str  # Mermaid flowchart source
    explanation: str
