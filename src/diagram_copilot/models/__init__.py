"""Model types for steps, inputs, outputs and settings."""

from diagram_copilot.models.decision_step import DecisionStep
from diagram_copilot.models.diagram_settings import DiagramSettings
from diagram_copilot.models.mermaid_diagram import MermaidDiagram
from diagram_copilot.models.plain_step import PlainStep
from diagram_copilot.models.process_description import ProcessDescription
from diagram_copilot.models.step import Step

__all__ = [
    "DecisionStep",
    "DiagramSettings",
    "MermaidDiagram",
    "PlainStep",
    "ProcessDescription",
    "Step",
]
