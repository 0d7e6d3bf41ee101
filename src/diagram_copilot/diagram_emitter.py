"""Mermaid flowchart rendering."""

from __future__ import annotations

from typing import Sequence

from diagram_copilot.models.decision_step import DecisionStep
from diagram_copilot.models.diagram_settings import DiagramSettings
from diagram_copilot.models.plain_step import PlainStep
from diagram_copilot.models.step import Step
from diagram_copilot.node_ids import branch_id, node_id

DEFAULT_SETTINGS = DiagramSettings()


def emit(steps: Sequence[Step], settings: DiagramSettings | None = None) -> str:
    """
    Renders steps as Mermaid flowchart source.

    Position 0 is the start node; the step at index i owns position i + 1.
    Each step attaches to the node of the step before it, including after a
    decision, whose branches end at their own leaf nodes.
    """
    settings = settings or DEFAULT_SETTINGS
    end = settings.line_terminator
    start = _node(0, settings)

    lines: list[str] = [f"graph {settings.direction}{end}", f"{start}(({settings.start_label})){end}"]
    previous = start
    for index, step in enumerate(steps):
        edges, previous = render_step(step, previous, _node(index + 1, settings))
        lines.extend(f"{edge}{end}" for edge in edges)

    return "\n".join(lines) + "\n"


def render_step(step: Step, previous: str, current: str) -> tuple[list[str], str]:
    """Returns the edges for one step and the node the next step attaches to."""
    if isinstance(step, PlainStep):
        # Labels are embedded verbatim; Mermaid metacharacters are not escaped.
        return [f"{previous} --> {current}[{step.text}]"], current
    if isinstance(step, DecisionStep):
        edges = [
            f"{previous} -->|{label}| {branch_id(current, index)}"
            for index, label in enumerate(step.branches)
        ]
        return edges, current
    raise TypeError(f"Unknown step type: {type(step).__name__}")


def _node(position: int, settings: DiagramSettings) -> str:
    return node_id(position, settings.node_prefix, settings.node_width)
