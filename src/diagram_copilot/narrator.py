"""Numbered prose explanation of a step sequence."""

from __future__ import annotations

from typing import Sequence

from diagram_copilot.models.decision_step import DecisionStep
from diagram_copilot.models.diagram_settings import DiagramSettings
from diagram_copilot.models.plain_step import PlainStep
from diagram_copilot.models.step import Step

DEFAULT_SETTINGS = DiagramSettings()


def explain(steps: Sequence[Step], settings: DiagramSettings | None = None) -> str:
    settings = settings or DEFAULT_SETTINGS
    lines = [settings.explanation_header]
    lines.extend(describe_step(step, number) for number, step in enumerate(steps, start=1))
    return "\n".join(lines) + "\n"


def describe_step(step: Step, number: int) -> str:
    if isinstance(step, PlainStep):
        return f"Step {number}: {step.text}"
    if isinstance(step, DecisionStep):
        return f"Decision at Step {number}: {step.condition} with paths {', '.join(step.branches)}"
    raise TypeError(f"Unknown step type: {type(step).__name__}")
