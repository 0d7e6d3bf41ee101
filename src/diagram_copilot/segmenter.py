"""Split a process description into ordered steps."""

from __future__ import annotations

import logging

from diagram_copilot.errors import EmptyInputError, MalformedDecisionError
from diagram_copilot.models.decision_step import DecisionStep
from diagram_copilot.models.diagram_settings import DiagramSettings
from diagram_copilot.models.plain_step import PlainStep
from diagram_copilot.models.step import Step


logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = DiagramSettings()


def segment(description: str, settings: DiagramSettings | None = None) -> tuple[Step, ...]:
    """
    Splits a description on the step delimiter and classifies each segment.
    Raises before returning anything if any segment is blank or a decision is malformed.
    """
    settings = settings or DEFAULT_SETTINGS
    if not description.strip():
        raise EmptyInputError()

    # Only line breaks are trimmed; a delimiter at either edge leaves a blank segment.
    text = description.strip("\r\n")
    steps: list[Step] = []
    for position, raw in enumerate(text.split(settings.step_delimiter), start=1):
        if not raw.strip():
            raise EmptyInputError(position)
        if settings.decision_marker in raw:
            steps.append(parse_decision(raw, position, settings))
        else:
            steps.append(PlainStep(text=raw))

    logger.debug("Segmented description into %d steps", len(steps))
    return tuple(steps)


def parse_decision(raw: str, position: int, settings: DiagramSettings) -> DecisionStep:
    if settings.condition_delimiter not in raw:
        raise MalformedDecisionError(raw, position, f"missing {settings.condition_delimiter!r} before paths")
    condition, paths = raw.split(settings.condition_delimiter, 1)
    if not condition.strip():
        raise MalformedDecisionError(raw, position, "blank condition")
    branches = tuple(label.strip() for label in paths.split(settings.branch_delimiter))
    if not any(branches):
        raise MalformedDecisionError(raw, position, "no paths given")
    if not all(branches):
        raise MalformedDecisionError(raw, position, "blank path label")
    logger.debug("Segment %d is a decision with %d paths", position, len(branches))
    return DecisionStep(condition=condition, branches=branches)
