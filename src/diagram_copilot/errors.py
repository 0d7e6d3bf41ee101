"""Errors raised while turning a description into steps."""

from __future__ import annotations


class DiagramError(ValueError):
    """Base class for description parsing failures."""


class EmptyInputError(DiagramError):
    def __init__(self, position: int | None = None) -> None:
        self.position = position
        if position is None:
            message = "Process description is empty."
        else:
            message = f"Segment {position} of the process description is empty."
        super().__init__(message)


class MalformedDecisionError(DiagramError):
    def __init__(self, segment: str, position: int, reason: str) -> None:
        self.segment = segment
        self.position = position
        self.reason = reason
        super().__init__(f"Malformed decision at segment {position} ({segment!r}): {reason}")
