"""Pipeline entry points."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from diagram_copilot.diagram_emitter import emit
from diagram_copilot.directory_permissions import DirectoryPermissions
from diagram_copilot.input_adaptors import FileInput, InputAdaptor
from diagram_copilot.models.diagram_settings import DiagramSettings
from diagram_copilot.models.mermaid_diagram import MermaidDiagram
from diagram_copilot.models.process_description import ProcessDescription
from diagram_copilot.narrator import explain
from diagram_copilot.segmenter import segment


logger = logging.getLogger(__name__)


def generate_diagram(
    description: ProcessDescription | str,
    settings: DiagramSettings | None = None,
) -> MermaidDiagram:
    """
    Segments the description once and renders the diagram and its explanation
    from the same steps, so the two never disagree.
    """
    if isinstance(description, ProcessDescription):
        text = description.description
    else:
        text = description
    steps = segment(text, settings)
    code = emit(steps, settings)
    explanation = explain(steps, settings)
    logger.debug("Generated diagram with %d steps", len(steps))
    return MermaidDiagram(code=code, explanation=explanation)


class Orchestrator:
    def __init__(
        self,
        settings: DiagramSettings | None = None,
        safe_dir: Optional[Path] = None,
    ) -> None:
        self.settings: DiagramSettings = settings or DiagramSettings()
        self.directory_permissions: DirectoryPermissions = DirectoryPermissions(safe_dir)

    def load(self, input_data: InputAdaptor | Path) -> ProcessDescription:
        if isinstance(input_data, InputAdaptor):
            return input_data.load()
        return FileInput(input_data, self.directory_permissions).load()

    def run(self, input_data: InputAdaptor | Path) -> MermaidDiagram:
        return generate_diagram(self.load(input_data), self.settings)
