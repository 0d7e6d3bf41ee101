"""Input adaptors for the diagram pipeline."""

from __future__ import annotations

from pathlib import Path

from diagram_copilot.directory_permissions import DirectoryPermissions
from diagram_copilot.io_utils import load_description
from diagram_copilot.models.process_description import ProcessDescription


class InputAdaptor:
    def load(self) -> ProcessDescription:
        raise NotImplementedError("InputAdaptor.load must be implemented by subclasses.")


class FileInput(InputAdaptor):
    def __init__(self, path: Path, permissions: DirectoryPermissions) -> None:
        self._description = load_description(path, permissions)

    def load(self) -> ProcessDescription:
        return self._description


class TextInput(InputAdaptor):
    def __init__(self, text: str) -> None:
        self._text = text

    def load(self) -> ProcessDescription:
        return ProcessDescription(description=self._text)
