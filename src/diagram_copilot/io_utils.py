"""Input helpers."""

from __future__ import annotations

from pathlib import Path

from diagram_copilot.directory_permissions import DirectoryPermissions
from diagram_copilot.models.process_description import ProcessDescription


def load_description(path: Path, permissions: DirectoryPermissions) -> ProcessDescription:
    safe_path = permissions.resolve(path)
    if not safe_path.exists():
        raise FileNotFoundError(safe_path)

    raw = safe_path.read_text(encoding="utf-8")
    if safe_path.suffix.lower() == ".json":
        return ProcessDescription.model_validate_json(raw)
    return ProcessDescription(description=raw)
