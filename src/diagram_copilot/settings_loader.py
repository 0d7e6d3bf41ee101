"""Settings presets stored as Markdown with YAML frontmatter."""

from __future__ import annotations

import logging
from pathlib import Path

import frontmatter

from diagram_copilot.models.diagram_settings import DiagramSettings


logger = logging.getLogger(__name__)


def load_settings_frontmatter(preset: Path | str) -> tuple[frontmatter.Post, str]:
    if isinstance(preset, Path):
        return frontmatter.load(str(preset)), str(preset)
    preset_path = Path(preset)
    try:
        is_file = preset_path.is_file()
    except OSError:
        # Inline text longer than the platform's file name limit.
        is_file = False
    if is_file:
        return frontmatter.load(str(preset_path)), str(preset_path)
    return frontmatter.loads(preset), "<inline>"


def load_settings(preset: Path | str) -> DiagramSettings:
    """
    Builds settings from a preset's frontmatter.
    The Markdown body is free-form notes and is not interpreted.
    """
    post, source_label = load_settings_frontmatter(preset)
    if not post.metadata:
        logger.warning("No frontmatter in %s; using default settings", source_label)
    return DiagramSettings.model_validate(post.metadata)
