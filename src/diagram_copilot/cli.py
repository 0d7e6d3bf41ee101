"""CLI entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from diagram_copilot.errors import DiagramError
from diagram_copilot.input_adaptors import InputAdaptor, TextInput
from diagram_copilot.models.diagram_settings import DiagramSettings
from diagram_copilot.models.mermaid_diagram import MermaidDiagram
from diagram_copilot.orchestrator import Orchestrator
from diagram_copilot.settings_loader import load_settings


def format_diagram(diagram: MermaidDiagram, output_format: str) -> str:
    if output_format == "json":
        return diagram.model_dump_json(indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(diagram.model_dump(), allow_unicode=True, sort_keys=False).rstrip()
    return f"{diagram.code}\n{diagram.explanation}".rstrip()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Turn a process description into a Mermaid flowchart.")
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("--input", type=str, help="Path to a description file (.txt or .json)")
    input_group.add_argument("--input-text", type=str, help="Raw description text")
    parser.add_argument("--safe-dir", type=str, default=".", help="Directory file input is confined to")
    parser.add_argument("--settings", type=str, default=None, help="Path to a settings preset")
    parser.add_argument("--format", choices=["text", "json", "yaml"], default="text")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    settings = load_settings(Path(args.settings)) if args.settings else DiagramSettings()
    orch = Orchestrator(settings, Path(args.safe_dir))
    input_data: InputAdaptor | Path
    if args.input_text is not None:
        input_data = TextInput(args.input_text)
    else:
        input_data = Path(args.input)

    try:
        diagram = orch.run(input_data)
    except (DiagramError, FileNotFoundError, PermissionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    print(format_diagram(diagram, args.format))
