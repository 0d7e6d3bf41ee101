"""Public package exports."""

from diagram_copilot.errors import DiagramError
from diagram_copilot.errors import EmptyInputError
from diagram_copilot.errors import MalformedDecisionError
from diagram_copilot.input_adaptors import FileInput
from diagram_copilot.input_adaptors import InputAdaptor
from diagram_copilot.input_adaptors import TextInput
from diagram_copilot.orchestrator import Orchestrator
from diagram_copilot.orchestrator import generate_diagram

__all__ = [
    "DiagramError",
    "EmptyInputError",
    "FileInput",
    "InputAdaptor",
    "MalformedDecisionError",
    "Orchestrator",
    "TextInput",
    "generate_diagram",
]
