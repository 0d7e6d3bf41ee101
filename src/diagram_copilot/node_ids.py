"""Positional node identifiers for emitted diagrams."""

from __future__ import annotations


def node_id(position: int, prefix: str = "N", width: int = 2) -> str:
    """
    Returns the identifier for a diagram position.
    Positions are zero-padded to `width` digits and grow past it instead of wrapping.
    """
    if position < 0:
        raise ValueError(f"Node position must be non-negative, got {position}.")
    return f"{prefix}{position:0{width}d}"


def branch_id(node: str, branch_index: int) -> str:
    return f"{node}_{branch_index + 1}"
