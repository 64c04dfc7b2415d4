"""Rendering a TocDocument as indented outline text."""

from __future__ import annotations

from toc_builder.grammar import SECTION_INDENT
from toc_builder.model import TocDocument, iter_numbered


def format_line(numbering: str, depth: int, title: str, indent_step: int = SECTION_INDENT) -> str:
    """Format one outline line.

    Chapters read ``Chapter 1. Title``; deeper tiers are indented by
    ``indent_step`` spaces per level and carry the dotted number.
    """
    if depth == 0:
        return f"Chapter {numbering}. {title}"
    return f"{' ' * (indent_step * depth)}{numbering} {title}"


def serialize(doc: TocDocument) -> str:
    """Serialize the document to the text form read back by ``parse_text``."""
    return "\n".join(
        format_line(numbering, depth, node.title) for numbering, depth, node in iter_numbered(doc)
    )
