"""Conversion between TocDocument and the host's ``{"chapters": [...]}`` shape."""

from __future__ import annotations

from typing import Any, Mapping

from toc_builder.ids import IdGenerator, default_id_generator
from toc_builder.model import TocDocument, TocNode


# Key holding the children of a node at each depth.
CHILD_KEYS: tuple[str, ...] = ("sections", "subsections", "subsubsections")

# Keys always emitted, even when empty, so three-tier documents keep the
# exact host shape. Deeper tiers appear only when present.
ALWAYS_EMITTED_CHILD_KEYS = frozenset({"sections", "subsections"})


def _node_to_dict(node: TocNode, depth: int) -> dict[str, Any]:
    data: dict[str, Any] = {"id": node.id, "title": node.title}
    if node.page_number is not None:
        data["pageNumber"] = node.page_number

    if depth < len(CHILD_KEYS):
        key = CHILD_KEYS[depth]
        if node.children or key in ALWAYS_EMITTED_CHILD_KEYS:
            data[key] = [_node_to_dict(child, depth + 1) for child in node.children]
    return data


def document_to_dict(doc: TocDocument) -> dict[str, Any]:
    """Serialize a TocDocument into the host interchange dictionary."""
    return {"chapters": [_node_to_dict(chapter, 0) for chapter in doc.children]}


def _node_from_dict(data: Mapping[str, Any], depth: int, generator: IdGenerator) -> TocNode:
    children_data: list[Mapping[str, Any]] = []
    if depth < len(CHILD_KEYS):
        children_data = list(data.get(CHILD_KEYS[depth]) or [])

    page_number = data.get("pageNumber")
    return TocNode(
        id=str(data.get("id") or generator.next()),
        title=str(data.get("title") or ""),
        children=tuple(_node_from_dict(child, depth + 1, generator) for child in children_data),
        page_number=None if page_number is None else str(page_number),
    )


def document_from_dict(
    data: Mapping[str, Any] | None,
    id_generator: IdGenerator | None = None,
) -> TocDocument:
    """Build a TocDocument from the host shape.

    ``None`` or a missing ``chapters`` key is the empty document. Nodes
    without an id receive one from ``id_generator``.
    """
    if not data:
        return TocDocument()

    generator = id_generator or default_id_generator()
    chapters = data.get("chapters") or []
    return TocDocument(children=tuple(_node_from_dict(chapter, 0, generator) for chapter in chapters))
