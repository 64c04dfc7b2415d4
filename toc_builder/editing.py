"""Copy-on-write edits used by the interactive tree editor.

Every helper returns a new TocDocument. Only the edited node and its
ancestors are rebuilt; untouched siblings are shared with the input.
"""

from __future__ import annotations

from dataclasses import replace

from toc_builder.errors import NodeNotFoundError
from toc_builder.ids import IdGenerator, default_id_generator
from toc_builder.model import MAX_TEXT_DEPTH, TocDocument, TocNode, level_name


_UNSET = object()


def _find_path(children: tuple[TocNode, ...], node_id: str) -> tuple[int, ...] | None:
    for index, node in enumerate(children):
        if node.id == node_id:
            return (index,)
        child_path = _find_path(node.children, node_id)
        if child_path is not None:
            return (index,) + child_path
    return None


def _node_at(doc: TocDocument, path: tuple[int, ...]) -> TocNode:
    node = doc.children[path[0]]
    for index in path[1:]:
        node = node.children[index]
    return node


def _rebuild(
    children: tuple[TocNode, ...],
    path: tuple[int, ...],
    new_node: TocNode | None,
) -> tuple[TocNode, ...]:
    index, rest = path[0], path[1:]
    if not rest:
        if new_node is None:
            return children[:index] + children[index + 1 :]
        return children[:index] + (new_node,) + children[index + 1 :]

    parent = children[index]
    updated_parent = replace(parent, children=_rebuild(parent.children, rest, new_node))
    return children[:index] + (updated_parent,) + children[index + 1 :]


def _require_path(doc: TocDocument, node_id: str) -> tuple[int, ...]:
    path = _find_path(doc.children, node_id)
    if path is None:
        raise NodeNotFoundError(node_id)
    return path


def find_node(doc: TocDocument, node_id: str) -> TocNode | None:
    path = _find_path(doc.children, node_id)
    if path is None:
        return None
    return _node_at(doc, path)


def add_node(
    doc: TocDocument,
    parent_id: str | None = None,
    title: str = "",
    id_generator: IdGenerator | None = None,
    max_depth: int = MAX_TEXT_DEPTH,
) -> tuple[TocDocument, TocNode]:
    """Append a new node under ``parent_id`` (a chapter when it is None).

    Returns the new document and the node that was created.
    """
    generator = id_generator or default_id_generator()
    new_node = TocNode(id=generator.next(), title=title)

    if parent_id is None:
        return TocDocument(children=doc.children + (new_node,)), new_node

    path = _require_path(doc, parent_id)
    if len(path) >= max_depth:
        raise ValueError(
            f"Cannot add a child to {level_name(len(path) - 1)} {parent_id!r}: "
            f"outline is limited to {max_depth} levels"
        )

    parent = _node_at(doc, path)
    updated_parent = replace(parent, children=parent.children + (new_node,))
    return TocDocument(children=_rebuild(doc.children, path, updated_parent)), new_node


def update_node(
    doc: TocDocument,
    node_id: str,
    title: object = _UNSET,
    page_number: object = _UNSET,
) -> TocDocument:
    """Replace the title and/or page number of one node."""
    path = _require_path(doc, node_id)
    node = _node_at(doc, path)

    changes: dict[str, object] = {}
    if title is not _UNSET:
        changes["title"] = title
    if page_number is not _UNSET:
        changes["page_number"] = page_number
    if not changes:
        return doc

    return TocDocument(children=_rebuild(doc.children, path, replace(node, **changes)))


def remove_node(doc: TocDocument, node_id: str) -> TocDocument:
    """Remove a node together with its whole subtree."""
    path = _require_path(doc, node_id)
    return TocDocument(children=_rebuild(doc.children, path, None))
