"""Table of contents data model and structural helpers."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator


LEVEL_NAMES: tuple[str, ...] = ("chapter", "section", "subsection", "subsubsection")

# Tiers edited in the text editor vs. tiers accepted from templates.
MAX_TEXT_DEPTH = 3
MAX_TEMPLATE_DEPTH = 4


@dataclass(frozen=True)
class TocNode:
    id: str
    title: str
    children: tuple["TocNode", ...] = ()
    page_number: str | None = None

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0


@dataclass(frozen=True)
class TocDocument:
    children: tuple[TocNode, ...] = field(default_factory=tuple)

    @property
    def chapters(self) -> tuple[TocNode, ...]:
        return self.children


def level_name(depth: int) -> str:
    """Return the tier name for a 0-based depth, e.g. 1 -> ``section``."""
    if 0 <= depth < len(LEVEL_NAMES):
        return LEVEL_NAMES[depth]
    return f"level-{depth + 1}"


def numbering_for(path: tuple[int, ...]) -> str:
    """Display number for a path of 0-based positions, e.g. (0, 2) -> ``1.3``."""
    return ".".join(str(index + 1) for index in path)


def iter_numbered(doc: TocDocument) -> Iterator[tuple[str, int, TocNode]]:
    """Yield ``(numbering, depth, node)`` in depth-first document order."""
    stack: list[tuple[tuple[int, ...], TocNode]] = [
        ((index,), node) for index, node in reversed(list(enumerate(doc.children)))
    ]
    while stack:
        path, node = stack.pop()
        yield numbering_for(path), len(path) - 1, node
        stack.extend(
            (path + (index,), child) for index, child in reversed(list(enumerate(node.children)))
        )


def traverse_all_nodes(doc: TocDocument) -> list[TocNode]:
    """Return all nodes in pre-order."""
    return [node for _, _, node in iter_numbered(doc)]


def document_depth(doc: TocDocument) -> int:
    """Number of tiers actually used; 0 for an empty document."""
    return max((depth + 1 for _, depth, _ in iter_numbered(doc)), default=0)


def find_duplicate_ids(doc: TocDocument) -> list[str]:
    counts = Counter(node.id for node in traverse_all_nodes(doc))
    return sorted(node_id for node_id, count in counts.items() if count > 1)


def has_content(doc: TocDocument | None) -> bool:
    return doc is not None and len(doc.children) > 0


def toc_summary(doc: TocDocument) -> dict[str, int]:
    """Count nodes per tier, keyed by plural tier name."""
    summary = {f"{name}s": 0 for name in LEVEL_NAMES}
    for _, depth, _ in iter_numbered(doc):
        key = f"{level_name(depth)}s"
        summary[key] = summary.get(key, 0) + 1
    return summary
