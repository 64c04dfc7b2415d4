"""Outline text parsing.

One forward pass turns outline text into a TocDocument. The same algorithm
serves both the indented text editor (lenient: lines that cannot be placed
are dropped) and template import (strict: every such line is reported with
its 1-based line number).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Any

from toc_builder.grammar import TEXT_GRAMMAR, LineMatch, OutlineGrammar, match_rule, measure_indent
from toc_builder.ids import IdGenerator, default_id_generator
from toc_builder.interchange import document_to_dict
from toc_builder.model import TocDocument, TocNode, level_name


LOGGER = logging.getLogger(__name__)


class Strictness(str, Enum):
    LENIENT = "lenient"
    STRICT = "strict"


@dataclass(frozen=True)
class ParseError:
    line: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "message": self.message}


@dataclass
class ParseResult:
    success: bool
    data: TocDocument | None = None
    errors: list[ParseError] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        if self.success and self.data is not None:
            return {"success": True, "data": document_to_dict(self.data)}
        return {"success": False, "errors": [error.to_dict() for error in self.errors]}


@dataclass
class _DraftNode:
    id: str
    title: str
    children: list["_DraftNode"] = field(default_factory=list)

    def freeze(self) -> TocNode:
        return TocNode(
            id=self.id,
            title=self.title,
            children=tuple(child.freeze() for child in self.children),
        )


def _classify(
    grammar: OutlineGrammar,
    content: str,
    indent: int,
    open_depth: int,
    strict: bool,
) -> tuple[LineMatch | None, LineMatch | None]:
    """Return ``(placed, orphan)``.

    ``placed`` is a match whose parent tier is open. ``orphan`` is the first
    match that had the right shape but nothing to attach to.
    """
    orphan: LineMatch | None = None
    for rule in grammar.rules:
        if not rule.accepts_indent(indent):
            continue
        found = match_rule(rule, content)
        if found is None:
            continue
        if found.depth <= open_depth:
            return found, None
        if orphan is None:
            orphan = found
        if strict:
            break
    return None, orphan


def _orphan_message(found: LineMatch) -> str:
    numbering = ".".join(found.numbering)
    return (
        f"{level_name(found.depth).capitalize()} {numbering} "
        f"has no enclosing {level_name(found.depth - 1)}"
    )


def parse_outline(
    text: str,
    grammar: OutlineGrammar,
    strictness: Strictness = Strictness.LENIENT,
    id_generator: IdGenerator | None = None,
) -> ParseResult:
    """Parse outline text with ``grammar``.

    In strict mode, after an error on a line of depth ``d`` the lines that
    would have nested under it are skipped without further errors until a
    line of depth ``d`` or shallower is placed.
    """
    generator = id_generator or default_id_generator()
    strict = strictness is Strictness.STRICT

    chapters: list[_DraftNode] = []
    open_nodes: list[_DraftNode] = []
    errors: list[ParseError] = []
    suppressed_below: int | None = None

    def fail(line_number: int, message: str, depth: int | None) -> None:
        nonlocal suppressed_below
        errors.append(ParseError(line=line_number, message=message))
        if depth is not None:
            del open_nodes[depth:]
            suppressed_below = depth

    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.rstrip()
        if not line.strip():
            continue

        indent = measure_indent(line)
        content = line.strip()
        placed, orphan = _classify(grammar, content, indent, len(open_nodes), strict)

        if placed is not None:
            suppressed_below = None
            node = _DraftNode(id=generator.next(), title=placed.title)
            if placed.depth == 0:
                chapters.append(node)
            else:
                open_nodes[placed.depth - 1].children.append(node)
            del open_nodes[placed.depth :]
            open_nodes.append(node)
            continue

        if not strict:
            LOGGER.debug("Dropping outline line %d: %r", line_number, content)
            continue

        if orphan is not None:
            if suppressed_below is not None and orphan.depth > suppressed_below:
                continue
            fail(line_number, _orphan_message(orphan), orphan.depth)
            continue

        rejection = next((rule for rule in grammar.rejections if rule.pattern.match(content)), None)
        if rejection is not None:
            if suppressed_below is not None and rejection.depth > suppressed_below:
                continue
            fail(line_number, f"{rejection.message}: {content!r}", rejection.depth)
            continue

        fail(line_number, f"Unrecognized line format: {content!r}", None)

    if strict and not errors and not chapters:
        errors.append(ParseError(line=0, message="No chapters found"))

    if errors:
        LOGGER.info("Outline parse (%s) failed with %d error(s)", grammar.name, len(errors))
        return ParseResult(success=False, errors=errors)

    document = TocDocument(children=tuple(chapter.freeze() for chapter in chapters))
    return ParseResult(success=True, data=document)


def parse_text(text: str, id_generator: IdGenerator | None = None) -> TocDocument:
    """Parse the indented text form; lines that cannot be placed are dropped."""
    result = parse_outline(text, TEXT_GRAMMAR, Strictness.LENIENT, id_generator=id_generator)
    return result.data or TocDocument()
