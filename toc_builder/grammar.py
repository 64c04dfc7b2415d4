"""Line grammars for outline text.

A grammar is a list of rules tried in order. Each rule recognizes one tier
by its numbering pattern and, for the indented text form, by how far the
line is indented.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from toc_builder.model import MAX_TEMPLATE_DEPTH, MAX_TEXT_DEPTH


@dataclass(frozen=True, slots=True)
class LevelRule:
    depth: int
    pattern: re.Pattern[str]
    min_indent: int = 0
    # Exclusive upper bound; None means any indentation.
    max_indent: int | None = None

    def accepts_indent(self, indent: int) -> bool:
        if indent < self.min_indent:
            return False
        return self.max_indent is None or indent < self.max_indent


@dataclass(frozen=True, slots=True)
class RejectRule:
    """A line shape that is recognized only to be refused with a reason."""

    depth: int
    pattern: re.Pattern[str]
    message: str


@dataclass(frozen=True, slots=True)
class OutlineGrammar:
    name: str
    rules: tuple[LevelRule, ...]
    max_depth: int
    rejections: tuple[RejectRule, ...] = ()


@dataclass(frozen=True, slots=True)
class LineMatch:
    depth: int
    numbering: tuple[str, ...]
    title: str


def match_rule(rule: LevelRule, content: str) -> LineMatch | None:
    match = rule.pattern.match(content)
    if match is None:
        return None
    groups = match.groups()
    return LineMatch(depth=rule.depth, numbering=tuple(groups[:-1]), title=groups[-1].strip())


def measure_indent(line: str) -> int:
    return len(line) - len(line.lstrip())


TEXT_CHAPTER_RE = re.compile(r"^(?:Chapter\s+)?(\d+)\.\s*(.+)$", re.IGNORECASE)
TEXT_SECTION_RE = re.compile(r"^(\d+)\.(\d+)\s+(.+)$")
TEXT_SUBSECTION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)\s+(.+)$")

SECTION_INDENT = 2
SUBSECTION_INDENT = 4

TEXT_GRAMMAR = OutlineGrammar(
    name="text",
    rules=(
        LevelRule(depth=2, pattern=TEXT_SUBSECTION_RE, min_indent=SUBSECTION_INDENT),
        LevelRule(depth=1, pattern=TEXT_SECTION_RE, min_indent=SECTION_INDENT, max_indent=SUBSECTION_INDENT),
        LevelRule(depth=0, pattern=TEXT_CHAPTER_RE, min_indent=0, max_indent=1),
    ),
    max_depth=MAX_TEXT_DEPTH,
)


TEMPLATE_CHAPTER_RE = re.compile(r"^Chapter\s+no\.\s*(\d+)(?:\s*[.:\-])?\s+(.+)$", re.IGNORECASE)
TEMPLATE_SECTION_RE = re.compile(r"^(\d+)\.(\d+)\.?\s+(.+)$")
TEMPLATE_SUBSECTION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)\.?\s+(.+)$")
TEMPLATE_SUBSUBSECTION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)\.(\d+)\.?\s+(.+)$")

UNTITLED_CHAPTER_RE = re.compile(r"^Chapter\s+no\.\s*\d+\s*[.:\-]?\s*$", re.IGNORECASE)
BARE_CHAPTER_RE = re.compile(r"^(?:Chapter\s+)?\d+[.):\-]?\s+\S", re.IGNORECASE)

TEMPLATE_GRAMMAR = OutlineGrammar(
    name="template",
    rules=(
        LevelRule(depth=0, pattern=TEMPLATE_CHAPTER_RE),
        LevelRule(depth=3, pattern=TEMPLATE_SUBSUBSECTION_RE),
        LevelRule(depth=2, pattern=TEMPLATE_SUBSECTION_RE),
        LevelRule(depth=1, pattern=TEMPLATE_SECTION_RE),
    ),
    max_depth=MAX_TEMPLATE_DEPTH,
    rejections=(
        RejectRule(depth=0, pattern=UNTITLED_CHAPTER_RE, message="Chapter line has no title"),
        RejectRule(
            depth=0,
            pattern=BARE_CHAPTER_RE,
            message='Chapter lines must start with "Chapter no." followed by the chapter number',
        ),
    ),
)
