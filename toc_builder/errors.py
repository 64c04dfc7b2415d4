"""Exceptions raised for unexpected failures.

Malformed outline text is never reported through these; the strict parser
returns its line errors in a ParseResult instead.
"""

from __future__ import annotations


class TocBuilderError(Exception):
    pass


class TemplateLoadError(TocBuilderError):
    """The template asset could not be read."""


class InvalidTransitionError(TocBuilderError):
    """A template session step was requested from the wrong state."""


class NodeNotFoundError(TocBuilderError, KeyError):
    def __init__(self, node_id: str) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"No TOC node with id {self.node_id!r}"
