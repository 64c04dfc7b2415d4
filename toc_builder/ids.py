"""Node id generation."""

from __future__ import annotations

from typing import Protocol
import uuid


class IdGenerator(Protocol):
    def next(self) -> str:
        ...


class UuidIdGenerator:
    """Random UUID4 ids, the same kind the tree editor assigns to new nodes."""

    def next(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator:
    """Deterministic ids like ``toc-1``, ``toc-2``.

    Each instance keeps its own counter, so two documents parsed with two
    generators may share ids. Not safe to share across threads.
    """

    def __init__(self, prefix: str = "toc", start: int = 1) -> None:
        self.prefix = prefix
        self._next_value = start

    def next(self) -> str:
        value = self._next_value
        self._next_value += 1
        return f"{self.prefix}-{value}"


def default_id_generator() -> IdGenerator:
    return UuidIdGenerator()
