"""Configuration loader for toc_builder."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from toc_builder.env import load_env
from toc_builder.ids import IdGenerator, SequentialIdGenerator, UuidIdGenerator
from toc_builder.template import DEFAULT_PREVIEW_LINES, PLACEHOLDER_TOKEN


ID_STRATEGIES = ("uuid", "sequential")


@dataclass
class TocConfig:
    placeholder_token: str = PLACEHOLDER_TOKEN
    template_path: Path | None = None
    preview_line_count: int = DEFAULT_PREVIEW_LINES
    id_strategy: str = "uuid"
    id_prefix: str = "toc"


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name, "").strip().lower()
    if raw in choices:
        return raw
    return default


def load_toc_config(load_dotenv: bool = True) -> TocConfig:
    if load_dotenv:
        load_env()

    template_file = os.getenv("TOC_TEMPLATE_FILE", "").strip()
    return TocConfig(
        placeholder_token=os.getenv("TOC_PLACEHOLDER_TOKEN", "").strip() or PLACEHOLDER_TOKEN,
        template_path=Path(template_file) if template_file else None,
        preview_line_count=max(1, _get_int("TOC_PREVIEW_LINES", DEFAULT_PREVIEW_LINES)),
        id_strategy=_get_choice("TOC_ID_STRATEGY", ID_STRATEGIES, "uuid"),
        id_prefix=os.getenv("TOC_ID_PREFIX", "").strip() or "toc",
    )


def build_id_generator(config: TocConfig) -> IdGenerator:
    if config.id_strategy == "sequential":
        return SequentialIdGenerator(prefix=config.id_prefix)
    return UuidIdGenerator()
