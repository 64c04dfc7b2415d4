"""Environment loading helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


def resolve_env_path(env_path: Path | None = None) -> Path:
    env_file_override = os.getenv("TOC_BUILDER_ENV_FILE", "").strip()
    if env_path is not None:
        return env_path
    if env_file_override:
        return Path(env_file_override)
    return Path.cwd() / ".env"


def load_env(env_path: Path | None = None, override: bool = False) -> bool:
    """Load environment variables from a .env file; False when none was loaded."""
    target_path = resolve_env_path(env_path)
    if not target_path.exists():
        return False
    return bool(load_dotenv(dotenv_path=target_path, override=override))
