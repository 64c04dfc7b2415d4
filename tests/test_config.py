import os
from pathlib import Path
import tempfile
import unittest
from unittest.mock import patch

from toc_builder.config import build_id_generator, load_toc_config
from toc_builder.env import load_env
from toc_builder.ids import SequentialIdGenerator, UuidIdGenerator


class TocConfigTests(unittest.TestCase):
    def test_defaults_are_applied(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = load_toc_config(load_dotenv=False)

        self.assertEqual(config.placeholder_token, "XXX")
        self.assertIsNone(config.template_path)
        self.assertEqual(config.preview_line_count, 10)
        self.assertEqual(config.id_strategy, "uuid")
        self.assertIsInstance(build_id_generator(config), UuidIdGenerator)

    def test_env_overrides_are_applied(self) -> None:
        with patch.dict(
            os.environ,
            {
                "TOC_PLACEHOLDER_TOKEN": "{{market}}",
                "TOC_TEMPLATE_FILE": "/tmp/template.txt",
                "TOC_PREVIEW_LINES": "5",
                "TOC_ID_STRATEGY": "Sequential",
                "TOC_ID_PREFIX": "node",
            },
            clear=True,
        ):
            config = load_toc_config(load_dotenv=False)

        self.assertEqual(config.placeholder_token, "{{market}}")
        self.assertEqual(config.template_path, Path("/tmp/template.txt"))
        self.assertEqual(config.preview_line_count, 5)
        generator = build_id_generator(config)
        self.assertIsInstance(generator, SequentialIdGenerator)
        self.assertEqual(generator.next(), "node-1")

    def test_invalid_values_fall_back(self) -> None:
        with patch.dict(
            os.environ,
            {"TOC_PREVIEW_LINES": "many", "TOC_ID_STRATEGY": "random"},
            clear=True,
        ):
            config = load_toc_config(load_dotenv=False)

        self.assertEqual(config.preview_line_count, 10)
        self.assertEqual(config.id_strategy, "uuid")

    def test_preview_lines_has_lower_bound(self) -> None:
        with patch.dict(os.environ, {"TOC_PREVIEW_LINES": "0"}, clear=True):
            config = load_toc_config(load_dotenv=False)

        self.assertEqual(config.preview_line_count, 1)

    def test_env_file_is_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            env_path = Path(tmpdir) / "toc.env"
            env_path.write_text("TOC_PLACEHOLDER_TOKEN=@@\n", encoding="utf-8")

            with patch.dict(os.environ, {"TOC_BUILDER_ENV_FILE": str(env_path)}, clear=True):
                config = load_toc_config()

        self.assertEqual(config.placeholder_token, "@@")

    def test_missing_env_file_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch.dict(os.environ, {}, clear=True):
                self.assertFalse(load_env(Path(tmpdir) / "missing.env"))


if __name__ == "__main__":
    unittest.main()
