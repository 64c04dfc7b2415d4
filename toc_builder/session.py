"""State machine for generating a TOC from the default template.

The flow is PREVIEW -> EDIT -> SUCCESS or ERROR. From a result the user
can go back to EDIT without losing their text; a SUCCESS result is only
adopted once confirmed.
"""

from __future__ import annotations

from enum import Enum
import logging

from toc_builder.config import TocConfig, build_id_generator
from toc_builder.errors import InvalidTransitionError, TemplateLoadError
from toc_builder.ids import IdGenerator
from toc_builder.model import TocDocument, has_content, toc_summary
from toc_builder.parser import ParseError
from toc_builder.template import generate_template_text, parse_template_to_toc, preview_lines


LOGGER = logging.getLogger(__name__)


class SessionStep(str, Enum):
    PREVIEW = "preview"
    EDIT = "edit"
    SUCCESS = "success"
    ERROR = "error"


class TemplateSession:
    def __init__(
        self,
        document_title: str,
        current_document: TocDocument | None = None,
        config: TocConfig | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self.config = config or TocConfig()
        self.id_generator = id_generator or build_id_generator(self.config)
        self.document_title = document_title
        self.replaces_existing = has_content(current_document)

        self.step = SessionStep.PREVIEW
        self.market_name = ""
        self.text = ""
        self.preview: list[str] = []
        self.load_error: str | None = None
        self.errors: list[ParseError] = []
        self.parsed: TocDocument | None = None

        self._load_template()

    def _load_template(self) -> None:
        try:
            self.market_name, self.text = generate_template_text(
                self.document_title,
                template_path=self.config.template_path,
                token=self.config.placeholder_token,
            )
        except TemplateLoadError as exc:
            LOGGER.warning("TOC template unavailable: %s", exc)
            self.load_error = str(exc)
            return
        self.preview = preview_lines(self.text, limit=self.config.preview_line_count)

    def _require(self, *steps: SessionStep) -> None:
        if self.step not in steps:
            allowed = ", ".join(step.value for step in steps)
            raise InvalidTransitionError(f"Session is in step '{self.step.value}', expected one of: {allowed}")

    def continue_to_edit(self) -> None:
        self._require(SessionStep.PREVIEW)
        if self.load_error is not None:
            raise InvalidTransitionError(f"Template could not be loaded: {self.load_error}")
        self.step = SessionStep.EDIT

    def back_to_preview(self) -> None:
        self._require(SessionStep.EDIT)
        self.step = SessionStep.PREVIEW

    def update_text(self, text: str) -> None:
        self._require(SessionStep.EDIT)
        self.text = text

    def import_text(self) -> bool:
        """Parse the edited text; returns True on success."""
        self._require(SessionStep.EDIT)
        result = parse_template_to_toc(self.text, id_generator=self.id_generator)
        if result.success:
            self.parsed = result.data
            self.errors = []
            self.step = SessionStep.SUCCESS
            return True

        self.parsed = None
        self.errors = list(result.errors)
        self.step = SessionStep.ERROR
        return False

    def back_to_edit(self) -> None:
        self._require(SessionStep.SUCCESS, SessionStep.ERROR)
        self.errors = []
        self.parsed = None
        self.step = SessionStep.EDIT

    def _parsed_document(self) -> TocDocument:
        self._require(SessionStep.SUCCESS)
        if self.parsed is None:
            raise InvalidTransitionError("Session has no parsed document")
        return self.parsed

    def summary(self) -> dict[str, int]:
        return toc_summary(self._parsed_document())

    def confirm(self) -> TocDocument:
        """Return the parsed document that should replace the live one."""
        return self._parsed_document()
