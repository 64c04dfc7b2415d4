"""Boilerplate TOC template, placeholder substitution and strict import."""

from __future__ import annotations

import logging
from pathlib import Path

from toc_builder.errors import TemplateLoadError
from toc_builder.grammar import TEMPLATE_GRAMMAR
from toc_builder.ids import IdGenerator
from toc_builder.parser import ParseResult, Strictness, parse_outline
from toc_builder.title import extract_market_name


LOGGER = logging.getLogger(__name__)

PLACEHOLDER_TOKEN = "XXX"
DEFAULT_PREVIEW_LINES = 10

DEFAULT_TEMPLATE = """\
Chapter no. 1 Preface
  1.1 Report Description and Scope
  1.2 Research Scope
  1.3 Research Methodology
    1.3.1 Market Research Type
    1.3.2 Market Research Methodology
      1.3.2.1 Primary Research
      1.3.2.2 Secondary Research
  1.4 Assumptions and Limitations
Chapter no. 2 Executive Summary
  2.1 Global XXX Market Overview
  2.2 XXX Market Snapshot
  2.3 Key Findings
Chapter no. 3 XXX Market Dynamics
  3.1 XXX Market Drivers
  3.2 XXX Market Restraints
  3.3 XXX Market Opportunities
  3.4 XXX Market Challenges
Chapter no. 4 XXX Market Analysis
  4.1 Porter's Five Forces Analysis
    4.1.1 Bargaining Power of Suppliers
    4.1.2 Bargaining Power of Buyers
    4.1.3 Threat of New Entrants
    4.1.4 Threat of Substitutes
    4.1.5 Competitive Rivalry
  4.2 PESTEL Analysis
  4.3 Value Chain Analysis
Chapter no. 5 Global XXX Market, by Type
  5.1 Overview
  5.2 Market Size and Forecast by Type
Chapter no. 6 Global XXX Market, by Application
  6.1 Overview
  6.2 Market Size and Forecast by Application
Chapter no. 7 Global XXX Market, by End User
  7.1 Overview
  7.2 Market Size and Forecast by End User
Chapter no. 8 Global XXX Market, by Region
  8.1 North America
    8.1.1 U.S.
    8.1.2 Canada
  8.2 Europe
    8.2.1 Germany
    8.2.2 U.K.
    8.2.3 France
    8.2.4 Rest of Europe
  8.3 Asia Pacific
    8.3.1 China
    8.3.2 Japan
    8.3.3 India
    8.3.4 Rest of Asia Pacific
  8.4 Latin America
  8.5 Middle East and Africa
Chapter no. 9 Competitive Landscape
  9.1 XXX Market Share Analysis
  9.2 Key Strategies Adopted by Leading Players
  9.3 Company Profiles
    9.3.1 Company Overview
    9.3.2 Financial Performance
    9.3.3 Product Portfolio
    9.3.4 Recent Developments
Chapter no. 10 Conclusion
  10.1 Analyst Recommendations
  10.2 Future Outlook of the XXX Market
"""


def get_default_template(template_path: Path | None = None) -> str:
    """Return the template text.

    When ``template_path`` is given the file replaces the built-in template;
    failing to read it raises TemplateLoadError.
    """
    if template_path is None:
        return DEFAULT_TEMPLATE

    try:
        return template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateLoadError(f"Failed to load TOC template {template_path}: {exc}") from exc


def replace_template_placeholders(template: str, market_name: str, token: str = PLACEHOLDER_TOKEN) -> str:
    """Replace every ``token`` with ``market_name`` in a single pass.

    The replacement is inserted literally and never rescanned, so a market
    name containing the token is left as is.
    """
    if not token:
        return template
    return template.replace(token, market_name)


def parse_template_to_toc(text: str, id_generator: IdGenerator | None = None) -> ParseResult:
    """Strictly parse template text, collecting an error for every bad line."""
    result = parse_outline(text, TEMPLATE_GRAMMAR, Strictness.STRICT, id_generator=id_generator)
    if result.success and result.data is not None:
        LOGGER.info("Template parsed into %d chapter(s)", len(result.data.chapters))
    return result


def preview_lines(text: str, limit: int = DEFAULT_PREVIEW_LINES) -> list[str]:
    """First ``limit`` non-blank lines, as shown before editing."""
    return [line for line in text.split("\n") if line.strip()][: max(limit, 0)]


def generate_template_text(
    document_title: str,
    template_path: Path | None = None,
    token: str = PLACEHOLDER_TOKEN,
) -> tuple[str, str]:
    """Load the template and fill it from ``document_title``.

    Returns ``(market_name, text)``.
    """
    market_name = extract_market_name(document_title)
    template = get_default_template(template_path)
    return market_name, replace_template_placeholders(template, market_name, token=token)
