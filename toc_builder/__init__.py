"""TOC Builder package."""

from toc_builder.config import TocConfig, build_id_generator, load_toc_config
from toc_builder.editing import add_node, find_node, remove_node, update_node
from toc_builder.errors import InvalidTransitionError, NodeNotFoundError, TemplateLoadError, TocBuilderError
from toc_builder.grammar import TEMPLATE_GRAMMAR, TEXT_GRAMMAR, OutlineGrammar
from toc_builder.ids import IdGenerator, SequentialIdGenerator, UuidIdGenerator
from toc_builder.interchange import document_from_dict, document_to_dict
from toc_builder.model import (
    TocDocument,
    TocNode,
    find_duplicate_ids,
    iter_numbered,
    toc_summary,
    traverse_all_nodes,
)
from toc_builder.parser import ParseError, ParseResult, Strictness, parse_outline, parse_text
from toc_builder.serializer import serialize
from toc_builder.session import SessionStep, TemplateSession
from toc_builder.template import (
    get_default_template,
    parse_template_to_toc,
    preview_lines,
    replace_template_placeholders,
)
from toc_builder.title import extract_market_name

__all__ = [
    "IdGenerator",
    "InvalidTransitionError",
    "NodeNotFoundError",
    "OutlineGrammar",
    "ParseError",
    "ParseResult",
    "SequentialIdGenerator",
    "SessionStep",
    "Strictness",
    "TEMPLATE_GRAMMAR",
    "TEXT_GRAMMAR",
    "TemplateLoadError",
    "TemplateSession",
    "TocBuilderError",
    "TocConfig",
    "TocDocument",
    "TocNode",
    "UuidIdGenerator",
    "add_node",
    "build_id_generator",
    "document_from_dict",
    "document_to_dict",
    "extract_market_name",
    "find_duplicate_ids",
    "find_node",
    "get_default_template",
    "iter_numbered",
    "load_toc_config",
    "parse_outline",
    "parse_template_to_toc",
    "parse_text",
    "preview_lines",
    "remove_node",
    "replace_template_placeholders",
    "serialize",
    "toc_summary",
    "traverse_all_nodes",
    "update_node",
]
