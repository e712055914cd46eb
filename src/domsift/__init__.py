"""
Domsift - query helpers over a parsed HTML tree.

Find nodes by id, class, tag or any predicate, read attributes and
extract inner text. Parsing is delegated to html5lib.

Usage:
    from domsift import parse_html, get_element_by_id, get_inner_text

    document = parse_html("<div id='main'>Hello<br>world</div>")
    main = get_element_by_id(document, "main")
    print(get_inner_text(main))
"""

__version__ = "0.1.0"

from domsift.dom import (
    Node,
    NodeSummary,
    NodeType,
    describe_node,
    find_all,
    find_first,
    get_attribute,
    get_element_by_class,
    get_element_by_id,
    get_element_by_tag,
    get_elements_by_class,
    get_elements_by_tag,
    get_inner_text,
    has_class,
    is_element_with_id,
    is_tag,
    parse_fragment,
    parse_html,
    summarize,
    walk,
)
from domsift.exceptions import DomsiftError, InvalidNodeError, ParseError
from domsift.logging import logger, setup_logging

__all__ = [
    "__version__",
    "Node",
    "NodeType",
    "NodeSummary",
    "parse_html",
    "parse_fragment",
    "walk",
    "find_first",
    "find_all",
    "get_attribute",
    "is_element_with_id",
    "has_class",
    "is_tag",
    "get_element_by_id",
    "get_elements_by_class",
    "get_element_by_class",
    "get_elements_by_tag",
    "get_element_by_tag",
    "get_inner_text",
    "describe_node",
    "summarize",
    "DomsiftError",
    "ParseError",
    "InvalidNodeError",
    "setup_logging",
    "logger",
]
