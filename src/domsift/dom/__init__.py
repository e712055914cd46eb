"""
Domsift DOM Module.

Provides the node model, the html5lib adapter, tree queries and
inner text extraction.
"""

from domsift.dom.node import Node, NodeType
from domsift.dom.parser import parse_fragment, parse_html
from domsift.dom.query import (
    find_all,
    find_first,
    get_attribute,
    get_element_by_class,
    get_element_by_id,
    get_element_by_tag,
    get_elements_by_class,
    get_elements_by_tag,
    has_class,
    is_element_with_id,
    is_tag,
    walk,
)
from domsift.dom.serializer import NodeSummary, describe_node, summarize
from domsift.dom.text import get_inner_text

__all__ = [
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
]
