"""
HTML Parser adapter - turns markup into a Node tree.

Parsing itself is done by html5lib. This module only replays html5lib's
tree walker token stream into Node objects.
"""

import logging

import html5lib
from html5lib.html5parser import ParseError as Html5libParseError

from domsift.config import DEFAULT_FRAGMENT_CONTAINER
from domsift.dom.node import Node, NodeType
from domsift.exceptions import ParseError

logger = logging.getLogger(__name__)

_TREE = "dom"
_TEXT_TOKENS = {"Characters", "SpaceCharacters"}


def parse_html(markup: str | bytes, *, strict: bool = False) -> Node:
    """
    Parse a complete HTML document.

    Args:
        markup: Document source; bytes are decoded using html5lib's sniffing
        strict: Raise ParseError on the first parse error instead of recovering

    Returns:
        A DOCUMENT node holding the doctype, comments and <html> element
    """
    parser = _make_parser(strict)
    try:
        document = parser.parse(markup)
    except Html5libParseError as e:
        raise ParseError(f"Invalid HTML document: {e}") from e

    return _build_tree(document)


def parse_fragment(
    markup: str | bytes,
    *,
    container: str = DEFAULT_FRAGMENT_CONTAINER,
    strict: bool = False,
) -> Node:
    """
    Parse an HTML fragment as if it were the content of `container`.

    Returns:
        A DOCUMENT node whose children are the fragment's top-level nodes
    """
    parser = _make_parser(strict)
    try:
        fragment = parser.parseFragment(markup, container=container)
    except Html5libParseError as e:
        raise ParseError(f"Invalid HTML fragment: {e}") from e

    return _build_tree(fragment)


def _make_parser(strict: bool) -> html5lib.HTMLParser:
    return html5lib.HTMLParser(tree=html5lib.getTreeBuilder(_TREE), strict=strict)


def _build_tree(parsed) -> Node:
    """Replay the walker tokens of an html5lib tree into Node objects."""
    walker = html5lib.getTreeWalker(_TREE)
    root = Node.document()
    open_nodes = [root]
    count = 1

    for token in walker(parsed):
        kind = token["type"]
        parent = open_nodes[-1]

        if kind in ("StartTag", "EmptyTag"):
            element = Node(
                type=NodeType.ELEMENT,
                tag=token["name"],
                namespace=token["namespace"],
                attributes=[(name, value) for (_, name), value in token["data"].items()],
            )
            parent.children.append(element)
            count += 1
            if kind == "StartTag":
                open_nodes.append(element)

        elif kind == "EndTag":
            open_nodes.pop()

        elif kind in _TEXT_TOKENS:
            # The walker splits one text node into leading space, body and trailing space
            last = parent.children[-1] if parent.children else None
            if last is not None and last.type is NodeType.TEXT:
                last.data += token["data"]
            else:
                parent.children.append(Node.text(token["data"]))
                count += 1

        elif kind == "Comment":
            parent.children.append(Node.comment(token["data"]))
            count += 1

        elif kind == "Doctype":
            parent.children.append(Node(type=NodeType.DOCTYPE, data=token["name"] or ""))
            count += 1

        elif kind == "SerializeError":
            logger.debug(f"Tree walker reported: {token['data']}")

    logger.debug(f"Built tree with {count} nodes")
    return root
