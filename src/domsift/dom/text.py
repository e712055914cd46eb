"""
Inner text extraction.
"""

from domsift.config import LINE_BREAK_TAG, SKIPPED_TEXT_TAGS
from domsift.dom.node import Node, NodeType, ensure_node


def get_inner_text(node: Node) -> str:
    """
    Concatenate the text below `node` in document order.

    Text nodes contribute their data verbatim, <br> contributes a newline,
    <script> subtrees are skipped and other elements contribute their own
    inner text. Comments and doctypes contribute nothing. Only descendants
    are filtered: the tag of `node` itself is never checked.

    Args:
        node: Root of the subtree to read

    Returns:
        The extracted text ("" when there is none)
    """
    ensure_node(node)
    parts: list[str] = []
    stack = list(reversed(node.children))

    while stack:
        child = stack.pop()

        if child.type is NodeType.TEXT:
            parts.append(child.data)
        elif child.type is NodeType.ELEMENT:
            if child.tag == LINE_BREAK_TAG:
                parts.append("\n")
            elif child.tag not in SKIPPED_TEXT_TAGS:
                stack.extend(reversed(child.children))

    return "".join(parts)
