"""
Node serialization - human readable descriptions and summaries of nodes.
"""

from pydantic import BaseModel, Field

from domsift.dom.node import Node, NodeType
from domsift.dom.text import get_inner_text

_TEXT_PREVIEW = 40


class NodeSummary(BaseModel):
    """Flat, JSON friendly view of a node."""

    type: NodeType
    tag: str = ""
    attributes: dict[str, str] = Field(default_factory=dict)
    text: str = ""


def summarize(node: Node) -> NodeSummary:
    """Build a NodeSummary; for repeated attribute keys the first one wins."""
    attributes: dict[str, str] = {}
    for key, value in node.attributes:
        attributes.setdefault(key, value)

    if node.type in (NodeType.TEXT, NodeType.COMMENT):
        text = node.data.strip()
    else:
        text = get_inner_text(node).strip()

    return NodeSummary(type=node.type, tag=node.tag, attributes=attributes, text=text)


def describe_node(node: Node) -> str:
    """Create a one-line description, e.g. <a id="home" href="/">."""
    if node.is_element:
        parts = [node.tag]
        parts.extend(f'{key}="{value}"' for key, value in node.attributes)
        return f"<{' '.join(parts)}>"

    if node.type is NodeType.TEXT:
        return f"#text {_preview(node.data)!r}"
    if node.type is NodeType.COMMENT:
        return f"#comment {_preview(node.data)!r}"
    if node.type is NodeType.DOCTYPE:
        return f"<!DOCTYPE {node.data}>"
    return "#document"


def _preview(data: str) -> str:
    data = data.strip()
    return data[:_TEXT_PREVIEW] + ("..." if len(data) > _TEXT_PREVIEW else "")
