"""
DOM Node - the read-only tree shape the query helpers operate on.

Nodes are produced by the parser adapter (or built by hand for tests);
the query functions only ever read them.
"""

from enum import Enum

from pydantic import BaseModel, Field

from domsift.exceptions import InvalidNodeError


class NodeType(str, Enum):
    """Kind of a node in the parsed tree."""

    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"


class Node(BaseModel):
    """One item of a parsed document tree."""

    type: NodeType
    tag: str = ""
    namespace: str | None = None
    attributes: list[tuple[str, str]] = Field(default_factory=list)
    children: list["Node"] = Field(default_factory=list)
    data: str = ""

    @property
    def is_element(self) -> bool:
        return self.type is NodeType.ELEMENT

    @classmethod
    def element(
        cls,
        tag: str,
        attributes: dict[str, str] | list[tuple[str, str]] | None = None,
        children: list["Node"] | None = None,
    ) -> "Node":
        """Build an element node; a dict of attributes keeps its insertion order."""
        if isinstance(attributes, dict):
            attributes = list(attributes.items())
        return cls(
            type=NodeType.ELEMENT,
            tag=tag,
            attributes=attributes or [],
            children=children or [],
        )

    @classmethod
    def text(cls, data: str) -> "Node":
        return cls(type=NodeType.TEXT, data=data)

    @classmethod
    def comment(cls, data: str) -> "Node":
        return cls(type=NodeType.COMMENT, data=data)

    @classmethod
    def document(cls, children: list["Node"] | None = None) -> "Node":
        return cls(type=NodeType.DOCUMENT, children=children or [])

    def __repr__(self) -> str:
        if self.is_element:
            return f"Node(<{self.tag}> children={len(self.children)})"
        if self.type in (NodeType.TEXT, NodeType.COMMENT):
            return f"Node({self.type.value} {self.data[:20]!r})"
        return f"Node({self.type.value} children={len(self.children)})"


def ensure_node(node: object) -> None:
    """Raise InvalidNodeError unless `node` is a Node (e.g. a None root)."""
    if not isinstance(node, Node):
        raise InvalidNodeError(f"Expected a Node, got {type(node).__name__}")
