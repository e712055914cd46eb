"""
DOM Query - predicate search over a parsed node tree.

All searches visit nodes in document order: a node before its children,
children left to right. Absence is a value, never an error: attribute
lookups return "", single searches return None, multi searches return [].
"""

from collections.abc import Callable, Iterator

from domsift.config import CLASS_SEPARATOR
from domsift.dom.node import Node, ensure_node

Predicate = Callable[[Node], bool]


def get_attribute(node: Node, key: str) -> str:
    """
    Get the value of the first attribute named `key`.

    Keys are matched case-sensitively, in attribute order.

    Returns:
        The attribute value, or "" when the node has no such attribute
    """
    ensure_node(node)
    for attr_key, value in node.attributes:
        if attr_key == key:
            return value
    return ""


def walk(node: Node) -> Iterator[Node]:
    """
    Yield `node` and all of its descendants in document order.

    Uses an explicit stack, so arbitrarily deep trees are safe.
    """
    ensure_node(node)
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        # Reversed so the leftmost child is popped first
        stack.extend(reversed(current.children))


def find_first(node: Node, predicate: Predicate) -> Node | None:
    """Return the first node in document order matching `predicate`, or None."""
    for candidate in walk(node):
        if predicate(candidate):
            return candidate
    return None


def find_all(node: Node, predicate: Predicate) -> list[Node]:
    """Return every node (including `node` itself) matching `predicate`, in document order."""
    return [candidate for candidate in walk(node) if predicate(candidate)]


# ===== Predicates =====


def is_element_with_id(node: Node, element_id: str) -> bool:
    return node.is_element and get_attribute(node, "id") == element_id


def has_class(node: Node, class_name: str) -> bool:
    """
    Check whether `class_name` is one of the element's class tokens.

    The class attribute is split on single spaces and compared token by
    token. A missing class attribute splits to [""], so an empty
    `class_name` matches elements without classes.
    """
    if not node.is_element:
        return False
    return class_name in get_attribute(node, "class").split(CLASS_SEPARATOR)


def is_tag(node: Node, tag: str) -> bool:
    return node.is_element and node.tag == tag


# ===== Derived queries =====


def get_element_by_id(node: Node, element_id: str) -> Node | None:
    """Return the first element with the given id, or None."""
    return find_first(node, lambda n: is_element_with_id(n, element_id))


def get_elements_by_class(node: Node, class_name: str) -> list[Node]:
    return find_all(node, lambda n: has_class(n, class_name))


def get_element_by_class(node: Node, class_name: str) -> Node | None:
    return find_first(node, lambda n: has_class(n, class_name))


def get_elements_by_tag(node: Node, tag: str) -> list[Node]:
    return find_all(node, lambda n: is_tag(n, tag))


def get_element_by_tag(node: Node, tag: str) -> Node | None:
    return find_first(node, lambda n: is_tag(n, tag))
