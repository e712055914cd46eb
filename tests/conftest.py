"""Shared fixtures."""

import logging

import pytest

from domsift.dom.node import Node


@pytest.fixture(autouse=True)
def _reset_domsift_logger():
    """CLI runs install handlers on the domsift logger; undo that between tests."""
    yield
    domsift_logger = logging.getLogger("domsift")
    domsift_logger.handlers = []
    domsift_logger.propagate = True
    domsift_logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_tree() -> Node:
    """A -> (B, C), C -> (D), all <div> elements tagged by id."""
    d = Node.element("div", {"id": "D"})
    c = Node.element("div", {"id": "C"}, [d])
    b = Node.element("div", {"id": "B"})
    return Node.element("div", {"id": "A"}, [b, c])
