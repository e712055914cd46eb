"""Basic tests to verify the package is importable and functional."""

import domsift


def test_version():
    """Test that version is defined."""
    assert domsift.__version__ == "0.1.0"


def test_exports():
    """Test that main exports are available."""
    assert hasattr(domsift, "parse_html")
    assert hasattr(domsift, "find_first")
    assert hasattr(domsift, "find_all")
    assert hasattr(domsift, "get_element_by_id")
    assert hasattr(domsift, "get_inner_text")
    assert hasattr(domsift, "Node")


def test_quickstart_round_trip():
    document = domsift.parse_html("<div id='main'>Hello<br>world</div>")
    main = domsift.get_element_by_id(document, "main")
    assert domsift.get_inner_text(main) == "Hello\nworld"
