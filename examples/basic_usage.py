"""
Simple walkthrough of the domsift query helpers.

Run with:
    python examples/basic_usage.py
"""

from domsift import (
    describe_node,
    find_all,
    get_attribute,
    get_element_by_id,
    get_elements_by_class,
    get_inner_text,
    parse_html,
    setup_logging,
)

PAGE = """<!DOCTYPE html>
<html>
<body>
  <nav id="menu">
    <a href="/" class="item active">Home</a>
    <a href="/docs" class="item">Docs</a>
  </nav>
  <article id="post">First line<br>second line<script>track()</script></article>
</body>
</html>
"""


def main() -> None:
    setup_logging(level="DEBUG")

    document = parse_html(PAGE)

    print("\n=== By id ===\n")
    menu = get_element_by_id(document, "menu")
    print(describe_node(menu))

    print("\n=== By class ===\n")
    for link in get_elements_by_class(document, "item"):
        print(f"{get_inner_text(link)} -> {get_attribute(link, 'href')}")

    print("\n=== Custom predicate ===\n")
    with_href = find_all(document, lambda n: n.is_element and get_attribute(n, "href") != "")
    print(f"{len(with_href)} element(s) carry an href")

    print("\n=== Inner text ===\n")
    print(get_inner_text(get_element_by_id(document, "post")))


if __name__ == "__main__":
    main()
