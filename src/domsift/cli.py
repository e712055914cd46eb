"""
Domsift CLI - Command line interface.

Usage:
    domsift find page.html --class headline --all
    domsift text page.html --id content
    curl -s https://example.com | domsift attr - --tag a --name href
"""

import json
import logging
import os
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv

from domsift import __version__
from domsift.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, LOG_LEVELS
from domsift.dom import (
    Node,
    describe_node,
    get_attribute,
    get_element_by_class,
    get_element_by_id,
    get_element_by_tag,
    get_elements_by_class,
    get_elements_by_tag,
    get_inner_text,
    parse_html,
    summarize,
)
from domsift.exceptions import DomsiftError, SourceError
from domsift.logging import (
    CompactFormatter,
    JSONFormatter,
    console,
    logger,
    setup_logging,
)

# Load .env file if present
load_dotenv()

app = typer.Typer(
    name="domsift",
    help="Query parsed HTML by id, class or tag and extract its text",
    add_completion=False,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_format: str = typer.Option(
        "rich", "--log-format", help="Log output format (rich/compact/json)"
    ),
) -> None:
    """Configure logging for every command."""
    level = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        console.print(f"[red]Unknown log level in {LOG_LEVEL_ENV}: {level}[/red]")
        raise typer.Exit(2)

    handler = None
    if log_format in ("compact", "json"):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JSONFormatter() if log_format == "json" else CompactFormatter())
    elif log_format != "rich":
        console.print(f"[red]Unknown log format: {log_format}[/red]")
        raise typer.Exit(2)

    setup_logging(level=level, handler=handler)


@app.command()
def find(
    source: str = typer.Argument(..., help="HTML file path, or - for stdin"),
    element_id: str | None = typer.Option(None, "--id", help="Match elements by id"),
    class_name: str | None = typer.Option(None, "--class", help="Match elements by class token"),
    tag: str | None = typer.Option(None, "--tag", help="Match elements by tag name"),
    find_all: bool = typer.Option(
        False, "--all", "-a", help="Return every match, not just the first"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print matches as JSON summaries"),
) -> None:
    """Find elements by id, class or tag."""
    given = (("id", element_id), ("class", class_name), ("tag", tag))
    criteria = [(kind, value) for kind, value in given if value is not None]
    if len(criteria) != 1:
        console.print("[red]Give exactly one of --id, --class or --tag[/red]")
        raise typer.Exit(2)

    kind, value = criteria[0]
    document = _load(source)
    matches = _query(document, kind, value, find_all)
    logger.query(kind, value, len(matches))

    if not matches:
        console.print(f"[yellow]No element matches {kind}={value!r}[/yellow]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([summarize(n).model_dump(mode="json") for n in matches], indent=2))
    else:
        for node in matches:
            typer.echo(describe_node(node))


@app.command()
def text(
    source: str = typer.Argument(..., help="HTML file path, or - for stdin"),
    element_id: str | None = typer.Option(None, "--id", help="Only read the element with this id"),
) -> None:
    """Print the inner text of the document or of one element."""
    root = _load(source)

    if element_id is not None:
        root = get_element_by_id(root, element_id)
        logger.query("id", element_id, 0 if root is None else 1)
        if root is None:
            console.print(f"[yellow]No element with id {element_id!r}[/yellow]")
            raise typer.Exit(1)

    typer.echo(get_inner_text(root))


@app.command()
def attr(
    source: str = typer.Argument(..., help="HTML file path, or - for stdin"),
    tag: str = typer.Option(..., "--tag", help="Tag name of the elements to read"),
    name: str = typer.Option(..., "--name", "-n", help="Attribute to print"),
) -> None:
    """Print an attribute of every element with the given tag."""
    document = _load(source)
    values = [get_attribute(n, name) for n in get_elements_by_tag(document, tag)]
    # "" means the attribute is absent
    values = [v for v in values if v]
    logger.query("tag", tag, len(values))

    if not values:
        console.print(f"[yellow]No <{tag}> element has a {name!r} attribute[/yellow]")
        raise typer.Exit(1)

    for value in values:
        typer.echo(value)


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"Domsift v{__version__}")


def _load(source: str) -> Node:
    """Read and parse SOURCE, exiting with status 1 on failure."""
    try:
        markup = _read_source(source)
        document = parse_html(markup)
    except DomsiftError as e:
        logger.error(str(e))
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    logger.parsed(source, len(markup))
    return document


def _read_source(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise SourceError(f"Cannot read {source}: {e.strerror or e}") from e


def _query(document: Node, kind: str, value: str, find_all: bool) -> list[Node]:
    if find_all:
        if kind == "class":
            return get_elements_by_class(document, value)
        if kind == "tag":
            return get_elements_by_tag(document, value)
        # ids are looked up first-match only
    finders = {
        "id": get_element_by_id,
        "class": get_element_by_class,
        "tag": get_element_by_tag,
    }
    node = finders[kind](document, value)
    return [] if node is None else [node]


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
