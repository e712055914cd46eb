"""Unit tests for logging setup and formatters."""

import json
import logging

from rich.logging import RichHandler

from domsift.logging import (
    CompactFormatter,
    JSONFormatter,
    QueryLogger,
    create_file_handler,
    get_logger,
    setup_logging,
)


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def _record(msg: str = "hello", level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord("domsift.test", level, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSetupLogging:
    def test_installs_rich_handler_by_default(self):
        setup_logging(level="INFO")
        root = logging.getLogger("domsift")
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)
        assert root.propagate is False

    def test_custom_handler(self):
        handler = _ListHandler()
        setup_logging(level="DEBUG", handler=handler)
        get_logger("dom.parser").debug("parsed")
        assert [r.getMessage() for r in handler.records] == ["parsed"]


class TestGetLogger:
    def test_prefixes_name(self):
        assert get_logger("cli").name == "domsift.cli"

    def test_keeps_existing_prefix(self):
        assert get_logger("domsift.dom").name == "domsift.dom"


class TestQueryLogger:
    def test_query_message(self):
        handler = _ListHandler()
        setup_logging(level="INFO", handler=handler)
        QueryLogger().query("class", "item", 3)
        message = handler.records[0].getMessage()
        assert "class" in message
        assert "'item'" in message
        assert "3" in message

    def test_query_carries_structured_fields(self):
        handler = _ListHandler()
        setup_logging(level="INFO", handler=handler)
        QueryLogger().query("id", "x", 1)
        record = handler.records[0]
        assert record.query == "id=x"
        assert record.matches == 1

    def test_query_renders_plain_json(self):
        handler = _ListHandler()
        setup_logging(level="INFO", handler=handler)
        QueryLogger().query("id", "x", 1)
        line = JSONFormatter().format(handler.records[0])
        data = json.loads(line)
        assert "[query]" not in line
        assert data["message"] == "Query id='x' matched 1 node(s)"
        assert data["query"] == "id=x"
        assert data["matches"] == 1

    def test_debug_filtered_at_info(self):
        handler = _ListHandler()
        setup_logging(level="INFO", handler=handler)
        QueryLogger().debug("hidden")
        assert handler.records == []


class TestFormatters:
    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(_record("found", query="id=main", matches=1)))
        assert data["message"] == "found"
        assert data["level"] == "INFO"
        assert data["logger"] == "domsift.test"
        assert data["query"] == "id=main"
        assert data["matches"] == 1

    def test_compact_formatter(self):
        line = CompactFormatter().format(_record("done", level=logging.WARNING))
        assert line.endswith("⚠ done")

    def test_file_handler_defaults_to_json(self, tmp_path):
        handler = create_file_handler(str(tmp_path / "domsift.log"))
        try:
            assert isinstance(handler.formatter, JSONFormatter)
            assert handler.level == logging.DEBUG
        finally:
            handler.close()
