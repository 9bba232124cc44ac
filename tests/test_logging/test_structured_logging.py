"""
Tests for the structured logging package.
"""

import io
import json
import logging
import sys

import pytest

from ormgen.core.context import RunContext
from ormgen.logging import (
    ContextFilter,
    JSONFormatter,
    LogContext,
    TextFormatter,
    configure_logging,
    get_logger,
    with_log_context,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the ormgen logger after each test."""
    root = logging.getLogger("ormgen")
    handlers = list(root.handlers)
    level = root.level
    propagate = root.propagate
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate


def make_record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="ormgen.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def filtered(**extra) -> logging.LogRecord:
    """A record after the context filter has run in the current scope."""
    record = make_record(**extra)
    assert ContextFilter().filter(record)
    return record


class TestLogContext:
    def test_to_dict_skips_none(self):
        assert LogContext(run_id="r1", table="users").to_dict() == {"run_id": "r1", "table": "users"}

    def test_for_run(self, run_context: RunContext):
        ctx = LogContext.for_run(run_context)
        assert ctx.to_dict() == {"run_id": "run-1", "driver": "postgres"}

    def test_table_scope_inside_run_scope(self, run_context: RunContext):
        with with_log_context(LogContext.for_run(run_context)):
            with with_log_context(table="posts"):
                record = filtered()
                assert (record.run_id, record.driver, record.table) == ("run-1", "postgres", "posts")

            record = filtered()
            assert record.run_id == "run-1"
            assert not hasattr(record, "table")

        assert not hasattr(filtered(), "run_id")

    def test_inner_table_replaces_outer(self):
        with with_log_context(table="users"):
            with with_log_context(LogContext(table="tags")):
                assert filtered().table == "tags"
            assert filtered().table == "users"

    def test_restored_on_error(self):
        with pytest.raises(RuntimeError):
            with with_log_context(table="users"):
                raise RuntimeError("boom")
        assert not hasattr(filtered(), "table")


class TestContextFilter:
    def test_does_not_override_record_fields(self):
        with with_log_context(table="users"):
            record = filtered(table="posts")
        assert record.table == "posts"


class TestFormatters:
    def test_json(self):
        record = make_record("Derived", run_id="r1", table="users", accessor="Posts")
        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "ormgen.test"
        assert data["message"] == "Derived"
        assert data["run_id"] == "r1"
        assert data["table"] == "users"
        assert data["extra"] == {"accessor": "Posts"}
        assert "driver" not in data

    def test_json_without_extra(self):
        record = make_record(accessor="Posts")
        data = json.loads(JSONFormatter(include_extra=False).format(record))
        assert "extra" not in data

    def test_json_unserializable_field(self):
        record = make_record(columns=("id", "name"), target=object())
        data = json.loads(JSONFormatter().format(record))
        assert data["extra"]["columns"] == ["id", "name"]
        assert data["extra"]["target"].startswith("<object")

    def test_json_exception(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "bad"

    def test_text(self):
        record = make_record("Built table data", driver="postgres", table="users", to_many=2)
        line = TextFormatter().format(record)

        assert "INFO" in line
        assert line.endswith("ormgen.test [driver=postgres table=users] Built table data to_many=2")

    def test_text_without_context(self):
        line = TextFormatter().format(make_record("Reflected database tables"))
        assert line.endswith("ormgen.test Reflected database tables")


class TestConfigureLogging:
    def test_json_output_with_context(self):
        stream = io.StringIO()
        configure_logging(level="debug", format="json", output=stream)

        with with_log_context(run_id="r1", table="users"):
            get_logger("ormgen.codegen").info("Built table data", to_many=2)

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "Built table data"
        assert data["run_id"] == "r1"
        assert data["table"] == "users"
        assert data["extra"]["to_many"] == 2

    def test_level_filters(self):
        stream = io.StringIO()
        configure_logging(level=logging.WARNING, format="text", output=stream)

        logger = get_logger("ormgen.codegen")
        logger.info("hidden")
        logger.warning("shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "shown" in output

    def test_without_context(self):
        stream = io.StringIO()
        configure_logging(format="json", output=stream, include_context=False)

        with with_log_context(table="users"):
            get_logger("ormgen").info("message")

        assert "table" not in json.loads(stream.getvalue())

    def test_does_not_propagate(self):
        configure_logging(output=io.StringIO())
        assert logging.getLogger("ormgen").propagate is False

    @pytest.mark.parametrize(("level", "fmt"), [("LOUD", "text"), ("INFO", "xml")])
    def test_rejects_unknown_values(self, level, fmt):
        with pytest.raises(ValueError):
            configure_logging(level=level, format=fmt, output=io.StringIO())
