# ============================================================================
# STRUCTURED LOGGING TESTS
# ============================================================================
# STATUS: Tests - Logging context and formatters
# PURPOSE: Verify per-task context and JSON output
# CREATED: 19 OCT 2026
# ============================================================================
"""
Structured Logging Tests

Run with:
    pytest tests/test_logging.py -v
"""

import asyncio
import json
import logging

from core.logging import (
    ComponentType,
    HumanFormatter,
    StructuredFormatter,
    get_current_context,
    get_logger,
    log_context,
)


def _record(message="hello", exc_info=None):
    return logging.LogRecord(
        name="health.test",
        level=logging.ERROR,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=exc_info,
    )


class TestLogContext:

    def test_nested_contexts_inherit(self):
        with log_context(check_name="queue-a"):
            with log_context(resource="ns/queue-a", attempt=2):
                context = get_current_context()
                assert context.check_name == "queue-a"
                assert context.resource == "ns/queue-a"
                assert context.extra == {"attempt": 2}
            assert get_current_context().resource is None
        assert get_current_context().check_name is None

    def test_context_isolated_between_tasks(self):
        seen = {}

        async def worker(name):
            with log_context(check_name=name):
                await asyncio.sleep(0.01)
                seen[name] = get_current_context().check_name

        async def main():
            await asyncio.gather(worker("a"), worker("b"))

        asyncio.run(main())
        assert seen == {"a": "a", "b": "b"}


class TestFormatters:

    def test_structured_formatter_json(self):
        with log_context(check_name="db-1"):
            output = StructuredFormatter().format(_record("db-1 failed."))

        data = json.loads(output)
        assert data["level"] == "ERROR"
        assert data["message"] == "db-1 failed."
        assert data["context"] == {"check_name": "db-1"}
        assert data["timestamp"].endswith("Z")

    def test_structured_formatter_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys
            record = _record(exc_info=sys.exc_info())

        data = json.loads(StructuredFormatter().format(record))
        assert "RuntimeError: boom" in data["exception"]

    def test_human_formatter_context(self):
        with log_context(check_name="queue-a", resource="ns/queue-a"):
            output = HumanFormatter().format(_record("probing"))
        assert "[check=queue-a, resource=ns/queue-a]" in output
        assert output.endswith("probing")


class TestContextLogger:

    def test_adapter_attaches_context(self, caplog):
        logger = get_logger("health.test.adapter")
        with caplog.at_level(logging.INFO, logger="health.test.adapter"):
            with log_context(check_name="orders"):
                logger.info("checked")

        record = caplog.records[-1]
        assert record.extra["check_name"] == "orders"

    def test_component_attached(self, caplog):
        logger = get_logger("health.test.component", ComponentType.EXECUTOR)
        with caplog.at_level(logging.INFO, logger="health.test.component"):
            logger.info("ran")

        assert caplog.records[-1].extra["component"] == "executor"
