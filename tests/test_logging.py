from __future__ import annotations

import json
import logging

from wmspanel.infrastructure.logging import ComponentType, JSONFormatter, LoggerFactory


def _record(logger: logging.Logger, message: str, **extra) -> logging.LogRecord:
    record = logger.makeRecord(logger.name, logging.INFO, __file__, 1, message, (), None, extra=extra)
    for f in logger.filters:
        f.filter(record)
    return record


def test_create_logger_names_and_tags_component():
    logger = LoggerFactory.create_logger(ComponentType.LAYERS, "test")
    LoggerFactory.create_logger(ComponentType.LAYERS, "test")

    assert logger.name == "wmspanel.layers.test"
    assert len(logger.filters) == 1

    record = _record(logger, "Added layer: ws1:roads")
    assert record.component == "layers"


def test_json_formatter_includes_context_and_dimensions():
    logger = LoggerFactory.create_logger(ComponentType.DISCOVERY, "test")
    record = _record(
        logger,
        "Found 1 workspaces and 2 layers",
        custom_dimensions={"layer_count": 2},
    )

    entry = json.loads(JSONFormatter().format(record))

    assert entry["message"] == "Found 1 workspaces and 2 layers"
    assert entry["level"] == "INFO"
    assert entry["component"] == "discovery"
    assert entry["custom_dimensions"] == {"layer_count": 2}
    assert entry["service"] == "wmspanel"
    assert "timestamp" in entry


def test_json_formatter_omits_empty_fields():
    record = logging.LogRecord("wmspanel.app.test", logging.WARNING, __file__, 1, "plain", (), None)

    entry = json.loads(JSONFormatter(service="panel-test").format(record))

    assert entry["service"] == "panel-test"
    assert "component" not in entry
    assert "custom_dimensions" not in entry


def test_configure_replaces_handler_and_quiets_httpx():
    root = logging.getLogger()
    previous_level = root.level
    try:
        first = LoggerFactory.configure()
        second = LoggerFactory.configure(use_json=True, level=logging.DEBUG)

        assert first not in root.handlers
        assert second in root.handlers
        assert isinstance(second.formatter, JSONFormatter)
        assert logging.getLogger("uvicorn.access").handlers == [second]
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.removeHandler(LoggerFactory._handler)
        LoggerFactory._handler = None
        root.setLevel(previous_level)
