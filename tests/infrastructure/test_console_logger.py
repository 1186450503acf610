from __future__ import annotations

import json

from infrastructure.logging.console_logger import ConsoleLogger


def test_console_logger_emits_type_field(capsys) -> None:
    logger = ConsoleLogger()

    logger.info("test.start", test_id="t1")

    captured = capsys.readouterr()
    line = captured.out.strip()

    assert line.startswith("test.start ")
    payload = json.loads(line.replace("test.start ", "", 1))
    assert payload["type"] == "test.start"
    assert payload["level"] == "info"
    assert payload["test_id"] == "t1"


def test_console_logger_bind_carries_fields(capsys) -> None:
    logger = ConsoleLogger().bind(collection_id="c1").bind(test_id="t2")

    logger.error("http.failed", error="boom")

    payload = json.loads(capsys.readouterr().out.strip().split(" ", 1)[1])
    assert payload["collection_id"] == "c1"
    assert payload["test_id"] == "t2"
    assert payload["error"] == "boom"


def test_console_logger_filters_below_level(capsys) -> None:
    logger = ConsoleLogger(level="warning")

    logger.debug("request.built")
    logger.info("http.response")
    logger.warning("http.json_decode_failed")

    lines = capsys.readouterr().out.strip().splitlines()
    assert [line.split(" ", 1)[0] for line in lines] == ["http.json_decode_failed"]
