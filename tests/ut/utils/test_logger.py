"""日志配置测试"""

from __future__ import annotations

import json
import logging

from reposync.utils.logger import JSONFormatter, reset_logging, setup_logging


class TestSetupLogging:
    def teardown_method(self) -> None:
        reset_logging()

    def test_single_handler_after_repeat(self) -> None:
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_json_handler(self) -> None:
        setup_logging("INFO", json_output=True)
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)


class TestJSONFormatter:
    def test_fields_and_target(self) -> None:
        record = logging.LogRecord("reposync.x", logging.INFO, __file__, 1, "pull %s", ("a",), None)
        record.target = "/tmp/repo"
        entry = json.loads(JSONFormatter().format(record))
        assert entry["message"] == "pull a"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "reposync.x"
        assert entry["target"] == "/tmp/repo"

    def test_no_target_field_by_default(self) -> None:
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "m", None, None)
        assert "target" not in json.loads(JSONFormatter().format(record))
