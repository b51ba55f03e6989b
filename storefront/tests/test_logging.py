import json
import logging

from storefront.app.core.config import Settings
from storefront.app.core.logging import make_order_log_handler, setup_logging


def test_setup_logging_follows_settings():
    handler = setup_logging(Settings(_env_file=None, log_level="debug", log_format="json"))
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert root.handlers == [handler]
    assert logging.getLogger("uvicorn.access").handlers == [handler]

    record = logging.LogRecord("storefront.test", logging.INFO, __file__, 1, 'two\nlines "q"', None, None)
    doc = json.loads(handler.format(record))
    assert doc["level"] == "INFO"
    assert doc["logger"] == "storefront.test"
    assert doc["msg"] == 'two\nlines "q"'


def test_unknown_level_falls_back_to_info():
    setup_logging(Settings(_env_file=None, log_level="chatty"))
    assert logging.getLogger().level == logging.INFO


def test_order_log_handler_appends_with_timestamp(tmp_path):
    path = tmp_path / "nested" / "orders.log"
    handler = make_order_log_handler(path)
    try:
        record = logging.LogRecord("o", logging.INFO, __file__, 1, "Order Details: x", None, None)
        handler.handle(record)
    finally:
        handler.close()
    line = path.read_text(encoding="utf-8").strip()
    # "YYYY/MM/DD HH:MM:SS Order Details: x"
    assert line.endswith(" Order Details: x")
    assert line[4] == "/" and line[7] == "/"
