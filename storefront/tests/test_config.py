from pathlib import Path

from storefront.app.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("STOREFRONT_ORDER_LOG_PATH", raising=False)
    s = Settings(_env_file=None)
    assert s.port == 8080
    assert s.order_log_path == Path("ecommerce.log")
    assert s.log_format == "text"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("STOREFRONT_PORT", "9090")
    monkeypatch.setenv("STOREFRONT_ORDER_LOG_PATH", "/tmp/orders.log")
    s = Settings(_env_file=None)
    assert s.port == 9090
    assert s.order_log_path == Path("/tmp/orders.log")
