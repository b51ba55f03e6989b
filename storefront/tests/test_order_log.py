import pytest
from fastapi.testclient import TestClient

from storefront.app.core.config import Settings
from storefront.app.core.errors import StartupFatal
from storefront.app.models.shop import CartItem, Order, Product
from storefront.app.services.order_log import OrderLogger, format_order
from storefront.main import create_app


def _order() -> Order:
    laptop = Product(id=1, name="Laptop", category="Electronics", price=1000.0)
    return Order(
        items=[CartItem(product=laptop, quantity=2)],
        total_amount=2000.0,
        payment_type="card",
        address="1 Main St",
    )


def test_format_order_is_multiline():
    text = format_order(_order())
    lines = text.splitlines()
    assert lines[0].startswith("Order Details: total=2000.00")
    assert "payment_type='card'" in lines[0]
    assert lines[1].strip() == "- 2 x Laptop (id=1, category=Electronics) @ 1000.00 = 2000.00"


def test_record_appends(tmp_path):
    path = tmp_path / "orders" / "ecommerce.log"
    path.parent.mkdir()
    path.write_text("earlier line\n", encoding="utf-8")

    sink = OrderLogger(path)
    try:
        sink.record(_order())
        sink.record(_order())
    finally:
        sink.close()

    text = path.read_text(encoding="utf-8")
    assert text.startswith("earlier line\n")
    assert text.count("Order Details:") == 2


def test_each_sink_writes_only_its_own_file(tmp_path):
    first = OrderLogger(tmp_path / "a.log")
    second = OrderLogger(tmp_path / "b.log")
    try:
        first.record(_order())
    finally:
        second.close()
    first.record(_order())
    first.close()
    assert (tmp_path / "a.log").read_text(encoding="utf-8").count("Order Details:") == 2
    assert (tmp_path / "b.log").read_text(encoding="utf-8") == ""


def test_two_apps_keep_separate_order_logs(tmp_path):
    app_a = create_app(Settings(order_log_path=tmp_path / "a.log"))
    app_b = create_app(Settings(order_log_path=tmp_path / "b.log"))
    client_a, client_b = TestClient(app_a), TestClient(app_b)

    client_a.post("/add?id=1")
    assert client_a.post("/checkout", json={"payment_type": "card", "address": "x"}).status_code == 200
    client_b.post("/add?id=3&quantity=2")
    assert client_b.post("/checkout", json={"payment_type": "cash", "address": "y"}).status_code == 200

    a_text = (tmp_path / "a.log").read_text(encoding="utf-8")
    b_text = (tmp_path / "b.log").read_text(encoding="utf-8")
    assert "total=1000.00" in a_text and "total=100.00" not in a_text
    assert "total=100.00" in b_text and "total=1000.00" not in b_text


def test_unopenable_sink_is_fatal(tmp_path):
    # a directory cannot be opened for append
    with pytest.raises(StartupFatal):
        OrderLogger(tmp_path)


def test_create_app_aborts_when_sink_unavailable(tmp_path):
    with pytest.raises(StartupFatal):
        create_app(Settings(order_log_path=tmp_path))
