from __future__ import annotations
import os
import tempfile

import pytest

# storefront.main builds a module-level app on import; keep its order log out of the cwd
os.environ.setdefault(
    "STOREFRONT_ORDER_LOG_PATH",
    os.path.join(tempfile.mkdtemp(prefix="storefront-test-"), "ecommerce.log"),
)

from fastapi.testclient import TestClient  # noqa: E402

from storefront.app.core.config import Settings  # noqa: E402
from storefront.main import create_app  # noqa: E402


@pytest.fixture
def order_log_path(tmp_path):
    return tmp_path / "ecommerce.log"


@pytest.fixture
def app(order_log_path):
    return create_app(Settings(order_log_path=order_log_path))


@pytest.fixture
def client(app):
    return TestClient(app)
