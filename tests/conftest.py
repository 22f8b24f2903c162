from __future__ import annotations

from datetime import datetime

import pytest

from src.shift_payroll.shift_payroll.container import build_container
from src.shift_payroll.shift_payroll.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 2, 10, 12, 0, 0)


@pytest.fixture
def container():
    return build_container()


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()
