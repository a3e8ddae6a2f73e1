"""Fixtures for statistics tests."""

from decimal import Decimal

import pytest

from app.orders.models.order import OrderStatus, PaymentMethod, PaymentStatus
from app.stats.dependencies import get_order_statistics_repository
from tests.utils.fakes import FakeOrder, FakeOrderStatisticsRepository


@pytest.fixture
def sample_orders() -> list[FakeOrder]:
    """Two revenue orders and one pending order, all inside the October window."""
    return [
        FakeOrder(status=OrderStatus.CONFIRMED, final_total=Decimal("100.00")),
        FakeOrder(
            status=OrderStatus.PENDING,
            final_total=Decimal("50.00"),
            payment_status=PaymentStatus.PENDING,
            payment_method=PaymentMethod.COD,
        ),
        FakeOrder(status=OrderStatus.DELIVERED, final_total=Decimal("200.00")),
    ]


@pytest.fixture
def fake_repository(sample_orders) -> FakeOrderStatisticsRepository:
    return FakeOrderStatisticsRepository(sample_orders)


@pytest.fixture
def override_repository(test_app):
    """Install a repository double for the statistics routes."""

    def install(repository) -> None:
        test_app.dependency_overrides[get_order_statistics_repository] = lambda: repository

    return install
