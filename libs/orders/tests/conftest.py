"""Shared fixtures for order library tests."""

from unittest.mock import MagicMock

import pytest

from libs.orders.manager import OrderManager
from libs.orders.protocols import Notifier, PaymentProcessor, StockChecker


@pytest.fixture()
def mock_stock() -> MagicMock:
    """Stock checker that reports stock available by default."""
    mock = MagicMock(spec=StockChecker)
    mock.check_stock.return_value = True
    return mock


@pytest.fixture()
def mock_payment() -> MagicMock:
    """Payment processor that approves by default."""
    mock = MagicMock(spec=PaymentProcessor)
    mock.process_payment.return_value = True
    return mock


@pytest.fixture()
def mock_notifier() -> MagicMock:
    """Notifier double."""
    return MagicMock(spec=Notifier)


@pytest.fixture()
def manager(
    mock_stock: MagicMock, mock_payment: MagicMock, mock_notifier: MagicMock
) -> OrderManager:
    """OrderManager wired to mock collaborators."""
    return OrderManager(mock_stock, mock_payment, mock_notifier)
