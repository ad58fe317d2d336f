from __future__ import annotations

from unittest.mock import Mock

import pytest

from sqlexpand.driver import ExecutionResult


@pytest.fixture
def mock_driver() -> Mock:
    """A driver double that records calls and returns statements unchanged from ``rebind``."""
    driver = Mock()
    driver.rebind.side_effect = lambda sql: sql
    driver.select.return_value = []
    driver.execute.return_value = ExecutionResult(rows_affected=0)
    return driver

