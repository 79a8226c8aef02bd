"""Shared fixtures for income report tests."""

import io
from datetime import date

import pytest
from rich.console import Console

from income_report.domains.sales.models import SalesRecord


@pytest.fixture
def make_record():
    """Factory for hand-built sales records with sensible defaults."""

    def _make(
        month: int = 2,
        department: str = "Men's Clothing",
        quantity: int = 10,
        unit_price: float = 100.0,
        base_cost: float = 80.0,
        product_id: str = "MENS-101-M-BK-US1",
        day: int = 15,
    ) -> SalesRecord:
        return SalesRecord(
            date_sold=date(2023, month, day),
            department_name=department,
            product_id=product_id,
            quantity_sold=quantity,
            unit_price=unit_price,
            base_cost=base_cost,
            volume_discount=int(quantity * 0.1),
        )

    return _make


@pytest.fixture
def capture_console() -> Console:
    """A colourless console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)
