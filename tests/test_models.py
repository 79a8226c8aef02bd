"""
Tests for `domains/sales/models.py`.

Covers:
- Month to quarter mapping is total (every int lands in a quarter).
- Department label, abbreviation and number stay aligned.
- Derived money fields on SalesRecord, including the zero-sales guard.
"""

from __future__ import annotations

import dataclasses

import pytest

from income_report.domains.sales.models import (
    COLOR_CODES,
    MANUFACTURING_SITES,
    SIZE_CODES,
    Department,
    Quarter,
    percentage,
    quarter_for_month,
)


@pytest.mark.parametrize(
    "month, expected",
    [
        (1, Quarter.Q1),
        (2, Quarter.Q1),
        (3, Quarter.Q1),
        (4, Quarter.Q2),
        (5, Quarter.Q2),
        (6, Quarter.Q2),
        (7, Quarter.Q3),
        (8, Quarter.Q3),
        (9, Quarter.Q3),
        (10, Quarter.Q4),
        (11, Quarter.Q4),
        (12, Quarter.Q4),
    ],
)
def test_quarter_for_month(month: int, expected: Quarter) -> None:
    assert quarter_for_month(month) == expected


@pytest.mark.parametrize("month", [0, 13, -1])
def test_quarter_for_month_out_of_range_falls_into_q4(month: int) -> None:
    assert quarter_for_month(month) == Quarter.Q4


def test_quarters_sort_lexicographically() -> None:
    assert sorted([Quarter.Q4, Quarter.Q1, Quarter.Q3, Quarter.Q2]) == ["Q1", "Q2", "Q3", "Q4"]


def test_departments_are_aligned() -> None:
    departments = list(Department)

    assert len(departments) == 8
    assert [d.abbreviation for d in departments] == [
        "MENS", "WOMN", "CHLD", "ACCS", "FOOT", "OUTR", "SPRT", "UNDR",
    ]
    assert [d.number for d in departments] == list(range(1, 9))
    assert Department.MENS.label == "Men's Clothing"
    assert Department.UNDR.label == "Undergarments"


def test_code_tables() -> None:
    assert SIZE_CODES == ("XS", "S", "M", "L", "XL")
    assert len(COLOR_CODES) == 8
    assert len(MANUFACTURING_SITES) == 10


def test_sales_record_derived_values(make_record) -> None:
    record = make_record(month=2, quantity=10, unit_price=100.0, base_cost=80.0)

    assert record.quarter == Quarter.Q1
    assert record.total_sales == pytest.approx(1000.0)
    assert record.total_cost == pytest.approx(800.0)
    assert record.profit == pytest.approx(200.0)
    assert record.profit_percentage == pytest.approx(20.0)
    assert record.volume_discount == 1


def test_sales_record_zero_sales_percentage_is_zero(make_record) -> None:
    record = make_record(unit_price=0.0, base_cost=0.0)

    assert record.total_sales == 0
    assert record.profit_percentage == 0.0


def test_sales_record_is_immutable(make_record) -> None:
    record = make_record()

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.quantity_sold = 5


def test_percentage_guards_zero_whole() -> None:
    assert percentage(5.0, 0.0) == 0.0
    assert percentage(50.0, 200.0) == pytest.approx(25.0)
