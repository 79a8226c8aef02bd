"""Build quarterly and per-department rollups from sales records."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd

from income_report.domains.sales.models import (
    DEPARTMENT_SUMMARY_SCHEMA,
    Quarter,
    SalesRecord,
    percentage,
)

type AggResult = list[QuarterSummary]

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 3

RECORD_COLUMNS = [
    "date_sold",
    "quarter",
    "department",
    "product_id",
    "quantity_sold",
    "unit_price",
    "base_cost",
    "volume_discount",
]
ORDER_COLUMNS = [
    "product_id",
    "quantity_sold",
    "unit_price",
    "total_sales",
    "profit",
    "profit_percentage",
]


@dataclass(frozen=True)
class QuarterSummary:
    quarter: Quarter
    total_sales: float
    total_profit: float
    profit_percentage: float
    order_count: int
    departments: pd.DataFrame
    top_orders: pd.DataFrame


def records_to_frame(records: Sequence[SalesRecord]) -> pd.DataFrame:
    """Flatten records into a frame, in input order, with derived money columns."""
    rows = [
        {
            "date_sold": r.date_sold,
            "quarter": r.quarter.value,
            "department": r.department_name,
            "product_id": r.product_id,
            "quantity_sold": r.quantity_sold,
            "unit_price": r.unit_price,
            "base_cost": r.base_cost,
            "volume_discount": r.volume_discount,
        }
        for r in records
    ]
    df = pd.DataFrame(rows, columns=RECORD_COLUMNS)
    df["date_sold"] = pd.to_datetime(df["date_sold"])
    df["unit_price"] = df["unit_price"].astype(float)
    df["base_cost"] = df["base_cost"].astype(float)

    df["total_sales"] = df["quantity_sold"] * df["unit_price"]
    df["total_cost"] = df["quantity_sold"] * df["base_cost"]
    df["profit"] = df["total_sales"] - df["total_cost"]

    sales = df["total_sales"].to_numpy(dtype=float)
    ratio = np.divide(
        df["profit"].to_numpy(dtype=float),
        sales,
        out=np.zeros(len(df)),
        where=sales != 0,
    )
    df["profit_percentage"] = ratio * 100.0
    return df


def _aggregate_departments(quarter_df: pd.DataFrame) -> pd.DataFrame:
    """Sales and profit per department, sorted by department name.

    ``profit_percentage`` is the percentage of the last record seen for the
    department, not a blend of the quarter's records.
    """
    agg = quarter_df.groupby("department", sort=True).agg(
        sales=("total_sales", "sum"),
        profit=("profit", "sum"),
        profit_percentage=("profit_percentage", "last"),
    ).reset_index()
    return DEPARTMENT_SUMMARY_SCHEMA.validate(agg)


def _top_orders(quarter_df: pd.DataFrame, top_n: int) -> pd.DataFrame:
    """Highest-profit orders first; ties keep input order."""
    ranked = quarter_df.sort_values("profit", ascending=False, kind="stable")
    return ranked.head(top_n)[ORDER_COLUMNS].reset_index(drop=True)


def build_quarterly_report(
    records: Sequence[SalesRecord],
    top_n: int = DEFAULT_TOP_N,
) -> AggResult:
    """Aggregate records into one summary per quarter, ordered Q1 to Q4.

    Quarters with no records are omitted.
    """
    if top_n < 1:
        raise ValueError(f"top_n must be at least 1, got {top_n}")

    df = records_to_frame(records)
    results: AggResult = []

    for quarter, quarter_df in df.groupby("quarter", sort=True):
        total_sales = float(quarter_df["total_sales"].sum())
        total_profit = float(quarter_df["profit"].sum())

        summary = QuarterSummary(
            quarter=Quarter(quarter),
            total_sales=total_sales,
            total_profit=total_profit,
            profit_percentage=percentage(total_profit, total_sales),
            order_count=len(quarter_df),
            departments=_aggregate_departments(quarter_df),
            top_orders=_top_orders(quarter_df, top_n),
        )
        logger.debug(
            "%s: %d orders across %d departments, sales %.2f",
            summary.quarter, summary.order_count, len(summary.departments), total_sales,
        )
        results.append(summary)

    logger.info("Aggregated %d records into %d quarters", len(df), len(results))
    return results
