"""Render quarterly income summaries as rich tables, plain text or JSON.

Each renderer takes the output of ``build_quarterly_report`` and nothing
else, so aggregation can be tested without going through a console.
"""

import json
from collections.abc import Sequence

import pandas as pd
from rich import box
from rich.console import Console
from rich.table import Table

from income_report.config import REPORT_FORMATS
from income_report.domains.sales.aggregate import (
    DEFAULT_TOP_N,
    AggResult,
    QuarterSummary,
    build_quarterly_report,
)
from income_report.domains.sales.models import SalesRecord

type ReportFormat = str  # "table" | "text" | "json"

REPORT_TITLE = "Quarterly Sales Report"

DEPARTMENT_HEADERS = ["Department", "Sales", "Profit", "Profit Percentage"]
ORDER_HEADERS = ["Product ID", "Quantity Sold", "Unit Price", "Total Sales", "Profit", "Profit %"]

# Cell widths for the plain-text layout, borders excluded
_DEPARTMENT_WIDTHS = [23, 19, 19, 20]
_ORDER_WIDTHS = [23, 19, 19, 19, 19, 20]

console = Console()


def format_currency(value: float) -> str:
    return f"${value:,.2f}"


def summary_line(summary: QuarterSummary) -> str:
    return (
        f"{summary.quarter}: Sales: {format_currency(summary.total_sales)}, "
        f"Profit: {format_currency(summary.total_profit)}, "
        f"Profit Percentage: {summary.profit_percentage:.2f}%"
    )


# --- rich tables -----------------------------------------------------------

def _department_table(summary: QuarterSummary) -> Table:
    table = Table(title="By Department", title_justify="left", box=box.SQUARE)
    table.add_column(DEPARTMENT_HEADERS[0], style="cyan", no_wrap=True)
    for header in DEPARTMENT_HEADERS[1:]:
        table.add_column(header, justify="right")

    for row in summary.departments.itertuples(index=False):
        table.add_row(
            row.department,
            format_currency(row.sales),
            format_currency(row.profit),
            f"{row.profit_percentage:.2f}%",
        )
    return table


def _orders_table(summary: QuarterSummary) -> Table:
    table = Table(title="Top Sales Orders", title_justify="left", box=box.SQUARE)
    table.add_column(ORDER_HEADERS[0], style="cyan", no_wrap=True)
    for header in ORDER_HEADERS[1:]:
        table.add_column(header, justify="right")

    for row in summary.top_orders.itertuples(index=False):
        table.add_row(
            row.product_id,
            str(row.quantity_sold),
            f"{row.unit_price:.2f}",
            f"{row.total_sales:.2f}",
            f"{row.profit:.2f}",
            f"{row.profit_percentage:.2f}%",
        )
    return table


def render_table(summaries: Sequence[QuarterSummary], out: Console) -> None:
    out.print(REPORT_TITLE, style="bold", markup=False)
    for summary in summaries:
        out.print()
        out.print(summary_line(summary), style="bold", markup=False, highlight=False)
        out.print(_department_table(summary))
        out.print(_orders_table(summary))


# --- plain text ------------------------------------------------------------

def _border(left: str, mid: str, right: str, widths: list[int]) -> str:
    return left + mid.join("─" * w for w in widths) + right


def _header(labels: list[str], widths: list[int]) -> str:
    return "│" + "│".join(f"{label:^{w}}" for label, w in zip(labels, widths)) + "│"


def _boxed(labels: list[str], widths: list[int], rows: list[str]) -> list[str]:
    return [
        _border("┌", "┬", "┐", widths),
        _header(labels, widths),
        _border("├", "┼", "┤", widths),
        *rows,
        _border("└", "┴", "┘", widths),
    ]


def render_text(summaries: Sequence[QuarterSummary]) -> list[str]:
    """Fixed-width, box-drawn lines for terminals without rich rendering."""
    lines = [REPORT_TITLE, "-" * len(REPORT_TITLE)]

    for summary in summaries:
        lines.append(summary_line(summary))

        lines.append("By Department:")
        dept_rows = [
            f"│ {row.department:<21} │ {format_currency(row.sales):>17} │ "
            f"{format_currency(row.profit):>17} │ {row.profit_percentage:>17.2f}% │"
            for row in summary.departments.itertuples(index=False)
        ]
        lines.extend(_boxed(DEPARTMENT_HEADERS, _DEPARTMENT_WIDTHS, dept_rows))
        lines.append("")

        lines.append("Top Sales Orders:")
        order_rows = [
            f"│ {row.product_id:<21} │ {row.quantity_sold:>17} │ {row.unit_price:>17.2f} │ "
            f"{row.total_sales:>17.2f} │ {row.profit:>17.2f} │ {row.profit_percentage:>17.2f}% │"
            for row in summary.top_orders.itertuples(index=False)
        ]
        lines.extend(_boxed(ORDER_HEADERS, _ORDER_WIDTHS, order_rows))
        lines.append("")

    return lines


# --- json ------------------------------------------------------------------

def _frame_records(df: pd.DataFrame) -> list[dict]:
    return json.loads(df.round(2).to_json(orient="records"))


def render_json(summaries: Sequence[QuarterSummary]) -> str:
    document = {
        "title": REPORT_TITLE,
        "quarters": [
            {
                "quarter": str(s.quarter),
                "total_sales": round(s.total_sales, 2),
                "total_profit": round(s.total_profit, 2),
                "profit_percentage": round(s.profit_percentage, 2),
                "order_count": s.order_count,
                "departments": _frame_records(s.departments),
                "top_orders": _frame_records(s.top_orders),
            }
            for s in summaries
        ],
    }
    return json.dumps(document, indent=2)


def print_report(
    summaries: Sequence[QuarterSummary],
    fmt: ReportFormat = "table",
    out: Console | None = None,
) -> None:
    out = out or console

    match fmt:
        case "table":
            render_table(summaries, out)
        case "text":
            out.out("\n".join(render_text(summaries)), highlight=False)
        case "json":
            out.out(render_json(summaries), highlight=False)
        case other:
            raise ValueError(f"Unsupported report format: {other}")


def quarterly_sales_report(
    records: Sequence[SalesRecord],
    out: Console | None = None,
    fmt: ReportFormat = "table",
    top_n: int = DEFAULT_TOP_N,
) -> AggResult:
    """Aggregate ``records`` and print the quarterly report."""
    if fmt not in REPORT_FORMATS:
        raise ValueError(f"Unsupported report format: {fmt}")

    summaries = build_quarterly_report(records, top_n=top_n)
    print_report(summaries, fmt=fmt, out=out)
    return summaries
