"""Sales record types, code tables and pandera schemas for the income report."""

from dataclasses import dataclass
from datetime import date
from enum import Enum, StrEnum

from pandera.pandas import Check, Column, DataFrameSchema

SIZE_CODES = ("XS", "S", "M", "L", "XL")
COLOR_CODES = ("BK", "BL", "GR", "RD", "YL", "OR", "WT", "GY")
MANUFACTURING_SITES = ("US1", "US2", "US3", "UK1", "UK2", "UK3", "JP1", "JP2", "JP3", "CA1")


class Department(Enum):
    """Product departments. Member name is the abbreviation used in product ids."""

    MENS = "Men's Clothing"
    WOMN = "Women's Clothing"
    CHLD = "Children's Clothing"
    ACCS = "Accessories"
    FOOT = "Footwear"
    OUTR = "Outerwear"
    SPRT = "Sportswear"
    UNDR = "Undergarments"

    @property
    def label(self) -> str:
        return self.value

    @property
    def abbreviation(self) -> str:
        return self.name

    @property
    def number(self) -> int:
        # 1-based position in declaration order
        return list(Department).index(self) + 1


DEPARTMENT_LABELS = [d.label for d in Department]


class Quarter(StrEnum):
    Q1 = "Q1"
    Q2 = "Q2"
    Q3 = "Q3"
    Q4 = "Q4"


def quarter_for_month(month: int) -> Quarter:
    match month:
        case m if 1 <= m <= 3:
            return Quarter.Q1
        case m if 4 <= m <= 6:
            return Quarter.Q2
        case m if 7 <= m <= 9:
            return Quarter.Q3
        case _:
            return Quarter.Q4


def percentage(part: float, whole: float) -> float:
    """part / whole as a percentage, 0.0 when whole is zero."""
    if whole == 0:
        return 0.0
    return part / whole * 100.0


@dataclass(frozen=True)
class SalesRecord:
    date_sold: date
    department_name: str
    product_id: str
    quantity_sold: int
    unit_price: float
    base_cost: float
    # Carried for completeness, nothing downstream reads it
    volume_discount: int = 0

    @property
    def quarter(self) -> Quarter:
        return quarter_for_month(self.date_sold.month)

    @property
    def total_sales(self) -> float:
        return self.quantity_sold * self.unit_price

    @property
    def total_cost(self) -> float:
        return self.quantity_sold * self.base_cost

    @property
    def profit(self) -> float:
        return self.total_sales - self.total_cost

    @property
    def profit_percentage(self) -> float:
        return percentage(self.profit, self.total_sales)


# Flattened record frame as produced by aggregate.records_to_frame; no column may hold nulls
SALES_SCHEMA = DataFrameSchema(
    columns={
        "date_sold": Column("datetime64[ns]"),
        "quarter": Column(str, Check.isin([q.value for q in Quarter])),
        "department": Column(str, Check.isin(DEPARTMENT_LABELS)),
        "product_id": Column(str, Check.str_matches(r"^[A-Z]{4}-\d{3}-[A-Z]{1,2}-[A-Z]{2}-[A-Z]{2}\d$")),
        "quantity_sold": Column(int, Check.in_range(1, 100)),
        "unit_price": Column(float, Check.greater_than(0)),
        "base_cost": Column(float, Check.greater_than(0)),
        "volume_discount": Column(int, Check.greater_than_or_equal_to(0)),
        "total_sales": Column(float),
        "profit": Column(float),
        "profit_percentage": Column(float),
    },
    checks=[
        Check(lambda df: df["base_cost"] < df["unit_price"], error="base_cost must be below unit_price"),
    ],
    strict=False,
    coerce=True,
)

# Per-quarter department rollup
DEPARTMENT_SUMMARY_SCHEMA = DataFrameSchema(
    columns={
        "department": Column(str, Check.isin(DEPARTMENT_LABELS), unique=True),
        "sales": Column(float, Check.greater_than_or_equal_to(0)),
        "profit": Column(float),
        "profit_percentage": Column(float),
    },
    strict=False,
    coerce=True,
)
