"""Synthesize random sales records for the quarterly income report."""

import logging
from datetime import date

import numpy as np

from income_report.domains.sales.models import (
    COLOR_CODES,
    MANUFACTURING_SITES,
    SIZE_CODES,
    Department,
    SalesRecord,
)

logger = logging.getLogger(__name__)

DEFAULT_RECORD_COUNT = 1000
DEFAULT_YEAR = 2023

DEPARTMENTS = list(Department)


def _choice(rng: np.random.Generator, options):
    return options[int(rng.integers(len(options)))]


def _build_product_id(rng: np.random.Generator, department: Department) -> str:
    """Compose ``ABBR-NXX-SIZE-COLOR-SITE`` for one record."""
    serial = int(rng.integers(1, 100))
    size = _choice(rng, SIZE_CODES)
    color = _choice(rng, COLOR_CODES)
    site = _choice(rng, MANUFACTURING_SITES)
    return f"{department.abbreviation}-{department.number}{serial:02d}-{size}-{color}-{site}"


def _generate_record(rng: np.random.Generator, year: int) -> SalesRecord:
    # Days capped at 28 so every month yields a valid date
    date_sold = date(year, int(rng.integers(1, 13)), int(rng.integers(1, 29)))
    department = _choice(rng, DEPARTMENTS)
    product_id = _build_product_id(rng, department)

    quantity_sold = int(rng.integers(1, 101))
    unit_price = int(rng.integers(25, 300)) + float(rng.random())
    discount = int(rng.integers(5, 21))
    base_cost = unit_price * (1 - discount / 100.0)

    return SalesRecord(
        date_sold=date_sold,
        department_name=department.label,
        product_id=product_id,
        quantity_sold=quantity_sold,
        unit_price=unit_price,
        base_cost=base_cost,
        volume_discount=int(quantity_sold * 0.1),
    )


def generate_sales_data(
    count: int = DEFAULT_RECORD_COUNT,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    year: int = DEFAULT_YEAR,
) -> list[SalesRecord]:
    """Generate ``count`` random sales records.

    Pass ``seed`` for a reproducible dataset, or ``rng`` to draw from an
    existing generator. With neither, fresh OS entropy is used.
    """
    if count < 0:
        raise ValueError(f"Record count must be non-negative, got {count}")
    if rng is None:
        rng = np.random.default_rng(seed)

    records = [_generate_record(rng, year) for _ in range(count)]
    logger.info("Generated %d sales records for %d (seed=%s)", len(records), year, seed)
    return records
