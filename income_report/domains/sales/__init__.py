"""Sales domain — synthetic data generation, quarterly aggregation, and reporting."""

from rich.console import Console

from income_report.config import ReportConfig
from income_report.domains.sales.aggregate import build_quarterly_report, records_to_frame
from income_report.domains.sales.generate import generate_sales_data
from income_report.domains.sales.models import SALES_SCHEMA
from income_report.domains.sales.report import quarterly_sales_report
from income_report.utils.validators import validate_dataframe


def _generate(config: ReportConfig):
    return generate_sales_data(config.record_count, seed=config.seed, year=config.year)


def validate(config: ReportConfig) -> dict:
    """Validate that the generated dataset satisfies the sales schema."""
    try:
        frame = records_to_frame(_generate(config))
        result = validate_dataframe(frame, SALES_SCHEMA)

        match result:
            case {"valid": True}:
                return {"status": "ok", "row_count": len(frame)}
            case {"valid": False, "errors": errs}:
                return {"status": "error", "message": "; ".join(errs[:3])}
    except ValueError as exc:
        return {"status": "error", "message": str(exc)}


def run(config: ReportConfig, out: Console | None = None) -> None:
    """Generate the dataset and print the quarterly report."""
    records = _generate(config)
    quarterly_sales_report(records, out=out, fmt=config.output_format, top_n=config.top_n)
