"""Command-line entry point for the quarterly income report."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from income_report.config import REPORT_FORMATS, apply_overrides, load_report_config
from income_report.domains import sales
from income_report.utils.types import DomainResult

console = Console()
err_console = Console(stderr=True)

DOMAINS = {
    "sales": sales,
}


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def validate_all(config) -> list[DomainResult]:
    results = []
    for name, module in DOMAINS.items():
        match module.validate(config):
            case {"status": "ok", **rest}:
                results.append({"domain": name, "valid": True, **rest})
            case {"status": "error", "message": msg}:
                results.append({"domain": name, "valid": False, "error": msg})
            case _:
                results.append({"domain": name, "valid": False, "error": "Unknown validation result"})
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a quarterly income report for synthetic sales data")
    parser.add_argument("--profile", default="default", help="Config profile: default, demo or test")
    parser.add_argument("--seed", type=int, help="Seed for reproducible sales data")
    parser.add_argument("--count", type=int, dest="record_count", help="Number of sales records to generate")
    parser.add_argument("--top", type=int, dest="top_n", help="Orders to list per quarter")
    parser.add_argument("--format", choices=REPORT_FORMATS, dest="output_format", help="Report layout")
    parser.add_argument("--validate", action="store_true", help="Only validate the generated data")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress to stderr")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_report_config(args.profile)
        config = apply_overrides(config, {
            "seed": args.seed,
            "record_count": args.record_count,
            "top_n": args.top_n,
            "output_format": args.output_format,
            "log_level": "INFO" if args.verbose else None,
        })
    except ValueError as exc:
        parser.error(str(exc))

    setup_logging(config.log_level)

    if args.validate:
        results = validate_all(config)
        table = Table(title="Validation Results")
        table.add_column("Domain")
        table.add_column("Valid")
        table.add_column("Details")

        for r in results:
            status = "[green]✓[/green]" if r["valid"] else "[red]✗[/red]"
            detail = r.get("error", f"{r.get('row_count', 0)} rows")
            table.add_row(r["domain"], status, detail)

        console.print(table)

        if not all(r["valid"] for r in results):
            sys.exit(1)
        return

    for module in DOMAINS.values():
        module.run(config, out=console)


if __name__ == "__main__":
    main()
