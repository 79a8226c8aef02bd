"""Shared utilities for the income report."""

from income_report.utils.validators import validate_dataframe
from income_report.utils.types import DomainResult, ValidationOutcome
