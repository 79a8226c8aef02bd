"""Shared type definitions for the income report."""

from enum import StrEnum


type ValidationOutcome = dict[str, bool | str | list[str]]
type DomainResult = dict[str, bool | str | int]


class ValidationStatus(StrEnum):
    OK = "ok"
    ERROR = "error"
