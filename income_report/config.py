"""Report configuration: profiles, pyproject overrides and defaults."""

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

type ConfigDict = dict[str, str | int | None]

logger = logging.getLogger(__name__)

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"

REPORT_FORMATS = ("table", "text", "json")
_INT_SETTINGS = ("record_count", "year", "top_n")


@dataclass(frozen=True)
class ReportConfig:
    record_count: int = 1000
    seed: int | None = None
    year: int = 2023
    top_n: int = 3
    output_format: str = "table"
    log_level: str = "WARNING"


def load_report_config(
    profile: str = "default",
    pyproject: Path | None = PYPROJECT,
) -> ReportConfig:
    match profile:
        case "default":
            config = ReportConfig()
        case "demo":
            config = ReportConfig(seed=42)
        case "test":
            config = ReportConfig(seed=0, record_count=50)
        case other:
            raise ValueError(f"Unknown profile: {other}")

    overrides = get_env_config(pyproject) if pyproject is not None else {}
    return apply_overrides(config, overrides)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_config(config: ReportConfig) -> ReportConfig:
    """Raise ``ValueError`` for any setting the report cannot run with."""
    for name in _INT_SETTINGS:
        value = getattr(config, name)
        if not _is_int(value):
            raise ValueError(f"{name} must be an integer, got {value!r}")
    if config.seed is not None and not _is_int(config.seed):
        raise ValueError(f"seed must be an integer, got {config.seed!r}")

    if config.record_count < 0:
        raise ValueError(f"record_count must be non-negative, got {config.record_count}")
    if config.top_n < 1:
        raise ValueError(f"top_n must be at least 1, got {config.top_n}")

    if config.output_format not in REPORT_FORMATS:
        raise ValueError(
            f"output_format must be one of {', '.join(REPORT_FORMATS)}, got {config.output_format!r}"
        )
    if config.log_level not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log_level: {config.log_level!r}")
    return config


def apply_overrides(config: ReportConfig, overrides: ConfigDict) -> ReportConfig:
    """Return ``config`` with known keys replaced; unknown keys are logged and ignored."""
    known = {f.name for f in fields(ReportConfig)}
    accepted = {}
    for key, value in overrides.items():
        key = key.replace("-", "_")
        if key not in known:
            logger.warning("Ignoring unknown report setting: %s", key)
            continue
        if value is not None:
            accepted[key] = value

    if isinstance(accepted.get("log_level"), str):
        accepted["log_level"] = accepted["log_level"].upper()
    return check_config(replace(config, **accepted))


def get_env_config(pyproject: Path = PYPROJECT) -> ConfigDict:
    """Read the ``[tool.income_report]`` table from pyproject.toml, if present."""
    if not pyproject.exists():
        return {}
    with open(pyproject, "rb") as f:
        data = tomllib.load(f)
    return data.get("tool", {}).get("income_report", {})
