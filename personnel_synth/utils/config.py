"""
Generator configuration: value ranges, chain depth and output settings.

Defaults reproduce the constants of the original record generator. A YAML
file can override any of them.
"""

from dataclasses import dataclass, field, fields, replace
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from faker.config import AVAILABLE_LOCALES

from ..errors import ConfigError

# Latest date of birth the field generators can produce.
LATEST_DATE_OF_BIRTH = date(2000, 12, 31)

SUPPORTED_CODECS = ("null", "deflate")

# Salaries are written as Avro longs.
MAX_SALARY = 2**63 - 1


@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration for one generation run."""

    # Fake-data provider
    locale: str = "en_GB"

    # Manager chain depth is min_manager_depth + randrange(extra_manager_depth_range)
    min_manager_depth: int = 2
    extra_manager_depth_range: int = 3

    # Compensation
    min_salary: int = 20_000
    extra_salary_range: int = 100_000
    salary_bonus_range: int = 10_000

    min_working_age: int = 18
    max_phone_numbers: int = 3
    max_emergency_contacts: int = 3

    # Upper bound for hire dates; None means today at pipeline construction
    reference_date: Optional[date] = None

    # Output
    progress_interval: int = 100_000
    top_manager_uid: str = "Bob"
    delimited_extensions: Tuple[str, ...] = field(default=("csv",))
    codec: str = "null"

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Check value ranges, raising ConfigError on the first problem."""
        positive = [
            "min_manager_depth",
            "extra_manager_depth_range",
            "extra_salary_range",
            "salary_bonus_range",
            "max_phone_numbers",
            "max_emergency_contacts",
            "progress_interval",
        ]
        for name in positive:
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

        if self.min_salary < 0:
            raise ConfigError(f"min_salary must not be negative, got {self.min_salary}")
        if self.min_salary + self.extra_salary_range - 1 > MAX_SALARY:
            raise ConfigError(
                f"min_salary + extra_salary_range must not exceed {MAX_SALARY + 1}"
            )
        if self.salary_bonus_range - 1 > MAX_SALARY:
            raise ConfigError(f"salary_bonus_range must not exceed {MAX_SALARY + 1}")
        if self.min_working_age < 0:
            raise ConfigError(
                f"min_working_age must not be negative, got {self.min_working_age}"
            )
        if (
            not isinstance(self.locale, str)
            or self.locale.replace("-", "_") not in AVAILABLE_LOCALES
        ):
            raise ConfigError(f"Unsupported locale: {self.locale!r}")
        if not self.top_manager_uid:
            raise ConfigError("top_manager_uid must not be empty")
        if self.codec not in SUPPORTED_CODECS:
            available = ", ".join(SUPPORTED_CODECS)
            raise ConfigError(f"Unknown codec: {self.codec}. Available: {available}")

        if self.reference_date is not None:
            earliest = LATEST_DATE_OF_BIRTH.replace(
                year=LATEST_DATE_OF_BIRTH.year + self.min_working_age
            )
            if self.reference_date < earliest:
                raise ConfigError(
                    f"reference_date {self.reference_date} is before {earliest}; "
                    "hire dates could not respect the minimum working age"
                )

    def with_overrides(self, **overrides: Any) -> "GeneratorConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)


def config_from_dict(data: Dict[str, Any]) -> GeneratorConfig:
    """Build a GeneratorConfig from a plain mapping."""
    known = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    values = dict(data)
    if "delimited_extensions" in values:
        extensions = values["delimited_extensions"]
        if isinstance(extensions, str):
            extensions = [extensions]
        values["delimited_extensions"] = tuple(
            str(ext).lower().lstrip(".") for ext in extensions
        )
    if isinstance(values.get("reference_date"), str):
        try:
            values["reference_date"] = date.fromisoformat(values["reference_date"])
        except ValueError as e:
            raise ConfigError(f"Invalid reference_date: {e}") from e

    return GeneratorConfig(**values)


def load_config(config_path: Union[str, Path]) -> GeneratorConfig:
    """
    Load generator settings from a YAML file.

    The file may hold the settings at the top level or under a
    ``generator`` key.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings
    """
    config_path = Path(config_path)
    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    data = data.get("generator", data)
    if not isinstance(data, dict):
        raise ConfigError(f"'generator' section in {config_path} must be a mapping")

    return config_from_dict(data)
