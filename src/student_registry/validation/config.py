"""Validation configuration constants.

This module centralizes validation thresholds and format patterns.
Adjust the constants to change the built-in defaults, or pass a
ValidationSettings loaded from YAML to override the tunable ones per call.

Tunable settings (YAML):
    eligibility:
      min_age: 16
      max_age: 35
    pagination:
      default_limit: 10
      max_limit: 100
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

# ============================================================================
# ELIGIBILITY
# ============================================================================

# Inclusive applicant age range (calendar-year difference)
MIN_STUDENT_AGE = 16
MAX_STUDENT_AGE = 35

# ============================================================================
# PAGINATION
# ============================================================================

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100  # Over-limit requests are rejected, not clamped

# ============================================================================
# FORMAT PATTERNS
# ============================================================================

# Optional leading '+', then digits, spaces, hyphens and parentheses
PHONE_PATTERN = re.compile(r"^\+?[0-9\-()\s]+$")

# Zero-padded 24-hour clock so that string order equals time order
TIME_PATTERN = re.compile(r"^([01][0-9]|2[0-3]):[0-5][0-9]$")

URL_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)


@dataclass(frozen=True)
class ValidationSettings:
    """Tunable validation thresholds.

    Attributes:
        min_age: Youngest accepted applicant age.
        max_age: Oldest accepted applicant age.
        default_limit: Page size used when a listing query omits ``limit``.
        max_limit: Largest accepted ``limit``.
    """

    min_age: int = MIN_STUDENT_AGE
    max_age: int = MAX_STUDENT_AGE
    default_limit: int = DEFAULT_LIMIT
    max_limit: int = MAX_LIMIT

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.min_age < 0 or self.min_age > self.max_age:
            raise ValueError(
                f"Invalid age range: min_age={self.min_age}, max_age={self.max_age}"
            )
        if self.max_limit < 1:
            raise ValueError(f"max_limit must be positive, got {self.max_limit}")
        if not 1 <= self.default_limit <= self.max_limit:
            raise ValueError(
                f"default_limit must be between 1 and max_limit ({self.max_limit}), "
                f"got {self.default_limit}"
            )


DEFAULT_SETTINGS = ValidationSettings()


def load_settings(config_file: Path) -> ValidationSettings:
    """Load validation settings from a YAML file.

    Keys that are not present keep their built-in defaults.

    Args:
        config_file: Path to the YAML configuration file.

    Returns:
        ValidationSettings with the file's overrides applied.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid YAML or holds inconsistent values.

    Examples:
        >>> settings = load_settings(Path("config/validation.yaml"))
        >>> settings.max_limit
        100
    """
    if not config_file.exists():
        raise FileNotFoundError(f"Validation config not found: {config_file}")
    try:
        with config_file.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to read validation config {config_file}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Validation config {config_file} must be a mapping")

    eligibility = _section(data, "eligibility", config_file)
    pagination = _section(data, "pagination", config_file)
    try:
        settings = ValidationSettings(
            min_age=int(eligibility.get("min_age", MIN_STUDENT_AGE)),
            max_age=int(eligibility.get("max_age", MAX_STUDENT_AGE)),
            default_limit=int(pagination.get("default_limit", DEFAULT_LIMIT)),
            max_limit=int(pagination.get("max_limit", MAX_LIMIT)),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid validation config {config_file}: {e}") from e
    logger.debug("Loaded validation settings from %s: %s", config_file, settings)
    return settings


def _section(data: Dict[str, Any], name: str, config_file: Path) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Section '{name}' in {config_file} must be a mapping")
    return section
