"""
Configuration type definitions and exceptions for isomap.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class ConfigVersion(Enum):
    """Configuration version stamped into the settings store."""
    CURRENT = "1.0"


class ConfigError(Exception):
    """Raised when a configuration value is invalid."""
    pass


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str]
