"""
Settings validation system for isomap.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        last_map = self.settings.last_map
        if last_map is None:
            warnings.append("No map opened yet")
        elif not last_map.exists():
            warnings.append(f"Last map no longer exists: {last_map}")

        if self.settings.render.stride <= 0:
            errors.append(f"Cell stride must be positive: {self.settings.render.stride}")

        width, height = self.settings.render.viewport_size
        if width <= 0 or height <= 0:
            errors.append(f"Viewport size must be positive: {width}x{height}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
