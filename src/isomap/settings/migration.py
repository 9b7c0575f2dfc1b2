"""
Settings version stamping for isomap.
"""

import logging
from typing import TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class SettingsMigrator:
    """Keeps the configuration version stamp current."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        """Stamp the current version on a fresh or foreign store."""
        current_version = str(self.settings.value("app/version", "") or "")

        if not current_version:
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.sync()
            logger.info("No configuration version found, initializing configuration")
        elif current_version != ConfigVersion.CURRENT.value:
            # No older formats exist; unknown keys are left alone
            logger.warning(
                f"Unknown configuration version {current_version}, "
                f"restamping as {ConfigVersion.CURRENT.value}"
            )
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.sync()
