"""
Path-related settings for isomap.
"""

from pathlib import Path
from typing import List, Optional, Union

from .base import SettingsSection

MAX_RECENT_MAPS = 10


class PathSettings(SettingsSection):
    """Manages path-related settings."""

    @property
    def last_map(self) -> Optional[Path]:
        """Get the most recently opened map description."""
        path_str = self._get_str("paths/last_map", "")
        return Path(path_str) if path_str else None

    @last_map.setter
    def last_map(self, value: Optional[Path]) -> None:
        """Set the most recently opened map description."""
        self.settings.setValue("paths/last_map", str(value) if value else "")
        self.settings.sync()

    @property
    def recent_maps(self) -> List[str]:
        """Get list of recently opened maps."""
        return self._get_list("paths/recent_maps", [])

    def add_recent_map(self, file_path: Union[str, Path]) -> None:
        """Add map to the recent list and make it the last map."""
        recent = self.recent_maps
        file_str = str(file_path)

        if file_str in recent:
            recent.remove(file_str)
        recent.insert(0, file_str)
        recent = recent[:MAX_RECENT_MAPS]

        self.settings.setValue("paths/recent_maps", recent)
        self.settings.setValue("paths/last_map", file_str)
        self.settings.sync()
