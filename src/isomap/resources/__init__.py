"""
Bundled resources for isomap.
"""

from pathlib import Path

RESOURCES_DIR = Path(__file__).parent
MAPS_DIR = RESOURCES_DIR / "maps"
DEFAULT_MAP = MAPS_DIR / "outside.json"


def get_builtin_maps() -> list[Path]:
    """Return the map descriptions shipped with the package."""
    return sorted(MAPS_DIR.glob("*.json"))
