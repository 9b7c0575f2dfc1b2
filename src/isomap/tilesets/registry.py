"""
Tile registry: integer tile codes to atlas regions.

A registry owns exactly one atlas image; every TileDefinition points into
it. Built once from the map description and read-only while rendering.
"""

import logging
from typing import Any, Iterable, Iterator, Mapping, Optional

from ..errors import UnknownTileCode
from .models import TileDefinition


class TileRegistry:
    """Map integer codes to TileDefinitions sharing one atlas.

    Registering an existing code overwrites it (last write wins).
    """

    def __init__(self, image: Any = None, source: Optional[str] = None):
        """Initialize the registry.

        Args:
            image: Shared atlas (a Pillow image when loaded from disk)
            source: Where the atlas came from, for diagnostics
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.image = image
        self.source = source
        self._tiles: dict[int, TileDefinition] = {}

    @classmethod
    def from_mapping(
        cls,
        image: Any,
        tiles: Mapping[int, TileDefinition],
        source: Optional[str] = None,
    ) -> "TileRegistry":
        """Build a registry from an already parsed code -> definition mapping."""
        registry = cls(image, source)
        for code, definition in tiles.items():
            registry.register(code, definition)
        return registry

    def register(self, code: int, definition: TileDefinition) -> None:
        """Insert or overwrite the definition for a code."""
        if code in self._tiles:
            self.logger.debug(f"Tile code {code} redefined, last definition wins")
        self._tiles[code] = definition

    def resolve(self, code: int) -> TileDefinition:
        """Return the definition for a code.

        Raises:
            UnknownTileCode: If the code was never registered
        """
        try:
            return self._tiles[code]
        except KeyError:
            raise UnknownTileCode(code) from None

    def get(self, code: int) -> Optional[TileDefinition]:
        """Return the definition for a code, or None."""
        return self._tiles.get(code)

    def codes(self) -> list[int]:
        """Registered codes in ascending order."""
        return sorted(self._tiles)

    def missing(self, codes: Iterable[int]) -> list[int]:
        """Return the codes from `codes` that have no definition, sorted."""
        return sorted({code for code in codes if code not in self._tiles})

    def __contains__(self, code: object) -> bool:
        return code in self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[int]:
        return iter(self.codes())

    def __repr__(self) -> str:
        return f"TileRegistry({len(self._tiles)} tiles, source={self.source!r})"
