"""
Board configuration for Minesweeper games.
"""
from dataclasses import dataclass

from .exceptions import InvalidConfigurationError


# ============================================================================
# Constants
# ============================================================================

# Pixel size of one tile when translating pointer positions
TILE_SIZE = 30


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
    """

    width: int = 9
    height: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("width", "height", "mine_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigurationError(
                    f"{name} must be an integer, got {value!r}"
                )
        if self.width < 1 or self.height < 1:
            raise InvalidConfigurationError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise InvalidConfigurationError("Number of mines cannot be negative")
        if self.mine_count > self.area:
            raise InvalidConfigurationError(
                f"Too many mines (max {self.area})"
            )

    @property
    def area(self) -> int:
        """Total number of tiles."""
        return self.width * self.height

    @property
    def safe_tiles(self) -> int:
        """Number of tiles without a mine."""
        return self.area - self.mine_count
