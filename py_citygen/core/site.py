"""
Site configuration for city layout generation.

``CityOptions`` describes the square site and every tunable of the layout
stages. Quantities that follow from the site size (half dimension, corner
distance, ring spacing, spoke angle) are derived properties and can never be
set independently.
"""

import math
from typing import Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger = structlog.get_logger()


class ConfigurationError(ValueError):
    """Raised when the options cannot describe a coherent city grid."""


class CityOptions(BaseModel):
    """Site size and layout tunables."""

    model_config = ConfigDict(frozen=True)

    base_dim: float = Field(default=200.0, description="Side length of the square site")

    # Rings
    num_rings: int = Field(default=4, description="Number of concentric ring roads")
    ring_points: int = Field(
        default=32, description="Segments used when sampling a ring outline"
    )
    ring_width: float = Field(default=4.0, description="Width of a ring road band")

    # Divisions
    num_divisions: int = Field(
        default=12, description="Number of angular slots a spoke may occupy"
    )
    division_width: Optional[float] = Field(
        default=None, description="Width of a division panel (defaults to ring_width)"
    )

    # River
    river_points: int = Field(
        default=32, description="Number of divisions when sampling the river curve"
    )

    # Cells
    cell_dim: float = Field(default=7.0, description="Lattice step between candidate cells")
    border_margin: float = Field(
        default=5.0, description="Minimum distance of a cell from the site border"
    )
    division_tolerance: float = Field(
        default=1.0, description="Triangle-inequality slack below which a cell touches a division"
    )
    ring_tolerance: Optional[float] = Field(
        default=None, description="Distance band around ring radii (defaults to cell_dim)"
    )

    @property
    def half_dim(self) -> float:
        return self.base_dim / 2

    @property
    def base_diagonal(self) -> float:
        """Distance from the site centre to a corner."""
        return math.sqrt(2 * self.half_dim ** 2)

    @property
    def ring_step(self) -> float:
        """Radius lost from one ring to the next."""
        return self.half_dim / self.num_rings

    @property
    def division_angle(self) -> float:
        """Angle between neighbouring division slots."""
        return (2 * math.pi) / self.num_divisions

    @property
    def effective_division_width(self) -> float:
        return self.ring_width if self.division_width is None else self.division_width

    @property
    def effective_ring_tolerance(self) -> float:
        return self.cell_dim if self.ring_tolerance is None else self.ring_tolerance

    def validate_layout(self) -> "CityOptions":
        """
        Fail fast on options that would produce undefined geometry.

        Returns:
            The options themselves, so calls can be chained

        Raises:
            ConfigurationError: If any option is out of range
        """
        problems = []

        if self.base_dim <= 0:
            problems.append(f"base_dim must be positive, got {self.base_dim}")
        if self.num_rings <= 0:
            problems.append(f"num_rings must be positive, got {self.num_rings}")
        if self.num_divisions < 0:
            problems.append(f"num_divisions must not be negative, got {self.num_divisions}")
        if self.cell_dim <= 0:
            problems.append(f"cell_dim must be positive, got {self.cell_dim}")
        if self.ring_points < 3:
            problems.append(f"ring_points must be at least 3, got {self.ring_points}")
        if self.river_points < 1:
            problems.append(f"river_points must be at least 1, got {self.river_points}")
        if self.ring_width < 0 or self.effective_division_width < 0:
            problems.append("ring_width and division_width must not be negative")
        if self.border_margin < 0:
            problems.append(f"border_margin must not be negative, got {self.border_margin}")
        if self.division_tolerance < 0 or self.effective_ring_tolerance < 0:
            problems.append("tolerances must not be negative")

        if problems:
            logger.error("Invalid city options", problems=problems)
            raise ConfigurationError("; ".join(problems))

        return self
