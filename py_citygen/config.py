"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.site import CityOptions


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CITYGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="console", description="Logging format (console or json)")

    # Generation
    default_seed: str = Field(default="default", description="Seed used when none is given")
    base_dim: float = Field(default=200.0, description="Side length of the square site")
    num_rings: int = Field(default=4, description="Number of ring roads")
    num_divisions: int = Field(default=12, description="Number of division slots")
    cell_dim: float = Field(default=7.0, description="Cell lattice step")
    river_points: int = Field(default=32, description="River sample divisions")

    def city_options(self) -> CityOptions:
        """Build layout options from the generation settings."""
        return CityOptions(
            base_dim=self.base_dim,
            num_rings=self.num_rings,
            num_divisions=self.num_divisions,
            cell_dim=self.cell_dim,
            river_points=self.river_points,
        )


settings = Settings()
