"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for the ingestion constants:
degree thresholds of the connectivity filter, the coordinate reduction
factor, the zero-weight epsilon and the logging setup.

Configuration can be overridden via environment variables:
- ROADNAV_OSM_DEGREE_THRESHOLD=2
- ROADNAV_POLY_DEGREE_THRESHOLD=2
- ROADNAV_GEOMETRY_REDUCTION_FACTOR=4.0
- ROADNAV_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class PolyConfig(BaseSettings):
    """Vertex/edge text format ingestion.

    Environment variables prefixed with ROADNAV_POLY_.
    A ``degree_threshold`` of None loads every vertex of the file;
    2 is the threshold used when the filter is enabled.
    """

    model_config = SettingsConfigDict(env_prefix="ROADNAV_POLY_")

    degree_threshold: Optional[int] = None


class OsmConfig(BaseSettings):
    """OSM XML ingestion.

    Environment variables prefixed with ROADNAV_OSM_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADNAV_OSM_")

    degree_threshold: Optional[int] = 3
    max_nodes: Optional[int] = 200_000


class GeometryConfig(BaseSettings):
    """Coordinate normalization and edge weighting.

    Environment variables prefixed with ROADNAV_GEOMETRY_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADNAV_GEOMETRY_")

    reduction_factor: float = 2.0
    zero_weight_epsilon: float = 0.001
    # When no node reaches the degree threshold, keep ceil(n / divisor) nodes.
    fallback_divisor: int = 10

    @field_validator("reduction_factor", "zero_weight_epsilon", "fallback_divisor")
    @classmethod
    def _positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be strictly positive")
        return value


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ROADNAV_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADNAV_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.osm.degree_threshold)
        print(config.geometry.reduction_factor)

    Environment variables prefixed with ROADNAV_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADNAV_")

    poly: PolyConfig = Field(default_factory=PolyConfig)
    osm: OsmConfig = Field(default_factory=OsmConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.

    Raises:
        ConfigurationError: If an environment override is invalid.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        first = e.errors()[0]
        raise ConfigurationError(
            "Invalid configuration",
            cause=e,
            setting_name=".".join(str(part) for part in first["loc"]),
        )


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
