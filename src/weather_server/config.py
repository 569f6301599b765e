"""Immutable server configuration: identity, weather lookup table and fallback.

A ``ServerConfig`` is built once and handed to the server at construction
time, so independent servers (e.g. in tests) never share module state.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class WeatherRecord:
    """A single mock weather reading."""

    temperature: float
    condition: str


UNKNOWN_WEATHER = WeatherRecord(temperature=20, condition="unknown")

_DEFAULT_WEATHER: dict[str, WeatherRecord] = {
    "london": WeatherRecord(temperature=15, condition="cloudy"),
    "paris": WeatherRecord(temperature=18, condition="sunny"),
    "tokyo": WeatherRecord(temperature=22, condition="rainy"),
    "new york": WeatherRecord(temperature=12, condition="windy"),
}


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Everything the server needs, fixed for the lifetime of the process."""

    name: str = "weather-server"
    version: str = "1.0.0"
    instructions: str = "Simple weather MCP server"
    weather: Mapping[str, WeatherRecord] = field(
        default_factory=lambda: MappingProxyType(dict(_DEFAULT_WEATHER))
    )
    fallback: WeatherRecord = UNKNOWN_WEATHER

    def lookup(self, city: str) -> WeatherRecord:
        """Return the reading for *city* (case-insensitive) or the fallback."""
        return self.weather.get(city.lower(), self.fallback)


def build_config(
    weather: Mapping[str, WeatherRecord],
    *,
    fallback: WeatherRecord = UNKNOWN_WEATHER,
    name: str = "weather-server",
    version: str = "1.0.0",
    instructions: str = "Simple weather MCP server",
) -> ServerConfig:
    """Build a config from an arbitrary table.

    Keys are lower-cased and the table is copied into a read-only view, so
    later changes to *weather* do not leak into the server.

    Args:
        weather: City name to reading. Keys may use any casing.
        fallback: Reading returned for cities not in the table.
        name: Server name advertised during initialization.
        version: Server version advertised during initialization.
        instructions: Free-text description sent to clients.
    """
    normalised = {city.lower(): record for city, record in weather.items()}
    return ServerConfig(
        name=name,
        version=version,
        instructions=instructions,
        weather=MappingProxyType(normalised),
        fallback=fallback,
    )


def default_config() -> ServerConfig:
    return ServerConfig()
