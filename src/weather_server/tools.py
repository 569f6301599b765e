"""Tool registry and the get_weather tool.

Dispatch never raises for caller mistakes: ``ToolServer.invoke`` returns
either a ``CallToolResult`` or an ``ErrorData`` describing what went wrong.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from mcp import types

from weather_server.config import ServerConfig

log = logging.getLogger("weather-server")

ToolHandler = Callable[[ServerConfig, Mapping[str, Any]], types.CallToolResult]


class InvalidArgumentsError(ValueError):
    """Raised by a tool handler when the caller's arguments are unusable."""


@dataclass(frozen=True, slots=True)
class RegisteredTool:
    """A tool descriptor paired with the function that implements it."""

    descriptor: types.Tool
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.descriptor.name


# ---------------------------------------------------------------------------
# Tool: get_weather
# ---------------------------------------------------------------------------

GET_WEATHER = types.Tool(
    name="get_weather",
    description="Get weather for a city",
    inputSchema={
        "type": "object",
        "properties": {"city": {"type": "string", "description": "City name"}},
        "required": ["city"],
    },
)


def get_weather(config: ServerConfig, arguments: Mapping[str, Any]) -> types.CallToolResult:
    """Report the mock weather for a city.

    Args:
        config: Server configuration holding the lookup table.
        arguments: Tool arguments; must contain a string ``city``.

    Returns:
        A single text block, e.g. ``Weather in London: 15°C, cloudy``. The
        city is echoed exactly as given; unknown cities get the fallback
        reading rather than an error.

    Raises:
        InvalidArgumentsError: ``city`` is missing or not a string.
    """
    if "city" not in arguments:
        raise InvalidArgumentsError("Missing required argument 'city'")
    city = arguments["city"]
    if not isinstance(city, str):
        raise InvalidArgumentsError("Argument 'city' must be a string")

    weather = config.lookup(city)
    text = f"Weather in {city}: {_format_temperature(weather.temperature)}°C, {weather.condition}"
    return types.CallToolResult(content=[types.TextContent(type="text", text=text)])


def _format_temperature(value: float) -> str:
    """Render whole numbers without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# Registry and dispatch
# ---------------------------------------------------------------------------

DEFAULT_TOOLS: tuple[RegisteredTool, ...] = (
    RegisteredTool(descriptor=GET_WEATHER, handler=get_weather),
)


class ToolServer:
    """Answers tool discovery and tool invocation for one configuration."""

    def __init__(
        self,
        config: ServerConfig,
        tools: tuple[RegisteredTool, ...] = DEFAULT_TOOLS,
    ) -> None:
        self.config = config
        self.tools: Mapping[str, RegisteredTool] = MappingProxyType(
            {tool.name: tool for tool in tools}
        )

    def list_capabilities(self) -> list[types.Tool]:
        """Return the descriptors of every registered tool, in registration order."""
        return [tool.descriptor for tool in self.tools.values()]

    def invoke(
        self, name: str, arguments: Mapping[str, Any] | None
    ) -> types.CallToolResult | types.ErrorData:
        """Run the tool called *name*.

        Returns an ``ErrorData`` with ``METHOD_NOT_FOUND`` for unknown tools
        and ``INVALID_PARAMS`` when the handler rejects the arguments.
        """
        tool = self.tools.get(name)
        if tool is None:
            log.debug("Rejected call to unknown tool %r", name)
            return types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}")

        try:
            result = tool.handler(self.config, arguments or {})
        except InvalidArgumentsError as exc:
            log.debug("Invalid arguments for %s: %s", name, exc)
            return types.ErrorData(
                code=types.INVALID_PARAMS,
                message=f"Invalid arguments for {name}: {exc}",
            )

        log.debug("Tool %s answered %r", name, arguments)
        return result
