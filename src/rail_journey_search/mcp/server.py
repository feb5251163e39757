"""MCP Server for Railway Journey Search.

This module implements a Model Context Protocol (MCP) server that exposes
journey search and railway network inspection over a network file.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.types import (
    TextContent,
    Tool,
)

from ..core.config import Settings
from ..core.exceptions import (
    DataFormatError,
    NetworkFileError,
    StationNotFoundError,
    ValidationError,
)
from ..core.journey import JourneySearch
from ..core.loader import load_network_data
from ..core.models import Network, RailwayData
from ..core.network import build_network
from ..core.railway import (
    format_distance,
    get_network_name,
    get_route,
    route_distance,
    route_to_string,
)

logger = logging.getLogger(__name__)


class RailJourneyMCPServer:
    """MCP Server for Railway Journey Search functionality."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the Rail Journey MCP Server."""
        self.settings = settings or Settings.from_env()
        self.server = Server("rail-journey-search")

        # Start empty; filled from the configured network file if present
        self.data = RailwayData()
        self.network = Network()
        self._load_network(self.settings.network_file)

        # Register handlers
        self._register_handlers()

    def _load_network(self, network_file: Path) -> None:
        """Load the network file and build its graph."""
        if not network_file.exists():
            logger.warning(
                f"No network file found at {network_file}. Starting with an empty network."
            )
            return

        try:
            self.data = load_network_data(network_file)
            self.network = build_network(self.data)
            logger.info(f"Loaded network with {len(self.network)} stations")
        except (NetworkFileError, DataFormatError) as e:
            logger.warning(f"Failed to load network: {e}. Starting with an empty network.")
            self.data = RailwayData()
            self.network = Network()

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List available tools."""
            return [
                Tool(
                    name="find_journeys",
                    description="Find the best journeys between two stations, ranked by changes then distance",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "origin": {
                                "type": "string",
                                "description": "Departure station name",
                            },
                            "destination": {
                                "type": "string",
                                "description": "Arrival station name",
                            },
                            "max_results": {
                                "type": "integer",
                                "description": "Maximum number of journeys to return",
                                "default": self.settings.max_results,
                                "minimum": 0,
                            },
                            "max_transfers": {
                                "type": "integer",
                                "description": "Skip journeys with more changes than this",
                                "minimum": 0,
                            },
                        },
                        "required": ["origin", "destination"],
                    },
                ),
                Tool(
                    name="list_routes",
                    description="List the routes of the railway network",
                    inputSchema={"type": "object", "properties": {}},
                ),
                Tool(
                    name="get_route_info",
                    description="Get the stops and distances of a route",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "route_name": {
                                "type": "string",
                                "description": "Exact route name",
                            }
                        },
                        "required": ["route_name"],
                    },
                ),
                Tool(
                    name="list_stations",
                    description="List the stations of the railway network",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "limit": {
                                "type": "integer",
                                "description": "Maximum number of results",
                                "default": 50,
                                "minimum": 1,
                                "maximum": 1000,
                            },
                        },
                    },
                ),
            ]

        @self.server.call_tool()
        async def handle_call_tool(
            name: str, arguments: dict[str, Any]
        ) -> list[TextContent]:
            """Handle tool calls."""
            try:
                if name == "find_journeys":
                    return await self._find_journeys(arguments)
                elif name == "list_routes":
                    return await self._list_routes(arguments)
                elif name == "get_route_info":
                    return await self._get_route_info(arguments)
                elif name == "list_stations":
                    return await self._list_stations(arguments)
                else:
                    return [TextContent(type="text", text=f"Unknown tool: {name}")]

            except Exception as e:
                logger.error(f"Error in tool {name}: {e}")
                return [TextContent(type="text", text=f"Error: {str(e)}")]

    async def _find_journeys(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Find the best journeys between two stations."""
        origin = arguments["origin"]
        destination = arguments["destination"]
        max_results = arguments.get("max_results", self.settings.max_results)
        max_transfers = arguments.get("max_transfers", self.settings.max_transfers)

        try:
            search = JourneySearch(self.network, max_transfers=max_transfers)
            journeys = search.find_best_journeys(origin, destination, max_results)
        except (StationNotFoundError, ValidationError) as e:
            return [TextContent(type="text", text=f"Journey search failed: {str(e)}")]

        if not journeys:
            return [
                TextContent(
                    type="text",
                    text=f"No journeys found from {origin} to {destination}",
                )
            ]

        result_text = f"**Found {len(journeys)} journeys from {origin} to {destination}:**\n\n"
        for idx, journey in enumerate(journeys, 1):
            result_text += f"{idx}. **{' → '.join(journey.station_names)}**\n"
            result_text += f"   • Distance: {format_distance(journey.distance)}\n"
            result_text += f"   • Changes: {journey.changes}\n"
            for line in journey.text.strip().splitlines():
                result_text += f"   {line}\n"
            result_text += "\n"

        journeys_data = [
            journey.model_dump(mode="json", exclude={"success"})
            for journey in journeys
        ]

        return [
            TextContent(type="text", text=result_text),
            TextContent(
                type="text",
                text=f"JSON Data:\n```json\n{json.dumps(journeys_data, indent=2, ensure_ascii=False)}\n```",
            ),
        ]

    async def _list_routes(self, arguments: dict[str, Any]) -> list[TextContent]:
        """List the routes of the network."""
        if not self.data.routes:
            return [TextContent(type="text", text="No routes loaded")]

        network_name = get_network_name(self.data) or "Railway network"
        result_text = f"**{network_name} ({len(self.data.routes)} routes):**\n\n"
        for i, route in enumerate(self.data.routes, 1):
            result_text += f"{i}. **{route.name}**"
            if route.stops:
                result_text += (
                    f" - {route.stops[0].station_name} to {route.stops[-1].station_name}"
                )
            result_text += f" ({format_distance(route_distance(route))} miles)\n"

        return [TextContent(type="text", text=result_text)]

    async def _get_route_info(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Get the stops of a single route."""
        route_name = arguments["route_name"]
        route = get_route(self.data, route_name)

        if route is None:
            return [TextContent(type="text", text=f"Route '{route_name}' not found")]

        return [
            TextContent(type="text", text=route_to_string(route) or ""),
            TextContent(
                type="text",
                text=f"\nJSON Data:\n```json\n{json.dumps(route.model_dump(mode='json', by_alias=True), indent=2, ensure_ascii=False)}\n```",
            ),
        ]

    async def _list_stations(self, arguments: dict[str, Any]) -> list[TextContent]:
        """List stations of the network."""
        limit = arguments.get("limit", 50)
        if (
            not isinstance(limit, int)
            or isinstance(limit, bool)
            or not 1 <= limit <= 1000
        ):
            return [
                TextContent(
                    type="text",
                    text=f"Invalid limit: {limit!r} (must be between 1 and 1000)",
                )
            ]

        stations = self.network.stations[:limit]

        if not stations:
            return [TextContent(type="text", text="No stations found")]

        result_text = f"**Stations ({len(stations)} of {len(self.network)}):**\n\n"
        for i, station in enumerate(stations, 1):
            routes = sorted({link.route_name for link in station.links})
            result_text += f"{i}. **{station.name}** (ID: {station.station_id})"
            if routes:
                result_text += f"\n   Routes: {', '.join(routes)}"
            result_text += "\n\n"

        return [TextContent(type="text", text=result_text)]


async def main() -> None:
    """Main entry point for the MCP server."""
    # Configure logging
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting Railway Journey Search MCP Server")

    # Create the server
    server_instance = RailJourneyMCPServer()

    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP Server running with stdio transport")
        await server_instance.server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name="rail-journey-search",
                server_version="0.1.0",
                capabilities=server_instance.server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def main_sync() -> None:
    """Synchronous wrapper for the async main function - used as entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    main_sync()
