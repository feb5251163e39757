"""MCP (Model Context Protocol) server module for railway journey search.

This module provides an MCP server implementation that exposes journey search
and network inspection through the Model Context Protocol.
"""

from .server import RailJourneyMCPServer, main

__all__ = ["RailJourneyMCPServer", "main"]
