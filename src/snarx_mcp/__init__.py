"""
Snarx MCP Server

This package implements a small HTTP server that exposes:
- Health: liveness check with uptime and environment
- Root: service metadata and the endpoint catalog
- MCP catalogs: descriptive listings of tools, resources and prompts

The catalogs only describe capabilities; nothing is invoked or fetched.
"""

__version__ = "1.0.0"
