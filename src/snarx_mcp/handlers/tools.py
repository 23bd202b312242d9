"""
MCP Tool Catalog Handler

Lists the tools this server advertises: echo, get_system_info.
The catalog is descriptive only; tools are not executed here.
"""

import logging
from typing import Dict, Any
from ..models import (
    ToolDefinition,
    ToolListResponse,
)

logger = logging.getLogger(__name__)


# Tool registry with metadata, in listing order
TOOL_REGISTRY: Dict[str, Dict[str, Any]] = {
    "echo": {
        "description": "Devuelve el mensaje que le envíes",
        "inputSchema": {
            "type": "object",
            "properties": {
                "message": {
                    "type": "string",
                    "description": "Mensaje a devolver"
                }
            },
            "required": ["message"]
        }
    },
    "get_system_info": {
        "description": "Obtiene información del sistema",
        "inputSchema": {
            "type": "object",
            "properties": {}
        }
    }
}


async def list_tools() -> ToolListResponse:
    """
    List all available tools.

    Returns:
        ToolListResponse with list of tool definitions
    """
    tools = [
        ToolDefinition(
            name=name,
            description=metadata["description"],
            inputSchema=metadata["inputSchema"]
        )
        for name, metadata in TOOL_REGISTRY.items()
    ]

    logger.debug(f"Listing {len(tools)} tools")
    return ToolListResponse(tools=tools)
