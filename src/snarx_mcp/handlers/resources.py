"""
MCP Resource Catalog Handler

Lists the resources this server advertises: system://info
"""

from typing import Dict, Any
from ..models import (
    ResourceDefinition,
    ResourceListResponse,
)


# Resource registry keyed by URI
RESOURCE_REGISTRY: Dict[str, Dict[str, Any]] = {
    "system://info": {
        "name": "System Information",
        "description": "Información del sistema donde corre el servidor",
        "mimeType": "application/json"
    }
}


async def list_resources() -> ResourceListResponse:
    """
    List all available resources.

    Returns:
        ResourceListResponse with list of resource definitions
    """
    resources = [ResourceDefinition(uri=uri, **metadata) for uri, metadata in RESOURCE_REGISTRY.items()]
    return ResourceListResponse(resources=resources)
