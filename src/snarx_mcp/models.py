"""
Response Models

Pydantic models for every JSON body the server returns: health and root
metadata, the MCP discovery catalogs, and the two error bodies.
"""

from pydantic import BaseModel, Field
from typing import Dict, Any, List


# ============================================================================
# System Models
# ============================================================================

class HealthResponse(BaseModel):
    """Response for the health check."""
    status: str = Field("ok", description="Service status")
    timestamp: str = Field(..., description="Current time, ISO-8601 UTC")
    uptime: float = Field(..., description="Seconds since process start")
    environment: str = Field(..., description="Deployment environment name")
    version: str = Field(..., description="Server version")


class MCPEndpoints(BaseModel):
    """Paths of the MCP catalog endpoints."""
    tools: str = "/mcp/tools"
    resources: str = "/mcp/resources"
    prompts: str = "/mcp/prompts"


class EndpointCatalog(BaseModel):
    """Paths advertised by the root endpoint."""
    health: str = "/health"
    mcp: MCPEndpoints = Field(default_factory=MCPEndpoints)


class RootResponse(BaseModel):
    """Response for the root endpoint."""
    message: str = Field(..., description="Greeting")
    version: str = Field(..., description="Server version")
    architecture: str = Field(..., description="Architecture label")
    endpoints: EndpointCatalog = Field(default_factory=EndpointCatalog)
    author: str = Field(..., description="Author")


# ============================================================================
# Tool Models
# ============================================================================

class ToolDefinition(BaseModel):
    """MCP tool definition schema."""
    name: str = Field(..., description="Tool name/identifier")
    description: str = Field(..., description="Tool description")
    inputSchema: Dict[str, Any] = Field(..., description="JSON schema for tool inputs")


class ToolListResponse(BaseModel):
    """Response for listing available tools."""
    tools: List[ToolDefinition] = Field(..., description="List of available tools")


# ============================================================================
# Resource Models
# ============================================================================

class ResourceDefinition(BaseModel):
    """MCP resource definition schema."""
    uri: str = Field(..., description="Resource URI")
    name: str = Field(..., description="Resource name")
    description: str = Field(..., description="Resource description")
    mimeType: str = Field(..., description="MIME type of the resource")


class ResourceListResponse(BaseModel):
    """Response for listing available resources."""
    resources: List[ResourceDefinition] = Field(..., description="List of available resources")


# ============================================================================
# Prompt Models
# ============================================================================

class PromptArgument(BaseModel):
    """Prompt argument definition."""
    name: str = Field(..., description="Argument name")
    description: str = Field(..., description="Argument description")
    required: bool = Field(default=True, description="Whether argument is required")


class PromptDefinition(BaseModel):
    """MCP prompt definition schema."""
    name: str = Field(..., description="Prompt name/identifier")
    description: str = Field(..., description="Prompt description")
    arguments: List[PromptArgument] = Field(default_factory=list, description="Prompt arguments")


class PromptListResponse(BaseModel):
    """Response for listing available prompts."""
    prompts: List[PromptDefinition] = Field(..., description="List of available prompts")


# ============================================================================
# Error Models
# ============================================================================

class NotFoundError(BaseModel):
    """Body returned when no route matches."""
    error: str = "Not Found"
    message: str = "Endpoint no encontrado"
    availableEndpoints: List[str] = Field(..., description="Registered paths")


class InternalServerError(BaseModel):
    """Body returned when building a response fails."""
    error: str = "Internal Server Error"
    message: str = Field(..., description="Failure description")
    timestamp: str = Field(..., description="Time of failure, ISO-8601 UTC")
