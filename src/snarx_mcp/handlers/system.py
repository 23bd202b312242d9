"""
Health and Root Endpoint Handlers

Builds the /health and / bodies. Only the health body is time-dependent.
"""

from datetime import datetime, timezone
from typing import Optional

from .. import __version__
from ..config import get_environment, get_uptime
from ..models import HealthResponse, RootResponse

ROOT_MESSAGE = "🚀 Snarx MCP Server está funcionando!"
ARCHITECTURE = "Clean Code + Mobile First"
AUTHOR = "Snarx.io"


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a moment as ISO-8601 UTC with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    if moment is None:
        moment = datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def get_health(environment: Optional[str] = None) -> HealthResponse:
    """
    Report liveness.

    Args:
        environment: Environment name to echo; read from the process environment when omitted

    Returns:
        HealthResponse with current timestamp, uptime and environment
    """
    return HealthResponse(
        status="ok",
        timestamp=utc_timestamp(),
        uptime=get_uptime(),
        environment=environment if environment is not None else get_environment(),
        version=__version__,
    )


async def get_root() -> RootResponse:
    """Service metadata and the endpoint catalog."""
    return RootResponse(
        message=ROOT_MESSAGE,
        version=__version__,
        architecture=ARCHITECTURE,
        author=AUTHOR,
    )
