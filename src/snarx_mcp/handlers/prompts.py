"""
MCP Prompt Catalog Handler

Lists the prompt templates this server advertises: analyze_code
"""

from typing import Dict, Any
from ..models import (
    PromptDefinition,
    PromptArgument,
    PromptListResponse,
)


# Prompt registry
PROMPT_REGISTRY: Dict[str, Dict[str, Any]] = {
    "analyze_code": {
        "description": "Template para análisis de código",
        "arguments": [
            {
                "name": "language",
                "description": "Lenguaje de programación",
                "required": True
            },
            {
                "name": "code",
                "description": "Código a analizar",
                "required": True
            }
        ]
    }
}


async def list_prompts() -> PromptListResponse:
    """
    List all available prompts.

    Returns:
        PromptListResponse with list of prompt definitions
    """
    prompts = [
        PromptDefinition(
            name=prompt_id,
            description=metadata["description"],
            arguments=[PromptArgument(**arg) for arg in metadata["arguments"]]
        )
        for prompt_id, metadata in PROMPT_REGISTRY.items()
    ]
    return PromptListResponse(prompts=prompts)
