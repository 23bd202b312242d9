"""
Endpoint Handlers

This package contains the response builders for each registered endpoint:
- system: health check and root metadata
- tools: tool catalog
- resources: resource catalog
- prompts: prompt catalog
"""
