"""
MCP server for EulerTrail.

Exposes the Euler search to LLMs via the Model Context Protocol.

Tools:
    - euler_solve: Enumerate Euler trails or circuits
    - euler_check: Degrees, parity and Euler classification
    - euler_samples: List the built-in sample graphs

Usage:
    Run: eulertrail-mcp
"""

import asyncio

from eulertrail.mcp.server import serve as _serve


def serve() -> None:
    """Entry point for the MCP server."""
    asyncio.run(_serve())


__all__ = ["serve"]
