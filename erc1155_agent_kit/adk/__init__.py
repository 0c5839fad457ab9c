"""Google ADK adapter for the ERC1155 Agent Kit.

This module provides tools for integrating the kit with Google's
Agent Development Kit (ADK).
"""

__all__ = [
    "Erc1155ADKToolkit",
    "create_adk_tool_function",
]

from .tool import create_adk_tool_function
from .toolkit import Erc1155ADKToolkit
