"""ADK toolkit for exposing ERC1155 tools as Google ADK-compatible functions.

This module provides `Erc1155ADKToolkit`, which discovers tools based on a
configuration and generates async Python functions that can be used directly
with Google ADK agents.
"""

from __future__ import annotations

from typing import Any, Callable, Coroutine, Dict, List

from erc1155_agent_kit import Configuration, Tool
from erc1155_agent_kit.adk.tool import create_adk_tool_function
from erc1155_agent_kit.shared import ToolDiscovery, Erc1155AgentAPI
from erc1155_agent_kit.shared.configuration import Context
from erc1155_agent_kit.shared.wallet.wallet_client import WalletClient


ADKToolFunction = Callable[..., Coroutine[Any, Any, Dict[str, Any]]]


class Erc1155ADKToolkit:
    """Wrapper to expose ERC1155 tools as Google ADK-compatible function tools.

    Example:
        ```python
        from google.adk.agents import Agent
        from erc1155_agent_kit.adk import Erc1155ADKToolkit

        toolkit = Erc1155ADKToolkit(wallet_client, configuration)
        agent = Agent(
            model='gemini-2.0-flash',
            name='erc1155_agent',
            tools=toolkit.get_tools(),
        )
        ```
    """

    def __init__(self, wallet_client: WalletClient, configuration: Configuration):
        context: Context = configuration.context or Context()

        tool_discovery: ToolDiscovery = ToolDiscovery.create_from_configuration(
            configuration
        )
        all_tools: list[Tool] = tool_discovery.get_all_tools(context, configuration)

        self._erc1155_agentkit = Erc1155AgentAPI(wallet_client, context, all_tools)

        self._tools: List[ADKToolFunction] = [
            create_adk_tool_function(
                erc1155_api=self._erc1155_agentkit,
                tool=tool,
            )
            for tool in all_tools
        ]

    def get_tools(self) -> List[ADKToolFunction]:
        """Return all registered ADK-compatible tool functions."""
        return self._tools

    def get_erc1155_agentkit_api(self) -> Erc1155AgentAPI:
        """Return the underlying Erc1155AgentAPI instance."""
        return self._erc1155_agentkit
