__all__ = [
    "Configuration",
    "Context",
    "ToolDiscovery",
    "Tool",
    "Plugin",
    "Erc1155AgentAPI",
    "WalletClient",
]

from .api import Erc1155AgentAPI
from .configuration import Configuration, Context
from .plugin import Plugin
from .tool import Tool
from .tool_discovery import ToolDiscovery
from .wallet import WalletClient
