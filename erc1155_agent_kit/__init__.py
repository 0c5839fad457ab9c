__all__ = [
    "Configuration",
    "Context",
    "ToolDiscovery",
    "Tool",
    "Plugin",
    "Erc1155AgentAPI",
    "WalletClient",
]

# Re-export key primitives from the shared package
from .shared import (
    Erc1155AgentAPI,
    Configuration,
    Context,
    ToolDiscovery,
    Tool,
    Plugin,
    WalletClient,
)

# Keep subpackages importable (e.g., erc1155_agent_kit.langchain, .plugins)
