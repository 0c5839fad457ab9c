__all__ = [
    "erc1155_plugin",
    "erc1155_plugin_tool_names",
]

from .erc1155_plugin import erc1155_plugin, erc1155_plugin_tool_names
