import logging
from typing import List, Dict

from .configuration import Context
from .plugin import Plugin
from .tool import Tool
from ..plugins.erc1155_plugin import erc1155_plugin

logger = logging.getLogger(__name__)

CORE_PLUGINS: List[Plugin] = [
    erc1155_plugin(),
]


class PluginRegistry:
    def __init__(self):
        self.plugins: Dict[str, Plugin] = {}

    def register(self, plugin: Plugin) -> None:
        if plugin.name in self.plugins:
            logger.warning('Plugin "%s" is already registered. Overwriting.', plugin.name)
        self.plugins[plugin.name] = plugin

    def get_plugins(self) -> List[Plugin]:
        return list(self.plugins.values())

    def _load_tools(self, plugins: List[Plugin], context: Context) -> List[Tool]:
        plugin_tools: List[Tool] = []
        for plugin in plugins:
            try:
                tools = plugin.tools(context)
                plugin_tools.extend(tools)
            except Exception as error:
                logger.error('Error loading tools from plugin "%s": %s', plugin.name, error)
        return plugin_tools

    def get_tools(self, context: Context) -> List[Tool]:
        if not self.plugins:
            return self._load_tools(CORE_PLUGINS, context)
        return self._load_tools(self.get_plugins(), context)

    def clear(self) -> None:
        self.plugins.clear()
