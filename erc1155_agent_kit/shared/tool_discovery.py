from __future__ import annotations

import logging
from typing import Optional

from .configuration import Context, Configuration
from .plugin import Plugin
from .plugin_registry import PluginRegistry
from .tool import Tool

logger = logging.getLogger(__name__)


class ToolDiscovery:
    def __init__(self, plugins: Optional[list[Plugin]] = None):
        self.plugin_registry = PluginRegistry()
        if plugins:
            for plugin in plugins:
                self.plugin_registry.register(plugin)

    def get_all_tools(
        self, context: Context, configuration: Optional[Configuration] = None
    ) -> list[Tool]:
        plugin_tools: list[Tool] = self.plugin_registry.get_tools(context)

        # First registration of a method wins
        all_tools: list[Tool] = []
        all_tool_names: set[str] = set()

        for plugin_tool in plugin_tools:
            if plugin_tool.method not in all_tool_names:
                all_tools.append(plugin_tool)
                all_tool_names.add(plugin_tool.method)
            else:
                logger.warning(
                    'Tool "%s" is provided by more than one plugin. Using the first one.',
                    plugin_tool.method,
                )

        if configuration and configuration.tools:
            return [tool for tool in all_tools if tool.method in configuration.tools]

        return all_tools

    @staticmethod
    def create_from_configuration(configuration: Configuration) -> ToolDiscovery:
        return ToolDiscovery(configuration.plugins or [])
