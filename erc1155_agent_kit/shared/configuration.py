from typing import Optional, List

from .plugin import Plugin


class Context:
    def __init__(
            self,
            account_address: Optional[str] = None,
            chain_id: Optional[int] = None,
    ):
        # Address of the connected wallet, used as the default owner in prompts
        self.account_address = account_address

        # Chain the agent is expected to operate on, informational only
        self.chain_id = chain_id


class Configuration:
    def __init__(
            self,
            tools: Optional[List[str]] = None,
            plugins: Optional[List[Plugin]] = None,
            context: Optional[Context] = None,
    ):
        self.tools = tools  # if empty, all tools will be used.
        self.plugins = plugins  # external plugins to load
        self.context = context
