from typing import Iterable, Optional

from erc1155_agent_kit.shared.plugin import Plugin
from erc1155_agent_kit.shared.token import Token

from .erc1155_service import Erc1155Service
from .get_token_info_by_symbol import (
    GetTokenInfoBySymbolTool,
    GET_TOKEN_INFO_BY_SYMBOL_TOOL,
)
from .balance_of import BalanceOfTool, ERC1155_BALANCE_OF_TOOL
from .balance_of_batch import BalanceOfBatchTool, ERC1155_BALANCE_OF_BATCH_TOOL
from .safe_transfer_from import SafeTransferFromTool, ERC1155_SAFE_TRANSFER_FROM_TOOL
from .safe_batch_transfer_from import (
    SafeBatchTransferFromTool,
    ERC1155_SAFE_BATCH_TRANSFER_FROM_TOOL,
)
from .set_approval_for_all import (
    SetApprovalForAllTool,
    ERC1155_SET_APPROVAL_FOR_ALL_TOOL,
)
from .is_approved_for_all import IsApprovedForAllTool, ERC1155_IS_APPROVED_FOR_ALL_TOOL

ERC1155_PLUGIN_NAME = "erc1155-plugin"


def erc1155_plugin(tokens: Optional[Iterable[Token]] = None) -> Plugin:
    """Build the ERC1155 plugin around a fixed list of known tokens."""
    service = Erc1155Service(tokens)

    return Plugin(
        name=ERC1155_PLUGIN_NAME,
        version="1.0.0",
        description="A plugin for ERC1155 multi-token contracts",
        tools=lambda context: [
            GetTokenInfoBySymbolTool(context, service),
            BalanceOfTool(context, service),
            BalanceOfBatchTool(context, service),
            SafeTransferFromTool(context, service),
            SafeBatchTransferFromTool(context, service),
            SetApprovalForAllTool(context, service),
            IsApprovedForAllTool(context, service),
        ],
    )


erc1155_plugin_tool_names = {
    "GET_TOKEN_INFO_BY_SYMBOL_TOOL": GET_TOKEN_INFO_BY_SYMBOL_TOOL,
    "ERC1155_BALANCE_OF_TOOL": ERC1155_BALANCE_OF_TOOL,
    "ERC1155_BALANCE_OF_BATCH_TOOL": ERC1155_BALANCE_OF_BATCH_TOOL,
    "ERC1155_SAFE_TRANSFER_FROM_TOOL": ERC1155_SAFE_TRANSFER_FROM_TOOL,
    "ERC1155_SAFE_BATCH_TRANSFER_FROM_TOOL": ERC1155_SAFE_BATCH_TRANSFER_FROM_TOOL,
    "ERC1155_SET_APPROVAL_FOR_ALL_TOOL": ERC1155_SET_APPROVAL_FOR_ALL_TOOL,
    "ERC1155_IS_APPROVED_FOR_ALL_TOOL": ERC1155_IS_APPROVED_FOR_ALL_TOOL,
}

__all__ = [
    "erc1155_plugin",
    "erc1155_plugin_tool_names",
    "Erc1155Service",
    "GetTokenInfoBySymbolTool",
    "BalanceOfTool",
    "BalanceOfBatchTool",
    "SafeTransferFromTool",
    "SafeBatchTransferFromTool",
    "SetApprovalForAllTool",
    "IsApprovedForAllTool",
]
