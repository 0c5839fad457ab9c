from __future__ import annotations

import logging
from typing import Any, Optional, cast

from erc1155_agent_kit.shared.configuration import Context
from erc1155_agent_kit.shared.errors import Erc1155Error
from erc1155_agent_kit.shared.models import (
    ExecutedTransactionToolResponse,
    RawTransactionResponse,
    ToolResponse,
    TRANSACTION_STATUS_FAILED,
    TRANSACTION_STATUS_SUBMITTED,
)
from erc1155_agent_kit.shared.parameter_schemas import SafeBatchTransferFromParameters
from erc1155_agent_kit.shared.tool import Tool
from erc1155_agent_kit.shared.utils.parameter_normaliser import ParameterNormaliser
from erc1155_agent_kit.shared.utils.prompt_generator import PromptGenerator
from erc1155_agent_kit.shared.wallet.wallet_client import WalletClient

from .erc1155_service import Erc1155Service

logger = logging.getLogger(__name__)


def safe_batch_transfer_from_prompt(context: Optional[Context] = None) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    from_desc: str = PromptGenerator.get_address_parameter_description(
        "from_address", context, "The current holder of the tokens"
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool transfers several ERC1155 token ids from one address to another in a single transaction.
ids and values are parallel lists: values[n] of ids[n] is transferred.

Parameters:
- token_address (str, required): The ERC1155 contract address
- {from_desc}
- to_address (str, required): The recipient address or ENS name
- ids (list of int, required): The token ids to transfer
- values (list of int, required): The amounts to transfer, same length as ids
- data (str, optional): Hex-encoded data passed to the receiver, defaults to 0x
{usage_instructions}
"""


def post_process(params: SafeBatchTransferFromParameters, tx_hash: str) -> str:
    transfers = ", ".join(
        f"{value} of id {token_id}" for token_id, value in zip(params.ids, params.values)
    )
    return (
        f"Batch transferred {transfers} from {params.from_address} to {params.to_address}.\n"
        f"Transaction Hash: {tx_hash}"
    )


async def safe_batch_transfer_from(
    wallet_client: WalletClient,
    context: Context,
    params: Any,
    service: Erc1155Service,
) -> ToolResponse:
    try:
        parsed_params = cast(
            SafeBatchTransferFromParameters,
            ParameterNormaliser.parse_params_with_schema(
                params, SafeBatchTransferFromParameters
            ),
        )
        tx_hash = await service.safe_batch_transfer_from(
            wallet_client,
            parsed_params.token_address,
            parsed_params.from_address,
            parsed_params.to_address,
            parsed_params.ids,
            parsed_params.values,
            parsed_params.data,
        )

        return ExecutedTransactionToolResponse(
            raw=RawTransactionResponse(
                status=TRANSACTION_STATUS_SUBMITTED, transaction_hash=tx_hash
            ),
            human_message=post_process(parsed_params, tx_hash),
        )

    except Exception as e:
        message: str = (
            str(e) if isinstance(e, Erc1155Error) else f"Failed to batch transfer: {e}"
        )
        logger.error("[%s] %s", ERC1155_SAFE_BATCH_TRANSFER_FROM_TOOL, message)
        return ExecutedTransactionToolResponse(
            raw=RawTransactionResponse(status=TRANSACTION_STATUS_FAILED, error=message),
            human_message=message,
        )


ERC1155_SAFE_BATCH_TRANSFER_FROM_TOOL: str = "erc1155_safe_batch_transfer_from_tool"


class SafeBatchTransferFromTool(Tool):
    def __init__(self, context: Context, service: Erc1155Service):
        self.method: str = ERC1155_SAFE_BATCH_TRANSFER_FROM_TOOL
        self.name: str = "ERC1155 Safe Batch Transfer From"
        self.description: str = safe_batch_transfer_from_prompt(context)
        self.parameters: type[SafeBatchTransferFromParameters] = (
            SafeBatchTransferFromParameters
        )
        self.service = service

    async def execute(
        self, wallet_client: WalletClient, context: Context, params: Any
    ) -> ToolResponse:
        return await safe_batch_transfer_from(
            wallet_client, context, params, self.service
        )
