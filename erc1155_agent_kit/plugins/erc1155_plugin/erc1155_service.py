"""ERC1155 contract operations over a generic wallet client.

This module exposes:
- Erc1155Service: token registry lookup by symbol plus the balance, transfer and
  approval calls of the ERC1155 standard.
"""

from __future__ import annotations

import asyncio
from typing import Iterable, List, Optional, Sequence, Tuple

from erc1155_agent_kit.shared.constants.contracts import (
    ERC1155_ABI,
    EMPTY_DATA,
    BALANCE_OF_FUNCTION_NAME,
    BALANCE_OF_BATCH_FUNCTION_NAME,
    SAFE_TRANSFER_FROM_FUNCTION_NAME,
    SAFE_BATCH_TRANSFER_FROM_FUNCTION_NAME,
    SET_APPROVAL_FOR_ALL_FUNCTION_NAME,
    IS_APPROVED_FOR_ALL_FUNCTION_NAME,
)
from erc1155_agent_kit.shared.errors import (
    ApprovalError,
    NotFoundError,
    QueryError,
    TransferError,
    UnsupportedChainError,
)
from erc1155_agent_kit.shared.token import Token, TokenInfo
from erc1155_agent_kit.shared.wallet.wallet_client import (
    ReadRequest,
    TransactionRequest,
    WalletClient,
)


class Erc1155Service:
    """Translates ERC1155 intents into wallet client calls.

    The token list is copied once on construction and never mutated, so a single
    service can be shared by concurrently running tools.
    """

    def __init__(self, tokens: Optional[Iterable[Token]] = None):
        self._tokens: Tuple[Token, ...] = tuple(tokens or ())

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    def find_token(self, symbol: str) -> Token:
        wanted = symbol.lower()
        token = next((t for t in self._tokens if t.symbol.lower() == wanted), None)
        if token is None:
            raise NotFoundError(f"Token with symbol {symbol} not found")
        return token

    def get_token_info_by_symbol(
        self, wallet_client: WalletClient, symbol: str
    ) -> TokenInfo:
        token = self.find_token(symbol)

        chain = wallet_client.get_chain()
        contract_address = token.contract_address_for(chain.id)
        if not contract_address:
            raise UnsupportedChainError(
                f"Token with symbol {symbol} not found on chain {chain.id}"
            )

        return TokenInfo.from_token(token, contract_address)

    async def balance_of(
        self,
        wallet_client: WalletClient,
        token_address: str,
        owner: str,
        token_id: int,
    ) -> int:
        try:
            resolved_owner = await wallet_client.resolve_address(owner)

            raw_balance = await wallet_client.read(
                ReadRequest(
                    address=token_address,
                    abi=ERC1155_ABI,
                    function_name=BALANCE_OF_FUNCTION_NAME,
                    args=[resolved_owner, token_id],
                )
            )
            return int(raw_balance.value)
        except Exception as error:
            raise QueryError(f"Failed to fetch balance: {error}") from error

    async def balance_of_batch(
        self,
        wallet_client: WalletClient,
        token_address: str,
        owners: Sequence[str],
        token_ids: Sequence[int],
    ) -> List[int]:
        # Parallel array lengths are enforced by the contract, not here
        try:
            resolved_owners = await asyncio.gather(
                *(wallet_client.resolve_address(owner) for owner in owners)
            )

            raw_balances = await wallet_client.read(
                ReadRequest(
                    address=token_address,
                    abi=ERC1155_ABI,
                    function_name=BALANCE_OF_BATCH_FUNCTION_NAME,
                    args=[list(resolved_owners), list(token_ids)],
                )
            )
            return [int(balance) for balance in raw_balances.value]
        except Exception as error:
            raise QueryError(f"Failed to fetch batch balances: {error}") from error

    async def safe_transfer_from(
        self,
        wallet_client: WalletClient,
        token_address: str,
        from_address: str,
        to_address: str,
        token_id: int,
        value: int,
        data: Optional[str] = None,
    ) -> str:
        try:
            sender = await wallet_client.resolve_address(from_address)
            recipient = await wallet_client.resolve_address(to_address)

            result = await wallet_client.send_transaction(
                TransactionRequest(
                    to=token_address,
                    abi=ERC1155_ABI,
                    function_name=SAFE_TRANSFER_FROM_FUNCTION_NAME,
                    args=[sender, recipient, token_id, value, data or EMPTY_DATA],
                )
            )
            return result.hash
        except Exception as error:
            raise TransferError(f"Failed to transfer: {error}") from error

    async def safe_batch_transfer_from(
        self,
        wallet_client: WalletClient,
        token_address: str,
        from_address: str,
        to_address: str,
        token_ids: Sequence[int],
        values: Sequence[int],
        data: Optional[str] = None,
    ) -> str:
        try:
            sender = await wallet_client.resolve_address(from_address)
            recipient = await wallet_client.resolve_address(to_address)

            result = await wallet_client.send_transaction(
                TransactionRequest(
                    to=token_address,
                    abi=ERC1155_ABI,
                    function_name=SAFE_BATCH_TRANSFER_FROM_FUNCTION_NAME,
                    args=[
                        sender,
                        recipient,
                        list(token_ids),
                        list(values),
                        data or EMPTY_DATA,
                    ],
                )
            )
            return result.hash
        except Exception as error:
            raise TransferError(f"Failed to batch transfer: {error}") from error

    async def set_approval_for_all(
        self,
        wallet_client: WalletClient,
        token_address: str,
        operator: str,
        approved: bool,
    ) -> str:
        try:
            resolved_operator = await wallet_client.resolve_address(operator)

            result = await wallet_client.send_transaction(
                TransactionRequest(
                    to=token_address,
                    abi=ERC1155_ABI,
                    function_name=SET_APPROVAL_FOR_ALL_FUNCTION_NAME,
                    args=[resolved_operator, approved],
                )
            )
            return result.hash
        except Exception as error:
            raise ApprovalError(f"Failed to set approval: {error}") from error

    async def is_approved_for_all(
        self,
        wallet_client: WalletClient,
        token_address: str,
        owner: str,
        operator: str,
    ) -> bool:
        try:
            resolved_owner = await wallet_client.resolve_address(owner)
            resolved_operator = await wallet_client.resolve_address(operator)

            approved = await wallet_client.read(
                ReadRequest(
                    address=token_address,
                    abi=ERC1155_ABI,
                    function_name=IS_APPROVED_FOR_ALL_FUNCTION_NAME,
                    args=[resolved_owner, resolved_operator],
                )
            )
            return approved.value
        except Exception as error:
            raise QueryError(f"Failed to fetch approval status: {error}") from error
