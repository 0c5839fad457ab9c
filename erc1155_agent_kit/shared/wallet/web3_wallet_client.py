"""EVM wallet client backed by web3.py.

This module exposes:
- Web3WalletClient: WalletClient implementation that reads through an AsyncWeb3
  provider and signs transactions locally with an eth-account LocalAccount.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

from dotenv import load_dotenv
from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3, Web3
from web3.providers import AsyncHTTPProvider

from .wallet_client import (
    Chain,
    ReadRequest,
    ReadResult,
    TransactionRequest,
    TransactionResult,
    WalletClient,
)

logger = logging.getLogger(__name__)

RPC_URL_ENV = "ERC1155_RPC_URL"
PRIVATE_KEY_ENV = "WALLET_PRIVATE_KEY"


class Web3WalletClient(WalletClient):
    def __init__(
        self,
        w3: AsyncWeb3,
        chain_id: int,
        account: Optional[LocalAccount] = None,
    ):
        self.w3 = w3
        self.chain_id = chain_id
        self.account = account

    @classmethod
    async def create(
        cls, rpc_url: str, private_key: Optional[str] = None
    ) -> Web3WalletClient:
        """Connect to ``rpc_url`` and fetch the chain id once."""
        w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url))
        chain_id: int = await w3.eth.chain_id
        account = Account.from_key(private_key) if private_key else None
        logger.debug("Connected to chain %s via %s", chain_id, rpc_url)
        return cls(w3, chain_id, account)

    @classmethod
    async def from_env(cls) -> Web3WalletClient:
        load_dotenv()
        rpc_url = os.getenv(RPC_URL_ENV)
        if not rpc_url:
            raise ValueError(f"{RPC_URL_ENV} must be set")
        return await cls.create(rpc_url, os.getenv(PRIVATE_KEY_ENV))

    def get_chain(self) -> Chain:
        return Chain(id=self.chain_id)

    async def resolve_address(self, identifier: str) -> str:
        if Web3.is_address(identifier):
            return Web3.to_checksum_address(identifier)

        # Anything dotted is treated as an ENS name
        if "." in identifier:
            resolved = await self.w3.ens.address(identifier)
            if resolved:
                return resolved
            raise ValueError(f"ENS name {identifier} could not be resolved")

        raise ValueError(f"Invalid address: {identifier}")

    def _contract_function(self, address: str, abi: list, function_name: str, args: list) -> Any:
        contract = self.w3.eth.contract(
            address=Web3.to_checksum_address(address), abi=abi
        )
        return getattr(contract.functions, function_name)(*args)

    async def read(self, request: ReadRequest) -> ReadResult:
        logger.debug("eth_call %s.%s%s", request.address, request.function_name, request.args)
        fn = self._contract_function(
            request.address, request.abi, request.function_name, request.args
        )
        return ReadResult(value=await fn.call())

    async def send_transaction(self, request: TransactionRequest) -> TransactionResult:
        if self.account is None:
            raise ValueError("A private key is required to send transactions")

        fn = self._contract_function(
            request.to, request.abi, request.function_name, request.args
        )
        tx_params: dict[str, Any] = {
            "from": self.account.address,
            "nonce": await self.w3.eth.get_transaction_count(
                self.account.address, "pending"
            ),
            "chainId": self.chain_id,
        }
        if request.value is not None:
            tx_params["value"] = request.value

        tx = await fn.build_transaction(tx_params)
        signed = self.account.sign_transaction(tx)
        tx_hash = await self.w3.eth.send_raw_transaction(signed.raw_transaction)
        logger.debug("Sent %s to %s: %s", request.function_name, request.to, tx_hash)
        return TransactionResult(hash=Web3.to_hex(tx_hash))
