from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class Chain:
    id: int
    type: str = "evm"


@dataclass
class ReadRequest:
    address: str
    abi: List[dict]
    function_name: str
    args: List[Any] = field(default_factory=list)


@dataclass
class ReadResult:
    value: Any


@dataclass
class TransactionRequest:
    to: str
    abi: List[dict]
    function_name: str
    args: List[Any] = field(default_factory=list)
    value: Optional[int] = None


@dataclass
class TransactionResult:
    hash: str


class WalletClient(ABC):
    """Gateway used by the ERC1155 tools to reach a chain.

    Implementations own key management, signing and broadcasting. The tools only
    resolve addresses, read contract state and submit contract calls through it.
    """

    @abstractmethod
    def get_chain(self) -> Chain:
        pass

    @abstractmethod
    async def resolve_address(self, identifier: str) -> str:
        """Turn an address or a resolvable alias (e.g. an ENS name) into an address."""
        pass

    @abstractmethod
    async def read(self, request: ReadRequest) -> ReadResult:
        pass

    @abstractmethod
    async def send_transaction(self, request: TransactionRequest) -> TransactionResult:
        pass
