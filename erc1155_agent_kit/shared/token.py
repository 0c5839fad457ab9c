from __future__ import annotations

from dataclasses import dataclass, field, asdict
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class TokenChainInfo:
    contract_address: str


@dataclass(frozen=True)
class Token:
    """Static description of a single ERC1155 token id and where it is deployed.

    ``chains`` maps a chain id to the contract holding the token on that chain.
    """

    symbol: str
    name: str
    id: int
    decimals: int = 0
    uri: str = ""
    total_supply: int = 0
    chains: Mapping[int, TokenChainInfo] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Read-only copy so later edits to the source dict do not leak in
        object.__setattr__(self, "chains", MappingProxyType(dict(self.chains)))

    def contract_address_for(self, chain_id: int) -> Optional[str]:
        chain_info = self.chains.get(chain_id)
        return chain_info.contract_address if chain_info else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Token:
        """Build a token from a plain mapping, as found in JSON or YAML config.

        Chain entries may be either ``{"contract_address": ...}`` mappings or bare
        address strings.
        """
        chains: Dict[int, TokenChainInfo] = {}
        for chain_id, chain_info in (data.get("chains") or {}).items():
            if isinstance(chain_info, str):
                address = chain_info
            else:
                address = chain_info.get("contract_address") or chain_info.get(
                    "contractAddress"
                )
            chains[int(chain_id)] = TokenChainInfo(contract_address=address)

        return cls(
            symbol=data["symbol"],
            name=data.get("name", ""),
            id=int(data["id"]),
            decimals=int(data.get("decimals", 0)),
            uri=data.get("uri", ""),
            total_supply=int(data.get("total_supply", data.get("totalSupply", 0))),
            chains=chains,
        )


@dataclass(frozen=True)
class TokenInfo:
    """Public view of a token resolved against one chain."""

    symbol: str
    contract_address: str
    id: int
    decimals: int
    name: str
    uri: str
    total_supply: int

    @classmethod
    def from_token(cls, token: Token, contract_address: str) -> TokenInfo:
        return cls(
            symbol=token.symbol,
            contract_address=contract_address,
            id=token.id,
            decimals=token.decimals,
            name=token.name,
            uri=token.uri,
            total_supply=token.total_supply,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
