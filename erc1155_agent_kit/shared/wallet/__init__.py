__all__ = [
    "WalletClient",
    "Chain",
    "ReadRequest",
    "ReadResult",
    "TransactionRequest",
    "TransactionResult",
]

from .wallet_client import (
    WalletClient,
    Chain,
    ReadRequest,
    ReadResult,
    TransactionRequest,
    TransactionResult,
)
