__all__ = [
    "GetTokenInfoBySymbolParameters",
    "BalanceOfParameters",
    "BalanceOfBatchParameters",
    "SafeTransferFromParameters",
    "SafeBatchTransferFromParameters",
    "SetApprovalForAllParameters",
    "IsApprovedForAllParameters",
]

from .erc1155_schema import (
    GetTokenInfoBySymbolParameters,
    BalanceOfParameters,
    BalanceOfBatchParameters,
    SafeTransferFromParameters,
    SafeBatchTransferFromParameters,
    SetApprovalForAllParameters,
    IsApprovedForAllParameters,
)
