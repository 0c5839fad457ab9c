from typing import Annotated, List, Optional

from pydantic import BaseModel, Field

from erc1155_agent_kit.shared.constants.contracts import EMPTY_DATA


class GetTokenInfoBySymbolParameters(BaseModel):
    symbol: Annotated[
        str,
        Field(description="The symbol of the token to get the info of (e.g. GOLD)."),
    ]


class BalanceOfParameters(BaseModel):
    token_address: Annotated[
        str, Field(description="The address of the ERC1155 contract.")
    ]
    owner: Annotated[
        str,
        Field(description="The address (or ENS name) of the owner to check the balance of."),
    ]
    id: Annotated[int, Field(ge=0, description="The id of the token within the contract.")]


class BalanceOfBatchParameters(BaseModel):
    token_address: Annotated[
        str, Field(description="The address of the ERC1155 contract.")
    ]
    owners: Annotated[
        List[str],
        Field(
            description="The addresses (or ENS names) of the owners, one per token id."
        ),
    ]
    ids: Annotated[
        List[Annotated[int, Field(ge=0)]],
        Field(description="The token ids, aligned with owners."),
    ]


class SafeTransferFromParameters(BaseModel):
    token_address: Annotated[
        str, Field(description="The address of the ERC1155 contract.")
    ]
    from_address: Annotated[
        str, Field(description="The address (or ENS name) to transfer the token from.")
    ]
    to_address: Annotated[
        str, Field(description="The address (or ENS name) to transfer the token to.")
    ]
    id: Annotated[int, Field(ge=0, description="The id of the token to transfer.")]
    value: Annotated[
        int, Field(ge=0, description="The amount of the token to transfer, in base units.")
    ]
    data: Annotated[
        Optional[str],
        Field(description="Additional hex-encoded data for the receiver hook."),
    ] = EMPTY_DATA


class SafeBatchTransferFromParameters(BaseModel):
    token_address: Annotated[
        str, Field(description="The address of the ERC1155 contract.")
    ]
    from_address: Annotated[
        str, Field(description="The address (or ENS name) to transfer the tokens from.")
    ]
    to_address: Annotated[
        str, Field(description="The address (or ENS name) to transfer the tokens to.")
    ]
    ids: Annotated[
        List[Annotated[int, Field(ge=0)]],
        Field(description="The ids of the tokens to transfer."),
    ]
    values: Annotated[
        List[Annotated[int, Field(ge=0)]],
        Field(description="The amounts to transfer, aligned with ids."),
    ]
    data: Annotated[
        Optional[str],
        Field(description="Additional hex-encoded data for the receiver hook."),
    ] = EMPTY_DATA


class SetApprovalForAllParameters(BaseModel):
    token_address: Annotated[
        str, Field(description="The address of the ERC1155 contract.")
    ]
    operator: Annotated[
        str, Field(description="The address (or ENS name) of the operator.")
    ]
    approved: Annotated[
        bool, Field(description="True to grant approval, false to revoke it.")
    ]


class IsApprovedForAllParameters(BaseModel):
    token_address: Annotated[
        str, Field(description="The address of the ERC1155 contract.")
    ]
    owner: Annotated[
        str, Field(description="The address (or ENS name) of the token owner.")
    ]
    operator: Annotated[
        str, Field(description="The address (or ENS name) of the operator.")
    ]
