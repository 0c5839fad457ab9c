class Erc1155Error(Exception):
    """Base class for all errors raised by the ERC1155 service."""


class NotFoundError(Erc1155Error):
    """No registered token matches the requested symbol."""


class UnsupportedChainError(Erc1155Error):
    """The token is registered but has no contract on the wallet's chain."""


class QueryError(Erc1155Error):
    """A read call (address resolution or contract view) failed."""


class TransferError(Erc1155Error):
    """A transfer transaction could not be sent."""


class ApprovalError(Erc1155Error):
    """An operator approval transaction could not be sent."""
