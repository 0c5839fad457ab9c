__all__ = ["ERC1155_ABI", "EMPTY_DATA"]

from .contracts import ERC1155_ABI, EMPTY_DATA
