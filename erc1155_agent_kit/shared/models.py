from __future__ import annotations

from dataclasses import dataclass, field
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

TRANSACTION_STATUS_SUBMITTED = "SUBMITTED"
TRANSACTION_STATUS_FAILED = "FAILED"


class ToolResponse(ABC):
    """Base class for all tool responses."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a dictionary."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> ToolResponse:
        """Deserialize from a dictionary."""
        pass


@dataclass
class QueryToolResponse(ToolResponse):
    """A tool response carrying the result of a read-only call."""

    human_message: str
    extra: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "query",
            "human_message": self.human_message,
            "extra": self.extra,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> QueryToolResponse:
        return cls(
            human_message=data.get("human_message", ""),
            extra=data.get("extra") or {},
            error=data.get("error"),
        )


@dataclass
class RawTransactionResponse:
    status: str
    transaction_hash: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary."""
        return {
            "status": self.status,
            "transaction_hash": self.transaction_hash,
            "error": str(self.error) if self.error else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawTransactionResponse:
        """Deserialize from a dictionary."""
        return cls(
            status=data.get("status", ""),
            transaction_hash=data.get("transaction_hash"),
            error=data.get("error"),
        )


@dataclass
class ExecutedTransactionToolResponse(ToolResponse):
    """A tool response representing a submitted contract transaction."""

    raw: RawTransactionResponse
    human_message: str

    @property
    def error(self) -> Optional[str]:
        return self.raw.error

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "executed_transaction",
            "raw": self.raw.to_dict(),
            "human_message": self.human_message,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExecutedTransactionToolResponse:
        return cls(
            raw=RawTransactionResponse.from_dict(data["raw"]),
            human_message=data.get("human_message", ""),
        )
