from erc1155_agent_kit.shared.models import (
    ExecutedTransactionToolResponse,
    QueryToolResponse,
    RawTransactionResponse,
    TRANSACTION_STATUS_FAILED,
)


def test_query_response_to_dict():
    response = QueryToolResponse(human_message="Balance: 5", extra={"balance": 5})

    assert response.to_dict() == {
        "type": "query",
        "human_message": "Balance: 5",
        "extra": {"balance": 5},
        "error": None,
    }


def test_executed_transaction_response_from_dict():
    response = ExecutedTransactionToolResponse.from_dict(
        {
            "type": "executed_transaction",
            "raw": {"status": TRANSACTION_STATUS_FAILED, "error": "Failed to transfer: x"},
            "human_message": "Failed to transfer: x",
        }
    )

    assert response.raw == RawTransactionResponse(
        status=TRANSACTION_STATUS_FAILED, error="Failed to transfer: x"
    )
    assert response.error == "Failed to transfer: x"
