"""
Wallet balance endpoints
"""

from typing import List

from fastapi import APIRouter, HTTPException

from .schemas import BalanceRequest, BalanceResponse
from ..addresses import validate_address
from ..balance import BalanceCalculator
from ..errors import BalanceError, InsufficientFunds, InvalidAddressFormat, InvalidTransactionAmount
from ..transactions import belongs_to_wallet, transaction_sort_key


router = APIRouter()


def _error_detail(error: BalanceError, positions: List[int]) -> dict:
    """Error detail with the index pointing into the request's transactions"""
    detail = error.to_dict()
    detail["index"] = positions[error.index]
    return detail


@router.post("/{address}/balance", response_model=BalanceResponse)
async def wallet_balance(address: str, request: BalanceRequest):
    """Calculate the balance of a wallet from the submitted transactions"""
    try:
        wallet = validate_address(address)
    except InvalidAddressFormat as e:
        raise HTTPException(status_code=400, detail=e.to_dict())

    try:
        submitted = [item.to_transaction() for item in request.transactions]
    except ValueError as e:
        raise HTTPException(status_code=400, detail={"error": "invalid_request", "message": str(e)})

    # (request position, transaction) pairs, so errors can name the submitted record
    selected = [
        (position, transaction) for position, transaction in enumerate(submitted)
        if belongs_to_wallet(wallet, transaction)
    ]
    ignored = len(submitted) - len(selected)
    if request.sort:
        selected.sort(key=lambda pair: transaction_sort_key(pair[1]))

    positions = [position for position, _ in selected]
    transactions = [transaction for _, transaction in selected]

    try:
        report = BalanceCalculator(request.mode).calculate(wallet, transactions)
    except InvalidTransactionAmount as e:
        raise HTTPException(status_code=422, detail=_error_detail(e, positions))
    except InsufficientFunds as e:
        raise HTTPException(status_code=409, detail=_error_detail(e, positions))

    return BalanceResponse.from_report(report, ignored=ignored, positions=positions)
