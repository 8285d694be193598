"""
Address endpoints
"""

from fastapi import APIRouter

from .schemas import AddressValidationResponse
from ..addresses import validate_address
from ..errors import InvalidAddressFormat


router = APIRouter()


@router.get("/{address}/validate", response_model=AddressValidationResponse)
async def check_address(address: str):
    """Check the syntax of a wallet address"""
    try:
        validate_address(address)
    except InvalidAddressFormat as e:
        return AddressValidationResponse(address=address, valid=False, reason=e.reason)

    return AddressValidationResponse(address=address, valid=True)
