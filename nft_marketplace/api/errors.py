"""Translation of domain errors into HTTP responses."""
from fastapi import HTTPException, status

from nft_marketplace.domain.errors import (
    AlreadySoldError,
    CollectionNotFoundError,
    InsufficientFundsError,
    InsufficientPaymentError,
    InvalidFeePercentError,
    InvalidPriceError,
    ListingNotFoundError,
    MarketplaceError,
    NotOwnerError,
    TokenNotFoundError,
    TransferNotAuthorizedError,
)

_STATUS_BY_ERROR: dict[type[MarketplaceError], int] = {
    ListingNotFoundError: status.HTTP_404_NOT_FOUND,
    TokenNotFoundError: status.HTTP_404_NOT_FOUND,
    CollectionNotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadySoldError: status.HTTP_409_CONFLICT,
    NotOwnerError: status.HTTP_403_FORBIDDEN,
    TransferNotAuthorizedError: status.HTTP_403_FORBIDDEN,
    InvalidPriceError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InsufficientPaymentError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InsufficientFundsError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidFeePercentError: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def to_http_exception(exc: MarketplaceError) -> HTTPException:
    status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail=str(exc))


def invalid_address(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
