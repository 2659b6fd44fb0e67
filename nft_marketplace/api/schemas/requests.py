from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from nft_marketplace.domain.value_objects.address import normalize_address

Address = Annotated[str, AfterValidator(normalize_address)]


class DeployCollectionRequest(BaseModel):
    name: str = Field(min_length=1)
    symbol: str = Field(min_length=1)


class MintRequest(BaseModel):
    caller: Address
    token_uri: str


class SetApprovalForAllRequest(BaseModel):
    caller: Address
    operator: Address
    approved: bool = True


class ApproveTokenRequest(BaseModel):
    caller: Address
    to: Address


class MakeItemRequest(BaseModel):
    caller: Address
    nft: Address
    token_id: int = Field(ge=1)
    # Not range-checked here: a non-positive price is rejected by the marketplace itself
    price: int


class PurchaseRequest(BaseModel):
    caller: Address
    value: int = Field(ge=0)


class FundAccountRequest(BaseModel):
    amount: int | None = Field(default=None, ge=0)
