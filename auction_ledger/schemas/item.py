"""Item and bid request/response schemas - REST API contract."""

from typing import Annotated

from pydantic import BaseModel, Field

# Unsigned on the wire, bounded to fit a signed 64-bit column
UInt64 = Annotated[int, Field(ge=0, le=2**63 - 1)]


class ItemBase(BaseModel):
    """Owner-editable listing fields (listItem / editItem body)."""

    description: str
    result_date: UInt64
    is_active: bool = True
    latest_update: UInt64


class BidCreate(BaseModel):
    amount: UInt64
    bid_date: UInt64


class BidResponse(BaseModel):
    item_id: int
    bidder: int = Field(validation_alias="bidder_id")
    amount: int
    bid_date: int

    model_config = {"from_attributes": True, "populate_by_name": True}


class ItemResponse(BaseModel):
    id: int
    owner: int = Field(validation_alias="owner_id")
    description: str
    highest_bid: int
    bid_history: list[BidResponse] = Field(validation_alias="bids")
    is_active: bool
    result_date: int
    latest_update: int

    model_config = {"from_attributes": True, "populate_by_name": True}


class DeleteConfirmation(BaseModel):
    id: int
    message: str


class BidConfirmation(BaseModel):
    item_id: int
    message: str
