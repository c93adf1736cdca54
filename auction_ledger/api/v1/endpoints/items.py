"""
Item endpoints - listing lifecycle and bidding.
Design: Thin controller; AuctionService holds every rule. AuctionError subclasses
propagate to the global handler, which renders them with their own status code.
"""

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from auction_ledger.config import get_settings
from auction_ledger.core.dependencies import CurrentUserId
from auction_ledger.db.repositories.counter_repository import CounterRepository
from auction_ledger.db.repositories.item_repository import ItemRepository
from auction_ledger.db.session import DbSession, WriteSession
from auction_ledger.schemas.item import (
    BidConfirmation,
    BidCreate,
    DeleteConfirmation,
    ItemBase,
    ItemResponse,
)
from auction_ledger.services.auction_service import AuctionService
from auction_ledger.services.id_allocator import IdAllocator

router = APIRouter()
settings = get_settings()


def _get_auction_service(session: AsyncSession) -> AuctionService:
    """Factory for service with repository injection (Dependency Inversion)."""
    allocator = IdAllocator(CounterRepository(session), settings.item_id_counter)
    return AuctionService(ItemRepository(session), allocator)


@router.get("", response_model=dict[int, ItemResponse])
async def get_all_items(session: DbSession):
    """getAllItems: every listing keyed by id."""
    return await _get_auction_service(session).get_all_items()


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(session: DbSession, item_id: int):
    """getItem: single listing with its bid history. Uses Redis cache."""
    item = await _get_auction_service(session).get_item(item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return item


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def list_item(session: WriteSession, data: ItemBase, user_id: CurrentUserId):
    """listItem: the caller becomes the owner."""
    return await _get_auction_service(session).list_item(user_id, data)


@router.put("/{item_id}", response_model=ItemResponse)
async def edit_item(session: WriteSession, item_id: int, data: ItemBase, user_id: CurrentUserId):
    """editItem: owner only."""
    return await _get_auction_service(session).edit_item(user_id, item_id, data)


@router.post("/{item_id}/stop", response_model=ItemResponse)
async def stop_listing(session: WriteSession, item_id: int, user_id: CurrentUserId):
    """stopListing: owner only; no further bids are accepted."""
    return await _get_auction_service(session).stop_listing(user_id, item_id)


@router.delete("/{item_id}", response_model=DeleteConfirmation)
async def delete_item(session: WriteSession, item_id: int, user_id: CurrentUserId):
    """deleteItem: owner only; bid history goes with the item."""
    return await _get_auction_service(session).delete_item(user_id, item_id)


@router.post("/{item_id}/bids", response_model=BidConfirmation)
async def bid_for_an_item(session: WriteSession, item_id: int, data: BidCreate, user_id: CurrentUserId):
    """bidForAnItem: anyone but the owner, while active, above the highest bid."""
    return await _get_auction_service(session).bid_for_item(user_id, item_id, data)
