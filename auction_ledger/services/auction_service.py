"""
Auction service - the state-mutation engine for listings and bids.
Challenge: Every rule and ownership check resolves before anything is written,
so a rejected call leaves the store untouched and is safe to retry.
Design: Repositories are injected per request; the caller identity is an argument.
"""

import logging

from auction_ledger.cache.redis_client import cache_get, cache_set, invalidate_on_commit, item_key
from auction_ledger.core.authorization import authorize
from auction_ledger.core.errors import (
    AuctionError,
    BidTooLowError,
    ItemInactiveError,
    ItemNotFoundError,
    NotItemOwnerError,
    SelfBidError,
)
from auction_ledger.core.metrics import BIDS_ACCEPTED, ITEMS_LISTED, MUTATIONS_REJECTED
from auction_ledger.db.models.bid import Bid
from auction_ledger.db.models.item import Item
from auction_ledger.db.repositories.item_repository import ItemRepository
from auction_ledger.schemas.item import (
    BidConfirmation,
    BidCreate,
    DeleteConfirmation,
    ItemBase,
    ItemResponse,
)
from auction_ledger.services.id_allocator import IdAllocator

logger = logging.getLogger(__name__)


def _item_to_response(item: Item) -> ItemResponse:
    return ItemResponse.model_validate(item)


def _reject(operation: str, error: AuctionError) -> AuctionError:
    """Count and log a refused mutation; returns the error for raising."""
    MUTATIONS_REJECTED.labels(operation=operation, code=error.code).inc()
    logger.warning(
        "%s rejected: %s",
        operation,
        error.message,
        extra={"error_code": error.code, "item_id": getattr(error, "item_id", None)},
    )
    return error


class AuctionService:
    """List, edit, stop, delete and bid on items on behalf of a caller."""

    def __init__(self, item_repo: ItemRepository, id_allocator: IdAllocator):
        self.item_repo = item_repo
        self.id_allocator = id_allocator

    async def get_all_items(self) -> dict[int, ItemResponse]:
        return {id: _item_to_response(item) for id, item in await self.item_repo.enumerate()}

    async def get_item(self, id: int, use_cache: bool = True) -> ItemResponse | None:
        """Single item; served from Redis when cached."""
        if use_cache:
            cached = await cache_get(item_key(id))
            if cached:
                return ItemResponse.model_validate(cached)
        item = await self.item_repo.get(id)
        if item is None:
            return None
        resp = _item_to_response(item)
        if use_cache:
            await cache_set(item_key(id), resp.model_dump(mode="json"))
        return resp

    async def list_item(self, caller: int, data: ItemBase) -> ItemResponse:
        """Create a listing owned by the caller with no bids."""
        id = await self.id_allocator.allocate()
        item = Item(
            owner_id=caller,
            description=data.description,
            highest_bid=0,
            is_active=data.is_active,
            result_date=data.result_date,
            latest_update=data.latest_update,
            bids=[],
        )
        await self.item_repo.insert(id, item)
        ITEMS_LISTED.inc()
        logger.info("item listed", extra={"item_id": id, "owner_id": caller})
        return _item_to_response(item)

    async def edit_item(self, caller: int, id: int, data: ItemBase) -> ItemResponse:
        """Overwrite the owner-editable fields. The only way to re-activate a stopped item."""
        item = await self._get_owned(caller, id, "editItem")
        item.description = data.description
        item.result_date = data.result_date
        item.is_active = data.is_active
        item.latest_update = data.latest_update
        await self._commit(item)
        logger.info("item edited", extra={"item_id": id, "is_active": item.is_active})
        return _item_to_response(item)

    async def stop_listing(self, caller: int, id: int) -> ItemResponse:
        """Deactivate the item. Stopping an inactive item is a no-op success."""
        item = await self._get_owned(caller, id, "stopListing")
        item.is_active = False
        await self._commit(item)
        logger.info("item stopped", extra={"item_id": id})
        return _item_to_response(item)

    async def delete_item(self, caller: int, id: int) -> DeleteConfirmation:
        """Remove the item and its bid history for good. The id is never reissued."""
        await self._get_owned(caller, id, "deleteItem")
        await self.item_repo.remove(id)
        invalidate_on_commit(self.item_repo.session, item_key(id))
        logger.info("item deleted", extra={"item_id": id})
        return DeleteConfirmation(id=id, message=f"Item with id {id} removed successfully")

    async def bid_for_item(self, caller: int, id: int, data: BidCreate) -> BidConfirmation:
        """
        Append a bid. Checks run in a fixed order so a doubly-invalid bid reports
        the first failure: self-bid, then inactive, then not above the highest bid.
        """
        item = await self.item_repo.get(id)
        if item is None:
            raise _reject("bidForAnItem", ItemNotFoundError(id))
        if authorize(caller, item.owner_id):
            raise _reject("bidForAnItem", SelfBidError(id))
        if not item.is_active:
            raise _reject("bidForAnItem", ItemInactiveError(id))
        if data.amount <= item.highest_bid:
            raise _reject("bidForAnItem", BidTooLowError(id, data.amount, item.highest_bid))

        item.bids.append(
            Bid(item_id=id, bidder_id=caller, amount=data.amount, bid_date=data.bid_date)
        )
        item.highest_bid = data.amount
        await self._commit(item)
        BIDS_ACCEPTED.inc()
        logger.info("bid accepted", extra={"item_id": id, "bidder_id": caller, "amount": data.amount})
        return BidConfirmation(item_id=id, message=f"Successfully bid for item {id}")

    async def _get_owned(self, caller: int, id: int, operation: str) -> Item:
        """Load the item and require the caller to own it. Nothing is modified on failure."""
        item = await self.item_repo.get(id)
        if item is None:
            raise _reject(operation, ItemNotFoundError(id))
        if not authorize(caller, item.owner_id):
            raise _reject(operation, NotItemOwnerError(id))
        return item

    async def _commit(self, item: Item) -> None:
        await self.item_repo.insert(item.id, item)
        invalidate_on_commit(self.item_repo.session, item_key(item.id))
