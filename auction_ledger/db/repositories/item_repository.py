"""
Item repository - the keyed item store: get / insert / remove / enumerate.
Challenge: Load bid history with the item in one extra query (no N+1).
Each call touches a single key; the request session provides atomicity.
"""

from sqlalchemy import select

from auction_ledger.db.models.item import MAX_ITEM_ID, Item
from auction_ledger.db.repositories.base_repository import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """Item store. Bids are eager-loaded (selectin) by the model mapping."""

    def __init__(self, session):
        super().__init__(session, Item)

    async def get(self, id: int) -> Item | None:
        """Item under id. Keys the column cannot hold are simply absent."""
        if not 0 <= id <= MAX_ITEM_ID:
            return None
        return await self.get_by_id(id)

    async def insert(self, id: int, item: Item) -> Item | None:
        """Store item under id, replacing unconditionally. Returns the previous value."""
        previous = await self.get(id)
        item.id = id
        if previous is None:
            self.session.add(item)
        elif previous is not item:
            await self.session.delete(previous)
            await self.session.flush()
            self.session.add(item)
        await self.session.flush()
        return previous

    async def remove(self, id: int) -> Item | None:
        """Delete item (and its bids). Returns what was removed, None if absent."""
        item = await self.get(id)
        if item is None:
            return None
        await self.delete(item)
        return item

    async def enumerate(self) -> list[tuple[int, Item]]:
        """All (id, item) pairs in ascending id order."""
        result = await self.session.execute(select(Item).order_by(Item.id))
        return [(item.id, item) for item in result.scalars().all()]
