"""
Counter repository - durable named integer cells.
"""

from auction_ledger.db.models.counter import Counter
from auction_ledger.db.repositories.base_repository import BaseRepository


class CounterRepository(BaseRepository[Counter]):
    def __init__(self, session):
        super().__init__(session, Counter)

    async def get(self, name: str, for_update: bool = False) -> int:
        """Current value; a cell that was never set reads as 0.

        for_update row-locks the cell until the transaction ends, so workers in
        other processes cannot read the same value before this one commits.
        """
        counter = await self.session.get(Counter, name, with_for_update=for_update)
        return counter.value if counter else 0

    async def set(self, name: str, value: int) -> None:
        counter = await self.get_by_id(name)
        if counter is None:
            await self.add(Counter(name=name, value=value))
            return
        counter.value = value
        await self.session.flush()
