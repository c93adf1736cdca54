"""
Sequential item id allocator backed by a durable counter cell.
"""

from auction_ledger.db.repositories.counter_repository import CounterRepository


class IdAllocator:
    """Hands out 0, 1, 2, ... from the named counter. A value is never handed out twice."""

    def __init__(self, counters: CounterRepository, name: str):
        self.counters = counters
        self.name = name

    async def allocate(self) -> int:
        current = await self.counters.get(self.name, for_update=True)
        await self.counters.set(self.name, current + 1)
        return current
