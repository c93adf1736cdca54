# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from auction_ledger.db.repositories.counter_repository import CounterRepository
from auction_ledger.db.repositories.item_repository import ItemRepository
from auction_ledger.db.repositories.user_repository import UserRepository

__all__ = ["CounterRepository", "ItemRepository", "UserRepository"]
