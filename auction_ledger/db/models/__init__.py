# Import every model so Base.metadata sees all tables (Alembic, create_all in tests)

from auction_ledger.db.models.bid import Bid
from auction_ledger.db.models.counter import Counter
from auction_ledger.db.models.item import Item
from auction_ledger.db.models.user import User

__all__ = ["Bid", "Counter", "Item", "User"]
