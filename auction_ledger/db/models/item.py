"""
Item model - an auction listing and its ordered bid history.
"""

from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from auction_ledger.db.base import Base

if TYPE_CHECKING:
    from auction_ledger.db.models.bid import Bid

# Largest value a BIGINT key column holds
MAX_ITEM_ID = 2**63 - 1


class Item(Base):
    """Auction listing. The id comes from the sequential allocator, never from the database."""

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    owner_id: Mapped[int] = mapped_column(nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    highest_bid: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(nullable=False, default=True)
    # Unix timestamps supplied by the caller; result_date is stored but never enforced
    result_date: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    latest_update: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    # Acceptance order == row order; deleting an item erases its history
    bids: Mapped[list["Bid"]] = relationship(
        "Bid",
        back_populates="item",
        order_by="Bid.id",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, owner_id={self.owner_id}, highest_bid={self.highest_bid})>"
