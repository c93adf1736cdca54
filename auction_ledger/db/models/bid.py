"""
Bid model - an accepted offer, immutable once appended to an item.
"""

from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from auction_ledger.db.base import Base

if TYPE_CHECKING:
    from auction_ledger.db.models.item import Item


class Bid(Base):
    __tablename__ = "bids"

    # Row id only orders the history; it is not part of the API contract
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    item_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True
    )
    bidder_id: Mapped[int] = mapped_column(nullable=False, index=True)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    bid_date: Mapped[int] = mapped_column(BigInteger, nullable=False)

    item: Mapped["Item"] = relationship("Item", back_populates="bids")

    def __repr__(self) -> str:
        return f"<Bid(item_id={self.item_id}, bidder_id={self.bidder_id}, amount={self.amount})>"
