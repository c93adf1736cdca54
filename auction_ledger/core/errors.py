"""
Auction errors - typed, distinguishable failures of the mutation engine.

Every error carries a stable code, a user-facing message and the HTTP status the
API maps it to. All are raised before anything is written, so a failed call has
no side effect and can be retried.
"""


class AuctionError(Exception):
    """Base exception for all auction rule violations."""

    code = "AUCTION_ERROR"
    http_status = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"error": {"code": self.code, "message": self.message}}


class ItemNotFoundError(AuctionError):
    code = "ITEM_NOT_FOUND"
    http_status = 404

    def __init__(self, item_id: int):
        super().__init__("Item could not be found.")
        self.item_id = item_id


class NotItemOwnerError(AuctionError):
    """Caller tried to edit, stop or delete somebody else's listing."""

    code = "UNAUTHORIZED"
    http_status = 403

    def __init__(self, item_id: int):
        super().__init__("You are not authorized to modify this item.")
        self.item_id = item_id


class SelfBidError(AuctionError):
    code = "SELF_BID"
    http_status = 403

    def __init__(self, item_id: int):
        super().__init__("You cannot bid for your own item.")
        self.item_id = item_id


class ItemInactiveError(AuctionError):
    code = "ITEM_INACTIVE"
    http_status = 409

    def __init__(self, item_id: int):
        super().__init__("The selected item is not actively listed.")
        self.item_id = item_id


class BidTooLowError(AuctionError):
    """Bid must be strictly greater than the current highest bid."""

    code = "BID_TOO_LOW"
    http_status = 409

    def __init__(self, item_id: int, amount: int, highest_bid: int):
        super().__init__(
            f"Your bid of {amount} must be higher than the current highest bid of {highest_bid}."
        )
        self.item_id = item_id
        self.amount = amount
        self.highest_bid = highest_bid
