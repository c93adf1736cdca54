"""Ownership gate for listing mutations."""


def authorize(caller: int, owner: int) -> bool:
    """True iff the caller owns the item."""
    return caller == owner
