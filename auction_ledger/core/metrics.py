"""
Prometheus counters for the auction engine, exposed at /metrics.
"""

from prometheus_client import Counter

ITEMS_LISTED = Counter(
    "auction_items_listed_total",
    "Items created through listItem",
)

BIDS_ACCEPTED = Counter(
    "auction_bids_accepted_total",
    "Bids committed to an item's history",
)

MUTATIONS_REJECTED = Counter(
    "auction_mutations_rejected_total",
    "Mutating calls refused by a rule or ownership check",
    ["operation", "code"],
)
