#!/usr/bin/env python3
"""
Seed script: registers users, lists items and places bid ladders via the API (no direct DB).
Every user lists items; every other user then bids on them with rising amounts.
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --users 10 --items-per-user 5 --bids-per-item 4
"""

import argparse
import random
import sys
import time

import httpx

API_BASE = "http://localhost:8000/api/v1"
PASSWORD = "password123"
ONE_WEEK = 7 * 24 * 3600

DESCRIPTIONS = [
    "Vintage mechanical watch, serviced last year",
    "First edition paperback, light shelf wear",
    "Mid-century oak side table",
    "Signed concert poster, framed",
    "Film camera with 50mm lens",
    "Hand-thrown stoneware vase",
    "Retro handheld console, boxed",
    "Antique brass compass",
    "Limited print, numbered 12/100",
    "Leather messenger bag, barely used",
]


def register_and_login(client: httpx.Client, n: int, errors: list[str]) -> dict | None:
    """Return {"id", "headers"} for user n, creating the account if needed."""
    email = f"bidder{n}@example.com"
    r = client.post("/users/register", json={
        "email": email,
        "password": PASSWORD,
        "full_name": f"Bidder {n}",
    })
    if r.status_code not in (200, 201, 409):
        errors.append(f"Register {email}: {r.status_code} {r.text[:80]}")
        return None
    r = client.post("/users/login", json={"email": email, "password": PASSWORD})
    if r.status_code != 200:
        errors.append(f"Login {email}: {r.status_code}")
        return None
    body = r.json()
    return {"id": body["user_id"], "headers": {"Authorization": f"Bearer {body['access_token']}"}}


def main():
    ap = argparse.ArgumentParser(description="Seed users, listings and bids via API")
    ap.add_argument("--users", type=int, default=5, help="Number of users to create")
    ap.add_argument("--items-per-user", type=int, default=3, help="Listings per user")
    ap.add_argument("--bids-per-item", type=int, default=4, help="Accepted bids per listing")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    errors: list[str] = []
    item_ids: list[tuple[int, int]] = []  # (item id, owner id)
    accepted = 0

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        print(f"Creating {args.users} users...")
        users = [u for n in range(1, args.users + 1) if (u := register_and_login(client, n, errors))]
        if len(users) < 2:
            print("Need at least two users to place bids.")
            sys.exit(1)

        print(f"Listing {len(users) * args.items_per_user} items...")
        now = int(time.time())
        for u in users:
            for _ in range(args.items_per_user):
                r = client.post("/items", headers=u["headers"], json={
                    "description": random.choice(DESCRIPTIONS),
                    "result_date": now + ONE_WEEK,
                    "is_active": True,
                    "latest_update": now,
                })
                if r.status_code == 201:
                    item_ids.append((r.json()["id"], u["id"]))
                else:
                    errors.append(f"List item for user {u['id']}: {r.status_code}")

        print("Placing bids...")
        for item_id, owner_id in item_ids:
            bidders = [u for u in users if u["id"] != owner_id]
            amount = 0
            for _ in range(args.bids_per_item):
                amount += random.choice([5, 10, 25, 50, 100])
                bidder = random.choice(bidders)
                r = client.post(
                    f"/items/{item_id}/bids",
                    headers=bidder["headers"],
                    json={"amount": amount, "bid_date": int(time.time())},
                )
                if r.status_code == 200:
                    accepted += 1
                else:
                    errors.append(f"Bid {amount} on item {item_id}: {r.status_code} {r.text[:80]}")

    print(f"\nDone. Users: {len(users)}, Items listed: {len(item_ids)}, Bids accepted: {accepted}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
