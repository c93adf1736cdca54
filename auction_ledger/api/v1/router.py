"""
API v1 router - health checks, identity (users) and the auction surface (items).
"""

from fastapi import APIRouter

from auction_ledger.api.v1.endpoints import items, users, health

api_router = APIRouter(prefix="/v1")

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(items.router, prefix="/items", tags=["items"])
