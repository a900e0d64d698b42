"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers.  Each endpoint module
declares its full paths itself, since ``/accounts/{id}/messages``
belongs to the accounts module but lives next to ``/messages``.
"""

from fastapi import APIRouter

from .endpoints import accounts, health, messages

router = APIRouter()

router.include_router(accounts.router, tags=["accounts"])
router.include_router(messages.router, tags=["messages"])
router.include_router(health.router, tags=["health"])
