"""HTTP routes, mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from contactkeeper.api import auth, contacts, health, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(users.router, prefix="/user", tags=["users"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
