"""API routers package."""

from fastapi import APIRouter

from src.explorer.api.routers.accounts import router as accounts_router
from src.explorer.api.routers.asset_definitions import (
    router as asset_definitions_router,
)
from src.explorer.api.routers.assets import router as assets_router
from src.explorer.api.routers.domains import router as domains_router
from src.explorer.api.routers.peer import router as peer_router
from src.explorer.api.routers.roles import router as roles_router

api_router = APIRouter()

api_router.include_router(accounts_router)
api_router.include_router(domains_router)
api_router.include_router(assets_router)
api_router.include_router(asset_definitions_router)
api_router.include_router(roles_router)

# Peer list and node status
api_router.include_router(peer_router)
