from fastapi import APIRouter

from contact_manager.api.routers.contacts import router as contacts_router
from contact_manager.api.routers.health import router as health_router


api_routers = APIRouter(prefix="/api")
api_routers.include_router(contacts_router, prefix="/contacts", tags=["contacts"])
api_routers.include_router(health_router, prefix="/health", tags=["health"])
