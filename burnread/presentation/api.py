from fastapi import APIRouter

from burnread.presentation.routers.v1.messages import router as messages_router
from burnread.presentation.routes.health import router as health_router

api = APIRouter()

# Add all v1 routers here
routers = (messages_router,)
for router in routers:
    api.include_router(router, prefix="/v1")

api.include_router(health_router)
