from fastapi import APIRouter

from lingo.api.routes.admin import router as admin_router
from lingo.api.routes.messages import router as messages_router
from lingo.api.routes.system import router as system_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(messages_router)
api_router.include_router(admin_router)
