# ===========================================================================
# File: app/api/v1/__init__.py
# ===========================================================================
from fastapi import APIRouter
from .endpoints import users, news, system

api_v1_router = APIRouter()

api_v1_router.include_router(news.router, prefix="/news", tags=["News & Announcements"])
api_v1_router.include_router(users.router, prefix="/users", tags=["Users & Profile"])
api_v1_router.include_router(system.router, prefix="/system", tags=["System Information"])
