"""Aggregate API routers."""

from fastapi import APIRouter

from . import admin, health, tasks, users

api_router = APIRouter()
api_router.include_router(admin.router)
api_router.include_router(users.router)
api_router.include_router(tasks.router)

__all__ = ["api_router", "health"]
