"""
API router aggregator — wires all endpoint modules together.
"""

from fastapi import APIRouter

from liveboard.api.endpoints import (announcements, auth, dashboard, enterprise,
                                     schedule, settings, tasks, users)

api_router = APIRouter()

# Auth and user management
api_router.include_router(auth.router)
api_router.include_router(users.router)

# Live board content (broadcast on write)
api_router.include_router(schedule.router)
api_router.include_router(announcements.router)
api_router.include_router(tasks.router)

# Enterprise resources and dropdown settings
for resource_router in enterprise.routers:
    api_router.include_router(resource_router)
api_router.include_router(settings.router)

# Dashboard stats, health
api_router.include_router(dashboard.router)
