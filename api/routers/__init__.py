"""
Router package for the workout log API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- session: Login, logout, session state and navigation guard
- templates: Workout template CRUD
- logged_workouts: Logged workout CRUD
- data: Snapshot export and import
"""

from api.routers.data import router as data_router
from api.routers.health import router as health_router
from api.routers.logged_workouts import router as logged_workouts_router
from api.routers.session import router as session_router
from api.routers.templates import router as templates_router

__all__ = [
    "data_router",
    "health_router",
    "logged_workouts_router",
    "session_router",
    "templates_router",
]
