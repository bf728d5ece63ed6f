"""
Router package for the CoachHub API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- completions: Client workout completion and program advancement
- pickup: Coach-driven program day completion
"""

from api.routers.health import router as health_router
from api.routers.completions import router as completions_router
from api.routers.pickup import router as pickup_router

__all__ = [
    "health_router",
    "completions_router",
    "pickup_router",
]
