from fastapi import APIRouter

from .clients import router as clients_router
from .health import router as health_router

"""
Router principal de l’API : regroupe les routeurs par domaine (health, clients).
"""

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(clients_router)
