from fastapi import APIRouter

from smartbank.core.settings import settings

"""
API Health.

Endpoint simple pour vérifier que l’API répond, avec la cible de scoring configurée.
"""

router = APIRouter()


@router.get("/health")
def health():
    return {
        "status": "ok",
        "env": settings.ENV,
        "scoring_api_url": settings.SCORING_API_URL,
        "default_locale": settings.DEFAULT_LOCALE,
    }
