from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from smartbank.core.settings import settings
from smartbank.db.session import get_db
from smartbank.services.client_pipeline import ClientPipeline
from smartbank.services.client_store import SqlClientStore
from smartbank.services.offer_engine import OfferEngine
from smartbank.services.score_client import ScoreClient

"""
Dépendances API.

Rôle (fonctionnel) :
- Construit explicitement les collaborateurs du pipeline d’onboarding pour chaque requête :
  - store SQL sur la session de la requête
  - client de scoring (URL + timeout depuis les settings)
  - moteur d’offres (langue par défaut depuis les settings)
- Point de substitution en tests (app.dependency_overrides).
"""


def get_score_client() -> ScoreClient:
    return ScoreClient(settings.SCORING_API_URL, settings.SCORING_TIMEOUT_SECONDS)


def get_client_pipeline(
    db: AsyncSession = Depends(get_db),
    score_client: ScoreClient = Depends(get_score_client),
) -> ClientPipeline:
    return ClientPipeline(
        store=SqlClientStore(db),
        score_client=score_client,
        offer_engine=OfferEngine(settings.DEFAULT_LOCALE),
    )


# Dépendance prête à l’emploi pour les routes clients
PipelineDep = Depends(get_client_pipeline)
