from __future__ import annotations

from typing import Literal, Optional

from fastapi import APIRouter, Query

from smartbank.api.deps import PipelineDep
from smartbank.core.errors import AppHTTPException, StorageError, ValidationError
from smartbank.schemas.clients import ClientCreate, ClientRecord
from smartbank.services.client_pipeline import ClientPipeline

"""
API Clients.

Rôle (fonctionnel) :
- POST /api/clients : onboarding d’un client (score + offre + message), renvoie l’enregistrement créé.
- GET  /api/clients : liste de tous les clients, du plus récent au plus ancien.

Erreurs :
- 422 VALIDATION_ERROR : champ requis absent / invalide (aucun client créé).
- 503 STORAGE_ERROR : base indisponible (écriture ou lecture).
- L’indisponibilité du service de scoring n’est jamais une erreur HTTP (score de fallback).
"""

router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.post("", response_model=ClientRecord, status_code=201)
async def create_client(
    payload: ClientCreate,
    lang: Optional[Literal["ar", "en"]] = Query(None, description="Langue de l’offre et du message"),
    pipeline: ClientPipeline = PipelineDep,
):
    try:
        return await pipeline.onboard(payload, locale=lang)
    except ValidationError as exc:
        raise AppHTTPException(422, exc.code, exc.message, details=exc.details)
    except StorageError as exc:
        raise AppHTTPException(503, exc.code, "Erreur serveur lors de l’enregistrement du client")


@router.get("", response_model=list[ClientRecord])
async def list_clients(pipeline: ClientPipeline = PipelineDep):
    try:
        return await pipeline.list_clients()
    except StorageError as exc:
        raise AppHTTPException(503, exc.code, "Erreur serveur lors de la lecture des clients")
