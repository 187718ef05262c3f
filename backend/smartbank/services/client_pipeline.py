from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from smartbank.core.errors import ValidationError
from smartbank.schemas.clients import ClientCreate, ClientRecord
from smartbank.services.client_store import ClientStore, NewClient
from smartbank.services.feature_extractor import extract
from smartbank.services.offer_engine import SUPPORTED_LOCALES, OfferEngine
from smartbank.services.score_client import ScoreClient

"""
Client Pipeline (onboarding).

Rôle (fonctionnel) :
- Orchestre l’onboarding d’un client :
  1) validation des champs requis (name, age, income, loans), avant tout appel externe
  2) extraction du vecteur de features
  3) score de remboursement (toujours défini : fallback si le service est indisponible)
  4) offre + message à partir du score et du nom
  5) persistance, puis retour de l’enregistrement (identité + date de création)
- Expose aussi le listing (lecture seule, plus récent en premier).

Erreurs :
- ValidationError : entrée rejetée, aucun appel externe, aucun enregistrement.
- StorageError : seule erreur pouvant remonter après validation.

Concurrence :
- Aucun état mutable partagé entre requêtes : le store et le client de scoring sont injectés.
"""

log = logging.getLogger("smartbank.onboarding")


def _validation_details(exc: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(p) for p in err.get("loc", ())),
            "message": err.get("msg"),
            "type": err.get("type"),
        }
        for err in exc.errors()
    ]


def validate_input(data: Union[ClientCreate, Mapping[str, Any]]) -> ClientCreate:
    """Valide un payload brut (mapping) ; une instance ClientCreate est déjà validée."""
    if isinstance(data, ClientCreate):
        return data
    try:
        return ClientCreate.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise ValidationError(
            "Champs requis manquants ou invalides : name, age, income, loans",
            details=_validation_details(exc),
        ) from None
    except (TypeError, ValueError):
        raise ValidationError("Payload client invalide (objet attendu)") from None


class ClientPipeline:
    def __init__(
        self,
        store: ClientStore,
        score_client: ScoreClient,
        offer_engine: Optional[OfferEngine] = None,
    ) -> None:
        self.store = store
        self.score_client = score_client
        self.offer_engine = offer_engine or OfferEngine()

    async def onboard(
        self,
        data: Union[ClientCreate, Mapping[str, Any]],
        locale: Optional[str] = None,
    ) -> ClientRecord:
        client = validate_input(data)
        locale = locale or self.offer_engine.locale
        if locale not in SUPPORTED_LOCALES:
            raise ValidationError(f"Langue non supportée: {locale}", details={"locale": locale})

        features = extract(client)
        result = await self.score_client.score(features)
        offer = self.offer_engine.derive(result.score, client.name, locale)

        record = await self.store.create(
            NewClient(
                name=client.name,
                age=features[0],
                income=features[1],
                loans=features[2],
                score=result.score,
                offer=offer.label,
                offer_tier=offer.tier,
                message=offer.message,
                locale=locale,
            )
        )

        log.info(
            "client onboarded",
            extra={
                "client_id": str(record.id),
                "score": result.score,
                "score_source": result.source,
                "offer_tier": offer.tier,
                "locale": locale,
            },
        )
        return record

    async def list_clients(self) -> List[ClientRecord]:
        return await self.store.list_all()
