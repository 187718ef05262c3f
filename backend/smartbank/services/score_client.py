from __future__ import annotations

import asyncio
import logging
import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import httpx

from smartbank.core.errors import ScoringUnavailable

"""
Score Client.

Rôle (fonctionnel) :
- Appelle le service de scoring externe (modèle de probabilité de remboursement).
- Contrat sortant : POST {"features": [age, income, loans]}
- Contrat entrant : {"repayment_score": <float 0..1>}

Politique de fallback (contrat de résilience) :
- Toute erreur (transport, timeout, statut non 2xx, corps non JSON, champ absent,
  non numérique ou hors [0, 1]) est convertie en FALLBACK_SCORE.
- Risque inconnu = risque élevé : 0.1 place le client dans le palier "review".
- Aucun retry, l’erreur est journalisée (WARNING) et jamais propagée à l’appelant.
- L’appel complet est borné par un timeout total : un service lent ne bloque pas les onboardings concurrents.
"""

log = logging.getLogger("smartbank.scoring")

FALLBACK_SCORE = 0.1

SOURCE_MODEL = "model"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class ScoreResult:
    """Score de remboursement (0..1) et son origine (modèle externe ou fallback)."""
    score: float
    source: str

    @property
    def is_fallback(self) -> bool:
        return self.source == SOURCE_FALLBACK


def _parse_score(body: Any) -> float:
    """Extrait repayment_score d’un corps JSON, ou lève ScoringUnavailable."""
    if not isinstance(body, dict) or "repayment_score" not in body:
        raise ScoringUnavailable("Réponse de scoring sans champ repayment_score")

    raw = body["repayment_score"]
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ScoringUnavailable("repayment_score non numérique", details={"value": repr(raw)})

    value = float(raw)
    if not math.isfinite(value) or not 0.0 <= value <= 1.0:
        raise ScoringUnavailable("repayment_score hors [0, 1]", details={"value": value})
    return value


class ScoreClient:
    """
    Client HTTP (httpx async) du service de scoring.

    transport : injectable (httpx.MockTransport en tests).
    """

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def _request_score(self, features: Sequence[int]) -> float:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.post(self.url, json={"features": list(features)})
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            # Timeout de phase, connexion refusée, DNS, URL mal formée...
            raise ScoringUnavailable(f"{type(exc).__name__}: {exc}") from exc

        if not r.is_success:
            raise ScoringUnavailable(f"Statut HTTP {r.status_code}", details={"status_code": r.status_code})

        try:
            body = r.json()
        except (ValueError, RecursionError) as exc:
            # RecursionError : JSON imbriqué trop profondément
            raise ScoringUnavailable("Corps de réponse non JSON") from exc

        return _parse_score(body)

    async def score(self, features: Sequence[int]) -> ScoreResult:
        """Retourne toujours un score défini (modèle ou fallback)."""
        # Le timeout httpx est par phase (connect, read...) : une réponse envoyée octet par octet
        # le relance sans fin. wait_for borne l'appel complet.
        try:
            value = await asyncio.wait_for(self._request_score(features), self.timeout)
        except asyncio.TimeoutError:
            error = f"Délai total dépassé ({self.timeout}s)"
        except ScoringUnavailable as exc:
            error = exc.message
        else:
            return ScoreResult(score=value, source=SOURCE_MODEL)

        log.warning(
            "scoring unavailable, using fallback score",
            extra={"scoring_url": self.url, "error": error, "score": FALLBACK_SCORE},
        )
        return ScoreResult(score=FALLBACK_SCORE, source=SOURCE_FALLBACK)
