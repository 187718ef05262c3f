from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException

"""
Core Errors.

Rôle (fonctionnel) :
- Standardise le format des erreurs renvoyées par l’API (payload homogène).
- Fournit une exception applicative (AppHTTPException) pour lever des erreurs HTTP de façon cohérente.
- Définit la taxonomie des erreurs métier de l’onboarding client :
  - ValidationError : entrée client absente / mal formée (rejetée avant tout appel externe)
  - ScoringUnavailable : service de scoring injoignable ou réponse invalide (jamais remontée, absorbée en fallback)
  - StorageError : échec de persistance ou de lecture (remontée à l’appelant)

Convention de réponse (exemple) :
{
  "error": {
    "code": "VALIDATION_ERROR",
    "message": "Champs requis manquants",
    "status": 422,
    "request_id": "...",
    "timestamp": "...",
    "details": {...}
  }
}
"""


def now_iso() -> str:
    """Timestamp ISO-8601 en UTC (utilisé dans toutes les erreurs)."""
    return datetime.now(timezone.utc).isoformat()


def error_payload(
    *,
    code: str,
    message: str,
    status: int,
    request_id: str,
    details: Optional[Any] = None,
) -> Dict[str, Any]:
    """Construit un payload d’erreur homogène pour l’API."""
    payload: Dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
            "status": status,
            "request_id": request_id,
            "timestamp": now_iso(),
        }
    }
    if details is not None:
        payload["error"]["details"] = details
    return payload


class AppHTTPException(HTTPException):
    """
    Exception applicative standardisée.

    Usage :
    - Lever une erreur avec un code stable et un message explicite.
    - Laisser la couche API/middlewares produire une réponse cohérente.

    Exemple :
        raise AppHTTPException(503, "STORAGE_ERROR", "Stockage indisponible")
    """

    def __init__(self, status_code: int, code: str, message: str, details: Any = None):
        super().__init__(status_code=status_code, detail={"code": code, "message": message, "details": details})


# --- Erreurs métier (indépendantes du transport HTTP) ---


class DomainError(Exception):
    """Racine des erreurs métier. Toujours limitée à la requête qui l’a déclenchée."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(DomainError):
    """Entrée client absente ou mal formée : aucun appel externe, aucun enregistrement."""

    code = "VALIDATION_ERROR"


class InvalidInput(ValidationError):
    """Champ non convertible vers son type numérique (levée par l’extraction de features)."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            f"Champ '{field}' non numérique",
            details=[{"field": field, "value": repr(value)}],
        )
        self.field = field


class ScoringUnavailable(DomainError):
    """Service de scoring injoignable ou réponse inexploitable (journalisé, jamais propagé)."""

    code = "SCORING_UNAVAILABLE"


class StorageError(DomainError):
    """Échec de persistance / lecture : seule erreur autorisée à remonter depuis l’onboarding."""

    code = "STORAGE_ERROR"
