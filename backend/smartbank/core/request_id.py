from __future__ import annotations

import uuid
from contextvars import ContextVar

"""
Core Request ID.

Rôle (fonctionnel) :
- Stocke l’identifiant de la requête en cours (ContextVar, isolé par tâche async).
- Repris du header X-Request-Id s’il est fourni, sinon généré (UUID4).
- Lu par les logs (RequestIdFilter) et par les handlers d’erreurs (payload “request_id”),
  ce qui permet de relier un onboarding, son appel de scoring et une éventuelle erreur de stockage.
"""

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(rid: str | None) -> None:
    _request_id.set(rid)


def get_request_id() -> str | None:
    return _request_id.get()


def ensure_request_id(incoming: str | None = None) -> str:
    """Réutilise le request_id entrant (nettoyé) ou en génère un, puis l’installe dans le contexte."""
    rid = (incoming or "").strip() or str(uuid.uuid4())
    set_request_id(rid)
    return rid
