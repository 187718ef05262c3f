from __future__ import annotations

import logging
import uuid
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import List, Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from smartbank.core.errors import StorageError
from smartbank.models.client import Client
from smartbank.schemas.clients import ClientRecord

"""
Client Store.

Rôle (fonctionnel) :
- Persiste les clients onboardés et les liste du plus récent au plus ancien.
- Le store attribue l’identité (UUID) et la date de création.

Contrat (ClientStore) :
- create(NewClient) -> ClientRecord
- list_all() -> list[ClientRecord] trié par created_at décroissant
- Toute erreur de la couche stockage est convertie en StorageError.

Implémentation :
- SqlClientStore : SQLAlchemy async, une session par requête (injectée, pas de handle global).
- Les tests utilisent un store en mémoire respectant le même contrat.
"""

log = logging.getLogger("smartbank.store")


@dataclass(frozen=True)
class NewClient:
    """Enregistrement assemblé par le pipeline, avant attribution de l’identité."""
    name: str
    age: int
    income: int
    loans: int
    score: float
    offer: str
    offer_tier: str
    message: str
    locale: str


class ClientStore(Protocol):
    async def create(self, record: NewClient) -> ClientRecord: ...

    async def list_all(self) -> List[ClientRecord]: ...


class SqlClientStore:
    """Store clients adossé à une AsyncSession SQLAlchemy."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(self, record: NewClient) -> ClientRecord:
        # identité et date fixées côté client : pas de refresh après commit
        client = Client(id=uuid.uuid4(), created_at=datetime.now(timezone.utc), **asdict(record))
        try:
            self.db.add(client)
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            log.exception("client insert failed")
            raise StorageError("Échec de l’enregistrement du client") from exc

        return ClientRecord.model_validate(client)

    async def list_all(self) -> List[ClientRecord]:
        stmt = select(Client).order_by(Client.created_at.desc())
        try:
            rows = (await self.db.execute(stmt)).scalars().all()
        except SQLAlchemyError as exc:
            log.exception("client listing failed")
            raise StorageError("Échec de la lecture des clients") from exc

        return [ClientRecord.model_validate(c) for c in rows]
