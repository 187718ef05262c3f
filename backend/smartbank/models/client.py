from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from smartbank.db.base import Base

"""
Model Client.

Rôle (fonctionnel) :
- Représente un client bancaire enregistré par l’onboarding.
- Conserve les attributs saisis (name, age, income, loans), le score de remboursement
  obtenu (0..1) et l’offre dérivée (libellé, palier, message personnalisé).

Cycle de vie :
- Créé une seule fois, à la fin du pipeline d’onboarding.
- Jamais modifié ensuite (pas de updated_at).

Index :
- created_at : la liste des clients est toujours triée du plus récent au plus ancien.
"""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Client(Base):
    __tablename__ = "clients"

    # Identifiant technique (UUID, portable Postgres / SQLite)
    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Attributs saisis
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    income: Mapped[int] = mapped_column(Integer, nullable=False)  # en milliers
    loans: Mapped[int] = mapped_column(Integer, nullable=False)

    # Score de remboursement 0..1 (modèle externe ou fallback)
    score: Mapped[float] = mapped_column(Float, nullable=False)

    # Offre dérivée du score
    offer: Mapped[str] = mapped_column(String(255), nullable=False)
    offer_tier: Mapped[str] = mapped_column(String(20), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    locale: Mapped[str] = mapped_column(String(5), nullable=False, default="ar")

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (Index("ix_clients_created_at", "created_at"),)
