from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

"""
Schemas Clients (Pydantic).

Rôle (fonctionnel) :
- Définit le contrat HTTP de l’onboarding (création) et du listing des clients.
- Validation stricte des entrées avant tout appel externe :
  - refuse les champs inconnus (extra="forbid")
  - name non vide (après strip)
  - 0 < age <= 150, income >= 0 (en milliers), loans >= 0, bornés à la capacité des colonnes Integer
  - les chaînes numériques ("30") sont acceptées, les booléens et décimaux non entiers refusés

Notes :
- ClientRecord est immuable (frozen) : un client enregistré n’est jamais modifié.
- from_attributes=True permet de sérialiser directement depuis l’objet ORM Client.
"""

# Colonnes Integer (32 bits signés)
INT32_MAX = 2_147_483_647
MAX_AGE = 150


class ClientCreate(BaseModel):
    """Payload d’onboarding d’un nouveau client (ClientInput)."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=255)
    age: int = Field(..., gt=0, le=MAX_AGE)
    income: int = Field(..., ge=0, le=INT32_MAX)
    loans: int = Field(..., ge=0, le=INT32_MAX)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, v: Any) -> Any:
        """Strip du nom (un nom fait uniquement d’espaces est considéré vide)."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("age", "income", "loans", mode="before")
    @classmethod
    def _reject_bool(cls, v: Any) -> Any:
        """Pydantic accepte True/False comme 1/0 en mode lax : refusé ici."""
        if isinstance(v, bool):
            raise ValueError("valeur numérique attendue")
        return v


class ClientRecord(BaseModel):
    """Client enregistré : entrée + score + offre + identité + date de création."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    name: str
    age: int
    income: int
    loans: int

    score: float
    offer: str
    offer_tier: str
    message: str
    locale: str

    created_at: datetime
