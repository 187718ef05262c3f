from __future__ import annotations

from typing import Any, Tuple

from smartbank.core.errors import InvalidInput
from smartbank.schemas.clients import ClientCreate

"""
Feature Extractor.

Rôle (fonctionnel) :
- Transforme l’entrée client validée en vecteur numérique attendu par le service de scoring.
- Vecteur ordonné (age, income, loans) : l’ordre fait partie du contrat du modèle externe.

Notes :
- Fonction pure, sans I/O.
- Ne re-valide pas la présence des champs (rôle du pipeline) : se contente de convertir en int
  et lève InvalidInput si un champ n’est pas convertible.
"""

FeatureVector = Tuple[int, int, int]

# Ordre figé, partagé avec le modèle de scoring
FEATURE_ORDER: Tuple[str, ...] = ("age", "income", "loans")


def _as_int(field: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidInput(field, value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidInput(field, value) from None


def extract(client: ClientCreate) -> FeatureVector:
    """Retourne (age, income, loans) en entiers."""
    age, income, loans = (_as_int(f, getattr(client, f, None)) for f in FEATURE_ORDER)
    return age, income, loans
