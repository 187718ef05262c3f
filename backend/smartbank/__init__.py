"""
smartbank

Package racine du backend Smart Bank (onboarding clients + offres personnalisées).

Rôle (fonctionnel) :
- Enregistre les clients de la banque et calcule, pour chaque nouveau client,
  un score de remboursement (service de scoring externe) et une offre / un message associés.
- Sert de point d’ancrage pour les imports : `from smartbank...`

Organisation (haute-level) :
- smartbank.api      : routes FastAPI (contrats HTTP, dépendances)
- smartbank.core     : briques transverses (settings, errors, logs, request_id)
- smartbank.db       : base SQLAlchemy + session async
- smartbank.models   : modèles ORM (table clients)
- smartbank.schemas  : schémas Pydantic (entrées/sorties API)
- smartbank.services : pipeline d’onboarding (features, scoring, offres, store)
"""
