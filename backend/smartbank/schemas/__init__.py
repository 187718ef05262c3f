"""
smartbank.schemas

Package des schémas API (Pydantic).

Rôle (fonctionnel) :
- Définit les modèles d’entrée/sortie utilisés par l’API (request/response).
- Sépare clairement :
  - les modèles ORM (smartbank.models) = persistance DB
  - les schémas Pydantic (smartbank.schemas) = contrat HTTP / validation
"""

from smartbank.schemas.clients import ClientCreate, ClientRecord

__all__ = ["ClientCreate", "ClientRecord"]
