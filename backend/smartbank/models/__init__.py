"""
smartbank.models

Package ORM (SQLAlchemy) : entités persistées en base.
"""

from smartbank.models.client import Client

__all__ = ["Client"]
