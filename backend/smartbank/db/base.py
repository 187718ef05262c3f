from sqlalchemy.orm import DeclarativeBase

"""
DB Base.

Classe racine des modèles ORM : la metadata sert à Alembic (migrations)
et à la création directe du schéma (tests SQLite, scripts).
"""


class Base(DeclarativeBase):
    pass
