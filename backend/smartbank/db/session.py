from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from smartbank.core.settings import settings

"""
DB Session.

Rôle (fonctionnel) :
- Initialise l’engine SQLAlchemy en mode async (runtime FastAPI).
- Fournit une factory de sessions AsyncSession (AsyncSessionLocal).
- Expose `get_db()` comme dépendance FastAPI : une session par requête,
  injectée dans le store clients (pas de handle global partagé entre requêtes).

Notes :
- expire_on_commit=False : les objets restent lisibles après commit (sérialisation de la réponse).
"""

engine = create_async_engine(settings.DATABASE_URL, echo=False)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db():
    """Dépendance FastAPI : yield une session DB et garantit sa fermeture."""
    async with AsyncSessionLocal() as session:
        yield session
