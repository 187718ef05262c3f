import argparse
import asyncio
import sys

# Windows: compat event loop (évite certains soucis avec drivers async PostgreSQL)
if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

from smartbank.core.errors import StorageError, ValidationError
from smartbank.core.logging import setup_logging
from smartbank.core.settings import settings
from smartbank.db.session import AsyncSessionLocal
from smartbank.services.client_pipeline import ClientPipeline
from smartbank.services.client_store import SqlClientStore
from smartbank.services.offer_engine import OfferEngine
from smartbank.services.score_client import ScoreClient

"""
Script CLI: onboard_one

Rôle (fonctionnel) :
- Onboarde un client depuis la ligne de commande, sans passer par l’API.
- Utilise la DB et le service de scoring configurés (settings / .env).
- Affiche le résultat (score, palier, offre, message).

Usage typique :
    python -m scripts.onboard_one --name Sara --age 30 --income 50 --loans 1 --lang en

Notes :
- Si le service de scoring est éteint, le client est quand même créé (score de fallback 0.1).
"""


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Onboarde un client (score + offre).")
    p.add_argument("--name", required=True)
    p.add_argument("--age", required=True)
    p.add_argument("--income", required=True, help="Revenu annuel (en milliers)")
    p.add_argument("--loans", required=True, help="Nombre de prêts en cours")
    p.add_argument("--lang", default=settings.DEFAULT_LOCALE, choices=["ar", "en"])
    return p.parse_args(argv)


async def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(settings.LOG_LEVEL)

    async with AsyncSessionLocal() as db:
        pipeline = ClientPipeline(
            store=SqlClientStore(db),
            score_client=ScoreClient(settings.SCORING_API_URL, settings.SCORING_TIMEOUT_SECONDS),
            offer_engine=OfferEngine(settings.DEFAULT_LOCALE),
        )
        payload = {"name": args.name, "age": args.age, "income": args.income, "loans": args.loans}

        try:
            record = await pipeline.onboard(payload, locale=args.lang)
        except ValidationError as exc:
            print("Entrée invalide:", exc.message, exc.details)
            return 2
        except StorageError as exc:
            print("Erreur de stockage:", exc.message)
            return 1

    print("Client:", record.id)
    print("Score:", record.score, record.offer_tier)
    print("Offre:", record.offer)
    print("Message:", record.message)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
