"""
Fixtures pytest : service de scoring simulé (httpx.MockTransport), stores en mémoire, pipeline.
"""

import json

import httpx
import pytest

from smartbank.services.client_pipeline import ClientPipeline
from smartbank.services.offer_engine import OfferEngine
from smartbank.services.score_client import ScoreClient
from tests.fakes import FailingClientStore, InMemoryClientStore

SCORING_URL = "http://scoring.test/predict"


class ScoringStub:
    """Handler MockTransport : enregistre les appels et répond via `respond(request)`."""

    def __init__(self, respond):
        self.respond = respond
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def sent_features(self, i: int = -1):
        return json.loads(self.requests[i].content)["features"]

    def client(self, timeout: float = 1.0) -> ScoreClient:
        return ScoreClient(SCORING_URL, timeout, transport=httpx.MockTransport(self))


@pytest.fixture
def scoring_returning():
    """Fabrique un stub de scoring répondant {"repayment_score": value}."""
    def _make(value):
        return ScoringStub(lambda request: httpx.Response(200, json={"repayment_score": value}))
    return _make


@pytest.fixture
def scoring_stub():
    """Fabrique un stub de scoring à partir d’une fonction request -> Response (ou qui lève)."""
    return ScoringStub


@pytest.fixture
def unreachable_scoring():
    def _refuse(request):
        raise httpx.ConnectError("connection refused", request=request)
    return ScoringStub(_refuse)


@pytest.fixture
def store():
    return InMemoryClientStore()


@pytest.fixture
def failing_store():
    return FailingClientStore()


@pytest.fixture
def make_pipeline(store):
    """Pipeline sur store en mémoire ; langue par défaut "en" pour lisibilité des assertions."""
    def _make(stub, *, store=store, locale="en"):
        return ClientPipeline(store=store, score_client=stub.client(), offer_engine=OfferEngine(locale))
    return _make
