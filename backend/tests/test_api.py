"""
Tests de la couche HTTP : codes de statut, format d’erreur standard, X-Request-Id.
"""

import pytest
from fastapi.testclient import TestClient

from smartbank.api.deps import get_client_pipeline
from smartbank.main import app
from smartbank.services.client_pipeline import ClientPipeline
from smartbank.services.offer_engine import OfferEngine

SARA = {"name": "Sara", "age": 30, "income": 50, "loans": 1}


@pytest.fixture
def client_for():
    """TestClient dont le pipeline est remplacé par un pipeline sur store en mémoire."""
    def _make(stub, store):
        pipeline = ClientPipeline(store=store, score_client=stub.client(), offer_engine=OfferEngine("ar"))
        app.dependency_overrides[get_client_pipeline] = lambda: pipeline
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


class TestCreateClient:

    def test_created_with_premium_offer(self, client_for, scoring_returning, store):
        client = client_for(scoring_returning(0.9), store)

        r = client.post("/api/clients", json=SARA)

        assert r.status_code == 201
        body = r.json()
        assert body["offer_tier"] == "premium"
        assert body["score"] == 0.9
        assert "Sara" in body["message"]
        assert body["locale"] == "ar"
        assert {"id", "created_at"} <= body.keys()
        assert r.headers["content-type"].startswith("application/json")

    def test_lang_query_selects_english(self, client_for, scoring_returning, store):
        client = client_for(scoring_returning(0.6), store)

        r = client.post("/api/clients?lang=en", json=SARA)

        assert r.status_code == 201
        assert r.json()["offer"] == "Repayment period extension"

    def test_unsupported_lang_is_validation_error(self, client_for, scoring_returning, store):
        client = client_for(scoring_returning(0.6), store)

        r = client.post("/api/clients?lang=fr", json=SARA)

        assert r.status_code == 422
        assert r.json()["error"]["code"] == "VALIDATION_ERROR"
        assert len(store) == 0

    def test_scoring_down_still_creates_client(self, client_for, unreachable_scoring, store):
        client = client_for(unreachable_scoring, store)

        r = client.post("/api/clients", json=SARA)

        assert r.status_code == 201
        assert r.json()["score"] == 0.1
        assert r.json()["offer_tier"] == "review"

    @pytest.mark.parametrize("missing", ["name", "age", "income", "loans"])
    def test_missing_field_returns_422_and_creates_nothing(self, client_for, scoring_returning, store, missing):
        stub = scoring_returning(0.9)
        client = client_for(stub, store)
        payload = {k: v for k, v in SARA.items() if k != missing}

        r = client.post("/api/clients", json=payload)

        assert r.status_code == 422
        error = r.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["status"] == 422
        assert error["request_id"]
        assert stub.calls == 0
        assert client.get("/api/clients").json() == []

    def test_non_numeric_age_returns_422(self, client_for, scoring_returning, store):
        client = client_for(scoring_returning(0.9), store)

        r = client.post("/api/clients", json={**SARA, "age": "thirty"})

        assert r.status_code == 422
        assert len(store) == 0

    def test_income_beyond_column_range_returns_422(self, client_for, scoring_returning, store):
        stub = scoring_returning(0.9)
        client = client_for(stub, store)

        r = client.post("/api/clients", json={**SARA, "income": 2**31})

        assert r.status_code == 422
        assert r.json()["error"]["code"] == "VALIDATION_ERROR"
        assert stub.calls == 0
        assert len(store) == 0

    def test_storage_failure_returns_503(self, client_for, scoring_returning, failing_store):
        client = client_for(scoring_returning(0.9), failing_store)

        r = client.post("/api/clients", json=SARA, headers={"X-Request-Id": "req-123"})

        assert r.status_code == 503
        error = r.json()["error"]
        assert error["code"] == "STORAGE_ERROR"
        assert error["request_id"] == "req-123"
        assert r.headers["X-Request-Id"] == "req-123"


class TestListClients:

    def test_most_recent_first(self, client_for, scoring_returning, store):
        client = client_for(scoring_returning(0.6), store)

        first = client.post("/api/clients", json=SARA).json()
        second = client.post("/api/clients", json={**SARA, "name": "Youssef"}).json()

        r = client.get("/api/clients")

        assert r.status_code == 200
        assert [c["id"] for c in r.json()] == [second["id"], first["id"]]

    def test_listing_storage_failure_returns_503(self, client_for, scoring_returning, failing_store):
        client = client_for(scoring_returning(0.6), failing_store)

        r = client.get("/api/clients")

        assert r.status_code == 503
        assert r.json()["error"]["code"] == "STORAGE_ERROR"


class TestPlumbing:

    def test_health(self):
        r = TestClient(app).get("/health")

        assert r.status_code == 200
        assert r.json()["status"] == "ok"
        assert "scoring_api_url" in r.json()

    def test_request_id_generated_when_absent(self):
        r = TestClient(app).get("/health")
        assert r.headers.get("X-Request-Id")

    def test_unknown_route_uses_standard_error_payload(self):
        r = TestClient(app).get("/api/nope")

        assert r.status_code == 404
        assert r.json()["error"]["code"] == "NOT_FOUND"
