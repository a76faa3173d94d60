"""Tests for the quote HTTP API."""

from collections.abc import Iterator
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from sliswap.api.endpoints import get_service
from sliswap.api.main import app
from sliswap.service import QuoteService
from tests.helpers import EDS_USDT, USDT, make_reader, make_service


@pytest.fixture
def client(service: QuoteService) -> Iterator[TestClient]:
    app.dependency_overrides[get_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def use_service(service: QuoteService) -> TestClient:
    app.dependency_overrides[get_service] = lambda: service
    return TestClient(app)


class TestQuoteEndpoint:
    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_direct_quote(self, client: TestClient):
        response = client.get("/quote/EDS/USDT", params={"amount": "10"})

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["marketExpected"]) == Decimal("20")
        assert data["idealAmount"] == data["marketExpected"]
        assert data["feeSlippage"] == data["totalSlippage"]
        assert Decimal(data["actualAmount"]) < Decimal("20")

    def test_multihop_quote(self, client: TestClient):
        response = client.get("/quote/VDEP/EDS", params={"amount": "1"})

        assert response.status_code == 200
        assert Decimal(response.json()["marketExpected"]) == Decimal("2")

    def test_same_asset_is_not_found(self, client: TestClient):
        response = client.get("/quote/EDS/EDS", params={"amount": "1"})

        assert response.status_code == 404
        assert "UnroutableAssetPair" in response.json()["detail"]

    @pytest.mark.parametrize("amount", ["0", "-1", "abc"])
    def test_invalid_amount(self, client: TestClient, amount: str):
        response = client.get("/quote/EDS/USDT", params={"amount": amount})
        assert response.status_code == 422

    def test_unknown_asset(self, client: TestClient):
        response = client.get("/quote/BTC/USDT", params={"amount": "1"})
        assert response.status_code == 422

    def test_missing_amount(self, client: TestClient):
        response = client.get("/quote/EDS/USDT")
        assert response.status_code == 422


class TestQuoteEndpointErrors:
    @pytest.fixture(autouse=True)
    def _clear_overrides(self) -> Iterator[None]:
        yield
        app.dependency_overrides.clear()

    def test_reader_failure_is_bad_gateway(self):
        client = use_service(make_service(make_reader(reserves={})))
        response = client.get("/quote/EDS/USDT", params={"amount": "1"})

        assert response.status_code == 502
        assert "Chain reader failed" in response.json()["detail"]

    def test_empty_pool_is_unavailable(self):
        reader = make_reader(reserves={EDS_USDT: (1_000 * 10**8, 0)}, quotes={(EDS_USDT, USDT, 10**6): 0})
        client = use_service(make_service(reader))
        response = client.get("/quote/USDT/EDS", params={"amount": "1"})

        assert response.status_code == 503
        assert "EDS/USDT" in response.json()["detail"]


class TestConfigureLogging:
    def test_configures_structlog(self):
        import structlog

        from sliswap.api.main import configure_logging

        try:
            configure_logging(debug=True)
            assert structlog.is_configured()
        finally:
            structlog.reset_defaults()
