"""Unit tests for metrics endpoint normalization."""
from unittest.mock import Mock

import pytest

from app.middleware import PrometheusMiddleware


@pytest.fixture
def middleware():
    return PrometheusMiddleware(app=Mock())


class TestNormalizeEndpoint:
    """Test path normalization used as the metrics endpoint label."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/v1/venues", "/v1/venues"),
            ("/v1/venues/ven_3f2a9c1b7d4e", "/v1/venues/{id}"),
            ("/v1/venues/export.csv", "/v1/venues/export.csv"),
            ("/v1/lookups/operators/1xBet", "/v1/lookups/operators/{value}"),
            ("/v1/lookups/operators", "/v1/lookups/operators"),
            ("/v1/periods/week", "/v1/periods/week"),
        ],
    )
    def test_normalize(self, middleware, path, expected):
        assert middleware._normalize_endpoint(path) == expected

    def test_only_venue_ids_are_collapsed(self, middleware):
        segment = "a" * 32
        assert middleware._normalize_endpoint(f"/v1/venues/{segment}") == f"/v1/venues/{segment}"
