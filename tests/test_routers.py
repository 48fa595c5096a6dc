"""HTTP route tests using FastAPI's TestClient (no Redis needed)."""
from unittest.mock import Mock

import pytest
import redis
from fastapi.testclient import TestClient

from app.errors import VenueNotFoundError
from app.handlers import VenueHandler
from app.models import Venue
from app.routers import set_lookup_dao, set_venue_handler
from app.services import ExportService, VenueService
from main import app


@pytest.fixture
def mock_venue_dao():
    dao = Mock()
    dao.list_venues.return_value = [
        Venue(id="ven_1", quartier="Hippodrome", operator="MSFG", bet_type="Simple", address="Bamako"),
        Venue(id="ven_2", quartier="Kati", operator="PremierBet", bet_type="Simple", address="Kati"),
        Venue(id="ven_3", quartier="ACI 2000", operator="MSFG", bet_type="Combiné", address="Rue 310"),
    ]
    return dao


@pytest.fixture
def client(mock_venue_dao):
    """TestClient wired to a real handler over a mocked DAO.

    The lifespan is not entered, so no Redis connection is attempted.
    """
    handler = VenueHandler(VenueService(mock_venue_dao), ExportService(mock_venue_dao))
    set_venue_handler(handler)
    lookup_dao = Mock()
    set_lookup_dao(lookup_dao)
    test_client = TestClient(app)
    test_client.lookup_dao = lookup_dao
    yield test_client
    set_venue_handler(None)
    set_lookup_dao(None)


class TestVenueRoutes:
    def test_list_with_filters(self, client):
        response = client.get("/v1/venues", params={"operator": "MSFG", "q": "bamako"})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["items"][0]["id"] == "ven_1"

    def test_list_sorted_desc(self, client):
        response = client.get("/v1/venues", params={"sort": "quartier", "order": "desc"})

        assert [v["quartier"] for v in response.json()["items"]] == ["Kati", "Hippodrome", "ACI 2000"]

    def test_list_rejects_unknown_sort_key(self, client):
        assert client.get("/v1/venues", params={"sort": "id"}).status_code == 422

    def test_empty_query_params_are_no_constraint(self, client):
        response = client.get("/v1/venues", params={"quartier": "", "q": ""})
        assert response.json()["total"] == 3

    def test_storage_failure_returns_500(self, client, mock_venue_dao):
        mock_venue_dao.list_venues.side_effect = redis.ConnectionError("down")

        response = client.get("/v1/venues")

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"

    def test_get_venue(self, client, mock_venue_dao):
        mock_venue_dao.get_venue.return_value = Venue(id="ven_9", quartier="Kati")

        response = client.get("/v1/venues/ven_9")

        assert response.status_code == 200
        assert response.json()["quartier"] == "Kati"

    def test_get_missing_venue_returns_404(self, client, mock_venue_dao):
        mock_venue_dao.get_venue.return_value = None
        assert client.get("/v1/venues/ven_missing").status_code == 404

    def test_create_venue(self, client, mock_venue_dao):
        mock_venue_dao.create_venue.side_effect = lambda data: Venue(
            id="ven_new", created_at="2024-03-14T10:00:00.000Z", **data.model_dump()
        )

        response = client.post(
            "/v1/venues",
            json={
                "quartier": "Hippodrome",
                "operator": "MSFG",
                "bet_type": "Simple",
                "address": "Rue 224",
                "quartier_no": 4,
                "created_by": "u_admin",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == "ven_new"
        assert body["quartier_no"] == "4"
        assert body["support"] == "Salle de jeux"

    def test_create_venue_validation_error(self, client, mock_venue_dao):
        response = client.post("/v1/venues", json={"quartier": "", "created_by": "u"})

        assert response.status_code == 422
        mock_venue_dao.create_venue.assert_not_called()

    def test_update_venue(self, client, mock_venue_dao):
        mock_venue_dao.update_venue.return_value = Venue(id="ven_1", notes="n")

        response = client.patch("/v1/venues/ven_1", json={"notes": "n"})

        assert response.status_code == 200
        venue_id, changes = mock_venue_dao.update_venue.call_args[0]
        assert venue_id == "ven_1"
        assert changes.changes() == {"notes": "n"}

    def test_update_cannot_change_provenance(self, client):
        assert client.patch("/v1/venues/ven_1", json={"created_at": "x"}).status_code == 422

    def test_update_missing_venue_returns_404(self, client, mock_venue_dao):
        mock_venue_dao.update_venue.side_effect = VenueNotFoundError("ven_x")
        assert client.patch("/v1/venues/ven_x", json={"notes": "n"}).status_code == 404

    def test_delete_venue(self, client, mock_venue_dao):
        mock_venue_dao.delete_venue.return_value = True

        response = client.delete("/v1/venues/ven_1")

        assert response.status_code == 204
        mock_venue_dao.delete_venue.assert_called_once_with("ven_1")


class TestExportRoutes:
    def test_listing_export(self, client):
        response = client.get("/v1/venues/export.csv", params={"operator": "MSFG"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert response.content.startswith(b"\xef\xbb\xbf")
        lines = response.content.decode("utf-8-sig").split("\n")
        assert lines[0].startswith("quartier_no,quartier,operator")
        assert len(lines) == 3

    def test_operator_export(self, client):
        response = client.get(
            "/v1/exports/venues.csv",
            params={"operator": "MSFG", "start": "2024-03-01", "end": "2024-03-31"},
        )

        assert response.status_code == 200
        assert "salles_MSFG_2024-03-01_2024-03-31.csv" in response.headers["content-disposition"]

    def test_operator_export_requires_operator(self, client):
        response = client.get("/v1/exports/venues.csv")

        assert response.status_code == 400
        assert response.json()["detail"] == "Veuillez choisir un opérateur."

    def test_operator_export_rejects_reversed_dates(self, client):
        response = client.get(
            "/v1/exports/venues.csv",
            params={"operator": "MSFG", "start": "2024-04-01", "end": "2024-03-01"},
        )
        assert response.status_code == 400


class TestPeriodRoutes:
    def test_default_period(self, client):
        body = client.get("/v1/periods/default").json()
        assert body["kind"] == "today"
        assert body["start"] == body["end"]

    def test_week_period(self, client):
        body = client.get("/v1/periods/week").json()
        assert body["kind"] == "week"
        assert body["start"] <= body["end"]

    def test_range_period_passthrough(self, client):
        body = client.get("/v1/periods/range", params={"start": "2024-05-01", "end": "2024-04-01"}).json()
        assert (body["start"], body["end"]) == ("2024-05-01", "2024-04-01")

    def test_unknown_kind(self, client):
        assert client.get("/v1/periods/year").status_code == 422


class TestLookupRoutes:
    def test_all_lookups(self, client):
        client.lookup_dao.all.return_value = {"operators": ["MSFG"], "supports": [], "bet_types": []}
        assert client.get("/v1/lookups").json()["operators"] == ["MSFG"]

    def test_add_lookup(self, client):
        client.lookup_dao.add.return_value = ["1xBet", "MSFG"]

        response = client.post("/v1/lookups/operators", json={"value": "MSFG"})

        assert response.status_code == 200
        client.lookup_dao.add.assert_called_once()

    def test_unknown_lookup_key(self, client):
        assert client.post("/v1/lookups/colors", json={"value": "red"}).status_code == 404

    def test_remove_lookup(self, client):
        client.lookup_dao.remove.return_value = []
        assert client.delete("/v1/lookups/bet_types/Simple").status_code == 200


class TestServiceNotReady:
    def test_routes_return_503_without_handler(self):
        set_venue_handler(None)
        set_lookup_dao(None)
        test_client = TestClient(app)

        assert test_client.get("/v1/venues").status_code == 503
        assert test_client.get("/v1/lookups").status_code == 503
