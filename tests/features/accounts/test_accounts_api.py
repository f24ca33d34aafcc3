"""
Test cases for the account API endpoints.
"""

from unittest.mock import AsyncMock

from sqlalchemy.exc import OperationalError

from peakrank.features.accounts.dependencies import get_account_repository


class TestAccountAPI:
    """Test class for account API endpoints."""

    def test_round_trip_and_delete_by_id(self, client):
        response = client.post(
            "/accounts", json={"player": "A", "riotId": "X#1", "server": "euw"}
        )
        assert response.status_code == 200
        assert response.json() == {"success": True}

        client.post("/accounts", json={"player": "B", "riotId": "Y#2", "server": "eune"})

        data = client.get("/accounts").json()
        assert data["success"] is True
        created = next(a for a in data["data"] if a["riotId"] == "X#1")
        assert created["player"] == "A"
        assert created["server"] == "euw"

        response = client.delete(f"/accounts/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""

        remaining = client.get("/accounts").json()["data"]
        assert [a["riotId"] for a in remaining] == ["Y#2"]

    def test_peak_fields_are_stored(self, client):
        client.post(
            "/accounts",
            json={
                "player": "A",
                "riotId": "X#1",
                "server": "euw",
                "peakRank": "DIAMOND",
                "peakDivision": "IV",
                "peakLP": 75,
            },
        )

        account = client.get("/accounts").json()["data"][0]

        assert account["peakRank"] == "DIAMOND"
        assert account["peakDivision"] == "IV"
        assert account["peakLP"] == 75

    def test_missing_player_is_rejected_without_store_mutation(self, client):
        response = client.post("/accounts", json={"riotId": "X#1", "server": "euw"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Missing required fields"}
        assert client.get("/accounts").json() == {"success": True, "data": []}

    def test_invalid_peak_lp_is_bad_request(self, client):
        response = client.post(
            "/accounts",
            json={"player": "A", "riotId": "X#1", "server": "euw", "peakLP": "lots"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert client.get("/accounts").json()["data"] == []

    def test_delete_by_player(self, client):
        for riot_id in ["X#1", "X#2"]:
            client.post("/accounts", json={"player": "A", "riotId": riot_id, "server": "euw"})
        client.post("/accounts", json={"player": "B", "riotId": "Y#1", "server": "euw"})

        response = client.delete("/accounts/player/A")

        assert response.status_code == 204
        remaining = client.get("/accounts").json()["data"]
        assert [a["player"] for a in remaining] == ["B"]

    def test_delete_unknown_id_is_no_content(self, client):
        assert client.delete("/accounts/12345").status_code == 204

    def test_store_failure_is_500(self, app, client):
        mock_repository = AsyncMock()
        mock_repository.list_accounts.side_effect = OperationalError(
            "SELECT", {}, Exception("no such table: accounts")
        )
        app.dependency_overrides[get_account_repository] = lambda: mock_repository

        response = client.get("/accounts")

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert "no such table" in body["error"]
