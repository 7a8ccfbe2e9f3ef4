"""
Test Fleet and Component Times API

Tests for:
- PUT/GET/DELETE /api/fleet/{aircraft_id}
- Default tracked components and tail number normalisation
- GET/PUT /api/fleet/{aircraft_id}/component-times
"""

import asyncio

import pytest


class TestFleetAPI:

    def test_save_and_get(self, client, aircraft_payload):
        response = client.put("/api/fleet/N350FO", json=aircraft_payload)
        assert response.status_code == 200, response.text

        data = response.json()
        assert data["_id"] == "N350FO"
        assert data["tail_number"] == "N350FO"
        assert data["tracked_component_names"] == aircraft_payload["tracked_component_names"]

        response = client.get("/api/fleet/N350FO")
        assert response.status_code == 200
        assert response.json()["model"] == "Cessna Citation CJ3"

    @pytest.mark.parametrize("tracked", [None, [], ["  "]])
    def test_default_tracked_components(self, client, tracked):
        payload = {"tail_number": "N12KA", "model": "King Air 350"}
        if tracked is not None:
            payload["tracked_component_names"] = tracked

        data = client.put("/api/fleet/N12KA", json=payload).json()

        assert data["tracked_component_names"] == ["Airframe", "Engine 1"]
        assert data["is_maintenance_tracked"] is True

    def test_update_preserves_created_at(self, client, aircraft_payload):
        first = client.put("/api/fleet/N350FO", json=aircraft_payload).json()
        second = client.put("/api/fleet/N350FO", json={**aircraft_payload, "base_location": "KTEB"}).json()

        assert second["base_location"] == "KTEB"
        assert first["created_at"] == second["created_at"]

    def test_list(self, client, aircraft_payload):
        client.put("/api/fleet/N350FO", json=aircraft_payload)
        client.put("/api/fleet/N12KA", json={"tail_number": "N12KA", "model": "King Air 350"})

        response = client.get("/api/fleet")
        assert response.status_code == 200
        assert [a["tail_number"] for a in response.json()] == ["N12KA", "N350FO"]

    def test_invalid_email(self, client, aircraft_payload):
        response = client.put(
            "/api/fleet/N350FO",
            json={**aircraft_payload, "primary_contact_email": "not-an-email"}
        )
        assert response.status_code == 422

    def test_get_missing(self, client):
        assert client.get("/api/fleet/NOPE").status_code == 404

    def test_delete_removes_component_times(self, client, aircraft_payload, mongo_db):
        client.put("/api/fleet/N350FO", json=aircraft_payload)
        client.put(
            "/api/fleet/N350FO/component-times",
            json={"component_times": {"Airframe": {"time": 10, "cycles": 5}}}
        )

        response = client.delete("/api/fleet/N350FO")

        assert response.status_code == 200
        assert client.get("/api/fleet/N350FO").status_code == 404
        assert asyncio.run(mongo_db.aircraft_component_times.find_one({"_id": "N350FO"})) is None

    def test_delete_missing(self, client):
        assert client.delete("/api/fleet/NOPE").status_code == 404


class TestComponentTimesAPI:

    @pytest.fixture(autouse=True)
    def aircraft(self, client, aircraft_payload):
        client.put("/api/fleet/N350FO", json=aircraft_payload)

    def test_get_fills_tracked_components(self, client):
        response = client.get("/api/fleet/N350FO/component-times")

        assert response.status_code == 200
        data = response.json()
        assert data["aircraft_id"] == "N350FO"
        assert set(data["component_times"]) == {"Airframe", "Engine 1", "Engine 2", "APU", "Landing Gear"}
        assert data["component_times"]["APU"] == {"time": 0.0, "cycles": 0}

    def test_put_replaces_map(self, client):
        payload = {
            "component_times": {
                "Airframe": {"time": 4210.35, "cycles": 3120},
                " Engine 1 ": {"time": 1500.1, "cycles": 980},
                "Old Part": {"time": 1.0, "cycles": 1},
            }
        }
        response = client.put("/api/fleet/N350FO/component-times", json=payload)
        assert response.status_code == 200, response.text
        assert "Engine 1" in response.json()["component_times"]

        data = client.get("/api/fleet/N350FO/component-times").json()["component_times"]
        assert data["Airframe"] == {"time": 4210.35, "cycles": 3120}
        assert data["Engine 1"] == {"time": 1500.1, "cycles": 980}
        assert data["Old Part"] == {"time": 1.0, "cycles": 1}
        assert data["Engine 2"] == {"time": 0.0, "cycles": 0}

    @pytest.mark.parametrize("value", [
        {"time": -1, "cycles": 0},
        {"time": 1, "cycles": -1},
        {"time": 1, "cycles": 1.5},
    ])
    def test_put_rejects_bad_values(self, client, value):
        response = client.put(
            "/api/fleet/N350FO/component-times",
            json={"component_times": {"Airframe": value}}
        )
        assert response.status_code == 422

    def test_unknown_aircraft(self, client):
        assert client.get("/api/fleet/NOPE/component-times").status_code == 404
        response = client.put("/api/fleet/NOPE/component-times", json={"component_times": {}})
        assert response.status_code == 404
