"""Integration tests for the map generation API."""

import inspect

from fastapi.testclient import TestClient

from py_rmg.api.main import app, generate_map

client = TestClient(app)


class TestAPIEndpoints:
    """Test API endpoints."""

    def test_root(self):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_tilesets(self):
        response = client.get("/tilesets")
        assert response.status_code == 200
        by_id = {t["id"]: t for t in response.json()}
        assert by_id["TEMPERAT"] == {"id": "TEMPERAT", "cliffs": True, "debris": True}
        assert by_id["INTERIOR"]["cliffs"] is False


class TestMapGeneration:
    """Test map generation over HTTP."""

    def test_generate_is_deterministic(self):
        request = {"seed": "api-seed", "width": 64, "height": 64, "player_num": 2}
        first = client.post("/maps/generate", json=request)
        second = client.post("/maps/generate", json=request)

        assert first.status_code == 200
        assert first.json() == second.json()

        data = first.json()
        assert data["seed"] == "api-seed"
        assert data["tileset"] == "TEMPERAT"
        assert (data["map_width"], data["map_height"]) == (66, 74)
        assert len(data["spawns"]) == 2
        assert data["players"] == ["Multi0", "Multi1"]
        assert data["creep_enemies"] == ["Multi0", "Multi1"]
        assert data["resource_cells"] > 0

    def test_generated_seed(self):
        response = client.post("/maps/generate", json={"width": 48, "height": 48})
        assert response.status_code == 200
        assert response.json()["seed"]

    def test_unknown_tileset(self):
        response = client.post("/maps/generate", json={"tileset": "MOON"})
        assert response.status_code == 404

    def test_invalid_request(self):
        assert client.post("/maps/generate", json={"width": 1}).status_code == 422
        assert client.post("/maps/generate", json={"spawn_policy": "grid"}).status_code == 422
        assert client.post("/maps/generate", json={"deposit_max_tries": 0}).status_code == 422

    def test_small_map_diagnostics(self):
        response = client.post("/maps/generate", json={"seed": "s", "width": 10, "height": 10})

        assert response.status_code == 200
        data = response.json()
        assert data["spawns"] == []
        assert [d["stage"] for d in data["diagnostics"]] == ["spawns"]

    def test_generation_runs_off_the_event_loop(self):
        """Test that generation is a sync handler served from the threadpool."""
        assert not inspect.iscoroutinefunction(generate_map)

    def test_health_between_generations(self):
        assert client.post("/maps/generate", json={"seed": "a", "width": 32}).status_code == 200
        assert client.get("/health").json() == {"status": "healthy"}

    def test_crowded_request_reports_spawns(self):
        response = client.post(
            "/maps/generate", json={"seed": "crowd", "width": 64, "height": 64, "player_num": 16}
        )

        data = response.json()
        assert len(data["spawns"]) < 16
        assert len(data["players"]) == len(data["spawns"])
        assert "spawns" in [d["stage"] for d in data["diagnostics"]]
