"""Tests for city API endpoints."""

from fastapi.testclient import TestClient


def _create(client: TestClient, name: str, traits=None, mood: str = "neutral") -> dict:
    response = client.post(
        "/city/villagers",
        json={"name": name, "traits": traits or [], "mood": mood},
    )
    assert response.status_code == 200
    return response.json()


class TestVillagerEndpoints:
    """Tests for /city/villagers endpoints."""

    def test_create_villager(self, client: TestClient):
        data = _create(client, "Alice", ["friendly", "artistic"], "happy")
        assert data["name"] == "Alice"
        assert data["traits"] == ["friendly", "artistic"]
        assert data["mood"] == "happy"
        assert data["position"] == {"x": 0, "y": 100}
        assert data["id"]

    def test_create_villager_default_mood(self, client: TestClient):
        response = client.post("/city/villagers", json={"name": "Bob"})
        assert response.status_code == 200
        assert response.json()["mood"] == "neutral"

    def test_create_villager_accepts_unknown_tags(self, client: TestClient):
        data = _create(client, "Odd", ["juggler"], "bewildered")
        assert data["traits"] == ["juggler"]
        assert data["mood"] == "bewildered"

    def test_create_villager_empty_name(self, client: TestClient):
        response = client.post("/city/villagers", json={"name": ""})
        assert response.status_code == 422

    def test_list_villagers(self, client: TestClient):
        _create(client, "Alice")
        _create(client, "Bob")
        response = client.get("/city/villagers")
        assert response.status_code == 200
        assert [v["name"] for v in response.json()] == ["Alice", "Bob"]

    def test_get_villager(self, client: TestClient):
        alice = _create(client, "Alice")
        response = client.get(f"/city/villagers/{alice['id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Alice"

    def test_get_unknown_villager(self, client: TestClient):
        response = client.get("/city/villagers/missing")
        assert response.status_code == 404

    def test_relationships(self, client: TestClient):
        alice = _create(client, "Alice", ["friendly"])
        eve = _create(client, "Eve", ["friendly"])
        client.post(
            "/city/nudges",
            json={"kind": "introduce", "villager_ids": [alice["id"], eve["id"]]},
        )

        response = client.get(f"/city/villagers/{alice['id']}/relationships")

        assert response.status_code == 200
        assert response.json() == [{"name": "Eve", "affinity": 40, "type": "neutral"}]

    def test_relationships_unknown_villager(self, client: TestClient):
        response = client.get("/city/villagers/missing/relationships")
        assert response.status_code == 404


class TestNudgeEndpoint:
    """Tests for POST /city/nudges."""

    def test_introduce(self, client: TestClient):
        alice = _create(client, "Alice", ["friendly"])
        eve = _create(client, "Eve", ["friendly"])

        response = client.post(
            "/city/nudges",
            json={"kind": "introduce", "villager_ids": [alice["id"], eve["id"]]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "introduce"
        assert [c["type"] for c in data["consequences"]] == ["positive"]

        moods = {v["name"]: v["mood"] for v in client.get("/city/villagers").json()}
        assert moods == {"Alice": "happy", "Eve": "happy"}

    def test_competition_uses_injected_random(self, client: TestClient):
        first = _create(client, "First")
        second = _create(client, "Second", ["competitive"])
        response = client.post(
            "/city/nudges",
            json={"kind": "competition", "villager_ids": [first["id"], second["id"]]},
        )
        consequences = response.json()["consequences"]
        assert consequences[0]["description"] == "First wins the competition!"
        assert consequences[1]["type"] == "rivalry"

    def test_group_event(self, client: TestClient):
        host = _create(client, "Host")
        a = _create(client, "A")
        b = _create(client, "B")
        response = client.post(
            "/city/nudges",
            json={
                "kind": "group_event",
                "villager_ids": [host["id"], a["id"], b["id"]],
                "event_kind": "picnic",
            },
        )
        assert response.status_code == 200
        descriptions = [c["description"] for c in response.json()["consequences"]]
        assert "A and B meet at the picnic" in descriptions

    def test_unknown_villager(self, client: TestClient):
        alice = _create(client, "Alice")
        response = client.post(
            "/city/nudges",
            json={"kind": "introduce", "villager_ids": [alice["id"], "ghost"]},
        )
        assert response.status_code == 404

    def test_wrong_arity(self, client: TestClient):
        alice = _create(client, "Alice")
        bob = _create(client, "Bob")
        response = client.post(
            "/city/nudges",
            json={"kind": "gossip", "villager_ids": [alice["id"], bob["id"]]},
        )
        assert response.status_code == 422
        assert "needs 3 villagers" in response.json()["detail"]

    def test_unknown_kind(self, client: TestClient):
        alice = _create(client, "Alice")
        response = client.post(
            "/city/nudges",
            json={"kind": "seance", "villager_ids": [alice["id"]]},
        )
        assert response.status_code == 422


class TestEventsEndpoint:
    """Tests for GET /city/events."""

    def test_all_events(self, client: TestClient):
        _create(client, "Alice")
        _create(client, "Bob")
        response = client.get("/city/events")
        assert response.status_code == 200
        data = response.json()
        assert [e["type"] for e in data] == ["game", "game"]
        assert data[0]["description"] == "Alice joins Butterfly City!"

    def test_limit(self, client: TestClient):
        for name in ["A", "B", "C"]:
            _create(client, name)
        data = client.get("/city/events", params={"limit": 2}).json()
        assert [e["metadata"]["villager"] for e in data] == ["B", "C"]

    def test_filter_by_type(self, client: TestClient):
        a = _create(client, "A")
        b = _create(client, "B")
        client.post(
            "/city/nudges",
            json={"kind": "romance", "villager_ids": [a["id"], b["id"]]},
        )
        data = client.get("/city/events", params={"type": "nudge"}).json()
        assert len(data) == 1
        assert data[0]["metadata"] == {"admirer": "A", "target": "B"}

    def test_invalid_limit(self, client: TestClient):
        response = client.get("/city/events", params={"limit": 0})
        assert response.status_code == 422
