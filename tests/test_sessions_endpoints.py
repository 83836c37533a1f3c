"""Tests for session endpoints."""

from fastapi.testclient import TestClient


def _create_user(client: TestClient, name: str) -> str:
    return client.post("/users/", json={"name": name}).json()["id"]


def _create_session(client: TestClient, owner_id: str) -> str:
    response = client.post("/sessions", json={"owner_id": owner_id, "name": "Sprint1"})
    assert response.status_code == 201
    return response.json()["id"]


def test_create_session_makes_owner_creator(client: TestClient) -> None:
    owner_id = _create_user(client, "Alice")

    response = client.post(
        "/sessions",
        json={"owner_id": owner_id, "name": "Sprint1", "description": "Planning"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["owner"]["id"] == owner_id
    assert data["owner"]["role"] == "creator"
    assert data["description"] == "Planning"
    assert data["story"] is None
    assert data["users"] == []
    assert len(data["id"]) == 6


def test_create_session_with_explicit_id(client: TestClient) -> None:
    owner_id = _create_user(client, "Alice")

    response = client.post(
        "/sessions", json={"owner_id": owner_id, "name": "Sprint1", "id": "team-a"}
    )

    assert response.json()["id"] == "team-a"
    assert client.get("/sessions/team-a").status_code == 200


def test_create_session_for_unknown_owner_returns_404(client: TestClient) -> None:
    response = client.post("/sessions", json={"owner_id": "ghost", "name": "Sprint1"})

    assert response.status_code == 404


def test_get_unknown_session_returns_404(client: TestClient) -> None:
    response = client.get("/sessions/missing")

    assert response.status_code == 404
    assert response.json() == {"detail": "Session not found: missing"}


def test_estimators_without_story_returns_409(client: TestClient) -> None:
    owner_id = _create_user(client, "Alice")
    session_id = _create_session(client, owner_id)

    response = client.get(f"/sessions/{session_id}/estimators")

    assert response.status_code == 409
    assert response.json() == {"detail": "No story has been set in the session."}


def test_estimators_with_empty_roster_returns_409(client: TestClient) -> None:
    owner_id = _create_user(client, "Alice")
    session_id = _create_session(client, owner_id)
    client.put(f"/sessions/{session_id}/story", json={"title": "Login page"})

    response = client.get(f"/sessions/{session_id}/estimators")

    assert response.status_code == 409
    assert response.json() == {"detail": "No users in the session."}


def test_estimate_for_user_not_on_roster_returns_404(client: TestClient) -> None:
    owner_id = _create_user(client, "Alice")
    session_id = _create_session(client, owner_id)

    response = client.put(
        f"/sessions/{session_id}/estimates/{owner_id}", json={"points": 3}
    )

    assert response.status_code == 404


def test_full_estimation_round(client: TestClient) -> None:
    owner_id = _create_user(client, "Alice")
    bob_id = _create_user(client, "Bob")
    session_id = _create_session(client, owner_id)

    assert client.post(f"/sessions/{session_id}/owner").status_code == 200
    joined = client.post(f"/sessions/{session_id}/users", json={"user_id": bob_id})
    assert {user["id"] for user in joined.json()["users"]} == {owner_id, bob_id}

    story = client.put(
        f"/sessions/{session_id}/story",
        json={"title": "Login page", "description": "OAuth"},
    ).json()
    assert story["title"] == "Login page"

    client.put(f"/sessions/{session_id}/estimates/{bob_id}", json={"points": 5})
    estimators = client.get(f"/sessions/{session_id}/estimators").json()
    assert estimators == [{"id": bob_id, "name": "Bob"}]
    assert client.get(f"/sessions/{session_id}/reveal").json() == []

    client.put(f"/sessions/{session_id}/estimates/{owner_id}", json={"points": 3})
    revealed = client.get(f"/sessions/{session_id}/reveal").json()
    assert sorted(revealed, key=lambda item: item["name"]) == [
        {"id": owner_id, "name": "Alice", "estimate": 3},
        {"id": bob_id, "name": "Bob", "estimate": 5},
    ]
    assert client.get(f"/sessions/{session_id}/average").json() == {"average": 4}

    assert client.delete(f"/sessions/{session_id}/estimates").status_code == 200
    assert client.get(f"/sessions/{session_id}/reveal").json() == []


def test_leave_session(client: TestClient) -> None:
    owner_id = _create_user(client, "Alice")
    bob_id = _create_user(client, "Bob")
    session_id = _create_session(client, owner_id)
    client.post(f"/sessions/{session_id}/users", json={"user_id": bob_id})

    first = client.delete(f"/sessions/{session_id}/users/{bob_id}")
    second = client.delete(f"/sessions/{session_id}/users/{bob_id}")

    assert first.json() == {"removed": True}
    assert second.json() == {"removed": False}
    assert client.get(f"/sessions/{session_id}").json()["users"] == []


def test_create_session_with_taken_id_returns_409(client: TestClient) -> None:
    alice_id = _create_user(client, "Alice")
    mallory_id = _create_user(client, "Mallory")
    client.post("/sessions", json={"owner_id": alice_id, "name": "A", "id": "team"})

    response = client.post(
        "/sessions", json={"owner_id": mallory_id, "name": "B", "id": "team"}
    )

    assert response.status_code == 409
    assert response.json() == {"detail": "Session already exists: team"}
    assert client.get("/sessions/team").json()["owner"]["id"] == alice_id


def test_votes_do_not_leak_between_sessions(client: TestClient) -> None:
    owner_id = _create_user(client, "Alice")
    bob_id = _create_user(client, "Bob")
    first = _create_session(client, owner_id)
    second = _create_session(client, owner_id)
    for session_id in (first, second):
        client.post(f"/sessions/{session_id}/users", json={"user_id": bob_id})
        client.put(f"/sessions/{session_id}/story", json={"title": "Login page"})

    client.put(f"/sessions/{first}/estimates/{bob_id}", json={"points": 5})

    assert client.get(f"/sessions/{second}/reveal").json() == []
    assert client.delete(f"/sessions/{second}/estimates").status_code == 200
    assert client.get(f"/sessions/{first}/reveal").json() == [
        {"id": bob_id, "name": "Bob", "estimate": 5}
    ]
    assert client.get(f"/users/{bob_id}").json()["estimate"] == 0
