"""Tests for the HTTP API: status codes, bodies and activity side effects."""

from fastapi.testclient import TestClient

from astramind.core.audit import resource_of
from astramind.core.exceptions import UpstreamGenerationError

from tests.conftest import FakeGateway


def _activity_types(client: TestClient) -> list:
    return [a["type"] for a in client.get("/api/activities").json()]


# -- Health ----------------------------------------------------------------------


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_readiness_reports_store_counts(client: TestClient) -> None:
    client.post("/api/goals", json={"title": "g", "category": "c"})

    data = client.get("/health/ready").json()

    assert data["status"] == "ready"
    assert data["store"]["goals"] == 1
    assert data["store"]["activities"] == 1


def test_security_headers(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_unknown_route_uses_error_body(client: TestClient) -> None:
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert "error" in resp.json()


# -- Chat ------------------------------------------------------------------------


def test_chat_creates_conversation(client: TestClient) -> None:
    resp = client.post("/api/chat", json={"message": "Plan my morning"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["message"]["role"] == "assistant"
    assert data["message"]["content"] == "Here is a plan for your day."
    assert data["message"]["conversationId"] == data["conversationId"]

    conversations = client.get("/api/conversations").json()
    assert [c["id"] for c in conversations] == [data["conversationId"]]
    assert conversations[0]["title"] == "Plan my morning"

    messages = client.get(f"/api/conversations/{data['conversationId']}/messages").json()
    assert [m["role"] for m in messages] == ["user", "assistant"]
    assert _activity_types(client) == ["chat"]


def test_chat_continues_conversation(client: TestClient, gateway: FakeGateway) -> None:
    first = client.post("/api/chat", json={"message": "one"}).json()

    resp = client.post("/api/chat", json={"message": "two", "conversationId": first["conversationId"]})

    assert resp.status_code == 200
    assert resp.json()["conversationId"] == first["conversationId"]
    assert len(gateway.reply_calls[-1][1]) == 2


def test_chat_unknown_conversation_is_404(client: TestClient) -> None:
    resp = client.post("/api/chat", json={"message": "hi", "conversationId": "missing"})

    assert resp.status_code == 404
    assert resp.json()["error"] == "Conversation not found"
    assert client.get("/api/conversations").json() == []
    assert _activity_types(client) == []


def test_chat_missing_message_is_400(client: TestClient) -> None:
    assert client.post("/api/chat", json={}).status_code == 400
    assert client.post("/api/chat", json={"message": ""}).status_code == 400


def test_chat_blank_message_is_400(client: TestClient) -> None:
    resp = client.post("/api/chat", json={"message": "   "})
    assert resp.status_code == 400
    assert resp.json()["code"] == "validation_error"


def test_chat_provider_failure_is_500(client: TestClient, gateway: FakeGateway) -> None:
    gateway.error = UpstreamGenerationError(details="provider down")

    resp = client.post("/api/chat", json={"message": "hello?"})

    assert resp.status_code == 500
    assert resp.json()["code"] == "generation_failed"
    assert resp.json()["error"] == "Failed to get AI response"


# -- Conversations -----------------------------------------------------------------


def test_conversation_crud(client: TestClient) -> None:
    created = client.post("/api/conversations", json={"title": "Manual"}).json()
    conv_id = created["id"]
    assert created["createdAt"] == created["updatedAt"]

    assert client.get(f"/api/conversations/{conv_id}").json()["title"] == "Manual"

    patched = client.patch(f"/api/conversations/{conv_id}", json={"title": "Renamed"}).json()
    assert patched["title"] == "Renamed"
    assert patched["id"] == conv_id

    assert client.delete(f"/api/conversations/{conv_id}").json() == {"success": True}
    assert client.get(f"/api/conversations/{conv_id}").status_code == 404
    assert client.delete(f"/api/conversations/{conv_id}").status_code == 404


def test_conversation_invalid_body_is_400(client: TestClient) -> None:
    assert client.post("/api/conversations", json={}).status_code == 400


def test_patch_unknown_conversation_is_404(client: TestClient) -> None:
    assert client.patch("/api/conversations/missing", json={"title": "x"}).status_code == 404


def test_messages_of_unknown_conversation_is_empty(client: TestClient) -> None:
    resp = client.get("/api/conversations/missing/messages")
    assert resp.status_code == 200
    assert resp.json() == []


# -- Goals -------------------------------------------------------------------------


def test_goal_scenario(client: TestClient) -> None:
    goal = client.post("/api/goals", json={"title": "Learn X", "category": "learning"}).json()
    assert goal["progress"] == 0
    assert goal["completed"] is False

    resp = client.patch(f"/api/goals/{goal['id']}", json={"progress": 100, "completed": True})

    assert resp.status_code == 200
    updated = resp.json()
    assert updated["progress"] == 100
    assert updated["completed"] is True
    assert updated["updatedAt"] >= updated["createdAt"]
    assert _activity_types(client) == ["goal_completed", "goal_created"]


def test_goal_other_update_logs_goal_updated(client: TestClient) -> None:
    goal = client.post("/api/goals", json={"title": "Run", "category": "health"}).json()
    client.patch(f"/api/goals/{goal['id']}", json={"description": "Every morning"})
    assert _activity_types(client)[0] == "goal_updated"


def test_goal_accepts_target_date(client: TestClient) -> None:
    goal = client.post(
        "/api/goals",
        json={"title": "Ship", "category": "work", "targetDate": "2026-12-31T00:00:00Z"},
    ).json()
    assert goal["targetDate"].startswith("2026-12-31")


def test_goal_invalid_body_is_400_and_not_logged(client: TestClient) -> None:
    resp = client.post("/api/goals", json={"title": "No category"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request data"
    assert _activity_types(client) == []


def test_goal_not_found(client: TestClient) -> None:
    assert client.get("/api/goals/missing").status_code == 404
    assert client.patch("/api/goals/missing", json={"progress": 1}).status_code == 404
    assert client.delete("/api/goals/missing").status_code == 404


def test_goal_delete(client: TestClient) -> None:
    goal = client.post("/api/goals", json={"title": "g", "category": "c"}).json()

    assert client.delete(f"/api/goals/{goal['id']}").json() == {"success": True}
    assert client.get("/api/goals").json() == []
    assert _activity_types(client)[0] == "goal_deleted"


# -- Notes -------------------------------------------------------------------------


def test_note_crud(client: TestClient) -> None:
    note = client.post("/api/notes", json={"title": "Idea", "content": "Body"}).json()
    assert note["tags"] == []

    patched = client.patch(f"/api/notes/{note['id']}", json={"tags": ["a", "b"]}).json()
    assert patched["tags"] == ["a", "b"]
    assert client.get(f"/api/notes/{note['id']}").json()["tags"] == ["a", "b"]

    assert client.delete(f"/api/notes/{note['id']}").status_code == 200
    assert client.get(f"/api/notes/{note['id']}").status_code == 404
    assert _activity_types(client) == ["note_deleted", "note_updated", "note_created"]


def test_notes_listed_newest_first(client: TestClient) -> None:
    first = client.post("/api/notes", json={"title": "first", "content": "x"}).json()
    second = client.post("/api/notes", json={"title": "second", "content": "x"}).json()

    ids = [n["id"] for n in client.get("/api/notes").json()]
    assert ids == [second["id"], first["id"]]


# -- Activities & summary ----------------------------------------------------------


def test_manual_activity(client: TestClient) -> None:
    resp = client.post("/api/activities", json={"type": "reading", "description": "Read a chapter"})

    assert resp.status_code == 200
    assert resp.json()["type"] == "reading"
    assert _activity_types(client) == ["reading"]


def test_manual_activity_invalid_is_400(client: TestClient) -> None:
    assert client.post("/api/activities", json={"type": "x"}).status_code == 400


def test_daily_summary(client: TestClient, gateway: FakeGateway) -> None:
    client.post("/api/chat", json={"message": "hello"})
    client.post("/api/notes", json={"title": "n", "content": "c"})

    data = client.get("/api/summary/daily").json()

    assert data["totalChats"] == 1
    assert data["notesCreated"] == 1
    assert data["goalsCompleted"] == 0
    assert data["insights"] == ["Nice work today!"]
    assert len(data["date"]) == 10


def test_unexpected_error_is_internal_error(client: TestClient, gateway: FakeGateway) -> None:
    gateway.error = RuntimeError("boom")

    resp = client.post("/api/chat", json={"message": "hello"})

    assert resp.status_code == 500
    assert resp.json()["code"] == "internal_error"
    assert resp.json()["error"] == "An unexpected error occurred"
    assert resp.json()["details"] is None


def test_audit_sets_response_time(client: TestClient) -> None:
    resp = client.get("/api/goals")
    assert resp.headers["X-Response-Time"].endswith("s")


def test_resource_of() -> None:
    assert resource_of("/api/goals/abc") == ("goals", "abc")
    assert resource_of("/api/chat") == ("chat", "-")
    assert resource_of("/health") == ("-", "-")


def test_chat_keeps_message_whitespace(client: TestClient) -> None:
    data = client.post("/api/chat", json={"message": "  hello  "}).json()

    messages = client.get(f"/api/conversations/{data['conversationId']}/messages").json()
    assert messages[0]["content"] == "  hello  "
    assert client.get(f"/api/conversations/{data['conversationId']}").json()["title"] == "  hello  "
