import httpx
import pytest

from Controller import chatbot_controller
from conftest import auth_headers


@pytest.fixture
def fake_completion(monkeypatch):
    calls = []

    async def _complete(messages):
        calls.append(messages)
        return f"reply {len(calls)}"

    monkeypatch.setattr(chatbot_controller, "request_completion", _complete)
    return calls


def test_chat_starts_and_continues_conversation(client, patient, fake_completion):
    headers = auth_headers(patient)
    res = client.post("/api/chatbot", json={"message": "What is hypertension?"}, headers=headers)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["message"] == "reply 1"
    conversation_id = data["conversationId"]

    res = client.post(
        "/api/chatbot", json={"message": "How do I lower it?", "conversationId": conversation_id}, headers=headers
    )
    assert res.json()["data"]["conversationId"] == conversation_id

    # system prompt + two earlier turns + the new message
    second_call = fake_completion[1]
    assert second_call[0]["role"] == "system"
    assert [m["content"] for m in second_call[1:]] == ["What is hypertension?", "reply 1", "How do I lower it?"]

    res = client.get(f"/api/chatbot/conversations/{conversation_id}", headers=headers)
    assert len(res.json()["conversation"]["messages"]) == 4


def test_foreign_conversation_id_starts_new_one(client, patient, make_user, fake_completion):
    first = client.post("/api/chatbot", json={"message": "Hi"}, headers=auth_headers(patient)).json()
    other = make_user("patient", email="other@clinic.org")
    res = client.post(
        "/api/chatbot",
        json={"message": "Hi", "conversationId": first["data"]["conversationId"]},
        headers=auth_headers(other),
    )
    assert res.json()["data"]["conversationId"] != first["data"]["conversationId"]


def test_list_and_soft_delete(client, patient, fake_completion):
    headers = auth_headers(patient)
    conversation_id = client.post("/api/chatbot", json={"message": "Hi"}, headers=headers).json()["data"]["conversationId"]
    assert len(client.get("/api/chatbot/conversations", headers=headers).json()["conversations"]) == 1

    assert client.delete(f"/api/chatbot/conversations/{conversation_id}", headers=headers).status_code == 200
    assert client.get("/api/chatbot/conversations", headers=headers).json()["conversations"] == []
    assert client.get(f"/api/chatbot/conversations/{conversation_id}", headers=headers).status_code == 404


def test_upstream_failure(client, patient, monkeypatch):
    async def _boom(messages):
        raise httpx.ConnectError("unreachable")

    monkeypatch.setattr(chatbot_controller, "request_completion", _boom)
    res = client.post("/api/chatbot", json={"message": "Hi"}, headers=auth_headers(patient))
    assert res.status_code == 500
    assert res.json() == {"success": False, "message": "Error communicating with the chatbot service"}
    assert client.get("/api/chatbot/conversations", headers=auth_headers(patient)).json()["conversations"] == []


def test_empty_message(client, patient, fake_completion):
    res = client.post("/api/chatbot", json={"message": ""}, headers=auth_headers(patient))
    assert res.status_code == 400


def test_history_survives_between_requests(client, patient, fake_completion, db):
    from model.conversation_model import Conversation

    headers = auth_headers(patient)
    conversation_id = client.post("/api/chatbot", json={"message": "Hi"}, headers=headers).json()["data"]["conversationId"]
    client.post("/api/chatbot", json={"message": "Again", "conversationId": conversation_id}, headers=headers)

    stored = db.get(Conversation, conversation_id)
    assert stored.user_id == patient.id
    assert [m["role"] for m in stored.messages] == ["user", "assistant", "user", "assistant"]
