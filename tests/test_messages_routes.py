import pytest

from tests.conftest import auth_header, register


@pytest.fixture
def tokens(client):
    return {name: register(client, name) for name in ("alice", "bob", "carol")}


def send(client, token, to_username, body):
    response = client.post("/messages", json={"to_username": to_username, "body": body}, headers=auth_header(token))
    assert response.status_code == 200, response.text
    return response.json()["message"]


def test_send_message(client, tokens):
    message = send(client, tokens["alice"], "bob", "hello")

    assert message["from_username"] == "alice"
    assert message["to_username"] == "bob"
    assert message["body"] == "hello"


def test_send_message_to_unknown_user(client, tokens):
    response = client.post(
        "/messages", json={"to_username": "nobody", "body": "hello"}, headers=auth_header(tokens["alice"])
    )
    assert response.status_code == 404


def test_get_message_as_participant(client, tokens):
    message = send(client, tokens["alice"], "bob", "hello")

    for name in ("alice", "bob"):
        response = client.get(f"/messages/{message['id']}", headers=auth_header(tokens[name]))
        assert response.status_code == 200
        assert response.json()["message"]["from_user"]["username"] == "alice"
        assert response.json()["message"]["to_user"]["username"] == "bob"


def test_get_message_as_outsider_looks_missing(client, tokens):
    message = send(client, tokens["alice"], "bob", "hello")
    missing_id = message["id"] + 1000

    existing = client.get(f"/messages/{message['id']}", headers=auth_header(tokens["carol"]))
    missing = client.get(f"/messages/{missing_id}", headers=auth_header(tokens["carol"]))

    assert existing.status_code == missing.status_code == 404
    assert existing.json()["detail"] == f"No such message: {message['id']}"
    assert missing.json()["detail"] == f"No such message: {missing_id}"


def test_get_missing_message(client, tokens):
    response = client.get("/messages/12345", headers=auth_header(tokens["alice"]))
    assert response.status_code == 404


def test_mark_read_by_recipient(client, tokens):
    message = send(client, tokens["alice"], "bob", "hello")

    response = client.post(f"/messages/{message['id']}/read", headers=auth_header(tokens["bob"]))

    assert response.status_code == 200
    assert response.json()["message"]["read_at"] is not None
    detail = client.get(f"/messages/{message['id']}", headers=auth_header(tokens["bob"])).json()["message"]
    assert detail["read_at"] is not None


def test_mark_read_by_sender_forbidden(client, tokens):
    message = send(client, tokens["alice"], "bob", "hello")

    response = client.post(f"/messages/{message['id']}/read", headers=auth_header(tokens["alice"]))

    assert response.status_code == 403


def test_mark_read_by_outsider_looks_missing(client, tokens):
    message = send(client, tokens["alice"], "bob", "hello")

    response = client.post(f"/messages/{message['id']}/read", headers=auth_header(tokens["carol"]))

    assert response.status_code == 404
    detail = client.get(f"/messages/{message['id']}", headers=auth_header(tokens["bob"])).json()["message"]
    assert detail["read_at"] is None
