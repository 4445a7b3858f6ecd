from tests.conftest import auth_header, register


def test_list_users_requires_token(client):
    response = client.get("/users")
    assert response.status_code == 401


def test_list_users_rejects_bad_token(client):
    response = client.get("/users", headers=auth_header("not-a-token"))
    assert response.status_code == 401


def test_list_users(client):
    token = register(client, "alice")
    register(client, "bob")

    response = client.get("/users", headers=auth_header(token))

    assert response.status_code == 200
    users = response.json()["users"]
    assert [u["username"] for u in users] == ["alice", "bob"]
    assert all("password" not in u for u in users)


def test_get_own_user(client):
    token = register(client, "alice", first_name="Alice")

    response = client.get("/users/alice", headers=auth_header(token))

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["first_name"] == "Alice"
    assert user["join_at"] is not None
    assert user["last_login_at"] is not None


def test_get_other_user_forbidden(client):
    token = register(client, "alice")
    register(client, "bob")

    response = client.get("/users/bob", headers=auth_header(token))

    assert response.status_code == 403


def test_user_message_lists(client):
    alice = register(client, "alice")
    bob = register(client, "bob")
    client.post("/messages", json={"to_username": "bob", "body": "hi bob"}, headers=auth_header(alice))

    sent = client.get("/users/alice/from", headers=auth_header(alice))
    received = client.get("/users/bob/to", headers=auth_header(bob))

    assert sent.status_code == 200
    assert received.status_code == 200
    assert sent.json()["messages"][0]["to_user"]["username"] == "bob"
    assert received.json()["messages"][0]["from_user"]["username"] == "alice"
    assert sent.json()["messages"][0]["sent_at"] == received.json()["messages"][0]["sent_at"]


def test_user_message_lists_empty(client):
    alice = register(client, "alice")

    response = client.get("/users/alice/to", headers=auth_header(alice))

    assert response.status_code == 200
    assert response.json() == {"messages": []}
