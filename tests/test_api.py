"""End-to-end tests for the HTTP endpoints."""


def register(client, username="bob", password="password"):
    return client.post("/register", json={"username": username, "password": password})


def post_message(client, posted_by, text="hello", epoch=1669947792):
    return client.post(
        "/messages",
        json={"posted_by": posted_by, "message_text": text, "time_posted_epoch": epoch},
    )


class TestAccounts:
    def test_register(self, client):
        response = register(client)
        assert response.status_code == 200
        body = response.json()
        assert body["account_id"] > 0
        assert body == {"account_id": body["account_id"], "username": "bob", "password": "password"}

    def test_register_rejections_have_empty_body(self, client):
        register(client)
        for payload in (
            {"username": "", "password": "password"},
            {"username": "alice", "password": "abc"},
            {"username": "bob", "password": "password"},
        ):
            response = client.post("/register", json=payload)
            assert response.status_code == 400
            assert response.content == b""

    def test_register_malformed_body(self, client):
        response = client.post("/register", content=b"{not json", headers={"Content-Type": "application/json"})
        assert response.status_code == 400

    def test_login(self, client):
        account_id = register(client).json()["account_id"]
        response = client.post("/login", json={"username": "bob", "password": "password"})
        assert response.status_code == 200
        assert response.json()["account_id"] == account_id

    def test_login_failures(self, client):
        register(client)
        assert client.post("/login", json={"username": "bob", "password": "wrong"}).status_code == 401
        assert client.post("/login", json={"username": "ghost", "password": "password"}).status_code == 401
        assert client.post("/login", content=b"[]", headers={"Content-Type": "application/json"}).status_code == 401

    def test_account_messages(self, client):
        bob_id = register(client).json()["account_id"]
        alice_id = register(client, "alice", "secret").json()["account_id"]
        post_message(client, bob_id, "one")
        post_message(client, alice_id, "two")

        response = client.get(f"/accounts/{bob_id}/messages")
        assert response.status_code == 200
        assert [m["message_text"] for m in response.json()] == ["one"]

    def test_account_messages_unknown_or_invalid_id(self, client):
        assert client.get("/accounts/999/messages").json() == []
        response = client.get("/accounts/abc/messages")
        assert response.status_code == 200
        assert response.json() == []


class TestMessages:
    def test_create(self, client):
        bob_id = register(client).json()["account_id"]
        response = post_message(client, bob_id)
        assert response.status_code == 200
        body = response.json()
        assert body["message_id"] > 0
        assert body["posted_by"] == bob_id
        assert body["message_text"] == "hello"
        assert body["time_posted_epoch"] == 1669947792

    def test_create_rejections(self, client):
        bob_id = register(client).json()["account_id"]
        assert post_message(client, bob_id, "").status_code == 400
        assert post_message(client, bob_id, "x" * 255).status_code == 400
        assert post_message(client, bob_id + 1).status_code == 400
        assert client.post("/messages", json={"message_text": "hi"}).status_code == 400
        assert post_message(client, bob_id, "x" * 254).status_code == 200

    def test_list_empty(self, client):
        response = client.get("/messages")
        assert response.status_code == 200
        assert response.json() == []

    def test_list(self, client):
        bob_id = register(client).json()["account_id"]
        first = post_message(client, bob_id, "one").json()
        second = post_message(client, bob_id, "two").json()
        assert client.get("/messages").json() == [first, second]

    def test_get(self, client):
        bob_id = register(client).json()["account_id"]
        created = post_message(client, bob_id).json()
        assert client.get(f"/messages/{created['message_id']}").json() == created

    def test_get_missing_is_empty_ok(self, client):
        for path in ("/messages/1", "/messages/abc"):
            response = client.get(path)
            assert response.status_code == 200
            assert response.content == b""

    def test_patch(self, client):
        bob_id = register(client).json()["account_id"]
        created = post_message(client, bob_id).json()
        response = client.patch(f"/messages/{created['message_id']}", json={"message_text": "edited"})
        assert response.status_code == 200
        assert response.json() == {**created, "message_text": "edited"}

    def test_patch_ignores_other_fields(self, client):
        bob_id = register(client).json()["account_id"]
        created = post_message(client, bob_id).json()
        response = client.patch(
            f"/messages/{created['message_id']}",
            json={"message_id": 999, "posted_by": 999, "message_text": "edited", "time_posted_epoch": 5},
        )
        assert response.json() == {**created, "message_text": "edited"}

    def test_patch_rejections(self, client):
        bob_id = register(client).json()["account_id"]
        created = post_message(client, bob_id).json()
        path = f"/messages/{created['message_id']}"
        assert client.patch("/messages/abc", json={"message_text": "edited"}).status_code == 400
        assert client.patch("/messages/999", json={"message_text": "edited"}).status_code == 400
        assert client.patch(path, json={"message_text": ""}).status_code == 400
        assert client.patch(path, json={"message_text": "x" * 255}).status_code == 400
        assert client.patch(path, json={}).status_code == 400
        assert client.get(path).json() == created

    def test_delete(self, client):
        bob_id = register(client).json()["account_id"]
        created = post_message(client, bob_id).json()
        path = f"/messages/{created['message_id']}"

        first = client.delete(path)
        assert first.status_code == 200
        assert first.json() == created

        second = client.delete(path)
        assert second.status_code == 200
        assert second.content == b""
        assert client.get(path).content == b""

    def test_delete_invalid_id(self, client):
        response = client.delete("/messages/abc")
        assert response.status_code == 200
        assert response.content == b""


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


TOO_BIG = 2 ** 63


class TestOutOfRangeIntegers:
    def test_reads_and_deletes_answer_empty(self, client):
        for response in (
            client.get(f"/messages/{TOO_BIG}"),
            client.delete(f"/messages/{TOO_BIG}"),
        ):
            assert response.status_code == 200
            assert response.content == b""

    def test_account_messages_answers_empty_list(self, client):
        response = client.get(f"/accounts/{TOO_BIG}/messages")
        assert response.status_code == 200
        assert response.json() == []

    def test_patch_rejected(self, client):
        response = client.patch(f"/messages/{TOO_BIG}", json={"message_text": "edited"})
        assert response.status_code == 400

    def test_create_rejected(self, client):
        bob_id = register(client).json()["account_id"]
        assert post_message(client, TOO_BIG).status_code == 400
        assert post_message(client, bob_id, epoch=TOO_BIG).status_code == 400
        assert client.get("/messages").json() == []


def test_patch_malformed_body(client):
    bob_id = register(client).json()["account_id"]
    created = post_message(client, bob_id).json()
    path = f"/messages/{created['message_id']}"
    response = client.patch(path, content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert client.get(path).json() == created
