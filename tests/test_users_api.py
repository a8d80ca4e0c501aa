"""
Testy endpointów /api/users.
"""

ADMIN_EMAIL = "admin@example.com"


def create(client, headers, username="testUser", email="test@example.com"):
    return client.post("/api/users", json={"username": username, "email": email}, headers=headers)


class TestUsersAccess:
    """Testy uprawnień."""

    def test_requires_token(self, client):
        assert client.get("/api/users").status_code == 401

    def test_requires_admin(self, client, user_headers):
        assert client.get("/api/users", headers=user_headers).status_code == 403
        assert create(client, user_headers).status_code == 403


class TestUsersCrud:
    """Testy operacji CRUD."""

    def test_create_user(self, client, admin_headers):
        response = create(client, admin_headers)

        assert response.status_code == 201
        # Admin ma ID 1
        assert response.json() == {"id": 2, "username": "testUser", "email": "test@example.com"}

    def test_get_user(self, client, admin_headers):
        user_id = create(client, admin_headers).json()["id"]

        response = client.get(f"/api/users/{user_id}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["email"] == "test@example.com"

    def test_get_missing_user(self, client, admin_headers):
        assert client.get("/api/users/999", headers=admin_headers).status_code == 404

    def test_list_users(self, client, admin_headers):
        create(client, admin_headers, "user1", "user1@example.com")
        create(client, admin_headers, "user2", "user2@example.com")

        response = client.get("/api/users", headers=admin_headers)
        assert response.status_code == 200
        emails = {user["email"] for user in response.json()}
        assert emails == {ADMIN_EMAIL, "user1@example.com", "user2@example.com"}
        assert all("password" not in user for user in response.json())

    def test_update_user(self, client, admin_headers):
        user_id = create(client, admin_headers).json()["id"]

        response = client.put(
            f"/api/users/{user_id}",
            json={"username": "newName", "email": "new@example.com"},
            headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json() == {"id": user_id, "username": "newName", "email": "new@example.com"}

    def test_update_admin_keeps_login(self, client, admin_headers):
        client.put(
            "/api/users/1",
            json={"username": "root", "email": ADMIN_EMAIL},
            headers=admin_headers
        )
        me = client.get("/api/auth/me", headers=admin_headers).json()
        assert me["username"] == "root"
        assert me["is_admin"] is True

    def test_update_missing_user(self, client, admin_headers):
        response = client.put(
            "/api/users/999",
            json={"username": "newName", "email": "new@example.com"},
            headers=admin_headers
        )
        assert response.status_code == 404

    def test_delete_user(self, client, admin_headers):
        user_id = create(client, admin_headers).json()["id"]

        assert client.delete(f"/api/users/{user_id}", headers=admin_headers).status_code == 204
        assert client.get(f"/api/users/{user_id}", headers=admin_headers).status_code == 404
        # Ponowne usunięcie to nie błąd
        assert client.delete(f"/api/users/{user_id}", headers=admin_headers).status_code == 204

    def test_ids_not_reused_after_delete(self, client, admin_headers):
        user_id = create(client, admin_headers).json()["id"]
        client.delete(f"/api/users/{user_id}", headers=admin_headers)

        assert create(client, admin_headers).json()["id"] == user_id + 1

    def test_get_by_email(self, client, admin_headers):
        create(client, admin_headers, email="Test@Example.com")

        found = client.get("/api/users/email/Test@Example.com", headers=admin_headers)
        missing = client.get("/api/users/email/test@example.com", headers=admin_headers)
        assert found.status_code == 200
        assert found.json()["username"] == "testUser"
        assert missing.status_code == 404


class TestUsersValidation:
    """Testy walidacji żądań."""

    def test_short_username(self, client, admin_headers):
        assert create(client, admin_headers, username="ab").status_code == 422

    def test_invalid_email(self, client, admin_headers):
        assert create(client, admin_headers, email="invalid-email").status_code == 422

    def test_missing_fields(self, client, admin_headers):
        response = client.post("/api/users", json={}, headers=admin_headers)
        assert response.status_code == 422

    def test_invalid_payload_on_update(self, client, admin_headers):
        response = client.put(
            "/api/users/1",
            json={"username": "", "email": ADMIN_EMAIL},
            headers=admin_headers
        )
        assert response.status_code == 422


class TestUsersEmailUniqueness:
    """Testy unikalności emaila przy tworzeniu i edycji."""

    def test_create_with_taken_email(self, client, admin_headers):
        response = create(client, admin_headers, username="copycat", email=ADMIN_EMAIL)

        assert response.status_code == 400
        emails = [user["email"] for user in client.get("/api/users", headers=admin_headers).json()]
        assert emails == [ADMIN_EMAIL]

    def test_update_onto_taken_email_keeps_owner_login(self, client, admin_headers, user_headers):
        response = client.put(
            "/api/users/1",
            json={"username": "admin", "email": "regular@example.com"},
            headers=admin_headers
        )
        assert response.status_code == 400

        login = client.post(
            "/api/auth/login",
            json={"email": "regular@example.com", "password": "secret123"}
        )
        assert login.status_code == 200
        assert client.get("/api/users/1", headers=admin_headers).json()["email"] == ADMIN_EMAIL

    def test_update_keeping_own_email(self, client, admin_headers):
        user_id = create(client, admin_headers).json()["id"]

        response = client.put(
            f"/api/users/{user_id}",
            json={"username": "renamed", "email": "test@example.com"},
            headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["username"] == "renamed"
