"""API tests for registration, lookups, profile data and profile pictures."""

from tests.shared.fixtures.api import API_PREFIX, auth_headers, register
from tests.shared.fixtures.factories import PROFILE_UPLOAD_URL

USERS = f"{API_PREFIX}/users"


class TestRegister:
    def test_register(self, client):
        response = register(client)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User created"
        assert body["user"]["username"] == "alice"
        assert body["user"]["email"] == "alice@example.com"
        assert body["user"]["user_level_id"] == 2
        assert body["user"]["level_name"] == "User"
        assert body["user"]["profile_picture"] is None
        assert "password" not in body["user"]

    def test_duplicate_username(self, client):
        register(client)

        response = register(client, email="other@example.com")

        assert response.status_code == 409
        assert response.json() == {
            "detail": "Username or email already exists",
            "code": "DUPLICATE_ACCOUNT",
        }

    def test_duplicate_email(self, client):
        register(client)

        assert register(client, username="alice2").status_code == 409

    def test_weak_password(self, client):
        response = register(client, password="short")

        assert response.status_code == 400
        assert response.json()["code"] == "WEAK_PASSWORD"

    def test_invalid_email(self, client):
        assert register(client, email="not-an-email").status_code == 422


class TestLookups:
    def test_get_by_id(self, client):
        user_id = register(client).json()["user"]["user_id"]

        response = client.get(f"{USERS}/{user_id}")

        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    def test_get_by_username(self, client):
        register(client)

        response = client.get(f"{USERS}/username/alice")

        assert response.status_code == 200
        assert response.json()["email"] == "alice@example.com"

    def test_unknown_id(self, client):
        response = client.get(f"{USERS}/404")

        assert response.status_code == 404
        assert response.json() == {"detail": "User not found", "code": "ACCOUNT_NOT_FOUND"}

    def test_unknown_username(self, client):
        assert client.get(f"{USERS}/username/nobody").status_code == 404

    def test_username_by_id(self, client):
        user_id = register(client).json()["user"]["user_id"]

        response = client.get(f"{USERS}/{user_id}/username")

        assert response.status_code == 200
        assert response.json() == {"user_id": user_id, "username": "alice"}

    def test_username_of_unknown_id(self, client):
        response = client.get(f"{USERS}/404/username")

        assert response.status_code == 404
        assert response.json()["code"] == "ACCOUNT_NOT_FOUND"

    def test_email_availability(self, client):
        register(client)

        taken = client.get(f"{USERS}/email/alice@example.com/exists")
        free = client.get(f"{USERS}/email/bob@example.com/exists")

        assert taken.json() == {"available": False}
        assert free.json() == {"available": True}


class TestUpdateMe:
    def test_partial_update(self, client):
        register(client)

        response = client.put(
            f"{USERS}/me",
            json={"email": "alice@new.example.com"},
            headers=auth_headers(client),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User updated"
        assert body["user"]["email"] == "alice@new.example.com"
        assert body["user"]["username"] == "alice"

    def test_conflict(self, client):
        register(client)
        register(client, username="bob", email="bob@example.com")

        response = client.put(
            f"{USERS}/me",
            json={"username": "bob"},
            headers=auth_headers(client),
        )

        assert response.status_code == 409

    def test_requires_token(self, client):
        assert client.put(f"{USERS}/me", json={"username": "ghost"}).status_code == 401


class TestDeleteMe:
    def test_delete(self, client):
        user_id = register(client).json()["user"]["user_id"]
        headers = auth_headers(client)

        response = client.delete(f"{USERS}/me", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted", "user_id": user_id}
        assert client.get(f"{USERS}/{user_id}").status_code == 404

    def test_second_delete_with_same_token_is_server_error(self, client):
        register(client)
        headers = auth_headers(client)
        client.delete(f"{USERS}/me", headers=headers)

        response = client.delete(f"{USERS}/me", headers=headers)

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to delete user", "code": "INTERNAL_ERROR"}

    def test_delete_removes_profile_picture(self, client):
        user_id = register(client).json()["user"]["user_id"]
        headers = auth_headers(client)
        client.put(
            f"{USERS}/me/profile-picture",
            json={"filename": "a.png", "filesize": 1, "media_type": "image/png"},
            headers=headers,
        )

        client.delete(f"{USERS}/me", headers=headers)

        assert client.get(f"{USERS}/{user_id}/profile-picture").status_code == 404


class TestProfilePicture:
    def test_put_and_get(self, client):
        user_id = register(client).json()["user"]["user_id"]
        headers = auth_headers(client)

        response = client.put(
            f"{USERS}/me/profile-picture",
            json={"filename": "avatar-1.png", "filesize": 2048, "media_type": "image/png"},
            headers=headers,
        )

        assert response.status_code == 200
        picture = response.json()["profile_picture"]
        assert response.json()["message"] == "Profile picture updated"
        assert picture["user_id"] == user_id
        assert picture["filename"] == f"{PROFILE_UPLOAD_URL}avatar-1.png"

        fetched = client.get(f"{USERS}/{user_id}/profile-picture")
        assert fetched.status_code == 200
        assert fetched.json() == picture

        user = client.get(f"{USERS}/{user_id}").json()
        assert user["profile_picture"] == f"{PROFILE_UPLOAD_URL}avatar-1.png"

    def test_second_put_replaces_first(self, client):
        user_id = register(client).json()["user"]["user_id"]
        headers = auth_headers(client)
        first = client.put(
            f"{USERS}/me/profile-picture",
            json={"filename": "avatar-1.png", "filesize": 2048, "media_type": "image/png"},
            headers=headers,
        ).json()["profile_picture"]

        second = client.put(
            f"{USERS}/me/profile-picture",
            json={"filename": "avatar-2.jpg", "filesize": 4096, "media_type": "image/jpeg"},
            headers=headers,
        ).json()["profile_picture"]

        assert second["profile_picture_id"] == first["profile_picture_id"]
        fetched = client.get(f"{USERS}/{user_id}/profile-picture").json()
        assert fetched["filename"] == f"{PROFILE_UPLOAD_URL}avatar-2.jpg"
        assert fetched["filesize"] == 4096
        assert fetched["media_type"] == "image/jpeg"

    def test_missing_picture(self, client):
        user_id = register(client).json()["user"]["user_id"]

        response = client.get(f"{USERS}/{user_id}/profile-picture")

        assert response.status_code == 404
        assert response.json()["code"] == "PROFILE_PICTURE_NOT_FOUND"

    def test_get_by_picture_id(self, client):
        register(client)
        picture = client.put(
            f"{USERS}/me/profile-picture",
            json={"filename": "avatar-1.png", "filesize": 2048, "media_type": "image/png"},
            headers=auth_headers(client),
        ).json()["profile_picture"]

        response = client.get(f"{USERS}/profile-pictures/{picture['profile_picture_id']}")

        assert response.status_code == 200
        assert response.json() == picture

    def test_unknown_picture_id(self, client):
        response = client.get(f"{USERS}/profile-pictures/404")

        assert response.status_code == 404
        assert response.json()["code"] == "PROFILE_PICTURE_NOT_FOUND"
