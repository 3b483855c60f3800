"""Integration tests for the user ledger endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lifelessons import models
from tests.factories import create_test_favorite, create_test_lesson, create_test_user


class TestGetOrCreateUser:
    def test_first_lookup_provisions_user(self, client: TestClient) -> None:
        response = client.get("/user", params={"email": "new@example.com"})
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["_id"] > 0
        assert data["email"] == "new@example.com"
        assert data["role"] == "user"
        assert data["isPremium"] is False
        assert data["createdAt"] is not None
        assert data["lastLoginAt"] is not None

    def test_second_lookup_returns_same_user(self, client: TestClient) -> None:
        first = client.get("/user", params={"email": "new@example.com"}).json()

        response = client.get("/user", params={"email": "new@example.com"})
        assert response.status_code == status.HTTP_200_OK
        second = response.json()
        assert second["_id"] == first["_id"]
        assert second["createdAt"] == first["createdAt"]
        assert second["role"] == first["role"]
        assert second["isPremium"] == first["isPremium"]

    def test_existing_premium_flag_is_preserved(
        self, client: TestClient, db_session: Session
    ) -> None:
        create_test_user(db_session, email="vip@example.com", is_premium=True)

        response = client.get("/user", params={"email": "vip@example.com"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["isPremium"] is True

    def test_missing_email_is_rejected(self, client: TestClient) -> None:
        response = client.get("/user")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"success": False, "error": "Email is required"}


class TestUpsertUser:
    def test_upsert_creates_then_updates(self, client: TestClient, db_session: Session) -> None:
        payload = {"email": "pat@example.com", "name": "Pat", "photoURL": "https://img/p.png"}

        response = client.put("/users", json=payload)
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "upserted": True, "message": "User created"}

        response = client.put("/users", json={**payload, "name": "Patricia"})
        assert response.json() == {"success": True, "upserted": False, "message": "User updated"}

        user = client.get("/user", params={"email": "pat@example.com"}).json()
        assert user["name"] == "Patricia"
        assert user["photoURL"] == "https://img/p.png"

        db_session.expire_all()
        assert db_session.query(models.User).count() == 1

    def test_upsert_never_touches_role_or_tier(
        self, client: TestClient, db_session: Session
    ) -> None:
        create_test_user(db_session, email="boss@example.com", role="admin", is_premium=True)

        client.put("/users", json={"email": "boss@example.com", "name": "Boss"})

        user = client.get("/user", params={"email": "boss@example.com"}).json()
        assert user["role"] == "admin"
        assert user["isPremium"] is True
        assert user["name"] == "Boss"

    def test_upsert_without_email_is_rejected(self, client: TestClient) -> None:
        response = client.put("/users", json={"name": "Nobody"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestUserStats:
    def test_counts_and_recent_lessons(self, client: TestClient, db_session: Session) -> None:
        email = "author@example.com"
        ids = [
            create_test_lesson(db_session, title=f"Mine {i}", creator_email=email, likes=i).id
            for i in range(7)
        ]
        other = create_test_lesson(db_session, creator_email="someone@example.com").id
        create_test_favorite(db_session, email, ids[0])
        create_test_favorite(db_session, email, other)
        create_test_favorite(db_session, "someone@example.com", ids[1])

        response = client.get("/user-stats", params={"email": email})
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["totalLessons"] == 7
        assert data["totalFavorites"] == 2

        recent = data["recentLessons"]
        assert [lesson["_id"] for lesson in recent] == list(reversed(ids))[:5]
        assert set(recent[0]) == {"_id", "title", "category", "createdAt", "likes"}
        assert recent[0]["likes"] == 6

    def test_user_with_nothing_has_zero_stats(self, client: TestClient) -> None:
        response = client.get("/user-stats", params={"email": "idle@example.com"})
        assert response.json() == {"totalLessons": 0, "totalFavorites": 0, "recentLessons": []}

    def test_missing_email_is_rejected(self, client: TestClient) -> None:
        assert client.get("/user-stats").status_code == status.HTTP_400_BAD_REQUEST


class TestAdminCheck:
    def test_admin_user(self, client: TestClient, db_session: Session) -> None:
        create_test_user(db_session, email="root@example.com", role="admin")

        response = client.get("/users/admin/root@example.com")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"isAdmin": True}

    def test_regular_and_unknown_users_are_not_admins(
        self, client: TestClient, db_session: Session
    ) -> None:
        create_test_user(db_session, email="plain@example.com")

        assert client.get("/users/admin/plain@example.com").json() == {"isAdmin": False}
        assert client.get("/users/admin/ghost@example.com").json() == {"isAdmin": False}
