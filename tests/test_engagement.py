"""Integration tests for like/unlike and save/unsave."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lifelessons import models
from tests.factories import create_test_lesson


def _lesson_state(client: TestClient, lesson_id: int) -> dict:
    return client.get(f"/lessons/{lesson_id}").json()


class TestLike:
    def test_like_adds_member_and_increments(
        self, client: TestClient, db_session: Session
    ) -> None:
        lesson_id = create_test_lesson(db_session).id

        response = client.post(
            f"/lessons/{lesson_id}/like", json={"userId": "u1", "action": "like"}
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "changed": True, "likes": 1}

        lesson = _lesson_state(client, lesson_id)
        assert lesson["likesArray"] == ["u1"]
        assert lesson["likes"] == 1

    def test_liking_twice_equals_liking_once(
        self, client: TestClient, db_session: Session
    ) -> None:
        lesson_id = create_test_lesson(db_session).id
        payload = {"userId": "u1", "action": "like"}

        client.post(f"/lessons/{lesson_id}/like", json=payload)
        response = client.post(f"/lessons/{lesson_id}/like", json=payload)

        assert response.json() == {"success": True, "changed": False, "likes": 1}
        assert _lesson_state(client, lesson_id)["likesArray"] == ["u1"]

    def test_like_then_unlike_restores_prior_state(
        self, client: TestClient, db_session: Session
    ) -> None:
        lesson_id = create_test_lesson(db_session).id
        client.post(f"/lessons/{lesson_id}/like", json={"userId": "u1", "action": "like"})

        response = client.post(
            f"/lessons/{lesson_id}/like", json={"userId": "u1", "action": "unlike"}
        )
        assert response.json() == {"success": True, "changed": True, "likes": 0}

        lesson = _lesson_state(client, lesson_id)
        assert lesson["likesArray"] == []
        assert lesson["likes"] == 0

    def test_unlike_by_non_member_changes_nothing(
        self, client: TestClient, db_session: Session
    ) -> None:
        lesson_id = create_test_lesson(db_session).id
        client.post(f"/lessons/{lesson_id}/like", json={"userId": "u1", "action": "like"})

        response = client.post(
            f"/lessons/{lesson_id}/like", json={"userId": "u2", "action": "unlike"}
        )
        assert response.json() == {"success": True, "changed": False, "likes": 1}

    def test_members_keep_join_order(self, client: TestClient, db_session: Session) -> None:
        lesson_id = create_test_lesson(db_session).id
        for user in ("u1", "u2", "u3"):
            client.post(f"/lessons/{lesson_id}/like", json={"userId": user, "action": "like"})
        client.post(f"/lessons/{lesson_id}/like", json={"userId": "u2", "action": "unlike"})

        lesson = _lesson_state(client, lesson_id)
        assert lesson["likesArray"] == ["u1", "u3"]
        assert lesson["likes"] == 2

    @pytest.mark.parametrize(
        "payload",
        [
            {"action": "like"},
            {"userId": "", "action": "like"},
            {"userId": "   ", "action": "like"},
            {"userId": "u1", "action": "save"},
            {"userId": "u1"},
        ],
    )
    def test_invalid_requests_are_rejected_without_side_effects(
        self, client: TestClient, db_session: Session, payload: dict
    ) -> None:
        lesson_id = create_test_lesson(db_session).id

        response = client.post(f"/lessons/{lesson_id}/like", json=payload)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["success"] is False

        db_session.expire_all()
        assert db_session.query(models.LessonLike).count() == 0

    def test_unknown_lesson_returns_404(self, client: TestClient) -> None:
        response = client.post("/lessons/404/like", json={"userId": "u1", "action": "like"})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_lesson_id_beyond_64_bits_returns_404(self, client: TestClient) -> None:
        response = client.post(
            "/lessons/100000000000000000000/like", json={"userId": "u1", "action": "like"}
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestSave:
    def test_save_and_unsave(self, client: TestClient, db_session: Session) -> None:
        lesson_id = create_test_lesson(db_session).id

        response = client.post(
            f"/lessons/{lesson_id}/save", json={"userId": "u1", "action": "save"}
        )
        assert response.json() == {"success": True, "changed": True, "saveCount": 1}
        assert _lesson_state(client, lesson_id)["savesArray"] == ["u1"]

        response = client.post(
            f"/lessons/{lesson_id}/save", json={"userId": "u1", "action": "unsave"}
        )
        assert response.json() == {"success": True, "changed": True, "saveCount": 0}
        assert _lesson_state(client, lesson_id)["savesArray"] == []

    def test_like_and_save_are_independent(
        self, client: TestClient, db_session: Session
    ) -> None:
        lesson_id = create_test_lesson(db_session).id

        client.post(f"/lessons/{lesson_id}/like", json={"userId": "u1", "action": "like"})
        client.post(f"/lessons/{lesson_id}/save", json={"userId": "u2", "action": "save"})

        lesson = _lesson_state(client, lesson_id)
        assert lesson["likesArray"] == ["u1"]
        assert lesson["savesArray"] == ["u2"]
        assert (lesson["likes"], lesson["saveCount"]) == (1, 1)


def test_counters_track_membership_after_mixed_sequence(
    client: TestClient, db_session: Session
) -> None:
    lesson_id = create_test_lesson(db_session).id
    steps = [
        ("like", "u1", "like"),
        ("like", "u2", "like"),
        ("like", "u1", "like"),
        ("save", "u1", "save"),
        ("like", "u3", "unlike"),
        ("save", "u1", "unsave"),
        ("save", "u1", "unsave"),
        ("like", "u2", "unlike"),
        ("save", "u2", "save"),
    ]
    for kind, user, action in steps:
        response = client.post(
            f"/lessons/{lesson_id}/{kind}", json={"userId": user, "action": action}
        )
        assert response.status_code == status.HTTP_200_OK

    lesson = _lesson_state(client, lesson_id)
    assert lesson["likes"] == len(lesson["likesArray"]) == 1
    assert lesson["saveCount"] == len(lesson["savesArray"]) == 1
