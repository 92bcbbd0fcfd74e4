"""API tests for goal and review endpoints.

Tests cover:
- Scoped goal and review listing
- Goal create / update / delete role and scope rules
- Review create, update, lock / unlock (409 while locked) and delete
- 400 for goals and reviews pointing at missing employees or cycles
- Review listings by cycle, reviewee and reviewer
"""

import pytest

from tests.api.conftest import auth_headers
from tests.conftest import EMPLOYEE_USER, HR_USER, MANAGER_USER


@pytest.mark.api
class TestGoalEndpoints:
    def test_list_goals_scoped(self, client):
        response = client.get("/api/v1/goals", headers=auth_headers(MANAGER_USER))

        assert response.status_code == 200
        assert [g["id"] for g in response.json()["goals"]] == [1, 2, 4]

    def test_get_goal_outside_scope(self, client):
        response = client.get("/api/v1/goals/3", headers=auth_headers(EMPLOYEE_USER))

        assert response.status_code == 403

    def test_get_missing_goal(self, client):
        response = client.get("/api/v1/goals/42", headers=auth_headers(EMPLOYEE_USER))

        assert response.status_code == 404

    def test_employee_cannot_create_goal(self, client):
        response = client.post(
            "/api/v1/goals",
            json={"employee_id": 1, "title": "Own goal"},
            headers=auth_headers(EMPLOYEE_USER),
        )

        assert response.status_code == 403

    def test_manager_creates_goal_for_report(self, client):
        response = client.post(
            "/api/v1/goals",
            json={"employee_id": 4, "title": "Ship v2", "progress": 0},
            headers=auth_headers(MANAGER_USER),
        )

        assert response.status_code == 201
        assert response.json()["employee_id"] == 4
        assert response.json()["status"] == "Not Started"

    def test_manager_cannot_create_for_outsider(self, client):
        response = client.post(
            "/api/v1/goals",
            json={"employee_id": 3, "title": "Nope"},
            headers=auth_headers(MANAGER_USER),
        )

        assert response.status_code == 403

    def test_goal_for_unknown_employee_is_400(self, client):
        response = client.post(
            "/api/v1/goals",
            json={"employee_id": 99, "title": "Ghost"},
            headers=auth_headers(HR_USER),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "employee_id"

    def test_end_before_start_is_422(self, client):
        response = client.post(
            "/api/v1/goals",
            json={
                "employee_id": 4,
                "title": "Backwards",
                "start_date": "2024-06-01",
                "end_date": "2024-01-01",
            },
            headers=auth_headers(MANAGER_USER),
        )

        assert response.status_code == 422

    def test_employee_updates_own_goal(self, client):
        response = client.put(
            "/api/v1/goals/1",
            json={"employee_id": 1, "title": "Ship onboarding flow", "progress": 75},
            headers=auth_headers(EMPLOYEE_USER),
        )

        assert response.status_code == 200
        assert response.json()["progress"] == 75

    def test_progress_out_of_range_is_422(self, client):
        response = client.put(
            "/api/v1/goals/1",
            json={"employee_id": 1, "title": "Ship onboarding flow", "progress": 150},
            headers=auth_headers(EMPLOYEE_USER),
        )

        assert response.status_code == 422

    def test_only_hr_admin_deletes_goal(self, client):
        denied = client.delete("/api/v1/goals/2", headers=auth_headers(MANAGER_USER))
        allowed = client.delete("/api/v1/goals/2", headers=auth_headers(HR_USER))

        assert denied.status_code == 403
        assert allowed.status_code == 204


@pytest.mark.api
class TestReviewEndpoints:
    def test_list_reviews_scoped(self, client):
        employee = client.get("/api/v1/reviews", headers=auth_headers(EMPLOYEE_USER))
        hr_admin = client.get("/api/v1/reviews", headers=auth_headers(HR_USER))

        assert [r["id"] for r in employee.json()["reviews"]] == [1, 5]
        assert hr_admin.json()["total_count"] == 5

    def test_get_unassigned_review_forbidden(self, client):
        response = client.get("/api/v1/reviews/4", headers=auth_headers(MANAGER_USER))

        assert response.status_code == 403

    def test_employee_cannot_create_review(self, client):
        response = client.post(
            "/api/v1/reviews",
            json={"cycle_id": 2, "reviewer_id": 1, "reviewee_id": 1},
            headers=auth_headers(EMPLOYEE_USER),
        )

        assert response.status_code == 403

    def test_manager_creates_review(self, client):
        response = client.post(
            "/api/v1/reviews",
            json={"cycle_id": 2, "reviewer_id": 2, "reviewee_id": 4, "rating": 4},
            headers=auth_headers(MANAGER_USER),
        )

        assert response.status_code == 201
        assert response.json()["is_locked"] is False

    def test_review_in_unknown_cycle_is_400(self, client):
        response = client.post(
            "/api/v1/reviews",
            json={"cycle_id": 9, "reviewer_id": 2, "reviewee_id": 4},
            headers=auth_headers(MANAGER_USER),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "cycle_id"

    def test_review_of_unknown_reviewee_is_400(self, client):
        response = client.post(
            "/api/v1/reviews",
            json={"cycle_id": 2, "reviewer_id": 3, "reviewee_id": 99},
            headers=auth_headers(HR_USER),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "reviewee_id"

    def test_reviews_by_cycle_scoped(self, client):
        response = client.get("/api/v1/reviews/cycle/1", headers=auth_headers(EMPLOYEE_USER))

        assert response.status_code == 200
        assert [r["id"] for r in response.json()["reviews"]] == [1, 5]

    def test_reviews_by_unknown_cycle_is_404(self, client):
        response = client.get("/api/v1/reviews/cycle/9", headers=auth_headers(HR_USER))

        assert response.status_code == 404
        assert response.json()["detail"] == "Review cycle not found"

    def test_reviews_by_reviewee_and_reviewer(self, client):
        headers = auth_headers(MANAGER_USER)

        about = client.get("/api/v1/reviews/reviewee/4", headers=headers)
        written = client.get("/api/v1/reviews/reviewer/2", headers=headers)

        assert [r["id"] for r in about.json()["reviews"]] == [2]
        assert [r["id"] for r in written.json()["reviews"]] == [1, 2]

    def test_reviews_by_reviewee_outside_scope_is_empty(self, client):
        response = client.get("/api/v1/reviews/reviewee/2", headers=auth_headers(EMPLOYEE_USER))

        assert response.status_code == 200
        assert response.json()["total_count"] == 0

    def test_rating_out_of_range_is_422(self, client):
        response = client.post(
            "/api/v1/reviews",
            json={"cycle_id": 2, "reviewer_id": 2, "reviewee_id": 4, "rating": 6},
            headers=auth_headers(MANAGER_USER),
        )

        assert response.status_code == 422

    def test_update_locked_review_is_409(self, client):
        response = client.put(
            "/api/v1/reviews/5",
            json={"cycle_id": 1, "reviewer_id": 3, "reviewee_id": 1, "rating": 2},
            headers=auth_headers(HR_USER),
        )

        assert response.status_code == 409
        assert response.json()["title"] == "Resource Conflict"

    def test_lock_then_unlock(self, client):
        headers = auth_headers(MANAGER_USER)
        body = {"cycle_id": 1, "reviewer_id": 2, "reviewee_id": 1, "rating": 5}

        locked = client.patch("/api/v1/reviews/1/lock", headers=headers)
        blocked = client.put("/api/v1/reviews/1", json=body, headers=headers)
        unlocked = client.patch("/api/v1/reviews/1/unlock", headers=headers)
        updated = client.put("/api/v1/reviews/1", json=body, headers=headers)

        assert locked.json()["is_locked"] is True
        assert blocked.status_code == 409
        assert unlocked.json()["is_locked"] is False
        assert updated.status_code == 200
        assert updated.json()["rating"] == 5

    def test_employee_cannot_lock(self, client):
        response = client.patch("/api/v1/reviews/1/lock", headers=auth_headers(EMPLOYEE_USER))

        assert response.status_code == 403

    def test_lock_missing_review_is_404(self, client):
        response = client.patch("/api/v1/reviews/99/lock", headers=auth_headers(EMPLOYEE_USER))

        assert response.status_code == 404

    def test_delete_review(self, client):
        denied = client.delete("/api/v1/reviews/1", headers=auth_headers(MANAGER_USER))
        allowed = client.delete("/api/v1/reviews/1", headers=auth_headers(HR_USER))

        assert denied.status_code == 403
        assert allowed.status_code == 204
