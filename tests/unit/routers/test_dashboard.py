"""
Unit tests for the dashboard endpoint.
"""

from datetime import date, timedelta

from tracker.enums import ProjectStatus
from tracker.services.project_service import ProjectService


def test_dashboard_empty_business(client, admin_headers):
    response = client.get("/dashboard", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["stats"] == {
        "total_projects": 0,
        "in_progress": 0,
        "completed": 0,
        "overdue": 0,
        "completion_rate": 0.0,
    }
    assert data["recent_projects"] == []
    assert data["is_fallback"] is False


def test_dashboard_stats(client, db_session, admin_headers, business, admin_user):
    yesterday = date.today() - timedelta(days=1)
    for name, status, target in [
        ("Late", ProjectStatus.IN_PROGRESS, yesterday),
        ("Shipped", ProjectStatus.COMPLETED, yesterday),
        ("Planned", ProjectStatus.TODO, None),
        ("Reviewing", ProjectStatus.REVIEW, date.today() + timedelta(days=30)),
    ]:
        ProjectService.create_project(
            db_session,
            {"project_name": name, "status": status, "target_completion_date": target},
            business.id,
            admin_user.id,
        )

    stats = client.get("/dashboard", headers=admin_headers).json()["stats"]

    assert stats["total_projects"] == 4
    assert stats["in_progress"] == 1
    assert stats["completed"] == 1
    assert stats["overdue"] == 1
    assert stats["completion_rate"] == 25.0


def test_dashboard_recent_projects_limited_to_five(client, db_session, admin_headers, business, admin_user):
    for index in range(7):
        ProjectService.create_project(
            db_session, {"project_name": f"Project {index}"}, business.id, admin_user.id
        )

    recent = client.get("/dashboard", headers=admin_headers).json()["recent_projects"]

    assert len(recent) == 5


def test_dashboard_excludes_other_business(client, db_session, admin_headers, other_business):
    ProjectService.create_project(db_session, {"project_name": "Foreign"}, other_business.id, "user_other")

    data = client.get("/dashboard", headers=admin_headers).json()

    assert data["stats"]["total_projects"] == 0


def test_dashboard_requires_authentication(client):
    assert client.get("/dashboard").status_code in (401, 403)
