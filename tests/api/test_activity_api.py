"""
Tests for the activity log endpoint.
"""

from datetime import timedelta

from juridico_app.models import ActivityLog

from conftest import NOW


def add_entry(db_session, user=None, **overrides):
    fields = {
        "user_id": user.id if user else None,
        "action": "CREATE_CASE",
        "resource_type": "CASE",
        "resource_id": "1",
        "description": "Criou processo 1",
        "created_at": NOW,
    }
    fields.update(overrides)
    entry = ActivityLog(**fields)
    db_session.add(entry)
    db_session.commit()
    return entry


class TestActivityLogAccess:
    def test_admin_only(self, client_for, editor):
        assert client_for(editor).get("/api/activity-logs").status_code == 403

    def test_unauthenticated(self, client):
        assert client.get("/api/activity-logs").status_code == 401


class TestActivityLogListing:
    def test_mutations_are_recorded_with_request_metadata(self, client_for, admin, case_factory):
        case = case_factory(status="novo")
        client = client_for(admin)
        client.patch(f"/api/cases/{case.id}/status", json={"status": "andamento"})

        response = client.get("/api/activity-logs")

        assert response.status_code == 200
        [entry] = response.json()
        assert entry["action"] == "UPDATE_STATUS"
        assert entry["resourceType"] == "CASE"
        assert entry["resourceId"] == str(case.id)
        assert entry["metadata"] == {"previousStatus": "novo", "newStatus": "andamento"}
        assert entry["ipAddress"] == "testclient"
        assert entry["actor"]["username"] == "admin"
        assert entry["actor"]["firstName"] == "Ana"

    def test_newest_first(self, client_for, admin, db_session):
        add_entry(db_session, admin, description="older", created_at=NOW - timedelta(hours=2))
        add_entry(db_session, admin, description="newer", created_at=NOW)

        response = client_for(admin).get("/api/activity-logs")

        assert [e["description"] for e in response.json()] == ["newer", "older"]

    def test_filters(self, client_for, admin, db_session):
        add_entry(db_session, admin, action="CREATE_CASE", description="Criou processo 1")
        add_entry(db_session, admin, action="CREATE_EMPLOYEE", resource_type="EMPLOYEE", description="Criou funcionário")
        add_entry(db_session, admin, action="UPDATE_USER", resource_type="USER", description="Atualizou usuário",
                  created_at=NOW - timedelta(days=1))
        client = client_for(admin)

        by_action = client.get("/api/activity-logs", params={"action": "CREATE_EMPLOYEE"}).json()
        processes = client.get("/api/activity-logs", params={"processOnly": "true"}).json()
        searched = client.get("/api/activity-logs", params={"search": "usuário"}).json()
        by_day = client.get("/api/activity-logs", params={"date": "2026-03-09"}).json()
        limited = client.get("/api/activity-logs", params={"limit": 1}).json()

        assert [e["action"] for e in by_action] == ["CREATE_EMPLOYEE"]
        assert [e["resourceType"] for e in processes] == ["CASE"]
        assert [e["action"] for e in searched] == ["UPDATE_USER"]
        assert [e["action"] for e in by_day] == ["UPDATE_USER"]
        assert len(limited) == 1

    def test_entries_without_actor(self, client_for, admin, db_session):
        add_entry(db_session, None, action="CREATE_USER", resource_type="USER")

        [entry] = client_for(admin).get("/api/activity-logs").json()

        assert entry["actor"]["id"] is None
        assert entry["actor"]["username"] is None
