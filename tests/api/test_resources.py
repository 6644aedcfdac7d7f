"""API resource tests."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest
from falcon.testing import TestClient

from taskhub.domain.entities import ScopeMember, Task
from taskhub.domain.value_objects import ScopeType

BASE = "/v1/workspaces/ws-1"


def _as(user_id: str) -> dict:
    return {"X-Test-User": user_id}


class TestPermissionCheck:
    """GET /permissions/check."""

    def test_requires_user(self, client: TestClient) -> None:
        result = client.simulate_get(f"{BASE}/permissions/check", params={"action": "VIEW_TASK"})
        assert result.status_code == 401

    def test_unknown_action(self, client: TestClient) -> None:
        result = client.simulate_get(
            f"{BASE}/permissions/check", params={"action": "FLY"}, headers=_as("alice")
        )
        assert result.status_code == 400

    def test_member_view_task(self, client: TestClient) -> None:
        result = client.simulate_get(
            f"{BASE}/permissions/check",
            params={"action": "view_task", "task_id": "t1"},
            headers=_as("alice"),
        )
        assert result.status_code == 200
        assert result.json == {"action": "VIEW_TASK", "allowed": True, "role": "member"}

    @pytest.mark.parametrize(("task_id", "allowed"), [("t2", True), ("t1", False)])
    def test_assignee_fallback(self, client: TestClient, task_id: str, allowed: bool) -> None:
        result = client.simulate_get(
            f"{BASE}/permissions/check",
            params={"action": "EDIT_TASK", "task_id": task_id},
            headers=_as("alice"),
        )
        assert result.json["allowed"] is allowed

    def test_task_from_other_workspace(self, client: TestClient) -> None:
        result = client.simulate_get(
            f"{BASE}/permissions/check",
            params={"action": "VIEW_TASK", "task_id": "foreign"},
            headers=_as("owner"),
        )
        assert result.status_code == 404

    def test_outsider_is_denied(self, client: TestClient) -> None:
        result = client.simulate_get(
            f"{BASE}/permissions/check",
            params={"action": "VIEW_WORKSPACE"},
            headers=_as("stranger"),
        )
        assert result.json == {"action": "VIEW_WORKSPACE", "allowed": False, "role": None}


class TestScopeMembers:
    """PUT/DELETE/GET /{scope}s/{scope_id}/members."""

    def test_override_restricts_assignee(self, client: TestClient) -> None:
        result = client.simulate_put(
            f"{BASE}/lists/L/members/alice",
            json={"permission_level": "view"},
            headers=_as("owner"),
        )
        assert result.status_code == 200
        assert result.json["permission_level"] == "VIEW"
        assert result.json["added_by"] == "owner"

        result = client.simulate_get(
            f"{BASE}/permissions/check",
            params={"action": "EDIT_TASK", "task_id": "t2"},
            headers=_as("alice"),
        )
        assert result.json["allowed"] is False

    def test_member_cannot_manage(self, client: TestClient) -> None:
        result = client.simulate_put(
            f"{BASE}/spaces/S/members/gus",
            json={"permission_level": "FULL"},
            headers=_as("alice"),
        )
        assert result.status_code == 403

    def test_invalid_body(self, client: TestClient) -> None:
        result = client.simulate_put(
            f"{BASE}/tables/T/members/alice", json={"level": "VIEW"}, headers=_as("owner")
        )
        assert result.status_code == 400
        result = client.simulate_put(
            f"{BASE}/tables/T/members/alice",
            json={"permission_level": "COMMENT"},
            headers=_as("owner"),
        )
        assert result.status_code == 400

    def test_list_and_revoke(self, client: TestClient) -> None:
        client.simulate_put(
            f"{BASE}/folders/F/members/alice",
            json={"permission_level": "EDIT"},
            headers=_as("owner"),
        )

        result = client.simulate_get(f"{BASE}/folders/F/members", headers=_as("owner"))
        assert result.status_code == 200
        assert [m["user_id"] for m in result.json["items"]] == ["alice"]

        result = client.simulate_delete(f"{BASE}/folders/F/members/alice", headers=_as("owner"))
        assert result.status_code == 204
        result = client.simulate_delete(f"{BASE}/folders/F/members/alice", headers=_as("owner"))
        assert result.status_code == 404

    def test_listing_hides_other_workspaces(self, client: TestClient, api_uow) -> None:
        api_uow.list_members.add(
            ScopeMember(
                id=uuid4(),
                scope=ScopeType.LIST,
                scope_id="L",
                user_id="someone",
                workspace_id="ws-2",
                permission_level="FULL",
                created_at=datetime.now(UTC),
            )
        )

        result = client.simulate_get(f"{BASE}/lists/L/members", headers=_as("owner"))
        assert result.json["items"] == []
        result = client.simulate_delete(f"{BASE}/lists/L/members/someone", headers=_as("owner"))
        assert result.status_code == 404

    def test_table_members_need_table_access(self, client: TestClient) -> None:
        result = client.simulate_get(f"{BASE}/tables/T/members", headers=_as("alice"))
        assert result.status_code == 403

    def test_table_access(self, client: TestClient) -> None:
        result = client.simulate_get(f"{BASE}/tables/T/access", headers=_as("alice"))
        assert result.json == {"table_id": "T", "allowed": False}
        client.simulate_put(
            f"{BASE}/tables/T/members/alice",
            json={"permission_level": "VIEW"},
            headers=_as("owner"),
        )
        result = client.simulate_get(f"{BASE}/tables/T/access", headers=_as("alice"))
        assert result.json["allowed"] is True


class TestTaskDependencies:
    """Dependency, transition and timeline routes."""

    def test_requires_user(self, client: TestClient) -> None:
        result = client.simulate_get(f"{BASE}/tasks/t1/dependencies")
        assert result.status_code == 401

    def test_guest_cannot_add(self, client: TestClient) -> None:
        result = client.simulate_post(
            f"{BASE}/tasks/t1/dependencies", json={"depends_on_id": "t2"}, headers=_as("gus")
        )
        assert result.status_code == 403

    def test_create_list_delete(self, client: TestClient) -> None:
        result = client.simulate_post(
            f"{BASE}/tasks/t2/dependencies",
            json={"depends_on_id": "t1", "type": "FS"},
            headers=_as("owner"),
        )
        assert result.status_code == 201
        dependency_id = result.json["id"]

        result = client.simulate_get(f"{BASE}/tasks/t2/dependencies", headers=_as("alice"))
        assert result.status_code == 200
        assert [d["depends_on_id"] for d in result.json["items"]] == ["t1"]

        result = client.simulate_get(
            f"{BASE}/tasks/t2/transition", params={"status": "inprogress"}, headers=_as("alice")
        )
        assert result.json["allowed"] is False
        assert result.json["blocking_tasks"][0]["task_id"] == "t1"

        result = client.simulate_post(
            f"{BASE}/tasks/t1/dependencies", json={"depends_on_id": "t2"}, headers=_as("owner")
        )
        assert result.status_code == 400

        result = client.simulate_delete(
            f"{BASE}/tasks/t2/dependencies/{dependency_id}", headers=_as("owner")
        )
        assert result.status_code == 204

    def test_invalid_payloads(self, client: TestClient) -> None:
        result = client.simulate_post(
            f"{BASE}/tasks/t2/dependencies",
            json={"depends_on_id": "t1", "type": "XX"},
            headers=_as("owner"),
        )
        assert result.status_code == 400
        result = client.simulate_delete(
            f"{BASE}/tasks/t2/dependencies/not-a-uuid", headers=_as("owner")
        )
        assert result.status_code == 400
        result = client.simulate_get(
            f"{BASE}/tasks/t2/transition", params={"status": "paused"}, headers=_as("owner")
        )
        assert result.status_code == 400

    def test_timeline(self, client: TestClient) -> None:
        result = client.simulate_post(
            f"{BASE}/tasks/t1/timeline",
            json={"start_date": "2026-03-02T09:00:00+00:00", "due_date": "2026-03-04T09:00:00+00:00"},
            headers=_as("owner"),
        )
        assert result.status_code == 200
        assert result.json["task_id"] == "t1"
        assert result.json["updated"] == 0

    def test_timeline_validation(self, client: TestClient) -> None:
        result = client.simulate_post(
            f"{BASE}/tasks/t1/timeline", json={"start_date": "soon"}, headers=_as("owner")
        )
        assert result.status_code == 400
        result = client.simulate_post(f"{BASE}/tasks/t1/timeline", json={}, headers=_as("owner"))
        assert result.status_code == 400
        result = client.simulate_post(
            f"{BASE}/tasks/t1/timeline",
            json={"due_date": "2026-03-04T09:00:00+00:00"},
            headers=_as("gus"),
        )
        assert result.status_code == 403

    def test_delete_requires_matching_task(self, client: TestClient) -> None:
        result = client.simulate_post(
            f"{BASE}/tasks/t2/dependencies", json={"depends_on_id": "t1"}, headers=_as("owner")
        )
        dependency_id = result.json["id"]

        result = client.simulate_delete(
            f"{BASE}/tasks/t1/dependencies/{dependency_id}", headers=_as("owner")
        )
        assert result.status_code == 404
        result = client.simulate_delete(
            f"/v1/workspaces/ws-2/tasks/t2/dependencies/{dependency_id}", headers=_as("owner")
        )
        assert result.status_code == 404

        result = client.simulate_get(f"{BASE}/tasks/t2/dependencies", headers=_as("owner"))
        assert [d["id"] for d in result.json["items"]] == [dependency_id]

    def test_timeline_of_foreign_task(self, client: TestClient) -> None:
        result = client.simulate_post(
            f"{BASE}/tasks/foreign/timeline",
            json={"due_date": "2026-03-04T09:00:00+00:00"},
            headers=_as("owner"),
        )
        assert result.status_code == 404


class TestGantt:
    """Timeline validation and space Gantt chart."""

    def test_validate_timeline(self, client: TestClient, api_uow) -> None:
        api_uow.tasks.add(
            Task(
                id="t3",
                workspace_id="ws-1",
                space_id="S",
                title="Ship",
                start_date=datetime(2026, 3, 1, tzinfo=UTC),
            )
        )
        api_uow.tasks.add(
            Task(
                id="t1",
                workspace_id="ws-1",
                space_id="S",
                list_id="L",
                title="Design",
                due_date=datetime(2026, 3, 5, tzinfo=UTC),
            )
        )
        client.simulate_post(
            f"{BASE}/tasks/t3/dependencies", json={"depends_on_id": "t1"}, headers=_as("owner")
        )

        result = client.simulate_get(f"{BASE}/tasks/t3/timeline/validate", headers=_as("alice"))
        assert result.status_code == 200
        assert result.json["valid"] is False
        assert result.json["errors"] == [
            'Task cannot start before predecessor "Design" finishes (FS dependency)'
        ]

        result = client.simulate_get(f"{BASE}/tasks/t2/timeline/validate", headers=_as("alice"))
        assert result.json == {"task_id": "t2", "valid": True, "errors": []}

    def test_validate_timeline_access(self, client: TestClient) -> None:
        result = client.simulate_get(f"{BASE}/tasks/t1/timeline/validate")
        assert result.status_code == 401
        result = client.simulate_get(f"{BASE}/tasks/foreign/timeline/validate", headers=_as("owner"))
        assert result.status_code == 404

    def test_space_gantt(self, client: TestClient) -> None:
        client.simulate_post(
            f"{BASE}/tasks/t2/dependencies",
            json={"depends_on_id": "t1", "type": "SS"},
            headers=_as("owner"),
        )

        result = client.simulate_get(f"{BASE}/spaces/S/gantt", headers=_as("gus"))
        assert result.status_code == 200
        items = {t["task_id"]: t for t in result.json["items"]}
        assert set(items) == {"t1", "t2"}
        assert items["t2"]["dependencies"] == [{"depends_on_id": "t1", "type": "SS"}]
        assert items["t1"]["duration_days"] == 0
        assert items["t1"]["progress"] == 0
        assert items["t1"]["status"] == "todo"

    def test_space_gantt_requires_membership(self, client: TestClient) -> None:
        result = client.simulate_get(f"{BASE}/spaces/S/gantt", headers=_as("stranger"))
        assert result.status_code == 403
