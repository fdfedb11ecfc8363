# File: /tests/test_plan_assignments_api.py | Version: 1.0 | Path: /tests/test_plan_assignments_api.py
from planner.core.results import ApiResponse
from planner.routers import plans as plans_router


def _users_url(plan_id, procedure_id) -> str:
    return f"/plans/{plan_id}/procedures/{procedure_id}/users"


def _user_ids(client, plan_id, procedure_id):
    r = client.get(_users_url(plan_id, procedure_id))
    assert r.status_code == 200, r.text
    return [u["id"] for u in r.json()]


def test_put_replaces_assignees(client, seeded):
    assert _user_ids(client, 1, 1) == [1, 2, 3]

    r = client.put(_users_url(1, 1), json={"user_ids": [2, 4]})
    assert r.status_code == 200, r.text
    assert r.json() == {"detail": "Users assigned"}

    assert _user_ids(client, 1, 1) == [2, 4]
    names = [u["name"] for u in client.get(_users_url(1, 1)).json()]
    assert names == ["User 2", "User 4"]


def test_post_command_body(client, seeded):
    r = client.post(
        "/plans/assign-users",
        json={"plan_id": 1, "procedure_id": 2, "user_ids": [1, 3]},
    )
    assert r.status_code == 200, r.text
    assert _user_ids(client, 1, 2) == [1, 3]


def test_bad_request_paths(client, seeded):
    r = client.put(_users_url(0, 1), json={"user_ids": [1]})
    assert r.status_code == 400, r.text
    assert r.json()["detail"] == "Invalid PlanId"

    r = client.put(_users_url(1, -1), json={"user_ids": [1]})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid ProcedureId"

    r = client.put(_users_url(1, 1), json={"user_ids": []})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid UserIds"

    # user_ids absent altogether
    r = client.post("/plans/assign-users", json={"plan_id": 1, "procedure_id": 1})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid UserIds"

    assert _user_ids(client, 1, 1) == [1, 2, 3]


def test_not_found_paths(client, seeded):
    r = client.put(_users_url(99, 1), json={"user_ids": [1]})
    assert r.status_code == 404
    assert r.json()["detail"] == "PlanId: 99 not found"

    r = client.put(_users_url(1, 3), json={"user_ids": [1]})
    assert r.status_code == 404
    assert r.json()["detail"] == "ProcedureId: 3 not found"

    r = client.put(_users_url(1, 1), json={"user_ids": [50, 51]})
    assert r.status_code == 404
    assert r.json()["detail"] == "UserIds: 50, 51 not found"

    r = client.get(_users_url(2, 1))
    assert r.status_code == 404


def test_partial_match_over_http(client, seeded):
    r = client.put(_users_url(1, 1), json={"user_ids": [4, 404]})
    assert r.status_code == 200, r.text
    assert _user_ids(client, 1, 1) == [4]


def test_unexpected_failure_is_opaque_500(client, seeded, monkeypatch):
    def failing(db, **kwargs):
        return ApiResponse.fail(RuntimeError("secret connection string"))

    monkeypatch.setattr(plans_router, "assign_users_to_plan_procedure", failing)

    r = client.put(_users_url(1, 1), json={"user_ids": [1]})
    assert r.status_code == 500
    assert "secret" not in r.text


def test_non_integer_ids_are_rejected_by_schema(client, seeded):
    r = client.put(_users_url(1, 1), json={"user_ids": ["abc"]})
    assert r.status_code == 422


def test_out_of_range_ids_are_bad_requests(client, seeded):
    huge = 2**70

    r = client.put(_users_url(huge, 1), json={"user_ids": [1]})
    assert r.status_code == 400, r.text
    assert r.json()["detail"] == "Invalid PlanId"

    r = client.put(_users_url(1, huge), json={"user_ids": [1]})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid ProcedureId"

    r = client.put(_users_url(1, 1), json={"user_ids": [huge]})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid UserIds"

    r = client.post(
        "/plans/assign-users", json={"plan_id": huge, "procedure_id": 1, "user_ids": [1]}
    )
    assert r.status_code == 400

    assert client.get(_users_url(huge, 1)).status_code == 422
    assert client.get(_users_url(1, huge)).status_code == 422
    assert _user_ids(client, 1, 1) == [1, 2, 3]
