"""HTTP contract for /tasks."""

import re
from unittest.mock import patch

DATE = re.compile(r"\d{2}-\d{2}-\d{4}")


def _store(client, **body):
    return client.post("/tasks/store", json=body)


def test_store_task(client, keywords):
    response = _store(client, title="Buy milk", keyword_ids=keywords[:2])

    assert response.status_code == 200
    body = response.json()
    assert body["code"] == 200
    assert body["message"] == "Task created successfully."
    data = body["data"]
    assert data["title"] == "Buy milk"
    assert data["is_done"] is False
    assert {k["id"] for k in data["keywords"]} == set(keywords[:2])
    assert DATE.fullmatch(data["created_at"])


def test_store_task_without_keywords(client):
    response = _store(client, title="Buy milk")

    assert response.status_code == 200
    assert response.json()["data"]["keywords"] == []


def test_store_task_requires_title(client):
    for body in ({}, {"title": ""}, {"title": "   "}, {"title": None}):
        response = client.post("/tasks/store", json=body)

        assert response.status_code == 422
        payload = response.json()
        assert payload["code"] == 422
        assert payload["message"]
        assert payload["errors"] == {"title": ["The field is required."]}

    assert client.get("/tasks/index").json()["data"] == []


def test_store_task_rejects_non_integer_keyword_ids(client):
    response = _store(client, title="Buy milk", keyword_ids=["abc"])

    assert response.status_code == 422
    assert "keyword_ids" in response.json()["errors"]


def test_store_task_unknown_keyword_is_all_or_nothing(client, keywords):
    response = _store(client, title="Buy milk", keyword_ids=[keywords[0], 999])

    assert response.status_code == 422
    assert response.json()["errors"] == {"keyword_ids": ["Unknown keyword ids: 999"]}
    assert client.get("/tasks/index").json()["data"] == []


def test_index_newest_first_with_keywords(client, keywords):
    for title in ("A", "B", "C"):
        _store(client, title=title, keyword_ids=[keywords[0]])

    response = client.get("/tasks/index")

    assert response.status_code == 200
    body = response.json()
    assert body["code"] == 200
    assert [t["title"] for t in body["data"]] == ["C", "B", "A"]
    assert all(t["keywords"][0]["id"] == keywords[0] for t in body["data"])


def test_toggle_round_trip(client):
    task_id = _store(client, title="Buy milk").json()["data"]["id"]

    response = client.put(f"/tasks/toggle/{task_id}")
    assert response.status_code == 200
    assert response.json() == {"code": 200, "message": "Task status changed successfully."}
    assert client.get("/tasks/index").json()["data"][0]["is_done"] is True

    client.put(f"/tasks/toggle/{task_id}")
    assert client.get("/tasks/index").json()["data"][0]["is_done"] is False


def test_toggle_missing_task_is_404(client):
    response = client.put("/tasks/toggle/999")

    assert response.status_code == 404
    assert response.json() == {"code": 404, "message": "Task 999 not found"}
    assert client.get("/tasks/index").json()["data"] == []


def test_toggle_non_integer_id(client):
    response = client.put("/tasks/toggle/abc")

    assert response.status_code == 422
    assert "task_id" in response.json()["errors"]


def test_unexpected_failure_is_500_without_details(client):
    with patch("taskboard.task.list_tasks", side_effect=RuntimeError("disk on fire")):
        response = client.get("/tasks/index")

    assert response.status_code == 500
    assert response.json() == {"code": 500, "message": "Some errors were found."}


def test_store_failure_rolls_back(client):
    with patch(
        "taskboard.task.operations._fetch_task", side_effect=RuntimeError("read failed")
    ):
        response = _store(client, title="Buy milk")

    assert response.status_code == 500
    assert client.get("/tasks/index").json()["data"] == []


def test_store_task_without_body(client):
    response = client.post("/tasks/store")

    assert response.status_code == 422
    assert response.json()["errors"] == {"title": ["The field is required."]}


def test_store_task_keyword_id_beyond_integer_range(client, keywords):
    response = _store(client, title="Buy milk", keyword_ids=[keywords[0], 2**63])

    assert response.status_code == 422
    assert response.json()["errors"] == {"keyword_ids": [f"Unknown keyword ids: {2**63}"]}
    assert client.get("/tasks/index").json()["data"] == []


def test_toggle_id_beyond_integer_range_is_404(client):
    response = client.put(f"/tasks/toggle/{2**63}")

    assert response.status_code == 404
    assert response.json() == {"code": 404, "message": f"Task {2**63} not found"}


def test_failure_outside_endpoint_guard_keeps_envelope(client):
    _store(client, title="Buy milk")

    with patch("taskboard.api.tasks.task_resource", side_effect=RuntimeError("bad row")):
        response = client.get("/tasks/index")

    assert response.status_code == 500
    assert response.json() == {"code": 500, "message": "Some errors were found."}


def test_unhandled_failure_is_logged_with_traceback(client, caplog):
    with patch("taskboard.api.tasks.task_resource", side_effect=RuntimeError("bad row")):
        _store(client, title="Buy milk")

    records = [r for r in caplog.records if r.name == "taskboard.api.responses"]
    assert records
    assert records[-1].exc_info is not None
    assert "bad row" in caplog.text
