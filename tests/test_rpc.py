from taskplanner.api.rpc.routes import OPERATIONS


def _call(client, name, payload=None):
    return client.post(f"/rpc/{name}", json=payload)


def test_every_named_operation_is_registered():
    assert {
        "getSections", "createSection", "renameSection", "deleteSection",
        "getTasks", "getTasksBySection", "createTask", "updateTask", "deleteTask",
        "getWeeklyPlan", "getAllWeeklyPlans", "createWeeklyPlan", "updateWeeklyPlan",
        "deleteWeeklyPlan", "duplicateWeeklyPlan",
    } <= set(OPERATIONS)


def test_unknown_operation(client):
    response = _call(client, "dropEverything")
    assert response.status_code == 404


def test_healthcheck(client):
    assert _call(client, "healthcheck").json()["result"]["status"] == "ok"


def test_sections_and_tasks(client):
    assert _call(client, "createSection", {"name": "Work"}).json() == {"result": {"name": "Work", "tasks": []}}
    assert _call(client, "createSection", {"name": "Work"}).status_code == 409

    task = _call(client, "createTask", {
        "section_name": "Work", "description": "Plan sprint", "priority": "Low",
        "due_date": None, "comments": "team",
    }).json()["result"]

    result = _call(client, "updateTask", {
        "section_name": "Work", "task_id": task["id"], "comments": None,
    }).json()["result"]
    assert result["comments"] is None
    assert result["priority"] == "Low"
    assert result["updated_at"] >= task["updated_at"]

    assert _call(client, "renameSection", {"old_name": "Work", "new_name": "Job"}).json() == {"result": True}
    assert _call(client, "getTasksBySection", {"name": "Work"}).json() == {"result": []}
    [moved] = _call(client, "getTasksBySection", {"name": "Job"}).json()["result"]
    assert moved["id"] == task["id"]

    assert len(_call(client, "getTasks").json()["result"]) == 1
    assert _call(client, "deleteTask", {"section_name": "Job", "task_id": task["id"]}).json() == {"result": True}
    assert _call(client, "getSections").json() == {"result": [{"name": "Job", "tasks": []}]}
    assert _call(client, "deleteSection", {"name": "Job"}).json() == {"result": True}
    assert _call(client, "deleteSection", {"name": "Job"}).status_code == 404


def test_invalid_input_is_422(client):
    response = _call(client, "createTask", {"section_name": "Work"})
    assert response.status_code == 422
    assert "Invalid input for createTask" in response.json()["detail"]


def test_weekly_plans(client):
    response = _call(client, "createWeeklyPlan", {
        "week_start": "2024-01-01T00:00:00.000Z",
        "content": "# Week of 01-Jan-2024\n\nNote line\n\n# Goals\n- A",
    })
    assert response.json()["result"]["week_start"] == "2024-01-01"

    assert _call(client, "getWeeklyPlan", {"week_start": "2024-01-08"}).json() == {"result": None}

    duplicated = _call(client, "duplicateWeeklyPlan", {
        "source_week_start": "2024-01-01", "target_week_start": "2024-01-08",
    }).json()["result"]
    assert "Week of 08-Jan-2024" in duplicated["content"]
    assert "Week of 01-Jan-2024" not in duplicated["content"]

    updated = _call(client, "updateWeeklyPlan", {
        "week_start": "2024-01-08", "short_week_note": "Second week",
    }).json()["result"]
    assert updated["short_week_note"] == "Second week"
    assert updated["content"] == duplicated["content"]

    plans = _call(client, "getAllWeeklyPlans").json()["result"]
    assert [p["week_start"] for p in plans] == ["2024-01-08", "2024-01-01"]

    assert _call(client, "deleteWeeklyPlan", {"week_start": "2024-01-08"}).json() == {"result": True}
    assert _call(client, "updateWeeklyPlan", {"week_start": "2024-01-08", "content": "x"}).status_code == 404


def test_template(client):
    content = _call(client, "getWeeklyPlanTemplate", {"week_start": "2024-01-15"}).json()["result"]
    assert content.endswith("# Notes & Reflections\n\n")
