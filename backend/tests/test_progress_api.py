from supercoach.core.constants import NOT_AVAILABLE


def log_workout(client, day):
    payload = {
        "date": day,
        "exercises": [{"exercise_id": "1", "sets": [{"reps": 20}]}],
    }
    r = client.post("/workouts/", json=payload)
    assert r.status_code == 200, r.text


def set_goal(client, **payload):
    payload.setdefault("description", "A goal")
    r = client.post("/goals/", json=payload)
    assert r.status_code == 200, r.text
    return r.json()


RAW_DOCUMENTS = {
    "reference_date": "2024-06-15",
    "months_back": 6,
    "workouts": [
        {"id": "a", "date": "2024-06-01"},
        {"id": "b", "date": "2024-06-02T07:00:00Z"},
        {"id": "c", "date": "garbage"},
        {"date": "2024-06-03"},
    ],
    "goals": [
        {"id": "g1", "targetMetric": "weight", "targetValue": 70, "currentValue": 75,
         "createdAt": "2024-01-01T00:00:00Z", "unit": "kg", "isAchieved": False},
        {"id": "g2", "targetMetric": "weight", "targetValue": 70, "currentValue": 73,
         "createdAt": {"seconds": 1709251200}},
        {"id": "g3", "targetMetric": "lift_pr", "targetValue": 100, "currentValue": 50},
        {"id": "g4", "targetMetric": "weight", "targetValue": 70, "currentValue": 72},
        {"id": "g5", "targetMetric": "nonsense", "targetValue": 5},
    ],
}


def test_summary_on_empty_database(client):
    r = client.get("/progress/summary", params={"reference_date": "2024-06-15"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["reference_date"] == "2024-06-15"
    assert body["total_workouts"] == 0
    assert body["longest_streak"] == 0
    assert [m["month"] for m in body["monthly_frequency"]] == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
    assert all(m["count"] == 0 for m in body["monthly_frequency"])
    assert body["goal_status"]["total"] == 0
    assert body["goal_status"]["slices"] == []
    trend = body["weight_trend"]
    assert trend["points"] == []
    assert trend["sufficient"] is False
    assert trend["current_weight"] is None
    assert trend["current_weight_label"] == NOT_AVAILABLE
    assert body["rejected"] == []


def test_summary_from_stored_records(client):
    for day in ["2024-06-01", "2024-06-02", "2024-06-03", "2024-06-05", "2024-06-05", "2024-04-10"]:
        log_workout(client, day)
    set_goal(client, metric_kind="weight", target_value=70, current_value=74, unit="kg")
    set_goal(client, metric_kind="weight", target_value=70, current_value=72, unit="kg")
    set_goal(client, metric_kind="lift_pr", target_value=100, current_value=80)
    set_goal(client, metric_kind="custom", target_value=1, is_achieved=True)

    r = client.get("/progress/summary", params={"reference_date": "2024-06-15", "months_back": 3})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["total_workouts"] == 6
    assert body["longest_streak"] == 3
    assert body["current_streak"] == 0
    assert [(m["month"], m["count"]) for m in body["monthly_frequency"]] == [
        ("Apr", 1),
        ("May", 0),
        ("Jun", 5),
    ]
    status = body["goal_status"]
    assert (status["completed"], status["in_progress"], status["pending"]) == (1, 1, 2)

    trend = body["weight_trend"]
    assert [p["weight"] for p in trend["points"]] == [74, 72]
    assert trend["sufficient"] is True
    assert trend["current_weight"] == 72
    assert trend["current_weight_label"] == "72 kg"


def test_summary_from_raw_documents(client):
    r = client.post("/progress/summary", json=RAW_DOCUMENTS)
    assert r.status_code == 200, r.text
    body = r.json()

    assert body["total_workouts"] == 3
    assert body["skipped_workouts"] == 1
    assert body["longest_streak"] == 2
    assert body["monthly_frequency"][-1] == {"month": "Jun", "count": 2}

    assert [(x["kind"], x["index"], x["id"]) for x in body["rejected"]] == [
        ("workout", 3, None),
        ("goal", 4, "g5"),
    ]

    trend = body["weight_trend"]
    assert trend["points"] == [
        {"date": "2024-01-01", "weight": 75},
        {"date": "2024-03-01", "weight": 73},
    ]
    assert trend["current_weight_label"] == "73 kg"
    assert body["skipped_weight_goals"] == 1

    assert body["goal_status"]["slices"] == [
        {"name": "In Progress", "value": 1},
        {"name": "Pending", "value": 3},
    ]


def test_summary_is_repeatable(client):
    first = client.post("/progress/summary", json=RAW_DOCUMENTS).json()
    second = client.post("/progress/summary", json=RAW_DOCUMENTS).json()
    assert first == second


def test_summary_with_non_string_unit_falls_back_to_default(client):
    payload = {
        "reference_date": "2024-06-15",
        "goals": [
            {"id": "g", "targetMetric": "weight", "targetValue": 70, "currentValue": 72,
             "createdAt": "2024-01-01", "unit": 5},
        ],
    }
    r = client.post("/progress/summary", json=payload)
    assert r.status_code == 200, r.text
    trend = r.json()["weight_trend"]
    assert trend["points"] == [{"date": "2024-01-01", "weight": 72}]
    assert trend["unit"] == "kg"
    assert trend["current_weight_label"] == "72 kg"
    assert r.json()["rejected"] == []


def test_months_back_must_not_be_negative(client):
    assert client.get("/progress/summary", params={"months_back": -1}).status_code == 422
    assert client.post("/progress/summary", json={"months_back": -1}).status_code == 422


def test_monthly_frequency_and_streak_endpoints(client):
    for day in ["2024-05-30", "2024-05-31", "2024-06-01"]:
        log_workout(client, day)

    r = client.get(
        "/progress/monthly_frequency", params={"reference_date": "2024-06-15", "months_back": 2}
    )
    assert r.json() == [{"month": "May", "count": 2}, {"month": "Jun", "count": 1}]

    r = client.get("/progress/streak", params={"reference_date": "2024-06-02"})
    assert r.json() == {"longest_streak": 3, "current_streak": 3, "skipped_workouts": 0}


def test_goal_and_weight_endpoints(client):
    set_goal(client, metric_kind="weight", target_value=70, current_value=80)

    status = client.get("/progress/goals").json()
    # reached the target but not marked achieved
    assert (status["completed"], status["in_progress"], status["pending"]) == (0, 0, 1)
    assert status["slices"] == [{"name": "Pending", "value": 1}]

    trend = client.get("/progress/weight_trend").json()
    assert len(trend["points"]) == 1
    assert trend["sufficient"] is False
    assert trend["current_weight_label"] == "80 kg"
