WEEK_FORM = [
    {"day": "monday", "enabled": True, "start_time": "09:00", "end_time": "18:00"},
    {"day": "tuesday", "enabled": True, "start_time": "09:00", "end_time": "18:00"},
    {"day": "wednesday", "enabled": False, "start_time": "", "end_time": ""},
    {"day": "thursday", "enabled": False, "start_time": "", "end_time": ""},
    {"day": "friday", "enabled": True, "start_time": "10:00", "end_time": "19:00"},
    {"day": "saturday", "enabled": False, "start_time": "", "end_time": ""},
    {"day": "sunday", "enabled": False, "start_time": "", "end_time": ""},
]


def _collaborator(client, name="Ana"):
    r = client.post("/collaborators", json={"name": name})
    assert r.status_code == 201
    return r.json()["id"]


def test_ping(client):
    assert client.get("/ping").json() == {"ok": True}


def test_collaborator_lifecycle(client):
    cid = _collaborator(client)
    r = client.get(f"/collaborators/{cid}")
    assert r.json()["name"] == "Ana"
    assert r.json()["schedule_version"] == 0

    r = client.get(f"/collaborators/{cid}/schedule")
    body = r.json()
    assert len(body["days"]) == 7
    assert not any(d["enabled"] for d in body["days"])
    assert body["summary"] == "No working hours configured"

    assert client.delete(f"/collaborators/{cid}").json() == {"ok": True}
    assert client.get(f"/collaborators/{cid}").status_code == 404


def test_put_schedule(client):
    cid = _collaborator(client)
    r = client.put(f"/collaborators/{cid}/schedule", json={"days": WEEK_FORM})
    assert r.status_code == 200
    body = r.json()
    assert body["version"] == 1
    assert body["summary"] == "Mon: 09:00-18:00 | Tue: 09:00-18:00 | Fri: 10:00-19:00"

    # optimistic check
    r = client.put(
        f"/collaborators/{cid}/schedule", json={"days": WEEK_FORM, "expected_version": 0}
    )
    assert r.status_code == 409


def test_put_schedule_reports_every_error(client):
    cid = _collaborator(client)
    form = [
        {"day": "monday", "enabled": True, "start_time": "18:00", "end_time": "09:00"},
        {"day": "tuesday", "enabled": True, "start_time": "", "end_time": ""},
    ]
    r = client.put(f"/collaborators/{cid}/schedule", json={"days": form})
    assert r.status_code == 422
    errors = r.json()["detail"]["errors"]
    assert set(errors) == {"monday", "tuesday"}

    r = client.put(f"/collaborators/{cid}/schedule", json={"days": []})
    assert r.status_code == 422
    assert "general" in r.json()["detail"]["errors"]


def test_put_schedule_rejects_bad_input(client):
    cid = _collaborator(client)
    dup = [WEEK_FORM[0], WEEK_FORM[0]]
    assert client.put(f"/collaborators/{cid}/schedule", json={"days": dup}).status_code == 422
    bad = [{"day": "monday", "enabled": True, "start_time": "9h", "end_time": "18:00"}]
    assert client.put(f"/collaborators/{cid}/schedule", json={"days": bad}).status_code == 422
    typo = [{"day": "mondya", "enabled": True, "start_time": "09:00", "end_time": "18:00"}]
    assert client.put(f"/collaborators/{cid}/schedule", json={"days": typo}).status_code == 422


def test_time_blocks_conflict(client):
    cid = _collaborator(client)
    url = f"/collaborators/{cid}/time-blocks"
    r = client.post(url, json={"block_date": "2024-01-01", "start_time": "12:00", "end_time": "13:00"})
    assert r.status_code == 201
    block_id = r.json()["id"]

    r = client.post(url, json={"block_date": "2024-01-01", "start_time": "12:30", "end_time": "13:30"})
    assert r.status_code == 409
    assert "12:00 to 13:00" in r.json()["detail"]

    r = client.post(url, json={"block_date": "2024-01-01", "start_time": "13:00", "end_time": "14:00"})
    assert r.status_code == 201

    r = client.post(url, json={"block_date": "2024-01-01", "start_time": "15:00", "end_time": "14:00"})
    assert r.status_code == 422

    assert len(client.get(url, params={"day": "2024-01-01"}).json()) == 2
    assert client.get(url, params={"day": "2024-01-02"}).json() == []

    assert client.delete(f"{url}/{block_id}").status_code == 200
    assert client.delete(f"{url}/{block_id}").status_code == 404


def test_full_day_blocks(client):
    cid = _collaborator(client)
    url = f"/collaborators/{cid}/blocks"
    r = client.post(url, json={"start_date": "2024-01-01", "end_date": "2024-01-03", "reason": "Vacation"})
    assert r.status_code == 201
    assert r.json()["reason"] == "Vacation"

    r = client.post(url, json={"start_date": "2024-01-03", "end_date": "2024-01-01", "reason": "x"})
    assert r.status_code == 422
    r = client.post(url, json={"start_date": "2024-01-03", "end_date": "2024-01-04", "reason": ""})
    assert r.status_code == 422
    r = client.post(url, json={"start_date": "2024-01-03", "end_date": "2024-01-04", "reason": "   "})
    assert r.status_code == 422
    r = client.post(url, json={"start_date": "2024-01-05", "end_date": "2024-01-05", "reason": "  Training  "})
    assert r.json()["reason"] == "Training"

    assert len(client.get(url, params={"day": "2024-01-02"}).json()) == 1
    assert client.get(url, params={"day": "2024-01-04"}).json() == []


def test_availability_endpoint(client):
    cid = _collaborator(client)
    client.put(f"/collaborators/{cid}/schedule", json={"days": WEEK_FORM})
    client.post(
        f"/collaborators/{cid}/time-blocks",
        json={"block_date": "2024-01-01", "start_time": "12:00", "end_time": "13:00"},
    )
    url = f"/collaborators/{cid}/availability"

    def reason(day, start, end):
        r = client.get(url, params={"day": day, "start": start, "end": end})
        assert r.status_code == 200
        return r.json()["reason"]

    assert reason("2024-01-01", "17:30", "18:00") == "Available"
    assert reason("2024-01-01", "18:00", "18:30") == "OutsideWeeklyWindow"
    assert reason("2024-01-01", "12:30", "13:30") == "TimeRangeBlocked"
    assert reason("2024-01-01", "13:00", "14:00") == "Available"
    assert reason("2024-01-07", "10:00", "11:00") == "WeeklyScheduleDisabled"

    client.post(
        f"/collaborators/{cid}/blocks",
        json={"start_date": "2024-01-01", "end_date": "2024-01-03", "reason": "Vacation"},
    )
    assert reason("2024-01-01", "10:00", "11:00") == "DayFullyBlocked"

    r = client.get(url, params={"day": "2024-01-01", "start": "10", "end": "11:00"})
    assert r.status_code == 422
    r = client.get(url, params={"day": "2024-01-01", "start": "11:00", "end": "10:00"})
    assert r.status_code == 422


def test_available_times_endpoint(client):
    cid = _collaborator(client)
    client.put(f"/collaborators/{cid}/schedule", json={"days": WEEK_FORM})
    r = client.get(
        f"/collaborators/{cid}/available-times",
        params={"day": "2024-01-05", "duration": 60, "interval": 60},
    )
    body = r.json()
    assert body["times"][0] == "10:00"
    assert body["times"][-1] == "18:00"

    # defaults from settings
    r = client.get(f"/collaborators/{cid}/available-times", params={"day": "2024-01-05"})
    assert r.json()["duration_minutes"] == 60
    assert r.json()["interval_minutes"] == 30


def test_unknown_collaborator(client):
    assert client.get("/collaborators/999/schedule").status_code == 404
    r = client.get("/collaborators/999/availability", params={"day": "2024-01-01", "start": "10:00", "end": "11:00"})
    assert r.status_code == 404


def test_time_block_reason_is_trimmed(client):
    cid = _collaborator(client)
    url = f"/collaborators/{cid}/time-blocks"
    r = client.post(
        url,
        json={"block_date": "2024-01-01", "start_time": "12:00", "end_time": "13:00", "reason": "   "},
    )
    assert r.status_code == 201
    assert r.json()["reason"] is None
    r = client.post(
        url,
        json={"block_date": "2024-01-01", "start_time": "14:00", "end_time": "15:00", "reason": " Lunch "},
    )
    assert r.json()["reason"] == "Lunch"


def test_toggle_schedule_day(client):
    cid = _collaborator(client)
    r = client.patch(f"/collaborators/{cid}/schedule/monday", json={"enabled": True})
    assert r.status_code == 200
    monday = next(d for d in r.json()["days"] if d["day"] == "monday")
    assert monday == {"day": "monday", "enabled": True, "start_time": "09:00", "end_time": "18:00"}
    assert r.json()["version"] == 1

    # the only working day cannot be switched off
    r = client.patch(f"/collaborators/{cid}/schedule/monday", json={"enabled": False})
    assert r.status_code == 422
    assert "general" in r.json()["detail"]["errors"]

    r = client.patch(
        f"/collaborators/{cid}/schedule/tuesday", json={"enabled": True, "expected_version": 0}
    )
    assert r.status_code == 409
    assert client.patch(f"/collaborators/{cid}/schedule/someday", json={"enabled": True}).status_code == 422


def test_inactive_collaborator_availability(client):
    r = client.post("/collaborators", json={"name": "Bia", "active": False})
    cid = r.json()["id"]
    client.put(f"/collaborators/{cid}/schedule", json={"days": WEEK_FORM})

    r = client.get(
        f"/collaborators/{cid}/availability",
        params={"day": "2024-01-01", "start": "10:00", "end": "11:00"},
    )
    assert r.status_code == 409
    assert "inactive" in r.json()["detail"]

    r = client.get(f"/collaborators/{cid}/available-times", params={"day": "2024-01-01"})
    assert r.status_code == 200
    assert r.json()["times"] == []
