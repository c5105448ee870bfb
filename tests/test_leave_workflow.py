import pytest
from employee_records.models.leave_event import LeaveEvent
from employee_records.models.leave_summary import LeaveSummary
from employee_records.schemas.leave import LeaveEventCreate
from employee_records.services.leave_service import LeaveService, counter_for


def _record(client, leave_type, date="2024-05-02", employee_id="E100", path="/api/leave-events"):
    return client.post(
        path,
        json={"employee_id": employee_id, "date": date, "leave_type": leave_type, "color": "#ff9800"},
    )


def _summary(client, employee_id="E100"):
    response = client.get(f"/api/leaves/summary/{employee_id}")
    assert response.status_code == 200
    return response.json()


def test_summary_without_events_is_zeroed(client):
    assert _summary(client, "E404") == {"employee_id": "E404", "pl": 0, "cl": 0, "sl": 0, "el": 0}


def test_recording_pl_increments_pl_case_insensitively(client):
    response = _record(client, "PL")
    assert response.status_code == 201
    assert response.json()["leave_type"] == "PL"
    assert _summary(client) == {"employee_id": "E100", "pl": 1, "cl": 0, "sl": 0, "el": 0}

    _record(client, "pl", date="2024-05-03")
    _record(client, "Sl", date="2024-05-04")
    assert _summary(client) == {"employee_id": "E100", "pl": 2, "cl": 0, "sl": 1, "el": 0}


def test_unknown_leave_type_leaves_counters_unchanged(client):
    _record(client, "cl")
    before = _summary(client)

    response = _record(client, "Comp-off", date="2024-06-01")
    assert response.status_code == 201
    assert _summary(client) == before


def test_both_route_prefixes_accepted(client):
    assert _record(client, "el", path="/leave-events").status_code == 201
    assert _record(client, "el", date="2024-05-09", path="/api/leave-events").status_code == 201
    assert _summary(client)["el"] == 2


def test_list_events_is_calendar_shaped(client):
    _record(client, "PL", date="2024-05-10")
    _record(client, "sl", date="2024-05-01")
    _record(client, "cl", employee_id="E999")

    response = client.get("/leave-events", params={"employee_id": "E100"})
    assert response.status_code == 200
    events = response.json()
    assert [e["start"] for e in events] == ["2024-05-01", "2024-05-10"]
    assert [e["title"] for e in events] == ["sl", "PL"]
    assert all(e["employee_id"] == "E100" for e in events)
    assert events[0]["color"] == "#ff9800"
    assert "date" not in events[0] and "leave_type" not in events[0]


def test_delete_leave_event_gives_day_back(client):
    event_id = _record(client, "PL").json()["id"]
    _record(client, "PL", date="2024-05-03")

    response = client.delete(f"/api/leave-events/{event_id}")
    assert response.status_code == 200
    assert response.json()["deleted"] == 1
    assert _summary(client)["pl"] == 1

    assert client.delete(f"/leave-events/{event_id}").json()["deleted"] == 0


def test_invalid_date_is_422(client):
    response = _record(client, "pl", date="not-a-date")
    assert response.status_code == 422


@pytest.mark.parametrize("label,expected", [
    ("PL", "pl"), (" cl ", "cl"), ("sL", "sl"), ("EL", "el"), ("vacation", None), (None, None),
])
def test_counter_for(label, expected):
    assert counter_for(label) == expected


def test_event_and_counter_roll_back_together(db_session, monkeypatch):
    service = LeaveService(db_session)
    service.record_leave_event(LeaveEventCreate(employee_id="E7", date="2024-01-02", leave_type="pl"))

    def broken_summary_row(employee_id):
        raise RuntimeError("summary table unavailable")

    monkeypatch.setattr(service, "_summary_row", broken_summary_row)
    with pytest.raises(RuntimeError):
        service.record_leave_event(LeaveEventCreate(employee_id="E7", date="2024-01-03", leave_type="pl"))

    assert db_session.query(LeaveEvent).filter(LeaveEvent.employee_id == "E7").count() == 1
    summary = db_session.query(LeaveSummary).filter(LeaveSummary.employee_id == "E7").one()
    assert summary.pl == 1
