from fastapi import status


def test_create_list_delete_event(client):
    response = client.post(
        "/events",
        json={"title": "Diwali", "date": "2024-11-01", "description": "Office closed", "event_type": "holiday"},
    )
    assert response.status_code == status.HTTP_201_CREATED
    event = response.json()
    assert event["id"]
    assert event["event_type"] == "holiday"

    listed = client.get("/events").json()
    assert any(e["id"] == event["id"] and e["title"] == "Diwali" for e in listed)

    response = client.delete(f"/events/{event['id']}")
    assert response.status_code == 200
    assert response.json()["deleted"] == 1
    assert all(e["id"] != event["id"] for e in client.get("/events").json())


def test_events_are_listed_by_date(client):
    client.post("/events", json={"title": "Later", "date": "2024-12-25"})
    client.post("/events", json={"title": "Sooner", "date": "2024-01-26"})

    titles = [e["title"] for e in client.get("/events").json()]
    assert titles.index("Sooner") < titles.index("Later")


def test_delete_unknown_event_is_noop(client):
    response = client.delete("/events/999999")
    assert response.status_code == 200
    assert response.json()["deleted"] == 0


def test_event_requires_title_and_date(client):
    assert client.post("/events", json={"title": "No date"}).status_code == 422
    assert client.post("/events", json={"date": "2024-01-01"}).status_code == 422
