from datetime import datetime, timezone

from app.models import BookingHour

API = "/api/v1/booking-hours"


def booking_payload(court_id, **overrides):
    payload = {
        "courtId": court_id,
        "dateStart": "2025-01-01T10:00:00Z",
        "dateEnd": "2025-01-01T11:00:00Z",
    }
    payload.update(overrides)
    return payload


def test_create_booking_hour_defaults_status(client, add_court, count_rows):
    court_id = add_court("Lapangan 1 Kiri")

    response = client.post(API, json=booking_payload(court_id))
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Booking hour created successfully"
    booking = body["data"]
    assert booking["courtId"] == court_id
    assert booking["status"] == "active"
    assert booking["dateStart"].startswith("2025-01-01T10:00:00")
    assert booking["dateEnd"].startswith("2025-01-01T11:00:00")
    assert count_rows(BookingHour, court_id=court_id) == 1


def test_create_booking_hour_keeps_explicit_status(client, add_court):
    court_id = add_court("Lapangan 1 Kiri")

    response = client.post(API, json=booking_payload(court_id, status="completed"))
    assert response.status_code == 201
    assert response.json()["data"]["status"] == "completed"


def test_unknown_court_is_validation_error(client, count_rows):
    response = client.post(API, json=booking_payload(999))
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Court not found or inactive", "data": None}
    assert count_rows(BookingHour) == 0


def test_inactive_court_is_validation_error(client, add_court, count_rows):
    court_id = add_court("Lapangan Lama", is_active=False)

    response = client.post(API, json=booking_payload(court_id))
    assert response.status_code == 400
    assert response.json()["message"] == "Court not found or inactive"
    assert count_rows(BookingHour) == 0


def test_missing_court_id(client):
    for court_id in (None, 0):
        payload = booking_payload(court_id)
        if court_id is None:
            del payload["courtId"]
        response = client.post(API, json=payload)
        assert response.status_code == 400
        assert response.json()["message"] == "Court ID is required"


def test_missing_or_zero_dates_rejected_before_court_lookup(client, count_rows):
    # Court 999 does not exist; the date check must fire first
    cases = [
        {"dateStart": None},
        {"dateEnd": None},
        {"dateStart": "0001-01-01T00:00:00Z"},
        {"dateEnd": "0001-01-01T00:00:00Z"},
    ]
    for overrides in cases:
        response = client.post(API, json=booking_payload(999, **overrides))
        assert response.status_code == 400, overrides
        assert response.json()["message"] == "Date start and date end are required"
    assert count_rows(BookingHour) == 0


def test_end_before_start_is_accepted(client, add_court):
    court_id = add_court("Lapangan 1 Kiri")

    response = client.post(
        API,
        json=booking_payload(court_id, dateStart="2025-01-01T12:00:00Z", dateEnd="2025-01-01T11:00:00Z"),
    )
    assert response.status_code == 201


def test_unparseable_date_is_invalid_payload(client, add_court):
    court_id = add_court("Lapangan 1 Kiri")

    response = client.post(API, json=booking_payload(court_id, dateStart="yesterday"))
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid JSON payload"


def test_list_booking_hours_newest_start_first(client, add_court, add_booking_hour):
    court_id = add_court("Lapangan 1 Kiri")
    early = add_booking_hour(court_id, datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc))
    late = add_booking_hour(court_id, datetime(2025, 1, 2, 8, 0, tzinfo=timezone.utc))
    middle = add_booking_hour(court_id, datetime(2025, 1, 1, 18, 0, tzinfo=timezone.utc))

    response = client.get(API)
    assert response.status_code == 200
    assert [b["id"] for b in response.json()["data"]] == [late, middle, early]


def test_list_booking_hours_filtered_by_court(client, add_court, add_booking_hour):
    court_a = add_court("Lapangan 1 Kiri")
    court_b = add_court("Lapangan 1 Kanan")
    booking_a = add_booking_hour(court_a)
    add_booking_hour(court_b)

    response = client.get(API, params={"courtId": court_a})
    assert response.status_code == 200
    data = response.json()["data"]
    assert [b["id"] for b in data] == [booking_a]
    assert data[0]["courtId"] == court_a


def test_list_booking_hours_empty_is_ok(client):
    response = client.get(API, params={"courtId": 42})
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Booking hours retrieved successfully",
        "data": [],
    }


def test_list_booking_hours_rejects_non_integer_filter(client):
    response = client.get(API, params={"courtId": "abc"})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid court ID"
