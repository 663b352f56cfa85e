#!/usr/bin/env python3
"""Simple API smoke script to verify a running service end to end."""

import os
import tempfile
from datetime import datetime, timedelta, timezone

import requests

BASE_URL = os.getenv("BASE_URL", "http://localhost:5009/api/v1")


def check(response, expected_status, description):
    """Print the outcome of one request and assert on its status."""
    print(f"  {description}")
    print(f"    Status: {response.status_code}")
    print(f"    Response: {response.json()}")
    assert response.status_code == expected_status, (
        f"{description}: expected {expected_status}, got {response.status_code}"
    )
    print("    ✓ passed\n")
    return response.json()


def check_health():
    print("Testing health endpoint...")
    body = check(requests.get(f"{BASE_URL}/health"), 200, "Health check")
    print(f"  Database: {body['data']['database']}\n")


def check_courts():
    """Create a court, hit the duplicate path and the name filter."""
    print("Testing courts...")
    check(requests.get(f"{BASE_URL}/courts"), 200, "List courts")

    name = f"Smoke Court {datetime.now():%H%M%S}"
    body = check(
        requests.post(f"{BASE_URL}/courts", json={"name": name, "description": "Smoke test court"}),
        201,
        "Create court",
    )
    check(requests.post(f"{BASE_URL}/courts", json={"name": name}), 409, "Duplicate court name")
    check(requests.get(f"{BASE_URL}/courts", params={"name": name}), 200, "Filter courts by name")
    return body["data"]["id"]


def check_booking_hours(court_id):
    print("Testing booking hours...")
    start = datetime.now(timezone.utc).replace(microsecond=0)
    payload = {
        "courtId": court_id,
        "dateStart": start.isoformat(),
        "dateEnd": (start + timedelta(hours=1)).isoformat(),
    }
    body = check(requests.post(f"{BASE_URL}/booking-hours", json=payload), 201, "Create booking hour")
    check(requests.get(f"{BASE_URL}/booking-hours", params={"courtId": court_id}), 200, "List by court")
    return body["data"]["id"]


def check_clip_upload(booking_hour_id):
    print("Testing clip upload...")
    with tempfile.NamedTemporaryFile(suffix=".mp4") as tmp:
        tmp.write(b"\x00\x00\x00\x20ftypmp41\x00\x00\x00\x00mp41mdat")
        tmp.flush()
        tmp.seek(0)
        body = check(
            requests.post(
                f"{BASE_URL}/clips",
                files={"video": ("smoke.mp4", tmp)},
                data={"bookingHourId": str(booking_hour_id), "description": "Lapangan kiri camera"},
            ),
            201,
            "Upload clip",
        )
    print(f"  Stored as {body['data']['file_path']} ({body['data']['file_size']} bytes)\n")
    check(requests.get(f"{BASE_URL}/clips", params={"bookingHourId": booking_hour_id}), 200, "List clips")


def check_errors():
    print("Testing error handling...")
    check(requests.get(f"{BASE_URL}/courts", params={"name": "NonExistentCourt"}), 404, "Unknown court name")
    check(requests.post(f"{BASE_URL}/courts", json={"name": ""}), 400, "Empty court name")
    start = datetime.now(timezone.utc).isoformat()
    check(
        requests.post(f"{BASE_URL}/booking-hours", json={"courtId": 999999, "dateStart": start, "dateEnd": start}),
        400,
        "Booking hour on unknown court",
    )
    check(requests.get(f"{BASE_URL}/clips", params={"bookingHourId": 999999}), 200, "Clips of empty booking hour")


def main():
    """Run all checks."""
    print("=" * 60)
    print("COURT CLIP BACKEND - API SMOKE TEST")
    print("=" * 60)
    print()

    try:
        check_health()
        court_id = check_courts()
        booking_hour_id = check_booking_hours(court_id)
        check_clip_upload(booking_hour_id)
        check_errors()

        print("=" * 60)
        print("ALL CHECKS PASSED! ✓")
        print("=" * 60)
    except requests.exceptions.ConnectionError:
        print("\n❌ ERROR: Could not connect to the API")
        print("   Make sure the server is running:")
        print("   uvicorn app.main:app --port 5009")
        print()
    except AssertionError as e:
        print(f"\n❌ CHECK FAILED: {e}")
        print()


if __name__ == "__main__":
    main()
