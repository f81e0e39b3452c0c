"""
Tests for bookings: public creation, admin-only listing and status changes.
"""

from __future__ import annotations

from barbershop.models.booking import Booking

BOOKING = {
    "client_name": "Тимур",
    "client_phone": "+998 90 123 45 67",
    "service": "Мужская стрижка",
    "master": "Ivan",
    "booking_date": "2024-03-10",
    "booking_time": "14:00",
}


def test_public_booking_is_pending(client) -> None:
    response = client.post("/api/bookings", json=BOOKING)
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "pending"
    assert body["client_email"] is None


def test_booking_requires_contact_and_slot(client, db_session) -> None:
    for field in ("client_name", "client_phone", "service", "booking_date", "booking_time"):
        payload = {key: value for key, value in BOOKING.items() if key != field}
        assert client.post("/api/bookings", json=payload).status_code == 400
    assert db_session.query(Booking).count() == 0


def test_listing_is_admin_only(client) -> None:
    client.post("/api/bookings", json=BOOKING)
    assert client.get("/api/bookings").status_code == 401


def test_listing_is_latest_slot_first(client, auth_headers) -> None:
    client.post("/api/bookings", json={**BOOKING, "booking_date": "2024-03-10", "booking_time": "10:00"})
    client.post("/api/bookings", json={**BOOKING, "booking_date": "2024-03-11", "booking_time": "09:00"})
    client.post("/api/bookings", json={**BOOKING, "booking_date": "2024-03-10", "booking_time": "18:30"})

    listed = client.get("/api/bookings", headers=auth_headers).json()
    slots = [(item["booking_date"], item["booking_time"]) for item in listed]
    assert slots == [("2024-03-11", "09:00"), ("2024-03-10", "18:30"), ("2024-03-10", "10:00")]


def test_update_status_keeps_notes(client, auth_headers) -> None:
    booking_id = client.post("/api/bookings", json={**BOOKING, "notes": "Без бороды"}).json()["id"]

    response = client.put(f"/api/bookings/{booking_id}", json={"status": "confirmed"}, headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "confirmed"
    assert body["notes"] == "Без бороды"


def test_unknown_status_is_rejected(client, auth_headers) -> None:
    booking_id = client.post("/api/bookings", json=BOOKING).json()["id"]
    response = client.put(f"/api/bookings/{booking_id}", json={"status": "lost"}, headers=auth_headers)
    assert response.status_code == 400


def test_update_requires_token(client) -> None:
    booking_id = client.post("/api/bookings", json=BOOKING).json()["id"]
    assert client.put(f"/api/bookings/{booking_id}", json={"status": "cancelled"}).status_code == 401


def test_delete_booking(client, auth_headers, db_session) -> None:
    booking_id = client.post("/api/bookings", json=BOOKING).json()["id"]
    assert client.delete(f"/api/bookings/{booking_id}", headers=auth_headers).status_code == 200
    assert db_session.query(Booking).count() == 0
    assert client.delete(f"/api/bookings/{booking_id}", headers=auth_headers).status_code == 404
