"""Tests for the Med Center HTTP API."""

import pytest
from fastapi.testclient import TestClient

from medcenter.config import Settings
from medcenter.core.scheduling import MedCenter, get_med_center
from medcenter.core.scheduling.errors import MedError
from medcenter.main import app, error_status


DATE = "2023-06-28"


@pytest.fixture
def center():
    """Fresh engine per test."""
    return MedCenter(Settings())


@pytest.fixture
def client(center):
    """Test client bound to the fresh engine."""
    app.dependency_overrides[get_med_center] = lambda: center
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def scheduled(client):
    """Cardiologist D1 scheduled 09:00-10:00 by 20 minutes."""
    client.post("/specialties", json={"specialties": ["Cardiology"]})
    client.post(
        "/doctors",
        json={"code": "D1", "name": "Mario", "surname": "Rossi", "specialty": "Cardiology"},
    )
    response = client.post(
        "/doctors/D1/schedules",
        json={"date": DATE, "start": "09:00", "end": "10:00", "duration": 20},
    )
    assert response.status_code == 201
    assert response.json() == {"slots": 3}
    return client


def _book(client, ssn: str, slot: str):
    return client.post(
        "/appointments",
        json={
            "ssn": ssn,
            "name": "Anna",
            "surname": "Bianchi",
            "doctor": "D1",
            "date": DATE,
            "slot": slot,
        },
    )


class TestHealth:
    """Test health endpoints."""

    def test_health(self, client):
        """Test basic health."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_live(self, client):
        """Test liveness reports uptime after startup."""
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json()["uptime_seconds"] is not None


class TestRegistryEndpoints:
    """Test specialties and doctors."""

    def test_specialties(self, client):
        """Test add and list."""
        response = client.post("/specialties", json={"specialties": ["Cardiology", "Cardiology"]})

        assert response.status_code == 204
        assert client.get("/specialties").json() == ["Cardiology"]

    def test_doctor(self, scheduled):
        """Test doctor lookup."""
        response = scheduled.get("/doctors/D1")

        assert response.json() == {"code": "D1", "name": "Mario", "surname": "Rossi"}
        assert scheduled.get("/specialties/Cardiology/doctors").json() == ["D1"]

    def test_unknown_doctor(self, client):
        """Test unknown doctor is 404."""
        assert client.get("/doctors/D9").status_code == 404

    def test_duplicate_doctor(self, scheduled):
        """Test duplicate doctor is 409."""
        response = scheduled.post(
            "/doctors",
            json={"code": "D1", "name": "X", "surname": "Y", "specialty": "Cardiology"},
        )

        assert response.status_code == 409
        assert response.json()["error"] == "DuplicateError"

    def test_unknown_specialty(self, client):
        """Test unknown specialty is 404."""
        response = client.post(
            "/doctors",
            json={"code": "D1", "name": "X", "surname": "Y", "specialty": "Surgery"},
        )

        assert response.status_code == 404


class TestAppointmentEndpoints:
    """Test booking, queue and completion."""

    def test_find_slots(self, scheduled):
        """Test slots query."""
        response = scheduled.get("/slots", params={"date": DATE, "specialty": "Cardiology"})

        assert response.json() == {"D1": ["09:00-09:20", "09:20-09:40", "09:40-10:00"]}

    def test_book_and_get(self, scheduled):
        """Test booking and lookup."""
        response = _book(scheduled, "S1", "09:20-09:40")

        assert response.status_code == 201
        assert response.json() == {"appointment_id": "A0"}

        data = scheduled.get("/appointments/A0").json()
        assert data["doctor"] == "D1"
        assert data["patient"] == "S1"
        assert data["time"] == "09:20"
        assert data["completed"] is False

    def test_book_invalid_slot(self, scheduled):
        """Test slot not on calendar is 404."""
        response = _book(scheduled, "S1", "09:00-09:30")

        assert response.status_code == 404
        assert response.json()["error"] == "InvalidSlotError"

    def test_book_malformed_slot(self, scheduled):
        """Test malformed range is 422."""
        response = _book(scheduled, "S1", "nine-ten")

        assert response.status_code == 422
        assert response.json()["error"] == "InvalidInputError"

    def test_book_taken_slot(self, scheduled):
        """Test second booking on a slot is 409."""
        _book(scheduled, "S1", "09:00-09:20")
        response = _book(scheduled, "S2", "09:00-09:20")

        assert response.status_code == 409
        assert response.json()["error"] == "SlotTakenError"

    def test_unknown_appointment(self, client):
        """Test unknown appointment is 404."""
        assert client.get("/appointments/A7").status_code == 404

    def test_daily_flow(self, scheduled):
        """Test accept, next and complete over HTTP."""
        _book(scheduled, "S1", "09:00-09:20")
        _book(scheduled, "S2", "09:20-09:40")

        response = scheduled.put("/current-date", json={"date": DATE})
        assert response.json() == {"date": DATE, "appointments": 2}

        assert scheduled.get("/doctors/D1/next").json() == {"appointment_id": None}

        assert scheduled.post("/patients/S2/accept").json() == {"ssn": "S2", "known": True}
        assert scheduled.post("/patients/S9/accept").json() == {"ssn": "S9", "known": False}
        assert scheduled.get("/doctors/D1/next").json() == {"appointment_id": "A1"}

        response = scheduled.post("/appointments/A1/complete", json={"doctor": "D1"})
        assert response.status_code == 204
        assert scheduled.get("/doctors/D1/next").json() == {"appointment_id": None}

        roster = scheduled.get("/doctors/D1/appointments", params={"date": DATE}).json()
        assert roster == ["09:00=S1", "09:20=S2"]

    def test_complete_not_accepted(self, scheduled):
        """Test completion before acceptance is 409."""
        _book(scheduled, "S1", "09:00-09:20")
        scheduled.put("/current-date", json={"date": DATE})

        response = scheduled.post("/appointments/A0/complete", json={"doctor": "D1"})

        assert response.status_code == 409
        assert response.json()["error"] == "NotAcceptedError"

    def test_malformed_date_override(self, scheduled):
        """Test a malformed date override is 422 on queue and completion."""
        _book(scheduled, "S1", "09:00-09:20")
        scheduled.post("/patients/S1/accept")
        scheduled.put("/current-date", json={"date": DATE})

        response = scheduled.get("/doctors/D1/next", params={"date": "not-a-date"})
        assert response.status_code == 422
        assert response.json()["error"] == "InvalidInputError"

        response = scheduled.post(
            "/appointments/A0/complete", json={"doctor": "D1", "date": "garbage"}
        )
        assert response.status_code == 422
        assert response.json()["error"] == "InvalidInputError"

    def test_impossible_schedule_date(self, scheduled):
        """Test a non-existent calendar date is 422."""
        response = scheduled.post(
            "/doctors/D1/schedules",
            json={"date": "2023-02-30", "start": "09:00", "end": "10:00", "duration": 20},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "InvalidInputError"


class TestStatsEndpoints:
    """Test statistics endpoints."""

    def test_show_rate(self, scheduled):
        """Test one of two accepted gives 0.5."""
        _book(scheduled, "S1", "09:00-09:20")
        _book(scheduled, "S2", "09:20-09:40")
        scheduled.post("/patients/S1/accept")

        response = scheduled.get("/stats/show-rate", params={"doctor": "D1", "date": DATE})

        assert response.json() == {"value": 0.5}

    def test_show_rate_no_appointments(self, scheduled):
        """Test empty day gives 0.0."""
        response = scheduled.get("/stats/show-rate", params={"doctor": "D1", "date": DATE})

        assert response.json() == {"value": 0.0}

    def test_completeness(self, scheduled):
        """Test completeness map and single doctor value."""
        _book(scheduled, "S1", "09:00-09:20")

        assert scheduled.get("/stats/completeness").json() == {"D1": pytest.approx(1 / 3)}
        assert scheduled.get("/stats/completeness/D1").json() == {"value": pytest.approx(1 / 3)}
        assert scheduled.get("/stats/completeness/D9").status_code == 404


class TestErrorStatus:
    """Test error family mapping."""

    def test_base_error_is_bad_request(self):
        """Test errors outside the families map to 400."""
        assert error_status(MedError("x")) == 400
