import pytest
from sqlalchemy.exc import OperationalError

from app.services import auth_service
from app.services.user_repo import find_by_phone


def test_unknown_phone_registers(client, db_session):
    resp = client.post("/login", json={"phone": "+254722000000", "password": "mama-2024", "name": "Wanjiru"})

    assert resp.status_code == 201
    data = resp.json()
    assert data["is_new"] is True
    assert data["phone"] == "+254722000000"
    assert data["name"] == "Wanjiru"

    user = find_by_phone(db_session, "+254722000000")
    assert user.id == data["user_id"]
    assert user.password_hash != "mama-2024"


def test_known_phone_with_right_password(client):
    first = client.post("/login", json={"phone": "+254722000001", "password": "pw"}).json()

    resp = client.post("/login", json={"phone": "+254722000001", "password": "pw"})

    assert resp.status_code == 200
    assert resp.json() == {
        "user_id": first["user_id"],
        "name": None,
        "phone": "+254722000001",
        "is_new": False,
    }


def test_known_phone_with_wrong_password(client, db_session):
    client.post("/login", json={"phone": "+254722000002", "password": "right", "name": "Achieng"})
    stored_hash = find_by_phone(db_session, "+254722000002").password_hash

    resp = client.post("/login", json={"phone": "+254722000002", "password": "wrong", "name": "Other"})

    assert resp.status_code == 401
    assert "user_id" not in resp.json()
    user = find_by_phone(db_session, "+254722000002")
    assert user.password_hash == stored_hash
    assert user.name == "Achieng"


@pytest.mark.parametrize(
    "body",
    [{}, {"phone": "+254722000003"}, {"password": "pw"}, {"phone": "  ", "password": "pw"}],
)
def test_missing_fields(client, db_session, body):
    resp = client.post("/login", json=body)

    assert resp.status_code == 400
    assert find_by_phone(db_session, "+254722000003") is None


def test_no_body(client):
    resp = client.post("/login")

    assert resp.status_code == 400


def test_login_store_failure(client, monkeypatch):
    def boom(db, phone):
        raise OperationalError("SELECT users", {}, Exception("db down"))

    monkeypatch.setattr(auth_service, "find_by_phone", boom)

    resp = client.post("/login", json={"phone": "+254722000004", "password": "pw"})

    assert resp.status_code == 500
    assert resp.json() == {"detail": "user store unavailable"}
