from sqlalchemy import text

from church_records.extensions import db


CHURCH = {"name": "St. Mark", "address": "1 Main St", "phone1": "555-0100"}


def _create_member(client, church_id):
    return client.post(
        "/api/members",
        json={"name": "Jane Doe", "address": "2 Elm St", "phone1": "555-0111", "church_id": church_id},
    )


def test_church_crud(client):
    response = client.post("/api/churches", json=CHURCH)
    assert response.status_code == 201
    church = response.get_json()
    assert church["id"] == 1
    assert church["created_at"] == church["modified_at"]

    response = client.get("/api/churches/1")
    assert response.status_code == 200
    assert response.get_json()["name"] == "St. Mark"

    response = client.put("/api/churches/1", json=dict(CHURCH, email="office@stmark.org"))
    assert response.status_code == 200
    updated = response.get_json()
    assert updated["email"] == "office@stmark.org"
    assert updated["modified_at"] > church["modified_at"]
    assert updated["created_at"] == church["created_at"]

    assert client.get("/api/churches").get_json()[0]["id"] == 1
    assert client.get("/api/churches/count").get_json() == {"count": 1}

    assert client.delete("/api/churches/1").status_code == 200
    assert client.get("/api/churches/1").status_code == 404


def test_delete_church_with_members_is_conflict(client):
    client.post("/api/churches", json=CHURCH)
    assert _create_member(client, 1).status_code == 201

    response = client.delete("/api/churches/1")
    assert response.status_code == 409
    assert response.get_json() == {"error": "Cannot delete church with members"}

    assert client.delete("/api/members/1").status_code == 200
    assert client.delete("/api/churches/1").status_code == 200


def test_member_with_unknown_church_is_not_found(client):
    response = _create_member(client, 5)
    assert response.status_code == 404
    assert client.get("/api/members/count").get_json() == {"count": 0}


def test_members_filter_by_church(client):
    client.post("/api/churches", json=CHURCH)
    client.post("/api/churches", json=dict(CHURCH, name="Grace Chapel"))
    _create_member(client, 1)
    _create_member(client, 2)

    members = client.get("/api/members?church_id=2").get_json()
    assert [m["church_id"] for m in members] == [2]


def test_validation_error_lists_fields(client):
    response = client.post("/api/fund-types", json={"name": "ab"})
    assert response.status_code == 400
    body = response.get_json()
    assert body["fields"] == {"name": "Name must be at least 3 characters"}


def test_missing_body_is_bad_request(client):
    response = client.post("/api/churches", data="not json", content_type="text/plain")
    assert response.status_code == 400
    assert response.get_json() == {"error": "No data provided"}


def test_fund_routes(client):
    client.post("/api/churches", json=CHURCH)
    _create_member(client, 1)
    client.post("/api/fund-types", json={"name": "Tithe"})

    response = client.post(
        "/api/funds",
        json={"member_id": 1, "fund_type_id": 1, "amount": 50, "endow_date": "2025-06-01"},
    )
    assert response.status_code == 201
    assert response.get_json()["endow_date"] == "2025-06-01"

    assert len(client.get("/api/funds?member_id=1").get_json()) == 1
    assert client.get("/api/funds?fund_type_id=2").get_json() == []
    assert client.delete("/api/fund-types/1").status_code == 409
    assert client.delete("/api/members/1").status_code == 409


def test_greet(client):
    response = client.post("/api/greet", json={"name": "Jane"})
    assert response.get_json() == {"message": "Hello, Jane! You've been greeted from Python!"}

    response = client.get("/api/greet/Sam")
    assert response.get_json()["message"].startswith("Hello, Sam!")

    assert client.post("/api/greet", json={}).status_code == 400


def test_schema_status(client):
    assert client.get("/api/schema").get_json() == {
        "current_version": 1,
        "head_version": 1,
        "pending": [],
    }


def test_malformed_church_id_is_bad_request(client):
    client.post("/api/churches", json=CHURCH)

    response = _create_member(client, "²")
    assert response.status_code == 400
    assert response.get_json()["fields"] == {"church_id": "Church must be a positive integer"}


def test_non_integer_filter_is_bad_request(client):
    client.post("/api/churches", json=CHURCH)
    _create_member(client, 1)

    response = client.get("/api/members?church_id=abc")
    assert response.status_code == 400
    assert response.get_json()["fields"] == {"church_id": "Must be an integer"}

    assert client.get("/api/members/count?church_id=abc").status_code == 400
    assert client.get("/api/funds?member_id=1&fund_type_id=x").get_json()["fields"] == {
        "fund_type_id": "Must be an integer"
    }


def test_greet_requires_text_name(client):
    assert client.post("/api/greet", json={"name": None}).status_code == 400
    assert client.post("/api/greet", json={"name": 42}).status_code == 400
    assert client.post("/api/greet", json={"name": "  "}).status_code == 400


def test_storage_failure_is_server_error(app, client):
    db.session.execute(text("DROP TABLE fund"))
    db.session.commit()

    response = client.get("/api/funds")
    assert response.status_code == 500
    assert response.get_json()["error"].startswith("Storage failure")
