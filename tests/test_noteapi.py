import uuid

import pytest

from codedrills.noteapi import HEALTH_MESSAGE, create_app, main
from codedrills.notestore import NoteStore


@pytest.fixture
def client():
    with NoteStore() as store:
        app = create_app(store)
        yield app.test_client()


def _create(client, title="Title", content="Body", **extra):
    return client.post("/api/notes", json={"title": title, "content": content, **extra})


def _edit(client, path, body):
    return client.open(path, method="PATCH", json=body)


def test_health_checker(client):
    response = client.get("/api/healthchecker")
    assert response.status_code == 200
    assert response.get_json() == {"status": "success", "message": HEALTH_MESSAGE}


def test_create_then_get(client):
    response = _create(client, "Plan", "write code", category="work")
    assert response.status_code == 201
    created = response.get_json()["data"]["note"]
    assert created["title"] == "Plan"
    assert created["category"] == "work"

    fetched = client.get(f"/api/notes/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.get_json() == {"status": "success", "data": {"note": created}}


def test_duplicate_title_conflicts(client):
    _create(client, "Same")
    response = _create(client, "Same")
    assert response.status_code == 409
    assert response.get_json() == {
        "status": "fail",
        "message": "Note with that title already exists",
    }


def test_create_requires_title(client):
    response = client.post("/api/notes", json={"content": "only body"})
    assert response.status_code == 422
    assert response.get_json()["status"] == "fail"


def test_list_reports_count(client):
    for i in range(3):
        _create(client, f"note {i}")
    body = client.get("/api/notes").get_json()
    assert body["status"] == "success"
    assert body["results"] == len(body["notes"]) == 3


def test_list_paging(client):
    for i in range(5):
        _create(client, f"note {i}")
    everything = client.get("/api/notes").get_json()["notes"]
    page = client.get("/api/notes?page=2&limit=2").get_json()["notes"]
    assert page == everything[2:4]


def test_list_with_unusable_query_uses_defaults(client):
    for i in range(12):
        _create(client, f"note {i}")
    body = client.get("/api/notes?page=abc&limit=2").get_json()
    assert body["results"] == 10


def test_list_page_zero_fails(client):
    response = client.get("/api/notes?page=0")
    assert response.status_code == 500
    assert response.get_json()["status"] == "fail"


def test_get_unknown_note(client):
    missing = uuid.uuid4()
    response = client.get(f"/api/notes/{missing}")
    assert response.status_code == 404
    assert response.get_json()["message"] == f"Note with ID: {missing} not found"


def test_bad_id_is_rejected(client):
    response = client.get("/api/notes/not-a-uuid")
    assert response.status_code == 400


def test_edit_updates_fields(client):
    created = _create(client, "Before", "body").get_json()["data"]["note"]
    response = _edit(
        client, f"/api/notes/{created['id']}", {"title": "After", "published": True}
    )
    assert response.status_code == 200
    note = response.get_json()["data"]["note"]
    assert note["title"] == "After"
    assert note["published"] is True
    assert note["content"] == created["content"]


def test_edit_rejects_wrong_types(client):
    created = _create(client).get_json()["data"]["note"]
    response = _edit(client, f"/api/notes/{created['id']}", {"published": "yes"})
    assert response.status_code == 422


def test_edit_unknown_note(client):
    response = _edit(client, f"/api/notes/{uuid.uuid4()}", {"title": "x"})
    assert response.status_code == 404


def test_delete_then_missing(client):
    created = _create(client).get_json()["data"]["note"]
    response = client.delete(f"/api/notes/{created['id']}")
    assert response.status_code == 204
    assert response.data == b""
    assert client.get(f"/api/notes/{created['id']}").status_code == 404
    assert client.delete(f"/api/notes/{created['id']}").status_code == 404


def test_cors_headers_for_allowed_origin(client):
    response = client.get(
        "/api/healthchecker", headers={"Origin": "http://localhost:3000"}
    )
    assert response.headers["Access-Control-Allow-Origin"] == "http://localhost:3000"
    other = client.get("/api/healthchecker", headers={"Origin": "http://evil.example.com"})
    assert "Access-Control-Allow-Origin" not in other.headers


def test_main_requires_database_url(monkeypatch, capsys):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert main([]) == 1
    assert "DATABASE_URL must be set" in capsys.readouterr().out


def test_main_reports_connection_failure(tmp_path, capsys):
    assert main(["--database", str(tmp_path)]) == 1
    assert "Failed to connect to the database" in capsys.readouterr().out