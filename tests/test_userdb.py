import json

import pytest
import requests
import responses

from codedrills.userdb import (
    Firebase,
    User,
    delete_user,
    get_user,
    get_users,
    set_user,
    update_user,
)

BASE = "https://db.example.com"


@pytest.fixture
def user():
    return User(name="Jake", age=30, email="jake@example.com")


def test_rejects_non_http_url():
    with pytest.raises(ValueError):
        Firebase("not a url")


def test_at_builds_nested_endpoint():
    firebase = Firebase(BASE + "/")
    assert firebase.url == BASE + "/.json"
    assert firebase.at("users").at("abc").url == BASE + "/users/abc.json"


def test_at_rejects_empty_path():
    with pytest.raises(ValueError):
        Firebase(BASE).at("/")


def test_set_user_posts_and_returns_key(user):
    with responses.RequestsMock() as mock:
        mock.add(responses.POST, BASE + "/users.json", json={"name": "-key1"})
        key = set_user(Firebase(BASE), user)
        sent = json.loads(mock.calls[0].request.body)
    assert key == "-key1"
    assert sent == {"name": "Jake", "age": 30, "email": "jake@example.com"}


def test_set_user_rejects_reply_without_name(user):
    with responses.RequestsMock() as mock:
        mock.add(responses.POST, BASE + "/users.json", json={"other": 1})
        with pytest.raises(ValueError):
            set_user(Firebase(BASE), user)


def test_get_user_reads_record(user):
    with responses.RequestsMock() as mock:
        mock.add(
            responses.GET,
            BASE + "/users/-key1.json",
            json={"name": user.name, "age": user.age, "email": user.email},
        )
        assert get_user(Firebase(BASE), "-key1") == user


def test_get_user_rejects_malformed_record():
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, BASE + "/users/x.json", json={"name": "Jake"})
        with pytest.raises(ValueError):
            get_user(Firebase(BASE), "x")


def test_get_users_maps_keys(user):
    record = {"name": user.name, "age": user.age, "email": user.email}
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, BASE + "/users.json", json={"a": record, "b": record})
        users = get_users(Firebase(BASE))
    assert users == {"a": user, "b": user}


def test_get_users_empty_database():
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, BASE + "/users.json", body="null")
        assert get_users(Firebase(BASE)) == {}


def test_update_user_patches(user):
    changed = User(name=user.name, age=user.age, email="new@example.com")
    with responses.RequestsMock() as mock:
        mock.add(
            responses.PATCH,
            BASE + "/users/Jake.json",
            json={"name": "Jake", "age": 30, "email": "new@example.com"},
        )
        result = update_user(Firebase(BASE), "Jake", changed)
        sent = json.loads(mock.calls[0].request.body)
    assert result == changed
    assert sent["email"] == "new@example.com"


def test_delete_user_sends_delete():
    with responses.RequestsMock() as mock:
        mock.add(responses.DELETE, BASE + "/users/Jake.json", body="null")
        delete_user(Firebase(BASE), "Jake")
        assert mock.calls[0].request.method == "DELETE"


def test_http_error_raises(user):
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, BASE + "/users/x.json", status=401, json={"error": "denied"})
        with pytest.raises(requests.HTTPError):
            get_user(Firebase(BASE), "x")