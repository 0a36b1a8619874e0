"""User records kept in a realtime JSON database reached over its REST interface."""

from __future__ import annotations

import argparse
import copy
from dataclasses import asdict, dataclass, replace
from typing import Any, Optional, Sequence
from urllib.parse import quote, urlsplit

import requests

_TIMEOUT = 30


@dataclass
class User:
    """A user's name, age and e-mail address."""

    name: str
    age: int
    email: str


def _user_from_json(data: Any) -> User:
    if not isinstance(data, dict):
        raise ValueError(f"not a user record: {data!r}")
    name, age, email = data.get("name"), data.get("age"), data.get("email")
    if not isinstance(name, str) or not isinstance(email, str):
        raise ValueError(f"user record lacks a name or email: {data!r}")
    if isinstance(age, bool) or not isinstance(age, int) or not 0 <= age < 2**32:
        raise ValueError(f"user record has an invalid age: {data!r}")
    return User(name=name, age=age, email=email)


class Firebase:
    """A location in a realtime JSON database, addressed as ``<url>/<path>.json``."""

    def __init__(self, url: str, session: Optional[requests.Session] = None) -> None:
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"not a database URL: {url!r}")
        self._base = url.rstrip("/")
        self._segments: tuple[str, ...] = ()
        self._session = session if session is not None else requests.Session()

    @property
    def url(self) -> str:
        """The REST endpoint for this location."""
        return f"{self._base}/{'/'.join(self._segments)}.json"

    def at(self, path: str) -> "Firebase":
        """The child location ``path`` below this one."""
        segment = str(path).strip("/")
        if not segment:
            raise ValueError("path must not be empty")
        child = copy.copy(self)
        child._segments = self._segments + (quote(segment, safe="/"),)
        return child

    def _send(self, method: str, data: Any = None) -> requests.Response:
        response = self._session.request(method, self.url, json=data, timeout=_TIMEOUT)
        response.raise_for_status()
        return response

    def set(self, data: Any) -> Any:
        """Push ``data`` as a new child; returns the server's reply."""
        return self._send("POST", data).json()

    def get(self) -> Any:
        """The JSON value stored here (None if nothing is)."""
        return self._send("GET").json()

    def update(self, data: Any) -> Any:
        """Merge ``data`` into the value stored here; returns what was written."""
        return self._send("PATCH", data).json()

    def delete(self) -> None:
        """Remove the value stored here."""
        self._send("DELETE")


def set_user(firebase: Firebase, user: User) -> str:
    """Store ``user`` under ``users`` and return the key it was given."""
    reply = firebase.at("users").set(asdict(user))
    if not isinstance(reply, dict) or not isinstance(reply.get("name"), str):
        raise ValueError(f"unexpected reply to a push: {reply!r}")
    return reply["name"]


def get_user(firebase: Firebase, user_id: str) -> User:
    """The user stored under ``users/<user_id>``."""
    return _user_from_json(firebase.at("users").at(user_id).get())


def get_users(firebase: Firebase) -> dict[str, User]:
    """Every stored user, by key."""
    data = firebase.at("users").get()
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"users is not a mapping: {data!r}")
    return {key: _user_from_json(value) for key, value in data.items()}


def update_user(firebase: Firebase, user_id: str, user: User) -> User:
    """Write ``user`` over ``users/<user_id>`` and return the stored result."""
    return _user_from_json(firebase.at("users").at(user_id).update(asdict(user)))


def delete_user(firebase: Firebase, user_id: str) -> None:
    """Remove the user stored under ``users/<user_id>``."""
    firebase.at("users").at(user_id).delete()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create, read, list, update and delete a sample user."""
    parser = argparse.ArgumentParser(
        prog="codedrills-userdb", description="User records in a JSON database."
    )
    parser.add_argument("url", help="base URL of the database")
    args = parser.parse_args(argv)

    firebase = Firebase(args.url)
    user = User(name="Jake", age=30, email="jake@example.com")

    key = set_user(firebase, user)
    print(key)

    user = get_user(firebase, key)
    print(user)

    print(get_users(firebase))

    user = replace(user, email="jake.thomas@example.com")
    updated = update_user(firebase, user.name, user)
    print(updated)

    delete_user(firebase, updated.name)
    return 0