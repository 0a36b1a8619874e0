"""HTTP API for creating, listing, reading, editing and deleting notes."""

from __future__ import annotations

import argparse
import os
import sqlite3
import uuid
from typing import Any, Mapping, Optional, Sequence

from flask import Flask, jsonify, request

from codedrills.fibapi import ALLOWED_ORIGIN
from codedrills.notestore import DuplicateTitle, NoteNotFound, NoteStore

HEALTH_MESSAGE = "Simple CRUD API with SQL storage"

_ALLOWED_METHODS = "GET, POST, PATCH, DELETE"
_ALLOWED_HEADERS = "authorization, accept, content-type"

_FIELD_TYPES = {"title": str, "content": str, "category": str, "published": bool}


def _fail(message: str, status: int):
    return jsonify({"status": "fail", "message": message}), status


def _error(exc: Exception):
    return jsonify({"status": "error", "message": repr(exc)}), 500


def _note_response(note) -> dict[str, Any]:
    return {"status": "success", "data": {"note": note.to_json()}}


def _body_fields(required: Sequence[str] = ()) -> Optional[dict[str, Any]]:
    """The JSON body's known fields, or None if it is not a valid note body."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return None
    fields: dict[str, Any] = {}
    for name, kind in _FIELD_TYPES.items():
        value = body.get(name)
        if value is None:
            if name in required:
                return None
            continue
        if not isinstance(value, kind):
            return None
        fields[name] = value
    return fields


def _filter_options(args: Mapping[str, str]) -> tuple[Optional[int], Optional[int]]:
    """Page and limit from the query; any unusable value drops both."""
    try:
        values = [None if args.get(key) is None else int(args[key]) for key in ("page", "limit")]
    except ValueError:
        return None, None
    if any(value is not None and value < 0 for value in values):
        return None, None
    return values[0], values[1]


def _parse_note_id(raw: str) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(raw)
    except ValueError:
        return None


def create_app(store: Optional[NoteStore] = None) -> Flask:
    """Build the application around ``store`` (an in-memory one by default)."""
    app = Flask(__name__)
    notes = store if store is not None else NoteStore()

    @app.get("/api/healthchecker")
    def health_checker():
        return jsonify({"status": "success", "message": HEALTH_MESSAGE})

    @app.get("/api/notes")
    def note_list():
        page, limit = _filter_options(request.args)
        try:
            found = notes.list(page=page, limit=limit)
        except (ValueError, sqlite3.Error):
            return jsonify(
                {
                    "status": "fail",
                    "message": "Something bad happened while fetching all note items",
                }
            ), 500
        return jsonify(
            {
                "status": "success",
                "results": len(found),
                "notes": [note.to_json() for note in found],
            }
        )

    @app.post("/api/notes")
    def create_note():
        fields = _body_fields(required=("title", "content"))
        if fields is None:
            return _fail("request body must hold a title and content", 422)
        try:
            note = notes.create(fields["title"], fields["content"], fields.get("category"))
        except DuplicateTitle as exc:
            return _fail(str(exc), 409)
        except sqlite3.Error as exc:
            return _error(exc)
        return jsonify(_note_response(note)), 201

    @app.get("/api/notes/<raw_id>")
    def get_note(raw_id: str):
        note_id = _parse_note_id(raw_id)
        if note_id is None:
            return _fail(f"invalid note id: {raw_id}", 400)
        try:
            note = notes.get(note_id)
        except NoteNotFound as exc:
            return _fail(str(exc), 404)
        return jsonify(_note_response(note))

    @app.patch("/api/notes/<raw_id>")
    def edit_note(raw_id: str):
        note_id = _parse_note_id(raw_id)
        if note_id is None:
            return _fail(f"invalid note id: {raw_id}", 400)
        fields = _body_fields()
        if fields is None:
            return _fail("request body is not a valid note update", 422)
        try:
            note = notes.update(note_id, **fields)
        except NoteNotFound as exc:
            return _fail(str(exc), 404)
        except (DuplicateTitle, sqlite3.Error) as exc:
            return _error(exc)
        return jsonify(_note_response(note))

    @app.delete("/api/notes/<raw_id>")
    def delete_note(raw_id: str):
        note_id = _parse_note_id(raw_id)
        if note_id is None:
            return _fail(f"invalid note id: {raw_id}", 400)
        try:
            notes.delete(note_id)
        except NoteNotFound as exc:
            return _fail(str(exc), 404)
        return "", 204

    @app.after_request
    def add_cors_headers(response):
        if request.headers.get("Origin") == ALLOWED_ORIGIN:
            response.headers["Access-Control-Allow-Origin"] = ALLOWED_ORIGIN
            response.headers["Access-Control-Allow-Credentials"] = "true"
            response.headers["Access-Control-Allow-Methods"] = _ALLOWED_METHODS
            response.headers["Access-Control-Allow-Headers"] = _ALLOWED_HEADERS
            response.headers.add("Vary", "Origin")
        return response

    return app


def _database_path(url: str) -> str:
    for prefix in ("sqlite:///", "sqlite://"):
        if url.startswith(prefix):
            return url[len(prefix):] or ":memory:"
    return url


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Connect to the database named by DATABASE_URL and serve the API."""
    parser = argparse.ArgumentParser(
        prog="codedrills-noteapi", description="Notes HTTP API."
    )
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--database", default=os.environ.get("DATABASE_URL"))
    args = parser.parse_args(argv)

    if not args.database:
        print("DATABASE_URL must be set")
        return 1
    try:
        store = NoteStore(_database_path(args.database))
    except sqlite3.Error as exc:
        print(f"🔥 Failed to connect to the database: {exc!r}")
        return 1
    print("✅Connection to the database is successful!")

    app = create_app(store)
    print("🚀 Server started successfully")
    try:
        app.run(host=args.host, port=args.port, threaded=True)
    finally:
        store.close()
    return 0