"""Tests for the error response bodies."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from category_tree.exception_handlers import register_exception_handlers
from category_tree.exceptions import (
    ConflictError,
    InvalidOperationError,
    NotFoundError,
    ServiceError,
)


class Payload(BaseModel):
    field1: int


@pytest.fixture
def error_client():
    """A bare app with the handlers installed and routes that fail on purpose."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/not-found")
    def not_found():
        raise NotFoundError("Entity not found")

    @app.get("/conflict")
    def conflict():
        raise ConflictError("Service entity exists")

    @app.get("/invalid")
    def invalid():
        raise InvalidOperationError("Cannot move category to itself")

    @app.get("/service")
    def service():
        raise ServiceError("Rejected")

    @app.get("/boom")
    def boom():
        raise RuntimeError("Something went wrong")

    @app.post("/validate")
    def validate(payload: Payload):
        return payload

    # The catch-all handler still re-raises inside the test client otherwise
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


def test_not_found(error_client):
    response = error_client.get("/not-found")
    assert response.status_code == 404
    assert response.json() == {
        "status": 404,
        "error": "Entity Not Found",
        "message": "Entity not found",
    }


def test_conflict(error_client):
    response = error_client.get("/conflict")
    assert response.status_code == 409
    assert response.json() == {
        "status": 409,
        "error": "Entity Already Exists",
        "message": "Service entity exists",
    }


def test_invalid_operation_is_a_conflict(error_client):
    response = error_client.get("/invalid")
    assert response.status_code == 409
    assert response.json()["error"] == "Invalid Operation"


def test_plain_service_error(error_client):
    response = error_client.get("/service")
    assert response.status_code == 409
    assert response.json()["error"] == "Conflict"


def test_unexpected_error_hides_details(error_client):
    response = error_client.get("/boom")
    assert response.status_code == 500
    data = response.json()
    assert data["status"] == 500
    assert data["error"] == "Internal Server Error"
    assert "Something went wrong" not in data["message"]


def test_validation_error(error_client):
    response = error_client.post("/validate", json={"field1": "not a number"})
    assert response.status_code == 400
    data = response.json()
    assert data["status"] == 400
    assert data["error"] == "Validation Error"
    assert data["message"] == "Invalid request data"
    assert set(data["errors"]) == {"field1"}


def test_missing_body(error_client):
    response = error_client.post("/validate")
    assert response.status_code == 400
    assert "body" in response.json()["errors"]
