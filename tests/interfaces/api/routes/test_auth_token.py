"""Tests for registration and the authentication token endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")


def test_register_and_login_by_username(client):
    response = client.post(
        "/users/",
        json={
            "username": "film_fan",
            "email": "Film.Fan@example.com",
            "password": "StrongPass123",
        },
    )
    assert response.status_code == 201
    created = response.json()
    assert created["display_name"] == "film_fan"
    assert created["email"] == "film.fan@example.com"

    token_response = client.post(
        "/auth/token",
        data={"username": "film_fan", "password": "StrongPass123"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert token_response.status_code == 200
    payload = token_response.json()
    assert payload["token_type"] == "bearer"

    me = client.get(
        "/users/me", headers={"Authorization": f"Bearer {payload['access_token']}"}
    )
    assert me.status_code == 200
    assert me.json()["username"] == "film_fan"
    assert me.json()["last_login"] is not None
    assert me.headers["X-Refreshed-Token"]


def test_duplicate_registration_is_rejected(client):
    body = {"username": "dup", "email": "dup@example.com", "password": "StrongPass123"}
    assert client.post("/users/", json=body).status_code == 201

    response = client.post("/users/", json={**body, "username": "other"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Email is already registered"


def test_wrong_password_is_unauthorized(client, register):
    register("reader")

    response = client.post(
        "/auth/token",
        data={"username": "reader@example.com", "password": "nope-nope"},
    )

    assert response.status_code == 401


def test_token_validation_returns_fresh_token(client, register):
    account = register("viewer")

    response = client.get("/auth/token/validate", headers=account["headers"])

    assert response.status_code == 200
    assert response.json()["access_token"]


def test_requests_without_token_are_rejected(client):
    assert client.get("/feed/").status_code == 401
