# mypy: ignore-errors
"""Tests for health and root endpoints."""

from fastapi import status

from tiredd_core.core.settings import settings


def test_health_check(client) -> None:
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_root(client) -> None:
    response = client.get("/")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == settings.app_name
