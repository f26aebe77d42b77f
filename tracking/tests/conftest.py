"""
Shared fixtures for tracking tests.

Run:  python -m pytest tracking/tests -v
"""

import pytest
from django.db import DatabaseError
from rest_framework.test import APIClient

from tracking.services import TrackingService


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def service():
    return TrackingService(site_url="https://track.example.com")


@pytest.fixture
def register(api_client):
    """POST /track/register and return the issued tracking id."""
    def _register(email, name=None, campaign=None):
        payload = {"email": email}
        if name is not None:
            payload["name"] = name
        if campaign is not None:
            payload["campaign"] = campaign
        response = api_client.post("/track/register", payload, format="json")
        assert response.status_code == 201, response.content
        return response.data["trackingId"]
    return _register


def raise_database_error(*args, **kwargs):
    """Stand-in for a repository call whose connection dropped."""
    raise DatabaseError("connection lost")
