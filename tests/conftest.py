"""Pytest configuration and fixtures."""

import logging
import random

import pytest
from fastapi.testclient import TestClient

from pcos_companion.config import Settings
from pcos_companion.store import Storage
from pcos_companion.web import create_app


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by the CLI or app so they don't outlive a test."""
    yield
    logger = logging.getLogger("pcos_companion")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def empty_storage():
    """A store with no seeded content."""
    return Storage(seed=False)


@pytest.fixture
def storage():
    """A seeded store with a fixed random source."""
    return Storage(rng=random.Random(42))


@pytest.fixture
def client(storage):
    """API client backed by the seeded store."""
    app = create_app(storage=storage, settings=Settings(log_level="WARNING"))
    return TestClient(app)


@pytest.fixture
def user_payload():
    """Registration data for a sample user."""
    return {
        "username": "maya",
        "email": "maya@example.com",
        "password": "s3cret-pass",
        "name": "Maya",
        "has_pcos": True,
        "pcos_type": "insulin_resistant",
    }


@pytest.fixture
def daily_log_payload():
    """A sample daily log for user 3."""
    return {
        "user_id": 3,
        "date": "2024-02-02",
        "mood": "happy",
        "energy": 7,
        "sleep_hours": 7.5,
        "exercised": True,
        "exercise_type": "yoga",
        "exercise_duration": 30,
        "diet": {"breakfast": "oats", "water_glasses": 6},
        "supplements": ["inositol", "vitamin d"],
        "symptoms": ["bloating"],
        "notes": "Good day",
    }
