"""
Shared fixtures for the Course Feedback test suite.
"""

import os

os.environ["ENVIRONMENT"] = "testing"

import pytest
from fastapi.testclient import TestClient

from course_feedback.core.dependencies import get_course_repository
from course_feedback.main import app
from course_feedback.repositories.memory_course_repository import MemoryCourseRepository


@pytest.fixture
def repository():
    """Empty in-memory store."""
    return MemoryCourseRepository()


@pytest.fixture
def seeded_repository():
    """Store holding the built-in sample catalog."""
    return MemoryCourseRepository(seed_sample_data=True)


@pytest.fixture
def client(repository):
    """HTTP client wired to the ``repository`` fixture."""
    app.dependency_overrides[get_course_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(seeded_repository):
    app.dependency_overrides[get_course_repository] = lambda: seeded_repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


