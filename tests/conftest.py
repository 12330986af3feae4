"""
Shared pytest fixtures for blog backend tests.
"""
import os
from unittest.mock import patch

import pytest

from app.infrastructure.db.mongo_post_repository import MongoPostRepository
from tests.fake_mongo import FakeMotorCollection


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test-blog-app",
        "LOG_LEVEL": "DEBUG",
        "SEED_SAMPLE_POSTS": "false",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def post_collection():
    """Empty in-process posts collection."""
    return FakeMotorCollection()


@pytest.fixture
def post_repository(post_collection):
    """MongoPostRepository over the in-process collection."""
    return MongoPostRepository(post_collection=post_collection)