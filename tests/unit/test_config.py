"""
Unit tests for app.core.config
"""
import os
from unittest.mock import patch

from app.core.config import Settings


class TestSettings:
    """Tests for Settings"""

    def test_reads_environment(self, mock_env):
        settings = Settings()
        assert settings.mongo_uri == "mongodb://localhost:27017"
        assert settings.mongo_database_name == "test-blog-app"
        assert settings.log_level == "DEBUG"
        assert settings.seed_sample_posts is False

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        assert settings.mongo_uri == "mongodb://localhost:27017"
        assert settings.mongo_database_name == "blog-app"
        assert settings.port == 8080
        assert settings.cors_origins == ["*"]
        assert settings.seed_sample_posts is False

    def test_database_url_fallback(self):
        with patch.dict(os.environ, {"DATABASE_URL": "mongodb://db.internal/blog"}, clear=True):
            settings = Settings()
        assert settings.mongo_uri == "mongodb://db.internal/blog"

    def test_parses_lists_and_flags(self):
        env = {
            "CORS_ORIGINS": "http://localhost:3000, https://blog.example.com",
            "SEED_SAMPLE_POSTS": "true",
            "PORT": "9000",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()
        assert settings.cors_origins == ["http://localhost:3000", "https://blog.example.com"]
        assert settings.seed_sample_posts is True
        assert settings.port == 9000
