"""Unit tests for environment configuration.

Run with: pytest tests/test_env.py -v
"""

from recording_api.env import RecordingSettings


class TestRecordingSettings:
    """Tests for RecordingSettings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RECORDING_STORE_BACKEND", raising=False)
        settings = RecordingSettings(_env_file=None)

        assert settings.store_backend == "django"
        assert settings.enforce_session_exists is True
        assert settings.database()["OPTIONS"] == {"timeout": 5}

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("RECORDING_ENFORCE_SESSION_EXISTS", "false")
        monkeypatch.setenv("RECORDING_ALLOWED_HOSTS", "api.example.com, localhost")

        settings = RecordingSettings(_env_file=None)

        assert settings.enforce_session_exists is False
        assert settings.host_list == ["api.example.com", "localhost"]

    def test_postgresql_applies_query_timeout(self, monkeypatch):
        monkeypatch.setenv("RECORDING_DATABASE_ENGINE", "postgresql")
        monkeypatch.setenv("RECORDING_QUERY_TIMEOUT_SECONDS", "3")

        database = RecordingSettings(_env_file=None).database()

        assert database["ENGINE"] == "django.db.backends.postgresql"
        assert database["OPTIONS"]["connect_timeout"] == 3
        assert database["OPTIONS"]["options"] == "-c statement_timeout=3000"
