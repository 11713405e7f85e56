"""Unit tests for configuration, Supabase client, /health and logging."""

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient


class TestSettings:
    """Settings loading via pydantic-settings."""

    def test_settings_loads_required_fields(self) -> None:
        """Given env vars are set, settings loads without error."""
        env_overrides = {
            "SUPABASE_URL": "https://students.supabase.co",
            "SUPABASE_KEY": "test-key-123",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict("os.environ", env_overrides, clear=False):
            from app.core.config import Settings

            s = Settings()  # type: ignore[call-arg]
            assert s.SUPABASE_URL == "https://students.supabase.co"
            assert s.SUPABASE_KEY == "test-key-123"
            assert s.LOG_LEVEL == "DEBUG"

    def test_settings_defaults(self) -> None:
        """Given minimal env vars, defaults are applied correctly."""
        env_overrides = {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_KEY": "test-key",
        }
        with patch.dict("os.environ", env_overrides, clear=False):
            import os

            os.environ.pop("ALLOWED_ORIGINS", None)
            os.environ.pop("LOG_LEVEL", None)
            os.environ.pop("HOST", None)
            os.environ.pop("PORT", None)
            from app.core.config import Settings

            s = Settings(_env_file=None)  # type: ignore[call-arg]
            assert s.ALLOWED_ORIGINS == "*"
            assert s.LOG_LEVEL == "INFO"
            assert s.HOST == "0.0.0.0"
            assert s.PORT == 8000


class TestSupabaseClient:
    """Supabase singleton client."""

    def test_get_supabase_returns_client(self) -> None:
        """Given valid settings, get_supabase returns a Client."""
        mock_client = MagicMock()
        with patch("app.db.supabase.create_client", return_value=mock_client):
            import app.db.supabase as supa_mod

            supa_mod._client = None
            client = supa_mod.get_supabase()
            assert client is mock_client
            supa_mod._client = None

    def test_get_supabase_is_singleton(self) -> None:
        """Given multiple calls, get_supabase returns the same instance."""
        mock_client = MagicMock()
        with patch("app.db.supabase.create_client", return_value=mock_client) as mock_create:
            import app.db.supabase as supa_mod

            supa_mod._client = None
            first = supa_mod.get_supabase()
            second = supa_mod.get_supabase()
            assert first is second
            mock_create.assert_called_once()
            supa_mod._client = None


class TestHealthEndpoint:
    """GET /health reports database connectivity."""

    def test_health_connected(
        self, test_client: TestClient, mock_supabase_module: MagicMock
    ) -> None:
        """Given Supabase is reachable, /health returns database=connected."""
        response = test_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "database": "connected"}
        mock_supabase_module.table.assert_called_with("student")

    def test_health_disconnected(
        self, test_client: TestClient, mock_supabase_disconnected: MagicMock
    ) -> None:
        """Given Supabase is unreachable, /health returns 503 with database=disconnected."""
        response = test_client.get("/health")
        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "degraded"
        assert body["database"] == "disconnected"


class TestLogging:
    """Structured logging configuration."""

    def test_setup_logging_configures_root_logger(self) -> None:
        """Given setup_logging is called, root logger has one structured handler."""
        import logging

        from app.core.logging import setup_logging

        setup_logging()
        root = logging.getLogger()
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert handler.formatter is not None
        fmt = handler.formatter._fmt
        assert "%(levelname)" in fmt
        assert "%(asctime)" in fmt
        assert "%(name)" in fmt

    def test_setup_logging_level_override(self) -> None:
        import logging

        from app.core.logging import setup_logging

        setup_logging("warning")
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING
        setup_logging()


class TestRunEntryPoint:
    """run.py serves the app through uvicorn."""

    def test_main_starts_uvicorn_with_settings(self) -> None:
        import run
        from app.core.config import settings

        with patch("run.uvicorn.run") as mock_run:
            run.main()

        mock_run.assert_called_once_with(
            "app.main:app",
            host=settings.HOST,
            port=settings.PORT,
            log_level=settings.LOG_LEVEL.lower(),
        )
