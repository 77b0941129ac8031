"""Tests for the ``moodpalette`` CLI entry point and application factory.

uvicorn and the Gemini client are patched so that no server is bound and no
network access occurs.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from moodpalette.api import main as main_module
from moodpalette.api.main import create_app


class TestMain:
    def test_exits_without_api_key(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)  # no .env file here

        with patch("uvicorn.run") as run, pytest.raises(SystemExit) as excinfo:
            main_module.main()

        assert excinfo.value.code == 1
        run.assert_not_called()

    def test_exits_on_unknown_log_level(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        clean_env.setenv("GEMINI_API_KEY", "k")
        clean_env.setenv("MOODPALETTE_LOG_LEVEL", "verbose")

        with patch("uvicorn.run") as run, pytest.raises(SystemExit) as excinfo:
            main_module.main()

        assert excinfo.value.code == 1
        run.assert_not_called()

    def test_runs_uvicorn_with_configured_address(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        clean_env.setenv("GEMINI_API_KEY", "k")
        clean_env.setenv("PORT", "9090")

        with patch("uvicorn.run") as run, patch.object(main_module, "GeminiModelClient") as client_cls:
            client_cls.from_config.return_value.model_name = "gemini-1.5-flash"
            main_module.main()

        run.assert_called_once()
        assert run.call_args.kwargs["host"] == "0.0.0.0"
        assert run.call_args.kwargs["port"] == 9090
        client_cls.from_config.assert_called_once()


class TestCreateApp:
    def test_builds_gemini_client_from_config(self, test_config):
        with patch.object(main_module, "GeminiModelClient") as client_cls:
            app = create_app(test_config)

        client_cls.from_config.assert_called_once_with(test_config)
        assert app.state.model_client is client_cls.from_config.return_value

    def test_uses_injected_client(self, test_config, fake_model_client):
        app = create_app(test_config, fake_model_client)
        assert app.state.model_client is fake_model_client

    def test_registers_palette_route(self, test_config, fake_model_client):
        app = create_app(test_config, fake_model_client)
        paths = {route.path for route in app.routes}
        assert "/api/generate-palette" in paths
        assert "/health" in paths
