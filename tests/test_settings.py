"""
Unit tests for environment-driven settings.

The settings module is reloaded under a patched environment; the
active Django settings object is not touched.
"""

import importlib
import os
from unittest.mock import patch

import virtual_patient.settings as settings_module
from api.responses import server_error_response


def _reload_with(env: dict):
    with patch.dict(os.environ, env, clear=True), patch(
        "dotenv.load_dotenv"
    ):
        return importlib.reload(settings_module)


class TestAppEnv:
    """Test suite for the APP_ENV switch."""

    def teardown_method(self):
        importlib.reload(settings_module)

    def test_defaults_to_production(self):
        module = _reload_with({})

        assert module.APP_ENV == "production"

    def test_reads_environment(self):
        module = _reload_with({"APP_ENV": "development"})

        assert module.APP_ENV == "development"

    def test_production_hides_exception_text(self, settings):
        settings.APP_ENV = "production"

        response = server_error_response(RuntimeError("db password leaked"), "Failed")

        assert response.status_code == 500
        assert response.data == {"success": False, "error": "Failed"}

    def test_development_exposes_exception_text(self, settings):
        response = server_error_response(RuntimeError("boom"), "Failed")

        assert response.data["details"] == {"exception": "boom"}
