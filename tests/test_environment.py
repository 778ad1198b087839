"""Unit tests for deployment environment names."""

from __future__ import annotations

import pytest

from envlayer.core.environment import (
    DeployEnvironment,
    is_known_environment,
    resolve_environment_name,
)


class TestDeployEnvironment:
    """Test suite for DeployEnvironment."""

    def test_values(self):
        """Test the canonical stage names."""
        assert [e.value for e in DeployEnvironment] == ["Production", "Staging", "Development"]

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Production", DeployEnvironment.PRODUCTION),
            ("production", DeployEnvironment.PRODUCTION),
            ("PRODUCTION", DeployEnvironment.PRODUCTION),
            ("staging", DeployEnvironment.STAGING),
            ("DeVeLoPmEnT", DeployEnvironment.DEVELOPMENT),
        ],
    )
    def test_from_name_case_insensitive(self, name, expected):
        """Test names match regardless of casing."""
        assert DeployEnvironment.from_name(name) is expected

    @pytest.mark.parametrize("name", [None, "", "QA", "local", " Production", "Prod", "Production.json"])
    def test_from_name_unknown(self, name):
        """Test unknown names map to None."""
        assert DeployEnvironment.from_name(name) is None


class TestIsKnownEnvironment:
    """Test suite for is_known_environment."""

    @pytest.mark.parametrize("name", ["Production", "production", "PRODUCTION", "Staging", "development"])
    def test_known(self, name):
        assert is_known_environment(name) is True

    @pytest.mark.parametrize("name", [None, "", "QA", "local", "garbage!"])
    def test_unknown(self, name):
        assert is_known_environment(name) is False


class TestResolveEnvironmentName:
    """Test suite for resolve_environment_name."""

    def test_primary_variable(self):
        """Test ENVLAYER_ENVIRONMENT takes precedence."""
        environ = {"ENVLAYER_ENVIRONMENT": "Staging", "APP_ENVIRONMENT": "Development"}
        assert resolve_environment_name(environ) == "Staging"

    def test_fallback_variable(self):
        """Test APP_ENVIRONMENT is used when the primary is empty."""
        environ = {"ENVLAYER_ENVIRONMENT": "", "APP_ENVIRONMENT": "development"}
        assert resolve_environment_name(environ) == "development"

    def test_unset(self):
        """Test None when nothing is configured."""
        assert resolve_environment_name({}) is None

    def test_value_not_validated(self):
        """Test unknown values are returned verbatim."""
        assert resolve_environment_name({"APP_ENVIRONMENT": "QA"}) == "QA"

    def test_reads_os_environ(self, monkeypatch):
        """Test the process environment is the default."""
        monkeypatch.setenv("ENVLAYER_ENVIRONMENT", "Production")
        assert resolve_environment_name() == "Production"
