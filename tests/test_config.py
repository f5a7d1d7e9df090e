# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Tests for provider configuration models."""

import pytest
from pydantic import ValidationError

from identity_backends import ProviderConfig, RestProviderConfig
from identity_backends.config import AUTHN_PROVIDER_ENV_PREFIX, USER_PROVIDER_ENV_PREFIX


class TestRestProviderConfig:
    """Tests for RestProviderConfig."""

    def test_defaults(self):
        """Test the default timeout and credential."""
        config = RestProviderConfig(base_url="https://idp.example.com/api/")

        assert config.base_url == "https://idp.example.com/api"
        assert config.api_key == ""
        assert config.timeout_seconds == 10.0

    @pytest.mark.parametrize("timeout", [0, 0.0, "0", None])
    def test_zero_timeout_becomes_default(self, timeout):
        """Test a zero or missing timeout is replaced by 10 seconds."""
        config = RestProviderConfig(base_url="https://idp", timeout_seconds=timeout)

        assert config.timeout_seconds == 10.0

    def test_negative_timeout_is_rejected(self):
        """Test negative timeouts fail validation."""
        with pytest.raises(ValidationError):
            RestProviderConfig(base_url="https://idp", timeout_seconds=-5)

    def test_empty_base_url_is_rejected(self):
        """Test a blank base URL fails validation."""
        with pytest.raises(ValidationError):
            RestProviderConfig(base_url="  ")

    def test_is_frozen(self):
        """Test configuration cannot change after validation."""
        config = RestProviderConfig(base_url="https://idp")

        with pytest.raises(ValidationError):
            config.base_url = "https://other"


class TestProviderConfig:
    """Tests for ProviderConfig."""

    def test_default_type(self):
        """Test the local delegate is selected by default."""
        assert ProviderConfig().provider_type == "default"

    def test_type_is_normalized(self):
        """Test provider types are case-insensitive."""
        config = ProviderConfig(provider_type=" REST ", rest=RestProviderConfig(base_url="https://idp"))

        assert config.provider_type == "rest"

    def test_rest_requires_settings(self):
        """Test the REST type needs connection settings."""
        with pytest.raises(ValidationError, match="'rest' settings are required"):
            ProviderConfig(provider_type="rest")

    def test_unknown_type_is_rejected(self):
        """Test only known provider types validate."""
        with pytest.raises(ValidationError):
            ProviderConfig(provider_type="ldap")

    def test_from_env_rest(self):
        """Test REST settings are read from prefixed variables."""
        environ = {
            "USER_PROVIDER_TYPE": "rest",
            "USER_PROVIDER_BASE_URL": "https://idp.example.com",
            "USER_PROVIDER_API_KEY": "secret",
            "USER_PROVIDER_TIMEOUT": "2.5",
        }

        config = ProviderConfig.from_env(USER_PROVIDER_ENV_PREFIX, environ)

        assert config.provider_type == "rest"
        assert config.rest == RestProviderConfig(
            base_url="https://idp.example.com", api_key="secret", timeout_seconds=2.5
        )

    def test_from_env_defaults(self):
        """Test an empty environment selects the local delegate."""
        config = ProviderConfig.from_env(AUTHN_PROVIDER_ENV_PREFIX, {})

        assert config.provider_type == "default"
        assert config.rest is None

    def test_from_env_missing_timeout(self):
        """Test an unset timeout variable yields the default."""
        environ = {"AUTHN_PROVIDER_TYPE": "rest", "AUTHN_PROVIDER_BASE_URL": "https://idp"}

        config = ProviderConfig.from_env(AUTHN_PROVIDER_ENV_PREFIX, environ)

        assert config.rest.timeout_seconds == 10.0

    def test_from_env_reads_process_environment(self, monkeypatch):
        """Test os.environ is used when no mapping is given."""
        monkeypatch.setenv("AUTHN_PROVIDER_TYPE", "rest")
        monkeypatch.setenv("AUTHN_PROVIDER_BASE_URL", "https://idp")

        config = ProviderConfig.from_env(AUTHN_PROVIDER_ENV_PREFIX)

        assert config.rest.base_url == "https://idp"

    def test_from_env_invalid_timeout(self):
        """Test a non-numeric timeout fails validation."""
        environ = {
            "AUTHN_PROVIDER_TYPE": "rest",
            "AUTHN_PROVIDER_BASE_URL": "https://idp",
            "AUTHN_PROVIDER_TIMEOUT": "soon",
        }

        with pytest.raises(ValidationError):
            ProviderConfig.from_env(AUTHN_PROVIDER_ENV_PREFIX, environ)
