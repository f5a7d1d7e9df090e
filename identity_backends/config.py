# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Provider configuration models.

A deployment selects one provider per role, either from explicit values or
from environment variables:

    AUTHN_PROVIDER_TYPE=rest
    AUTHN_PROVIDER_BASE_URL=https://idp.example.com/api
    AUTHN_PROVIDER_API_KEY=...
    AUTHN_PROVIDER_TIMEOUT=5

Configuration objects are frozen once validated.
"""

import os
from typing import Literal, Mapping

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .rest_client import DEFAULT_TIMEOUT_SECONDS, resolve_timeout

ProviderType = Literal["default", "rest"]

AUTHN_PROVIDER_ENV_PREFIX = "AUTHN_PROVIDER"
USER_PROVIDER_ENV_PREFIX = "USER_PROVIDER"


class RestProviderConfig(BaseModel):
    """Connection settings for a REST-backed provider."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    api_key: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @field_validator("base_url")
    @classmethod
    def _validate_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("base_url must not be empty")
        return value

    @field_validator("timeout_seconds", mode="before")
    @classmethod
    def _validate_timeout(cls, value: float | None) -> float:
        return resolve_timeout(float(value) if value is not None else None)


class ProviderConfig(BaseModel):
    """Selects and configures the provider for one role."""

    model_config = ConfigDict(frozen=True)

    provider_type: ProviderType = "default"
    rest: RestProviderConfig | None = None

    @field_validator("provider_type", mode="before")
    @classmethod
    def _normalize_type(cls, value: str) -> str:
        return value.strip().lower() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _require_rest_settings(self) -> "ProviderConfig":
        if self.provider_type == "rest" and self.rest is None:
            raise ValueError("'rest' settings are required when provider_type is 'rest'")
        return self

    @classmethod
    def from_env(cls, prefix: str, environ: Mapping[str, str] | None = None) -> "ProviderConfig":
        """Build a configuration from ``<PREFIX>_*`` environment variables.

        Args:
            prefix: Variable prefix, e.g. "AUTHN_PROVIDER" or "USER_PROVIDER"
            environ: Mapping to read instead of ``os.environ``

        Raises:
            pydantic.ValidationError: If the variables describe an invalid setup
        """
        env = os.environ if environ is None else environ
        provider_type = env.get(f"{prefix}_TYPE", "default")

        rest = None
        base_url = env.get(f"{prefix}_BASE_URL")
        if base_url:
            rest = RestProviderConfig(
                base_url=base_url,
                api_key=env.get(f"{prefix}_API_KEY", ""),
                timeout_seconds=env.get(f"{prefix}_TIMEOUT") or None,
            )

        return cls(provider_type=provider_type, rest=rest)
