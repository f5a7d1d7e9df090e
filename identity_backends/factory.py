# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Construction helpers that select one provider per role at startup.

Examples:
    >>> # Local delegates over the platform's user service
    >>> authn = initialize_default_authn_provider(user_service)
    >>> users = initialize_default_user_provider(user_service)

    >>> # REST adapters; a zero timeout means the 10 second default
    >>> users = initialize_rest_user_provider(
    ...     "https://idp.example.com/api", api_key="secret", timeout=0
    ... )

    >>> # Driven by configuration
    >>> config = ProviderConfig.from_env("USER_PROVIDER")
    >>> users = create_user_provider(config, user_service=user_service)
"""

import httpx

from .config import ProviderConfig
from .default_authn_provider import DefaultAuthnProvider
from .default_user_provider import DefaultUserProvider
from .log import Logger
from .provider import AuthnProvider, UserProvider
from .rest_authn_provider import RestAuthnProvider
from .rest_user_provider import RestUserProvider
from .user_service import UserService


def initialize_default_authn_provider(
    user_service: UserService, logger: Logger | None = None
) -> AuthnProvider:
    """Create the authentication provider backed by the internal user service."""
    return DefaultAuthnProvider(user_service, logger=logger)


def initialize_rest_authn_provider(
    base_url: str,
    api_key: str,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
    logger: Logger | None = None,
) -> AuthnProvider:
    """Create the REST authentication provider.

    Args:
        base_url: Base URL of the external identity service
        api_key: Pre-shared credential sent with every request
        timeout: Request timeout in seconds; zero or None means 10 seconds
    """
    return RestAuthnProvider(base_url, api_key, timeout=timeout, transport=transport, logger=logger)


def initialize_default_user_provider(
    user_service: UserService, logger: Logger | None = None
) -> UserProvider:
    """Create the user provider backed by the internal user service."""
    return DefaultUserProvider(user_service, logger=logger)


def initialize_rest_user_provider(
    base_url: str,
    api_key: str,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
    logger: Logger | None = None,
) -> UserProvider:
    """Create the REST user provider.

    Args:
        base_url: Base URL of the external identity service
        api_key: Pre-shared credential sent with every request
        timeout: Request timeout in seconds; zero or None means 10 seconds
    """
    return RestUserProvider(base_url, api_key, timeout=timeout, transport=transport, logger=logger)


def create_authn_provider(
    config: ProviderConfig,
    user_service: UserService | None = None,
    logger: Logger | None = None,
) -> AuthnProvider:
    """Create the authentication provider described by ``config``.

    Raises:
        ValueError: If the provider type is unknown or a required
            collaborator is missing
    """
    if config.provider_type == "default":
        if user_service is None:
            raise ValueError("user_service is required for the default authentication provider")
        return initialize_default_authn_provider(user_service, logger=logger)

    if config.provider_type == "rest":
        rest = config.rest
        return initialize_rest_authn_provider(
            rest.base_url, rest.api_key, timeout=rest.timeout_seconds, logger=logger
        )

    raise ValueError(
        f"Unknown authentication provider type: {config.provider_type}. "
        f"Supported types: default, rest"
    )


def create_user_provider(
    config: ProviderConfig,
    user_service: UserService | None = None,
    logger: Logger | None = None,
) -> UserProvider:
    """Create the user provider described by ``config``.

    Raises:
        ValueError: If the provider type is unknown or a required
            collaborator is missing
    """
    if config.provider_type == "default":
        if user_service is None:
            raise ValueError("user_service is required for the default user provider")
        return initialize_default_user_provider(user_service, logger=logger)

    if config.provider_type == "rest":
        rest = config.rest
        return initialize_rest_user_provider(
            rest.base_url, rest.api_key, timeout=rest.timeout_seconds, logger=logger
        )

    raise ValueError(
        f"Unknown user provider type: {config.provider_type}. "
        f"Supported types: default, rest"
    )
