# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Pluggable identity backends.

Authentication and user-management provider contracts with two
interchangeable implementations each: a local delegate over the platform's
internal user service and a REST adapter for an externally hosted identity
service. Both report failures through the same :class:`ProviderError`
taxonomy.
"""

__version__ = "0.1.0"

from .config import ProviderConfig, RestProviderConfig
from .default_authn_provider import DefaultAuthnProvider
from .default_user_provider import DefaultUserProvider
from .errors import ErrorCode, ProviderError
from .factory import (
    create_authn_provider,
    create_user_provider,
    initialize_default_authn_provider,
    initialize_default_user_provider,
    initialize_rest_authn_provider,
    initialize_rest_user_provider,
)
from .log import Logger, create_logger
from .models import AuthnResult, GetAttributesResult, User, UserGroup, UserGroupListResponse
from .provider import AuthnProvider, UserProvider
from .rest_authn_provider import RestAuthnProvider
from .rest_client import DEFAULT_TIMEOUT_SECONDS
from .rest_user_provider import RestUserProvider
from .user_service import ServiceError, ServiceErrorCode, UserRecord, UserService

__all__ = [
    # Version
    "__version__",
    # Errors
    "ErrorCode",
    "ProviderError",
    # Models
    "AuthnResult",
    "GetAttributesResult",
    "User",
    "UserGroup",
    "UserGroupListResponse",
    # Contracts
    "AuthnProvider",
    "UserProvider",
    # Local delegates
    "DefaultAuthnProvider",
    "DefaultUserProvider",
    "ServiceError",
    "ServiceErrorCode",
    "UserRecord",
    "UserService",
    # REST adapters
    "DEFAULT_TIMEOUT_SECONDS",
    "RestAuthnProvider",
    "RestUserProvider",
    # Configuration and factory
    "ProviderConfig",
    "RestProviderConfig",
    "create_authn_provider",
    "create_user_provider",
    "initialize_default_authn_provider",
    "initialize_default_user_provider",
    "initialize_rest_authn_provider",
    "initialize_rest_user_provider",
    # Logging
    "Logger",
    "create_logger",
]
