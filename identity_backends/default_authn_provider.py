# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Authentication provider backed by the platform's internal user service.

The principal is located with ``identify_user`` and its credentials checked
with ``verify_user``. The issued token is the authenticated user ID, which
``get_attributes`` resolves back to the stored user.
"""

import json

from .errors import ErrorCode, ProviderError
from .log import Logger, create_logger
from .models import (
    AuthnMetadata,
    AuthnResult,
    Credentials,
    GetAttributesMetadata,
    GetAttributesResult,
    Identifiers,
)
from .provider import AuthnProvider
from .user_service import ServiceError, ServiceErrorCode, UserService


def _map_error(error: ServiceError) -> ProviderError:
    if error.code == ServiceErrorCode.USER_NOT_FOUND:
        code = ErrorCode.USER_NOT_FOUND
    elif error.code == ServiceErrorCode.AUTHENTICATION_FAILED:
        code = ErrorCode.AUTHENTICATION_FAILED
    else:
        code = ErrorCode.SYSTEM_ERROR
    return ProviderError(code, error.error, error.error_description)


class DefaultAuthnProvider(AuthnProvider):
    """Local delegate authenticating against a :class:`UserService`."""

    def __init__(self, user_service: UserService, logger: Logger | None = None):
        if user_service is None:
            raise ValueError("DefaultAuthnProvider requires a user service")
        self._user_service = user_service
        self._logger = logger or create_logger(name="identity_backends.default_authn_provider")

    def authenticate(
        self,
        identifiers: Identifiers,
        credentials: Credentials,
        metadata: AuthnMetadata | None = None,
    ) -> AuthnResult:
        try:
            user_id = self._user_service.identify_user(identifiers)
            record = self._user_service.verify_user(user_id, credentials)
        except ServiceError as e:
            error = _map_error(e)
            self._logger.info("Authentication failed", code=error.code)
            raise error from e

        available = []
        if record.attributes:
            try:
                stored = json.loads(record.attributes)
            except ValueError:
                stored = None
            if isinstance(stored, dict):
                available = sorted(stored)

        return AuthnResult(
            user_id=record.id,
            user_type=record.type,
            ou_id=record.organization_unit,
            token=record.id,
            available_attributes=available,
        )

    def get_attributes(
        self,
        token: str,
        requested_attributes: list[str],
        metadata: GetAttributesMetadata | None = None,
    ) -> GetAttributesResult:
        if not token:
            raise ProviderError(ErrorCode.INVALID_TOKEN, "Invalid token", "token is empty")

        try:
            record = self._user_service.get_user(token)
        except ServiceError as e:
            error = _map_error(e)
            if error.code == ErrorCode.USER_NOT_FOUND:
                error = ProviderError(ErrorCode.INVALID_TOKEN, "Invalid token", e.error_description)
            raise error from e

        try:
            stored = json.loads(record.attributes) if record.attributes else {}
        except ValueError as e:
            raise ProviderError.system_error("Failed to decode user attributes", e) from e
        if not isinstance(stored, dict):
            raise ProviderError.system_error(
                "Failed to decode user attributes", "attributes must be a JSON object"
            )

        if requested_attributes:
            attributes = {name: stored[name] for name in requested_attributes if name in stored}
        else:
            attributes = stored

        return GetAttributesResult(
            user_id=record.id,
            user_type=record.type,
            ou_id=record.organization_unit,
            attributes=attributes,
        )
