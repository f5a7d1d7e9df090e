# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""User provider backed by the platform's internal user service."""

import json
from typing import Any

from .errors import ErrorCode, ProviderError
from .log import Logger, create_logger
from .models import User, UserGroupListResponse
from .provider import UserProvider
from .user_service import ServiceError, ServiceErrorCode, UserRecord, UserService


def map_service_error(error: ServiceError) -> ProviderError:
    """Translate a user service failure into the provider taxonomy.

    The service's not-found code becomes ``UserNotFound``; every other
    service failure becomes ``SystemError``. Message and description are kept.
    """
    if error.code == ServiceErrorCode.USER_NOT_FOUND:
        code = ErrorCode.USER_NOT_FOUND
    else:
        code = ErrorCode.SYSTEM_ERROR
    return ProviderError(code, error.error, error.error_description)


def _to_user(record: UserRecord) -> User:
    return User(
        user_id=record.id,
        user_type=record.type,
        ou_id=record.organization_unit,
        attributes=record.attributes,
    )


def _to_record(user: User, user_id: str = "") -> UserRecord:
    return UserRecord(
        id=user_id or user.user_id,
        type=user.user_type,
        organization_unit=user.ou_id,
        attributes=user.attributes,
    )


class DefaultUserProvider(UserProvider):
    """Local delegate forwarding every operation to a :class:`UserService`."""

    def __init__(self, user_service: UserService, logger: Logger | None = None):
        if user_service is None:
            raise ValueError("DefaultUserProvider requires a user service")
        self._user_service = user_service
        self._logger = logger or create_logger(name="identity_backends.default_user_provider")

    def _fail(self, operation: str, error: ServiceError) -> ProviderError:
        mapped = map_service_error(error)
        self._logger.debug(
            "User service call failed",
            operation=operation,
            service_code=error.code,
            code=mapped.code,
        )
        return mapped

    def identify_user(self, filters: dict[str, Any]) -> str:
        try:
            return self._user_service.identify_user(filters)
        except ServiceError as e:
            raise self._fail("identify_user", e) from e

    def get_user(self, user_id: str) -> User:
        try:
            record = self._user_service.get_user(user_id)
        except ServiceError as e:
            raise self._fail("get_user", e) from e
        return _to_user(record)

    def get_user_groups(self, user_id: str, limit: int, offset: int) -> UserGroupListResponse:
        try:
            return self._user_service.get_user_groups(user_id, limit, offset)
        except ServiceError as e:
            raise self._fail("get_user_groups", e) from e

    def update_user(self, user_id: str, user: User) -> User:
        try:
            record = self._user_service.update_user(user_id, _to_record(user, user_id))
        except ServiceError as e:
            raise self._fail("update_user", e) from e
        return _to_user(record)

    def create_user(self, user: User) -> User:
        try:
            record = self._user_service.create_user(_to_record(user))
        except ServiceError as e:
            raise self._fail("create_user", e) from e
        return _to_user(record)

    def update_user_credentials(self, user_id: str, credentials: str | bytes | dict[str, Any]) -> None:
        if isinstance(credentials, (str, bytes)):
            try:
                credentials = json.loads(credentials)
            except ValueError as e:
                raise ProviderError(
                    ErrorCode.INVALID_REQUEST_FORMAT, "Invalid credentials payload", str(e)
                ) from e
        if not isinstance(credentials, dict):
            raise ProviderError(
                ErrorCode.INVALID_REQUEST_FORMAT,
                "Invalid credentials payload",
                "credentials must be a JSON object",
            )

        try:
            self._user_service.update_user_credentials(user_id, credentials)
        except ServiceError as e:
            raise self._fail("update_user_credentials", e) from e
