# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Fakes standing in for the user service and the remote identity service."""

import json
from typing import Any, Callable

import httpx

from identity_backends import (
    ServiceError,
    ServiceErrorCode,
    UserGroup,
    UserGroupListResponse,
    UserRecord,
    UserService,
)

BASE_URL = "http://idp.test/api"
API_KEY = "test-api-key"


class StubUserService(UserService):
    """In-memory user service with scriptable failures."""

    def __init__(self):
        self.records: dict[str, UserRecord] = {}
        self.passwords: dict[str, str] = {}
        self.groups: dict[str, list[UserGroup]] = {}
        self.failures: dict[str, ServiceError] = {}
        self.calls: list[tuple[str, tuple]] = []

    def add(self, record: UserRecord, password: str = "secret") -> UserRecord:
        self.records[record.id] = record
        self.passwords[record.id] = password
        return record

    def _enter(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, args))
        if operation in self.failures:
            raise self.failures[operation]

    def _require(self, user_id: str) -> UserRecord:
        if user_id not in self.records:
            raise ServiceError(
                ServiceErrorCode.USER_NOT_FOUND, "User not found", f"no user with id {user_id}"
            )
        return self.records[user_id]

    def identify_user(self, filters):
        self._enter("identify_user", filters)
        for record in self.records.values():
            stored = json.loads(record.attributes or "{}")
            if filters and all(stored.get(k) == v for k, v in filters.items()):
                return record.id
        raise ServiceError(ServiceErrorCode.USER_NOT_FOUND, "User not found", "no user matches the filters")

    def get_user(self, user_id):
        self._enter("get_user", user_id)
        return self._require(user_id)

    def verify_user(self, user_id, credentials):
        self._enter("verify_user", user_id, credentials)
        record = self._require(user_id)
        if credentials.get("password") != self.passwords.get(user_id):
            raise ServiceError(
                ServiceErrorCode.AUTHENTICATION_FAILED, "Authentication failed", "invalid credentials"
            )
        return record

    def get_user_groups(self, user_id, limit, offset):
        self._enter("get_user_groups", user_id, limit, offset)
        self._require(user_id)
        groups = self.groups.get(user_id, [])
        return UserGroupListResponse(
            groups=groups[offset:offset + limit], total=len(groups), limit=limit, offset=offset
        )

    def update_user(self, user_id, record):
        self._enter("update_user", user_id, record)
        self._require(user_id)
        self.records[user_id] = record
        return record

    def create_user(self, record):
        self._enter("create_user", record)
        created = UserRecord(
            id=f"user-{len(self.records) + 1}",
            type=record.type,
            organization_unit=record.organization_unit,
            attributes=record.attributes,
        )
        self.records[created.id] = created
        return created

    def update_user_credentials(self, user_id, credentials):
        self._enter("update_user_credentials", user_id, credentials)
        self._require(user_id)
        self.passwords[user_id] = credentials.get("password", "")


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)
        self.closed = False

    def close(self) -> None:
        self.closed = True

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def respond(status: int, body: Any = None, raw: bytes | None = None) -> Callable[[httpx.Request], httpx.Response]:
    """Build a handler returning a fixed status and JSON (or raw) body."""

    def _handler(request: httpx.Request) -> httpx.Response:
        if raw is not None:
            return httpx.Response(status, content=raw)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    return _handler


def refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("[Errno 111] Connection refused", request=request)
