# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Interface of the platform's internal user service.

The local delegate providers forward to an implementation of
:class:`UserService`. The store behind it lives outside this package; only
the calls and the error shape are fixed here.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .models import UserGroupListResponse


class ServiceErrorCode:
    """Codes the user service reports that the providers recognize."""

    USER_NOT_FOUND = "USR-1003"
    AUTHENTICATION_FAILED = "USR-1007"


@dataclass
class UserRecord:
    """A user as stored by the internal user service.

    ``attributes`` is the stored JSON text, untouched.
    """
    id: str
    type: str = ""
    organization_unit: str = ""
    attributes: str | None = None


class ServiceError(Exception):
    """Failure reported by the user service."""

    def __init__(self, code: str, error: str = "", error_description: str = ""):
        self.code = code
        self.error = error
        self.error_description = error_description
        super().__init__(code, error, error_description)

    def __str__(self) -> str:
        return f"{self.code}: {self.error}" if self.error else self.code


class UserService(ABC):
    """Operations the local providers need from the internal user store.

    Every method raises :class:`ServiceError` on failure.
    """

    @abstractmethod
    def identify_user(self, filters: dict[str, Any]) -> str:
        pass

    @abstractmethod
    def get_user(self, user_id: str) -> UserRecord:
        pass

    @abstractmethod
    def verify_user(self, user_id: str, credentials: dict[str, Any]) -> UserRecord:
        """Check credentials for a user and return the verified record."""

    @abstractmethod
    def get_user_groups(self, user_id: str, limit: int, offset: int) -> UserGroupListResponse:
        pass

    @abstractmethod
    def update_user(self, user_id: str, record: UserRecord) -> UserRecord:
        pass

    @abstractmethod
    def create_user(self, record: UserRecord) -> UserRecord:
        pass

    @abstractmethod
    def update_user_credentials(self, user_id: str, credentials: dict[str, Any]) -> None:
        pass
