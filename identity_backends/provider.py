# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Abstract provider contracts for authentication and user management.

Call sites depend only on these two interfaces. One implementation of each is
selected at startup (see :mod:`identity_backends.factory`), either the local
delegate backed by the platform's user service or the REST adapter backed by
an external identity service.

Every operation returns its result or raises :class:`ProviderError`; there is
no partial success.
"""

from abc import ABC, abstractmethod
from typing import Any

from .models import (
    AuthnMetadata,
    AuthnResult,
    Credentials,
    GetAttributesMetadata,
    GetAttributesResult,
    Identifiers,
    User,
    UserGroupListResponse,
)


class AuthnProvider(ABC):
    """Authenticates principals and discloses their attributes."""

    @abstractmethod
    def authenticate(
        self,
        identifiers: Identifiers,
        credentials: Credentials,
        metadata: AuthnMetadata | None = None,
    ) -> AuthnResult:
        """Authenticate the principal described by identifiers and credentials.

        Args:
            identifiers: Opaque mapping locating the principal (e.g. username)
            credentials: Opaque mapping proving the principal (e.g. password)
            metadata: Optional backend-specific side-channel payload

        Returns:
            AuthnResult on an explicit backend success

        Raises:
            ProviderError: On any other outcome
        """

    @abstractmethod
    def get_attributes(
        self,
        token: str,
        requested_attributes: list[str],
        metadata: GetAttributesMetadata | None = None,
    ) -> GetAttributesResult:
        """Return the requested attributes the backend is willing to disclose.

        Raises:
            ProviderError: If the token is rejected or the lookup fails
        """


class UserProvider(ABC):
    """Looks up and maintains user records."""

    @abstractmethod
    def identify_user(self, filters: dict[str, Any]) -> str:
        """Resolve a filter mapping to exactly one user ID.

        Raises:
            ProviderError: If no single user matches or the lookup fails
        """

    @abstractmethod
    def get_user(self, user_id: str) -> User:
        """Fetch a user record by ID."""

    @abstractmethod
    def get_user_groups(self, user_id: str, limit: int, offset: int) -> UserGroupListResponse:
        """Fetch one page of the user's groups.

        ``limit`` and ``offset`` are forwarded as given; the backend owns
        pagination semantics.
        """

    @abstractmethod
    def update_user(self, user_id: str, user: User) -> User:
        """Replace a user record and return the backend's resulting record."""

    @abstractmethod
    def create_user(self, user: User) -> User:
        """Create a user record and return it as stored by the backend."""

    @abstractmethod
    def update_user_credentials(self, user_id: str, credentials: str | bytes | dict[str, Any]) -> None:
        """Replace a user's credentials with an opaque payload.

        Pre-serialized JSON (``str`` or ``bytes``) is forwarded verbatim.

        Raises:
            ProviderError: If the update is rejected or fails
        """
