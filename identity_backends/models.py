# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Value objects exchanged through the provider contracts.

Identifiers, credentials and metadata are plain mappings owned by the caller
and never inspected here. ``User.attributes`` is raw JSON text that is carried
through unchanged.
"""

from dataclasses import dataclass, field
from typing import Any

# Opaque caller-owned payloads
Identifiers = dict[str, Any]
Credentials = dict[str, Any]
AuthnMetadata = dict[str, Any]
GetAttributesMetadata = dict[str, Any]


@dataclass
class User:
    """A user record as seen through a user provider.

    Attributes:
        user_id: Unique user identifier (empty for records not yet created)
        user_type: Backend-defined user category
        ou_id: Organization unit identifier, may be empty
        attributes: Raw JSON text of the user's attributes, or None
    """
    user_id: str = ""
    user_type: str = ""
    ou_id: str = ""
    attributes: str | None = None


@dataclass
class UserGroup:
    """A group a user belongs to."""
    id: str
    name: str = ""
    ou_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserGroup":
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            ou_id=str(data.get("ouId") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id}
        if self.name:
            result["name"] = self.name
        if self.ou_id:
            result["ouId"] = self.ou_id
        return result


@dataclass
class UserGroupListResponse:
    """One page of a user's groups with backend-defined pagination metadata."""
    groups: list[UserGroup] = field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserGroupListResponse":
        raw_groups = data.get("groups")
        if raw_groups is None:
            raw_groups = []
        if not isinstance(raw_groups, list) or not all(isinstance(g, dict) for g in raw_groups):
            raise ValueError("'groups' must be a list of objects")
        return cls(
            groups=[UserGroup.from_dict(group) for group in raw_groups],
            total=int(data.get("total") or 0),
            limit=int(data.get("limit") or 0),
            offset=int(data.get("offset") or 0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "groups": [group.to_dict() for group in self.groups],
            "total": self.total,
            "limit": self.limit,
            "offset": self.offset,
        }


@dataclass
class AuthnResult:
    """Outcome of a successful authentication.

    Only the commonly used fields are named; anything else the backend sends
    is kept in ``extra``.
    """
    user_id: str = ""
    user_type: str = ""
    ou_id: str = ""
    token: str = ""
    available_attributes: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    _KNOWN_FIELDS = ("userId", "userType", "ouId", "token", "availableAttributes")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuthnResult":
        available = data.get("availableAttributes")
        if available is None:
            available = []
        if not isinstance(available, list):
            raise ValueError("'availableAttributes' must be a list")
        return cls(
            user_id=str(data.get("userId") or ""),
            user_type=str(data.get("userType") or ""),
            ou_id=str(data.get("ouId") or ""),
            token=str(data.get("token") or ""),
            available_attributes=[str(name) for name in available],
            extra={k: v for k, v in data.items() if k not in cls._KNOWN_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "userId": self.user_id,
            "userType": self.user_type,
            "ouId": self.ou_id,
            "token": self.token,
            "availableAttributes": list(self.available_attributes),
        }


@dataclass
class GetAttributesResult:
    """Attributes a backend agreed to disclose for a token."""
    user_id: str = ""
    user_type: str = ""
    ou_id: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    _KNOWN_FIELDS = ("userId", "userType", "ouId", "attributes")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GetAttributesResult":
        attributes = data.get("attributes")
        if attributes is None:
            attributes = {}
        if not isinstance(attributes, dict):
            raise ValueError("'attributes' must be an object")
        return cls(
            user_id=str(data.get("userId") or ""),
            user_type=str(data.get("userType") or ""),
            ou_id=str(data.get("ouId") or ""),
            attributes=attributes,
            extra={k: v for k, v in data.items() if k not in cls._KNOWN_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "userId": self.user_id,
            "userType": self.user_type,
            "ouId": self.ou_id,
            "attributes": self.attributes,
        }
