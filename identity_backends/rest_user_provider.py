# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""User provider backed by an external identity service over REST.

| Operation               | Request                                     |
|-------------------------|---------------------------------------------|
| identify_user           | POST /identify ``{"filters": ...}``         |
| get_user                | GET /users/{id}                             |
| get_user_groups         | GET /users/{id}/groups?limit=N&offset=M     |
| update_user             | PUT /users/{id} with the full user record   |
| create_user             | POST /users with the user record            |
| update_user_credentials | PUT /users/{id}/credentials, raw JSON body  |

Every operation succeeds on 200; creation also accepts 201.
"""

from dataclasses import replace
from typing import Any

from .models import User, UserGroupListResponse
from .provider import UserProvider
from .rest_client import RestClient, path_segment
from .wire import decode_json_object, decode_user, encode_json, encode_raw, encode_user


def _decode_user_id(content: bytes) -> str:
    user_id = decode_json_object(content).get("userID")
    if not isinstance(user_id, str) or not user_id:
        raise ValueError("response has no 'userID'")
    return user_id


def _decode_groups(content: bytes) -> UserGroupListResponse:
    return UserGroupListResponse.from_dict(decode_json_object(content))


class RestUserProvider(RestClient, UserProvider):
    """Manages user records held by a remote identity service."""

    def identify_user(self, filters: dict[str, Any]) -> str:
        body = self._encode(encode_json, {"filters": filters})
        return self._call("POST", "/identify", _decode_user_id, content=body)

    def get_user(self, user_id: str) -> User:
        return self._call("GET", f"/users/{path_segment(user_id)}", decode_user)

    def get_user_groups(self, user_id: str, limit: int, offset: int) -> UserGroupListResponse:
        params = {"limit": str(limit), "offset": str(offset)}
        return self._call(
            "GET", f"/users/{path_segment(user_id)}/groups", _decode_groups, params=params
        )

    def update_user(self, user_id: str, user: User) -> User:
        body = self._encode(encode_user, user)
        return self._call("PUT", f"/users/{path_segment(user_id)}", decode_user, content=body)

    def create_user(self, user: User) -> User:
        body = self._encode(encode_user, replace(user, user_id=""))
        return self._call("POST", "/users", decode_user, content=body, success=(200, 201))

    def update_user_credentials(self, user_id: str, credentials: str | bytes | dict[str, Any]) -> None:
        body = self._encode(encode_raw, credentials)
        self._call("PUT", f"/users/{path_segment(user_id)}/credentials", content=body)
