# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Authentication provider backed by an external identity service over REST.

Endpoints, relative to the configured base URL:

- ``POST /authenticate`` with ``{identifiers, credentials, metadata}``
- ``POST /attributes`` with ``{token, requestedAttributes, metadata}``

Status 200 carries the result; any other status carries a
``{code, message, description}`` error body.
"""

from .models import (
    AuthnMetadata,
    AuthnResult,
    Credentials,
    GetAttributesMetadata,
    GetAttributesResult,
    Identifiers,
)
from .provider import AuthnProvider
from .rest_client import RestClient
from .wire import decode_json_object, encode_json


def _decode_authn_result(content: bytes) -> AuthnResult:
    return AuthnResult.from_dict(decode_json_object(content))


def _decode_attributes_result(content: bytes) -> GetAttributesResult:
    return GetAttributesResult.from_dict(decode_json_object(content))


class RestAuthnProvider(RestClient, AuthnProvider):
    """Authenticates principals against a remote identity service."""

    def authenticate(
        self,
        identifiers: Identifiers,
        credentials: Credentials,
        metadata: AuthnMetadata | None = None,
    ) -> AuthnResult:
        body = self._encode(
            encode_json,
            {
                "identifiers": identifiers,
                "credentials": credentials,
                "metadata": metadata,
            },
        )
        return self._call("POST", "/authenticate", _decode_authn_result, content=body)

    def get_attributes(
        self,
        token: str,
        requested_attributes: list[str],
        metadata: GetAttributesMetadata | None = None,
    ) -> GetAttributesResult:
        body = self._encode(
            encode_json,
            {
                "token": token,
                "requestedAttributes": requested_attributes,
                "metadata": metadata,
            },
        )
        return self._call("POST", "/attributes", _decode_attributes_result, content=body)
