# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Error taxonomy shared by authentication and user providers.

Every provider failure is raised as a :class:`ProviderError`. Failures that
originate inside this package (request encoding, transport, response decoding)
always carry :attr:`ErrorCode.SYSTEM_ERROR`; failures reported by a backend
keep the backend's own code.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes owned by the provider layer.

    Backends may return additional business codes; those are passed through
    as plain strings and never coerced into this enumeration.
    """

    SYSTEM_ERROR = "SystemError"
    USER_NOT_FOUND = "UserNotFound"
    INVALID_REQUEST_FORMAT = "InvalidRequestFormat"
    AUTHENTICATION_FAILED = "AuthenticationFailed"
    INVALID_TOKEN = "InvalidToken"

    def __str__(self) -> str:
        return self.value


class ProviderError(Exception):
    """Structured failure raised by every provider operation.

    Attributes:
        code: Taxonomy code or a backend business code passed through unchanged
        message: Human-readable summary
        description: Diagnostic detail, may embed an underlying failure's text
    """

    def __init__(self, code: str, message: str = "", description: str = ""):
        if not code:
            raise ValueError("ProviderError requires a non-empty code")
        self.code = str(code)
        self.message = message or ""
        self.description = description or ""
        super().__init__(self.code, self.message, self.description)

    @classmethod
    def system_error(cls, message: str, cause: BaseException | str) -> "ProviderError":
        """Build a SystemError recording the underlying failure text."""
        return cls(ErrorCode.SYSTEM_ERROR, message, str(cause))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProviderError":
        """Build an error from its ``{code, message, description}`` wire shape.

        Raises:
            ValueError: If ``data`` has no usable code
        """
        code = data.get("code")
        if not isinstance(code, str) or not code:
            raise ValueError("error body has no 'code' field")
        message = data.get("message")
        description = data.get("description")
        return cls(
            code,
            message if isinstance(message, str) else "",
            description if isinstance(description, str) else "",
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "code": self.code,
            "message": self.message,
            "description": self.description,
        }

    @property
    def is_system_error(self) -> bool:
        return self.code == ErrorCode.SYSTEM_ERROR

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProviderError):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.code, self.message, self.description))

    def __str__(self) -> str:
        text = f"{self.code}: {self.message}" if self.message else self.code
        if self.description:
            text = f"{text} ({self.description})"
        return text

    def __repr__(self) -> str:
        return (
            f"ProviderError(code={self.code!r}, message={self.message!r}, "
            f"description={self.description!r})"
        )
