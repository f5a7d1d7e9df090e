# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Shared fixtures for identity provider tests."""

import pytest

from fakes import StubUserService
from identity_backends.log import SilentLogger


@pytest.fixture
def user_service():
    return StubUserService()


@pytest.fixture
def silent_logger():
    return SilentLogger()
