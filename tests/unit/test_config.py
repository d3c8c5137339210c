# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from src.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("IDENTITY_HEADER", raising=False)
    settings = Settings(_env_file=None)
    assert settings.identity_header == "X-Authenticated-User"
    assert settings.log_level == "INFO"


def test_log_level_is_normalized():
    assert Settings(_env_file=None, log_level=" debug ").log_level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")


def test_blank_identity_header_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, identity_header="  ")


def test_identity_header_from_environment(monkeypatch):
    monkeypatch.setenv("IDENTITY_HEADER", "X-Forwarded-User")
    assert Settings(_env_file=None).identity_header == "X-Forwarded-User"
