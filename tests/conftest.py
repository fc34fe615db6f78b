"""
Pytest configuration file for the configstore test suite.

This file defines shared fixtures used across the test modules. It includes:
- Keys of every accepted length, so round-trip tests can run against AES-128/192/256.
- A store fixture bound to a file under `tmp_path`, so tests never share or
  leave behind a backing file.
- A small dataclass standing in for an application's typed settings.
"""
from dataclasses import dataclass, field
from typing import Optional

import pytest

from configstore import DataclassSerializer, EncryptedConfigStore


KEY_16 = b"0123456789abcdef"
KEY_24 = b"0123456789abcdef01234567"
KEY_32 = b"0123456789abcdef0123456789abcdef"


@dataclass
class Credentials:
    """Typed configuration used by the dataclass serializer tests."""
    username: str
    password: str
    servers: list = field(default_factory=list)


@dataclass
class Endpoint:
    host: str
    port: int = 443


@dataclass
class ServiceSettings:
    """Typed configuration with nested dataclass fields."""
    name: str
    primary: Endpoint
    backup: Optional[Endpoint] = None


@pytest.fixture(params=[KEY_16, KEY_24, KEY_32], ids=["aes128", "aes192", "aes256"])
def key(request):
    """Provides each valid key length in turn."""
    return request.param


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "cfg.dat"


@pytest.fixture
def store(config_path):
    """Provides a JSON store with an AES-256 key on a fresh file."""
    return EncryptedConfigStore(config_path, KEY_32)


@pytest.fixture
def credentials_store(config_path):
    """Provides a store that persists `Credentials` instances."""
    return EncryptedConfigStore(config_path, KEY_16, serializer=DataclassSerializer(Credentials))
