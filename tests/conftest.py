"""
Shared fixtures: a fake HTTP session so no test touches the network.

FakeSession routes each request by URL prefix to a canned FakeResponse or
raises the configured requests exception. Every test also gets an in-memory
keychain and a throwaway config directory, so the real ~/.lingochain and OS
keychain are never read or written.
"""

import json

import keyring
import keyring.core
import pytest
from keyring.backend import KeyringBackend
from keyring.backends import fail
from keyring.errors import PasswordDeleteError

from lingochain.config import GOOGLE_WEB_URL, MYMEMORY_URL, ChainConfig

LIBRE_A = "https://libre-a.test"
LIBRE_B = "https://libre-b.test"


class FakeResponse:
    def __init__(self, body="", status_code=200):
        if not isinstance(body, str):
            body = json.dumps(body, ensure_ascii=False)
        self.text = body
        self.status_code = status_code


class FakeSession:
    """Stand-in for requests.Session with per-URL canned replies."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append({
            "method": method,
            "url": url,
            "params": params,
            "json": json,
            "headers": headers,
            "timeout": timeout,
        })
        for prefix, reply in self.routes.items():
            if url.startswith(prefix):
                if isinstance(reply, Exception):
                    raise reply
                return reply
        raise AssertionError(f"unexpected request to {url}")

    def urls(self):
        return [call["url"] for call in self.calls]

    def close(self):
        self.closed = True


def google_body(translation, romanization=None, source="en"):
    """Nested-array body as returned by the web endpoint."""
    segments = [[translation, "source text", None, None, 10]]
    if romanization is not None:
        segments.append([None, None, romanization, None])
    return [segments, None, source]


@pytest.fixture
def chain_config():
    return ChainConfig(libretranslate_instances=(LIBRE_A, LIBRE_B))


@pytest.fixture
def make_session():
    return FakeSession


@pytest.fixture
def urls():
    """Provider URLs in fallback order."""
    return {
        "google": GOOGLE_WEB_URL,
        "libre_a": LIBRE_A,
        "libre_b": LIBRE_B,
        "mymemory": MYMEMORY_URL,
    }


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def make_google_body():
    return google_body


class MemoryKeyring(KeyringBackend):
    """Keychain backend that keeps passwords in a dict."""

    priority = 1

    def __init__(self):
        super().__init__()
        self.passwords = {}

    def get_password(self, service, username):
        return self.passwords.get((service, username))

    def set_password(self, service, username, password):
        self.passwords[(service, username)] = password

    def delete_password(self, service, username):
        try:
            del self.passwords[(service, username)]
        except KeyError:
            raise PasswordDeleteError(username)


@pytest.fixture(autouse=True)
def memory_keyring(monkeypatch, tmp_path):
    backend = MemoryKeyring()
    monkeypatch.setattr(keyring.core, "_keyring_backend", backend)
    monkeypatch.setattr("lingochain.keys.CONFIG_DIR", tmp_path / "lingochain")
    return backend


@pytest.fixture
def no_keyring(monkeypatch):
    """Simulate a machine without any keychain backend."""
    monkeypatch.setattr(keyring.core, "_keyring_backend", fail.Keyring())
