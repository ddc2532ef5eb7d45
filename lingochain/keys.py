"""
API key management for LingoChain.

None of the default providers need a key. A LibreTranslate instance that
requires one (e.g. the public libretranslate.com portal) can be given a key
through:
1. Environment variable (preferred for CI/production)
2. OS keychain via keyring (secure local storage)
3. Local config file (~/.lingochain/keys.json, fallback when no keychain)

Usage:
    from lingochain.keys import KeyManager

    km = KeyManager()
    km.set_key("libretranslate", "xxxxxxxx-...")
    key = km.get_key("libretranslate")
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import keyring
from keyring.backends import fail
from keyring.errors import KeyringError, PasswordDeleteError

from lingochain.config import CONFIG_DIR

logger = logging.getLogger(__name__)

# Supported services and their env var names
SERVICES = {
    "libretranslate": "LIBRETRANSLATE_API_KEY",
}


@dataclass
class KeyInfo:
    """Information about an API key."""
    service: str
    is_set: bool
    source: str  # 'env', 'keyring', 'config', 'none'
    masked_value: str


class KeyManager:
    """Look up and store provider API keys.

    Priority order for key retrieval:
    1. Environment variable
    2. OS keychain (via keyring)
    3. Local config file
    """

    SERVICE_NAME = "LingoChain"

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = Path(config_dir) if config_dir else CONFIG_DIR
        self.config_file = self.config_dir / "keys.json"
        self._keyring_available = self._check_keyring()

    def _check_keyring(self) -> bool:
        """Whether a usable keychain backend is installed."""
        try:
            backend = keyring.get_keyring()
        except KeyringError as e:
            logger.debug(f"keyring unavailable: {e}")
            return False
        return not isinstance(backend, fail.Keyring)

    def _env_var(self, service: str) -> str:
        return SERVICES.get(service, f"{service.upper()}_API_KEY")

    def _read_config(self) -> dict:
        if not self.config_file.exists():
            return {}
        try:
            config = json.loads(self.config_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable key file {self.config_file}: {e}")
            return {}
        if not isinstance(config, dict):
            logger.warning(
                f"Ignoring unreadable key file {self.config_file}: "
                f"expected a JSON object, got {type(config).__name__}"
            )
            return {}
        return config

    def _write_config(self, config: dict):
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(json.dumps(config, indent=2), encoding="utf-8")
        self.config_file.chmod(0o600)  # Restrict permissions

    def _keyring_get(self, service: str) -> Optional[str]:
        if not self._keyring_available:
            return None
        try:
            return keyring.get_password(self.SERVICE_NAME, service)
        except KeyringError as e:
            logger.warning(f"Could not read {service} key from keychain: {e}")
            return None

    def _lookup(self, service: str) -> tuple[Optional[str], str]:
        service = service.lower()
        if env_val := os.getenv(self._env_var(service)):
            return env_val, "env"
        if key := self._keyring_get(service):
            return key, "keyring"
        if key := self._read_config().get(service):
            return key, "config"
        return None, "none"

    def get_key(self, service: str) -> Optional[str]:
        """Get API key for a service, or None if not configured."""
        return self._lookup(service)[0]

    def set_key(self, service: str, key: str, use_keyring: bool = True) -> str:
        """Store API key for a service.

        Args:
            service: Service name
            key: API key to store
            use_keyring: Whether to use the OS keychain (if available)

        Returns:
            Storage location used ('keyring' or 'config')
        """
        service = service.lower()

        if use_keyring and self._keyring_available:
            try:
                keyring.set_password(self.SERVICE_NAME, service, key)
                return "keyring"
            except KeyringError as e:
                logger.warning(f"Keychain rejected {service} key, using {self.config_file}: {e}")

        config = self._read_config()
        config[service] = key
        self._write_config(config)
        return "config"

    def delete_key(self, service: str) -> bool:
        """Delete a stored API key from keychain and config file.

        Environment variables are left alone.
        """
        service = service.lower()
        deleted = False

        if self._keyring_available:
            try:
                keyring.delete_password(self.SERVICE_NAME, service)
                deleted = True
            except PasswordDeleteError:
                pass  # nothing stored there
            except KeyringError as e:
                logger.warning(f"Could not delete {service} key from keychain: {e}")

        config = self._read_config()
        if service in config:
            del config[service]
            self._write_config(config)
            deleted = True

        return deleted

    def get_key_info(self, service: str) -> KeyInfo:
        """Get information about a stored key."""
        key, source = self._lookup(service)
        return KeyInfo(
            service=service.lower(),
            is_set=key is not None,
            source=source,
            masked_value=self._mask_key(key) if key else "",
        )

    def list_keys(self) -> list[KeyInfo]:
        """List all known services and their key status."""
        return [self.get_key_info(service) for service in SERVICES]

    def _mask_key(self, key: str) -> str:
        """Mask a key for display (show first 4 and last 4 chars)."""
        if len(key) <= 12:
            return "*" * len(key)
        return f"{key[:4]}...{key[-4:]}"


def get_key(service: str) -> Optional[str]:
    """Convenience function to get an API key."""
    return KeyManager().get_key(service)
