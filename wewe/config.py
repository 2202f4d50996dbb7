"""Loading and validation of the YAML user configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Mapping

import yaml

logger = logging.getLogger("wewe.config")

_TRUE_WORDS = frozenset({"true", "yes", "on", "y", "1", "enable", "enabled"})
_FALSE_WORDS = frozenset({"false", "no", "off", "n", "0", "disable", "disabled"})


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


@dataclass(frozen=True)
class Network:
    """A trusted network, identified by the MAC address of its gateway."""

    name: str
    gateway: str


@dataclass(frozen=True)
class User:
    """Per-user settings."""

    username: str
    trusted_network_check: bool
    pin_hash: str | None = None
    networks: tuple[Network, ...] = ()


@dataclass(frozen=True)
class Config:
    """The whole configuration document."""

    users: tuple[User, ...] = field(default_factory=tuple)

    def find_user(self, username: str) -> User | None:
        """Return the first user entry with this name, or None."""
        return next((user for user in self.users if user.username == username), None)


def _check_keys(
    mapping: Any, where: str, required: set[str], optional: set[str]
) -> Mapping[str, Any]:
    if not isinstance(mapping, Mapping):
        raise ConfigError(f"{where}: expected a mapping")
    unknown = set(mapping) - required - optional
    if unknown:
        raise ConfigError(f"{where}: unknown key(s): {', '.join(sorted(map(str, unknown)))}")
    missing = required - set(mapping)
    if missing:
        raise ConfigError(f"{where}: missing key(s): {', '.join(sorted(missing))}")
    return mapping


def _string(value: Any, where: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ConfigError(f"{where}: expected a string")


def _boolean(value: Any, where: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ConfigError(f"{where}: expected a boolean")


def _sequence(value: Any, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise ConfigError(f"{where}: expected a sequence")
    return value


def _parse_network(raw: Any, where: str) -> Network:
    data = _check_keys(raw, where, {"name", "gateway"}, set())
    return Network(
        name=_string(data["name"], f"{where}.name"),
        gateway=_string(data["gateway"], f"{where}.gateway"),
    )


def _parse_user(raw: Any, where: str) -> User:
    data = _check_keys(
        raw, where, {"username", "trusted_network_check"}, {"pin_hash", "networks"}
    )
    pin_hash = None
    if "pin_hash" in data:
        pin_hash = _string(data["pin_hash"], f"{where}.pin_hash")
    networks: tuple[Network, ...] = ()
    if "networks" in data:
        entries = _sequence(data["networks"], f"{where}.networks")
        networks = tuple(
            _parse_network(entry, f"{where}.networks[{pos}]")
            for pos, entry in enumerate(entries)
        )
    return User(
        username=_string(data["username"], f"{where}.username"),
        trusted_network_check=_boolean(
            data["trusted_network_check"], f"{where}.trusted_network_check"
        ),
        pin_hash=pin_hash,
        networks=networks,
    )


def _parse_config(document: Any) -> Config:
    data = _check_keys(document, "document", {"users"}, set())
    entries = _sequence(data["users"], "users")
    return Config(
        users=tuple(
            _parse_user(entry, f"users[{pos}]") for pos, entry in enumerate(entries)
        )
    )


def load_config(filepath: str | os.PathLike[str]) -> Config:
    """Read and validate the configuration at ``filepath``.

    Raises ConfigError if the file cannot be read, is not valid YAML, or does
    not follow the expected schema.
    """
    try:
        with open(filepath, encoding="utf-8") as stream:
            document = yaml.safe_load(stream)
        config = _parse_config(document)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.error("Failed to load YAML file %s: %s", filepath, exc)
        raise ConfigError(f"failed to load {filepath}: {exc}") from exc
    except ConfigError as exc:
        logger.error("Failed to load YAML file %s: %s", filepath, exc)
        raise
    logger.info("Successfully loaded config from %s", filepath)
    return config