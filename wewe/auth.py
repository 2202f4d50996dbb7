"""PIN authentication, optionally restricted to trusted networks."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

import nacl.exceptions
import nacl.pwhash.argon2id

from wewe.config import ConfigError, load_config
from wewe.net import get_default_gateway_mac

logger = logging.getLogger("wewe.auth")

DEFAULT_CONFIG_PATH = "/etc/wewe/config.yaml"
_CONFIG_PATH_PREFIX = "config_path="
PIN_PROMPT = "PIN: "


class PamResult(enum.IntEnum):
    """Result codes returned to the authentication stack."""

    SUCCESS = 0
    AUTH_ERR = 7
    USER_UNKNOWN = 10
    IGNORE = 25


class PamError(Exception):
    """Raised by a handle when an item cannot be obtained."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


@dataclass
class PamHandle:
    """An authentication transaction: the user and a way to ask for the PIN.

    ``conversation`` is called with the prompt when no token is cached.
    """

    user: str | None = None
    authtok: str | None = None
    conversation: Callable[[str], str | None] | None = field(default=None, repr=False)

    def get_user(self) -> str:
        """Return the user being authenticated."""
        if self.user is None:
            raise PamError("no user available")
        return self.user

    def get_authtok(self, prompt: str = PIN_PROMPT) -> str:
        """Return the cached token, asking through the conversation if needed."""
        if self.authtok is None:
            if self.conversation is None:
                raise PamError("no conversation available")
            answer = self.conversation(prompt)
            if answer is None:
                raise PamError("conversation returned no token")
            self.authtok = answer
        return self.authtok

    def clear_authtok(self) -> None:
        """Forget the cached token."""
        self.authtok = None


def config_path_from_args(argv: Iterable[str]) -> str:
    """Return the value of the first ``config_path=`` argument, or the default."""
    for arg in argv:
        if arg.startswith(_CONFIG_PATH_PREFIX):
            return arg[len(_CONFIG_PATH_PREFIX):]
    return DEFAULT_CONFIG_PATH


def verify_pin(pin_hash: str, pin: str) -> bool:
    """Check ``pin`` against an encoded argon2id hash."""
    try:
        return nacl.pwhash.argon2id.verify(pin_hash.encode(), pin.encode())
    except (nacl.exceptions.CryptoError, ValueError, TypeError):
        return False


def authenticate(
    pamh: PamHandle,
    argv: Iterable[str] = (),
    gateway_lookup: Callable[[], str | None] = get_default_gateway_mac,
) -> PamResult:
    """Authenticate the handle's user by PIN according to the configuration."""
    config_path = config_path_from_args(argv)

    try:
        username = pamh.get_user()
    except PamError:
        logger.error("Could not get username.")
        return PamResult.USER_UNKNOWN

    try:
        config = load_config(config_path)
    except ConfigError:
        logger.error("Failed to load wewe config.")
        return PamResult.IGNORE  # fail open

    user = config.find_user(username)
    if user is None or not user.pin_hash:
        logger.info("User %s not in wewe config or no PIN, ignoring.", username)
        return PamResult.IGNORE

    if user.trusted_network_check:
        gateway_mac = gateway_lookup()
        if gateway_mac is None:
            logger.warning("Could not get gateway MAC, ignoring wewe auth.")
            return PamResult.IGNORE
        wanted = gateway_mac.lower()
        if not any(network.gateway.lower() == wanted for network in user.networks):
            logger.info("User %s not on a trusted network, ignoring wewe auth.", username)
            return PamResult.IGNORE

    try:
        pin = pamh.get_authtok(PIN_PROMPT)
    except PamError as exc:
        logger.error("pam_get_authtok failed: %s", exc)
        return PamResult.AUTH_ERR

    if not verify_pin(user.pin_hash, pin):
        logger.warning("Invalid PIN for user %s.", username)
        pamh.clear_authtok()
        return PamResult.AUTH_ERR

    logger.info("User %s authenticated successfully via wewe.", username)
    return PamResult.SUCCESS


def setcred(pamh: PamHandle, argv: Iterable[str] = ()) -> PamResult:
    """Credentials are not managed; always succeeds."""
    return PamResult.SUCCESS