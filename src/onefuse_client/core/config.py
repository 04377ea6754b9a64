from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional

from dotenv import load_dotenv

DEFAULT_SCHEME = "https"
DEFAULT_PORT = 443
SUPPORTED_SCHEMES = ("http", "https")

_FALSEY = {"0", "false", "no", "off"}


class MissingConnectionSettingError(ValueError):
    """Raised when a required connection setting is missing."""

    def __init__(self, setting: str):
        super().__init__(f"{setting} not set")
        self.setting = setting


@dataclass(frozen=True)
class ConnectionContext:
    """
    Where and how to reach a OneFuse instance.
    - Immutable; one instance is shared read-only by every operation of a client
    - verify_ssl=False makes the transport skip certificate verification
    """

    host: str
    username: str
    password: str
    scheme: str = DEFAULT_SCHEME
    port: int = DEFAULT_PORT
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        if not self.host:
            raise MissingConnectionSettingError("host")
        if not self.username:
            raise MissingConnectionSettingError("username")
        if self.scheme not in SUPPORTED_SCHEMES:
            raise ValueError(
                f"scheme must be one of {', '.join(SUPPORTED_SCHEMES)}, "
                f"got {self.scheme!r}"
            )
        if not isinstance(self.port, int) or not 0 < self.port < 65536:
            raise ValueError(f"port must be an integer in 1..65535, got {self.port!r}")

    @property
    def netloc(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.netloc}"

    def __repr__(self) -> str:
        # password intentionally left out so contexts can be logged
        return (
            f"ConnectionContext(scheme={self.scheme!r}, host={self.host!r}, "
            f"port={self.port!r}, username={self.username!r}, "
            f"verify_ssl={self.verify_ssl!r})"
        )

    @classmethod
    def from_env(cls, *, use_dotenv: bool = True) -> "ConnectionContext":
        settings = load_env_config(use_dotenv=use_dotenv)
        if not settings["host"]:
            raise MissingConnectionSettingError("ONEFUSE_ADDRESS")
        if not settings["username"]:
            raise MissingConnectionSettingError("ONEFUSE_USER")
        return cls(
            host=settings["host"],
            username=settings["username"],
            password=settings["password"],
            scheme=settings["scheme"],
            port=_parse_port(settings["port"]),
            verify_ssl=_parse_bool(settings["verify_ssl"], default=True),
        )


def _parse_port(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"ONEFUSE_PORT must be an integer, got {raw!r}") from exc


def _parse_bool(raw: Optional[str], *, default: bool) -> bool:
    if raw is None or raw == "":
        return default
    return raw.strip().lower() not in _FALSEY


def load_env_config(*, use_dotenv: bool = True) -> Dict[str, str]:
    """Load OneFuse connection settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    return {
        "scheme": os.getenv("ONEFUSE_SCHEME", DEFAULT_SCHEME).strip().lower(),
        "host": os.getenv("ONEFUSE_ADDRESS", "").strip(),
        "port": os.getenv("ONEFUSE_PORT", "").strip(),
        "username": os.getenv("ONEFUSE_USER", "").strip(),
        "password": os.getenv("ONEFUSE_PASSWORD", ""),
        "verify_ssl": os.getenv("ONEFUSE_VERIFY_SSL", ""),
    }


__all__ = [
    "ConnectionContext",
    "MissingConnectionSettingError",
    "load_env_config",
    "DEFAULT_SCHEME",
    "DEFAULT_PORT",
]
