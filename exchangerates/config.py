"""Loading of the YAML configuration file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

import yaml

from .openexchangerates import OpenExchangeRatesConfig

_RULE = "~" * 100


@dataclass(frozen=True)
class ServerConfig:
    """Address and port the HTTP server listens on."""

    addr: str = ""
    port: int = 0

    def socket_addr(self) -> str:
        """Return ``"<addr>:<port>"``."""
        return f"{self.addr}:{self.port}"


@dataclass(frozen=True)
class Config:
    """The whole application configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    open_exchange_rates_api: OpenExchangeRatesConfig = field(
        default_factory=OpenExchangeRatesConfig
    )

    def _as_json(self) -> dict[str, Any]:
        return {
            "Server": {"Addr": self.server.addr, "Port": self.server.port},
            "OpenExchangeRatesAPI": {
                "AppID": self.open_exchange_rates_api.app_id,
                "BaseURL": self.open_exchange_rates_api.base_url,
            },
        }

    def __str__(self) -> str:
        body = json.dumps(self._as_json(), indent=1)
        return (
            f"\n{_RULE}\nYAML configuration file:\n{_RULE}\n{body}\n{_RULE}\n"
        )


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    for name, value in data.items():
        if str(name).lower() == key:
            if value is None:
                return {}
            if not isinstance(value, Mapping):
                raise ValueError(f"'{key}' must be a mapping")
            return value
    return {}


def _value(data: Mapping[str, Any], key: str, default: Any) -> Any:
    for name, value in data.items():
        if str(name).lower() == key:
            return default if value is None else value
    return default


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _value(data, key, "")
    if isinstance(value, (Mapping, list)):
        raise ValueError(f"'{key}' must be a scalar")
    return str(value)


def _integer(data: Mapping[str, Any], key: str) -> int:
    value = _value(data, key, 0)
    if isinstance(value, bool):
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{key}' must be an integer, got {value!r}") from None


def load_config(path: str) -> Config:
    """Read and decode the YAML configuration file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            raw = yaml.safe_load(handle)
    except OSError as exc:
        raise type(exc)(f"failed to read the config file: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"failed to read the config file: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValueError("failed to unmarshal config file: top level must be a mapping")

    try:
        server = _section(raw, "server")
        api = _section(raw, "open_exchange_rates_api")
        return Config(
            server=ServerConfig(
                addr=_string(server, "addr"), port=_integer(server, "port")
            ),
            open_exchange_rates_api=OpenExchangeRatesConfig(
                app_id=_string(api, "app_id"), base_url=_string(api, "base_url")
            ),
        )
    except ValueError as exc:
        raise ValueError(f"failed to unmarshal config file: {exc}") from exc