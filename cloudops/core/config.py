#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Dispatcher configuration.

Defaults match the stock deployment: the compute and application-deployment
services share ``localhost:50051`` and the generic module service listens on
``localhost:50052``. Every field can be overridden through ``CLOUDOPS_*``
environment variables (see ``DispatcherConfig.from_env``).
"""

import os
import threading
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from .data.models import ServiceGroup
from .utils.exceptions import ConfigurationError
from .utils.logger import resolve_level

DEFAULT_ADDRESS = "localhost:50051"
DEFAULT_MODULE_ADDRESS = "localhost:50052"
DEFAULT_CALL_TIMEOUT = 600.0
DEFAULT_CLOSE_TIMEOUT = 5.0
DEFAULT_SELECTOR_KEY = "serviceCase"

_ENV_PREFIX = "CLOUDOPS_"


def _parse_address(address: str, field_name: str) -> str:
    text = str(address).strip()
    host, sep, port = text.rpartition(":")
    if not sep or not host:
        raise ConfigurationError(
            message=f"{field_name} must look like host:port, got '{address}'",
            field=field_name,
            value=address,
        )
    try:
        port_number = int(port)
    except ValueError as e:
        raise ConfigurationError(
            message=f"{field_name} has a non-numeric port: '{address}'",
            field=field_name,
            value=address,
        ) from e
    if not 1 <= port_number <= 65535:
        raise ConfigurationError(
            message=f"{field_name} port must be in range 1-65535, got {port_number}",
            field=field_name,
            value=address,
        )
    return text


def _parse_optional_seconds(value: Any, field_name: str) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("", "none", "off", "0"):
            return None
        value = text
    try:
        seconds = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            message=f"{field_name} must be a number of seconds, got '{value}'",
            field=field_name,
            value=value,
        ) from e
    if seconds <= 0:
        return None
    return seconds


@dataclass(frozen=True)
class DispatcherConfig:
    """
    Immutable dispatcher settings.

    Attributes:
        address: Endpoint of the compute and deployment services
        module_address: Endpoint of the generic module service
        call_timeout: Per-call deadline in seconds; ``None`` waits indefinitely
        close_timeout: Bounded wait for in-flight calls when closing
        selector_key: Parameter naming the operation to run
        log_level: Logging level name
    """

    address: str = DEFAULT_ADDRESS
    module_address: str = DEFAULT_MODULE_ADDRESS
    call_timeout: Optional[float] = DEFAULT_CALL_TIMEOUT
    close_timeout: float = DEFAULT_CLOSE_TIMEOUT
    selector_key: str = DEFAULT_SELECTOR_KEY
    log_level: str = "info"

    def __post_init__(self) -> None:
        _parse_address(self.address, "address")
        _parse_address(self.module_address, "module_address")

        if self.call_timeout is not None and self.call_timeout <= 0:
            raise ConfigurationError(
                message="call_timeout must be positive or None",
                field="call_timeout",
                value=self.call_timeout,
            )
        if self.close_timeout < 0:
            raise ConfigurationError(
                message="close_timeout cannot be negative",
                field="close_timeout",
                value=self.close_timeout,
            )
        if not str(self.selector_key).strip():
            raise ConfigurationError(
                message="selector_key cannot be empty",
                field="selector_key",
                value=self.selector_key,
            )
        try:
            resolve_level(self.log_level)
        except ValueError as e:
            raise ConfigurationError(
                message=str(e),
                field="log_level",
                value=self.log_level,
            ) from e

    def address_for(self, service: ServiceGroup) -> str:
        """
        Endpoint hosting the given service group.
        """
        if service is ServiceGroup.MODULE:
            return self.module_address
        return self.address

    def with_overrides(self, **overrides: Any) -> "DispatcherConfig":
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DispatcherConfig":
        """
        Build configuration from ``CLOUDOPS_ADDRESS``, ``CLOUDOPS_MODULE_ADDRESS``,
        ``CLOUDOPS_CALL_TIMEOUT``, ``CLOUDOPS_CLOSE_TIMEOUT``,
        ``CLOUDOPS_SELECTOR_KEY`` and ``CLOUDOPS_LOG_LEVEL``.
        """
        env = os.environ if environ is None else environ
        values: dict = {}

        for field_name in ("address", "module_address", "selector_key", "log_level"):
            raw = env.get(_ENV_PREFIX + field_name.upper())
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()

        raw_call_timeout = env.get(_ENV_PREFIX + "CALL_TIMEOUT")
        if raw_call_timeout is not None:
            values["call_timeout"] = _parse_optional_seconds(raw_call_timeout, "call_timeout")

        raw_close_timeout = env.get(_ENV_PREFIX + "CLOSE_TIMEOUT")
        if raw_close_timeout is not None:
            close_timeout = _parse_optional_seconds(raw_close_timeout, "close_timeout")
            values["close_timeout"] = close_timeout if close_timeout is not None else 0.0

        return cls(**values)


_default_config: Optional[DispatcherConfig] = None
_default_lock = threading.Lock()


def create_config(**overrides: Any) -> DispatcherConfig:
    """
    Build a configuration from defaults plus explicit overrides.
    """
    return DispatcherConfig(**overrides)


def get_config() -> DispatcherConfig:
    """
    Process-wide default configuration, read once from the environment.
    """
    global _default_config
    with _default_lock:
        if _default_config is None:
            _default_config = DispatcherConfig.from_env()
        return _default_config


def set_config(config: Optional[DispatcherConfig]) -> None:
    """
    Replace (or with ``None`` reset) the process-wide default configuration.
    """
    global _default_config
    with _default_lock:
        _default_config = config


__all__ = [
    "DispatcherConfig",
    "create_config",
    "get_config",
    "set_config",
    "DEFAULT_ADDRESS",
    "DEFAULT_MODULE_ADDRESS",
    "DEFAULT_CALL_TIMEOUT",
    "DEFAULT_CLOSE_TIMEOUT",
    "DEFAULT_SELECTOR_KEY",
]
