#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Remote connection handle.

A ``ConnectionHandle`` owns one gRPC channel to one endpoint for the lifetime
of a dispatcher run. Opening it never performs a round trip. Closing it waits
up to a bounded timeout for in-flight calls to drain and then releases the
channel regardless.
"""

import threading
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Type

import grpc

from .config import DEFAULT_CLOSE_TIMEOUT
from .data.models import ServiceGroup
from .protos.stubs import EC2OpsStub, GenericOpsStub, WordPressOpsStub
from .utils.exceptions import ConnectionError, ExceptionTranslator
from .utils.logger import ModernLogger

SERVICE_STUBS: Dict[ServiceGroup, Type[Any]] = {
    ServiceGroup.COMPUTE: EC2OpsStub,
    ServiceGroup.DEPLOYMENT: WordPressOpsStub,
    ServiceGroup.MODULE: GenericOpsStub,
}

SERVICE_NAMES: Dict[ServiceGroup, str] = {
    ServiceGroup.COMPUTE: "EC2Ops",
    ServiceGroup.DEPLOYMENT: "WordPressOps",
    ServiceGroup.MODULE: "GenericOps",
}

ChannelFactory = Callable[[str, List[Tuple[str, Any]]], Any]


def default_channel_options() -> List[Tuple[str, Any]]:
    """
    Channel options for long-running provisioning calls.
    """
    return [
        ("grpc.max_send_message_length", 16 * 1024 * 1024),
        ("grpc.max_receive_message_length", 16 * 1024 * 1024),
        # Keep the HTTP/2 connection alive while a deployment runs for minutes
        ("grpc.keepalive_time_ms", 30000),
        ("grpc.keepalive_timeout_ms", 10000),
        ("grpc.keepalive_permit_without_calls", True),
        ("grpc.http2.max_pings_without_data", 0),
    ]


def insecure_channel_factory(address: str, options: List[Tuple[str, Any]]) -> grpc.Channel:
    return grpc.insecure_channel(address, options=options)


class ConnectionHandle(ModernLogger):
    """
    Reusable channel plus one stub per service group.

    The channel and stubs are fixed at construction. The only mutable state is
    the in-flight call counter used by ``close`` to drain outstanding work.

    Usage:
        >>> with ConnectionHandle.open("localhost:50051") as handle:
        ...     stub = handle.stub(ServiceGroup.COMPUTE)
    """

    def __init__(
        self,
        address: str,
        channel: Any,
        close_timeout: float = DEFAULT_CLOSE_TIMEOUT,
    ) -> None:
        super().__init__(name="ConnectionHandle")
        self.address = address
        self.close_timeout = close_timeout
        self._channel = channel
        self._stubs: Dict[ServiceGroup, Any] = {
            group: stub_type(channel) for group, stub_type in SERVICE_STUBS.items()
        }
        self._in_flight = 0
        self._closed = False
        self._condition = threading.Condition()

    @classmethod
    def open(
        cls,
        address: str,
        options: Optional[List[Tuple[str, Any]]] = None,
        close_timeout: float = DEFAULT_CLOSE_TIMEOUT,
        channel_factory: Optional[ChannelFactory] = None,
    ) -> "ConnectionHandle":
        """
        Create the channel for ``address``. No network round trip happens here.

        Raises:
            ConnectionError: If the channel cannot be constructed
        """
        factory = channel_factory or insecure_channel_factory
        channel_options = default_channel_options() if options is None else list(options)
        try:
            channel = factory(address, channel_options)
        except Exception as e:
            raise ExceptionTranslator.as_connection_error(
                e,
                address=address,
                message=f"Failed to create channel to {address}",
            ) from e
        handle = cls(address=address, channel=channel, close_timeout=close_timeout)
        handle.debug(f"Opened channel to {address}")
        return handle

    @property
    def channel(self) -> Any:
        return self._channel

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def in_flight(self) -> int:
        with self._condition:
            return self._in_flight

    def stub(self, service: ServiceGroup) -> Any:
        if self._closed:
            raise ConnectionError(
                message=f"Connection to {self.address} is closed",
                address=self.address,
            )
        return self._stubs[service]

    @contextmanager
    def call_scope(self) -> Iterator["ConnectionHandle"]:
        """
        Track one outstanding call so ``close`` can wait for it.
        """
        with self._condition:
            if self._closed:
                raise ConnectionError(
                    message=f"Connection to {self.address} is closed",
                    address=self.address,
                )
            self._in_flight += 1
        try:
            yield self
        finally:
            with self._condition:
                self._in_flight -= 1
                self._condition.notify_all()

    def close(self, timeout: Optional[float] = None) -> bool:
        """
        Release the channel after waiting up to ``timeout`` seconds for
        in-flight calls.

        Returns:
            True if every in-flight call finished before the channel was
            released, False if the wait timed out. Repeated calls return True
            without doing anything.
        """
        wait_seconds = self.close_timeout if timeout is None else max(0.0, timeout)

        with self._condition:
            if self._closed:
                self.debug(f"Connection to {self.address} already closed")
                return True
            self._closed = True

            deadline = time.monotonic() + wait_seconds
            while self._in_flight > 0:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                self._condition.wait(remaining)
            drained = self._in_flight == 0
            pending = self._in_flight

        if not drained:
            self.warning(
                f"Timed out after {wait_seconds:.1f}s waiting for {pending} in-flight "
                f"call(s) on {self.address}; closing anyway"
            )

        try:
            self._channel.close()
        except Exception as e:
            self.warning(f"Error while closing channel to {self.address}: {e}")
        else:
            self.debug(f"Closed channel to {self.address}")

        return drained

    def __enter__(self) -> "ConnectionHandle":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"ConnectionHandle(address={self.address!r}, state={state})"


__all__ = [
    "ConnectionHandle",
    "ChannelFactory",
    "SERVICE_NAMES",
    "SERVICE_STUBS",
    "default_channel_options",
    "insecure_channel_factory",
]
