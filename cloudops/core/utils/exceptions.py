#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exception hierarchy for CloudOps.

All errors carry a human readable ``message``, an optional ``cause`` and a
dictionary of structured context. ``ExceptionTranslator`` is the single place
where gRPC transport failures become ``RemoteCallError`` instances.
"""

import builtins
import traceback
from typing import Any, Dict, Iterable, List, Optional

import grpc


class CloudOpsError(Exception):
    """
    Base class for all CloudOps errors.
    """

    default_message = "CloudOps error"

    def __init__(
        self,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
        **context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.cause = cause
        self.context: Dict[str, Any] = {
            key: value for key, value in context.items() if value is not None
        }
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "error": type(self).__name__,
            "message": self.message,
        }
        if self.context:
            payload["context"] = dict(self.context)
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


class InvalidParametersError(CloudOpsError):
    """
    Required parameters are absent; raised before any network activity.
    """

    default_message = "Invalid parameters"

    def __init__(
        self,
        missing: Iterable[str] = (),
        message: Optional[str] = None,
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.missing: List[str] = list(missing)
        if message is None and self.missing:
            message = "missing required parameter(s): {0}".format(", ".join(self.missing))
        super().__init__(
            message=message,
            cause=cause,
            operation=operation,
            missing=self.missing or None,
        )


class UnsupportedOperationError(CloudOpsError):
    """
    The selector does not name any registered operation.
    """

    default_message = "Unsupported operation"

    def __init__(self, selector: str, message: Optional[str] = None) -> None:
        self.selector = selector
        super().__init__(
            message=message or f"Unsupported operation: {selector}",
            selector=selector,
        )


class RemoteCallError(CloudOpsError):
    """
    A remote call failed at the transport level or returned an error status.
    """

    default_message = "Remote call failed"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[str] = None,
        details: Optional[str] = None,
        method: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.status_code = status_code
        self.details = details
        self.method = method
        super().__init__(
            message=message,
            cause=cause,
            status_code=status_code,
            details=details,
            method=method,
        )

    @property
    def summary(self) -> str:
        """
        ``STATUS: details`` rendering used as the failure detail.
        """
        code = self.status_code or "UNKNOWN"
        details = self.details if self.details is not None else self.message
        return f"{code}: {details}" if details else code


class ConnectionError(CloudOpsError):
    """
    The channel to a remote endpoint could not be created or used.
    """

    default_message = "Connection error"

    def __init__(
        self,
        message: Optional[str] = None,
        address: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.address = address
        super().__init__(message=message, cause=cause, address=address)


class ConfigurationError(CloudOpsError):
    """
    Dispatcher configuration is invalid.
    """

    default_message = "Invalid configuration"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        value: Any = None,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message=message, field=field, value=value)


class PropertiesFormatError(CloudOpsError):
    """
    A ``.properties`` source could not be read.
    """

    default_message = "Malformed properties source"

    def __init__(
        self,
        message: Optional[str] = None,
        source: Optional[str] = None,
        line_number: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.source = source
        self.line_number = line_number
        super().__init__(
            message=message,
            cause=cause,
            source=source,
            line_number=line_number,
        )


class ExceptionTranslator:
    """
    Normalize foreign exceptions into CloudOps errors.
    """

    @staticmethod
    def _status_of(exc: BaseException) -> Optional[str]:
        code_getter = getattr(exc, "code", None)
        if not callable(code_getter):
            return None
        try:
            code = code_getter()
        except Exception:
            return None
        if isinstance(code, grpc.StatusCode):
            return code.name
        return str(code) if code is not None else None

    @staticmethod
    def _details_of(exc: BaseException) -> Optional[str]:
        details_getter = getattr(exc, "details", None)
        if not callable(details_getter):
            return None
        try:
            details = details_getter()
        except Exception:
            return None
        return str(details) if details is not None else None

    @classmethod
    def as_remote_call_error(
        cls,
        exc: BaseException,
        method: Optional[str] = None,
    ) -> RemoteCallError:
        if isinstance(exc, RemoteCallError):
            return exc

        if isinstance(exc, grpc.RpcError):
            status_code = cls._status_of(exc) or "UNKNOWN"
            details = cls._details_of(exc) or str(exc) or None
        elif isinstance(exc, (builtins.TimeoutError, grpc.FutureTimeoutError)):
            status_code = grpc.StatusCode.DEADLINE_EXCEEDED.name
            details = str(exc) or "Deadline Exceeded"
        elif isinstance(exc, ConnectionError):
            status_code = grpc.StatusCode.UNAVAILABLE.name
            details = exc.message
        else:
            status_code = grpc.StatusCode.INTERNAL.name
            details = f"{type(exc).__name__}: {exc}"

        return RemoteCallError(
            message=f"RPC failed: {status_code}",
            status_code=status_code,
            details=details,
            method=method,
            cause=exc,
        )

    @staticmethod
    def as_connection_error(
        exc: BaseException,
        address: Optional[str] = None,
        message: Optional[str] = None,
    ) -> ConnectionError:
        if isinstance(exc, ConnectionError):
            return exc
        return ConnectionError(
            message=message or f"Connection failure: {exc}",
            address=address,
            cause=exc,
        )


class ExceptionFormatter:
    """
    Formatting helpers for log lines and CLI output.
    """

    @staticmethod
    def format_exception_summary(exc: BaseException) -> str:
        if isinstance(exc, RemoteCallError):
            return exc.summary
        if isinstance(exc, CloudOpsError):
            return exc.message
        return f"{type(exc).__name__}: {exc}"

    @staticmethod
    def format_exception_chain(exc: BaseException) -> str:
        parts: List[str] = []
        current: Optional[BaseException] = exc
        seen = set()
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            parts.append(ExceptionFormatter.format_exception_summary(current))
            current = getattr(current, "cause", None) or current.__cause__
        return " <- ".join(parts)

    @staticmethod
    def format_exception(exc: BaseException) -> str:
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


__all__ = [
    "CloudOpsError",
    "InvalidParametersError",
    "UnsupportedOperationError",
    "RemoteCallError",
    "ConnectionError",
    "ConfigurationError",
    "PropertiesFormatError",
    "ExceptionTranslator",
    "ExceptionFormatter",
]
