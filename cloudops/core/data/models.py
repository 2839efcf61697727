#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Domain models for CloudOps dispatch.

Requests and replies are frozen dataclasses that translate to and from the
cloudlab protobuf messages through a per-class ``WIRE_FIELDS`` table
(attribute name -> wire field name). A dispatch always ends in exactly one
``DispatchOutcome``.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, Iterator, List, Mapping, Optional, Type, Union

from google.protobuf import message

from ..protos import messages
from ..utils.exceptions import InvalidParametersError, UnsupportedOperationError


class OperationSelector(str, Enum):
    """
    Remote operations a dispatch can perform.
    """

    CREATE_INSTANCE = "CreateInstance"
    DESTROY_INSTANCE = "DestroyInstance"
    DEPLOY_APPLICATION = "DeployApplication"
    DEPLOY_DATABASE = "DeployDatabase"
    CONNECT_APP_TO_DATABASE = "ConnectAppToDatabase"
    RUN_MODULE = "RunModule"

    @classmethod
    def from_value(cls, value: Union["OperationSelector", str]) -> "OperationSelector":
        """
        Parse a selector, accepting the ``serviceCase`` spellings of older
        ``config.properties`` files (``CreateVM``, ``DeleteVM``, ...).
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if member.value == text:
                return member
        alias = _SELECTOR_ALIASES.get(text)
        if alias is not None:
            return alias
        raise UnsupportedOperationError(selector=text)


_SELECTOR_ALIASES: Dict[str, OperationSelector] = {
    "CreateVM": OperationSelector.CREATE_INSTANCE,
    "DeleteVM": OperationSelector.DESTROY_INSTANCE,
    "DeployApp": OperationSelector.DEPLOY_APPLICATION,
    "DeployDB": OperationSelector.DEPLOY_DATABASE,
    "Connect": OperationSelector.CONNECT_APP_TO_DATABASE,
    "Generic": OperationSelector.RUN_MODULE,
}


class ServiceGroup(str, Enum):
    """
    Logical remote service an operation belongs to.
    """

    COMPUTE = "compute"
    DEPLOYMENT = "deployment"
    MODULE = "module"


class FailureKind(str, Enum):
    INVALID_PARAMETERS = "InvalidParameters"
    UNSUPPORTED_OPERATION = "UnsupportedOperation"
    RPC_ERROR = "RpcError"


class ParameterSet(Mapping[str, str]):
    """
    Immutable name -> string mapping that feeds the request builders.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        self._values: Dict[str, str] = {}
        for key, value in (values or {}).items():
            if value is None:
                continue
            self._values[str(key)] = str(value)

    @classmethod
    def from_properties_file(cls, path: Any, encoding: str = "latin-1") -> "ParameterSet":
        from .properties import read_properties_file

        return cls(read_properties_file(path, encoding=encoding))

    @classmethod
    def from_properties(cls, text: str) -> "ParameterSet":
        from .properties import load_properties

        return cls(load_properties(text))

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParameterSet({self._values!r})"

    def is_present(self, name: str) -> bool:
        value = self._values.get(name)
        return value is not None and value.strip() != ""

    def first_present(self, names: Iterable[str]) -> Optional[str]:
        """
        Value of the first name that is present, or ``None``.
        """
        for name in names:
            if self.is_present(name):
                return self._values[name]
        return None

    def require(self, names: Iterable[str], operation: Optional[str] = None) -> Dict[str, str]:
        """
        Return the named values, raising once for every missing name.
        """
        found: Dict[str, str] = {}
        missing: List[str] = []
        for name in names:
            if self.is_present(name):
                found[name] = self._values[name]
            else:
                missing.append(name)
        if missing:
            raise InvalidParametersError(missing=missing, operation=operation)
        return found

    def merged(self, overrides: Optional[Mapping[str, Any]]) -> "ParameterSet":
        combined: Dict[str, Any] = dict(self._values)
        combined.update(overrides or {})
        return ParameterSet(combined)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._values)


@dataclass(frozen=True)
class _WireValue:
    """
    Mixin for frozen values mirrored by a protobuf message.
    """

    WIRE_FIELDS: ClassVar[Dict[str, str]] = {}

    def to_wire_dict(self) -> Dict[str, str]:
        return {wire: getattr(self, attr) for attr, wire in self.WIRE_FIELDS.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass(frozen=True)
class OperationRequest(_WireValue):
    MESSAGE_TYPE: ClassVar[Type[message.Message]]

    def to_message(self) -> message.Message:
        return self.MESSAGE_TYPE(**self.to_wire_dict())


@dataclass(frozen=True)
class OperationReply(_WireValue):
    @classmethod
    def from_message(cls, reply: message.Message) -> "OperationReply":
        values = {attr: getattr(reply, wire) for attr, wire in cls.WIRE_FIELDS.items()}
        return cls(**values)


@dataclass(frozen=True)
class CreateInstanceRequest(OperationRequest):
    region: str
    os: str
    machine_size: str
    key_pair: str
    bucket_name: str

    MESSAGE_TYPE: ClassVar[Type[message.Message]] = messages.Request
    WIRE_FIELDS: ClassVar[Dict[str, str]] = {
        "region": "region",
        "os": "OS",
        "machine_size": "machineSize",
        "key_pair": "keyPair",
        "bucket_name": "bucketName",
    }


@dataclass(frozen=True)
class DestroyInstanceRequest(OperationRequest):
    instance_id: str
    region: str

    MESSAGE_TYPE: ClassVar[Type[message.Message]] = messages.DestroyRequest
    WIRE_FIELDS: ClassVar[Dict[str, str]] = {
        "instance_id": "instanceID",
        "region": "region",
    }


_DEPLOYMENT_WIRE_FIELDS = {
    "credentials": "credentials",
    "bucket_name": "bucketName",
    "username": "username",
    "public_ip": "publicIP",
}


@dataclass(frozen=True)
class DeploymentRequest(OperationRequest):
    """
    Fields shared by every request of the deployment family.
    """

    credentials: str
    bucket_name: str
    username: str
    public_ip: str

    WIRE_FIELDS: ClassVar[Dict[str, str]] = _DEPLOYMENT_WIRE_FIELDS


@dataclass(frozen=True)
class DeployApplicationRequest(DeploymentRequest):
    MESSAGE_TYPE: ClassVar[Type[message.Message]] = messages.DeployAppRequest


@dataclass(frozen=True)
class DeployDatabaseRequest(DeploymentRequest):
    MESSAGE_TYPE: ClassVar[Type[message.Message]] = messages.DeployDBRequest


@dataclass(frozen=True)
class ConnectAppToDatabaseRequest(DeploymentRequest):
    MESSAGE_TYPE: ClassVar[Type[message.Message]] = messages.ConnectRequest


@dataclass(frozen=True)
class RunModuleRequest(DeploymentRequest):
    module_name: str
    install_file: str

    MESSAGE_TYPE: ClassVar[Type[message.Message]] = messages.GenericRequest
    WIRE_FIELDS: ClassVar[Dict[str, str]] = {
        **_DEPLOYMENT_WIRE_FIELDS,
        "module_name": "moduleName",
        "install_file": "installFile",
    }


@dataclass(frozen=True)
class CreateInstanceReply(OperationReply):
    instance_id: str
    public_ip: str

    WIRE_FIELDS: ClassVar[Dict[str, str]] = {
        "instance_id": "instanceID",
        "public_ip": "publicIP",
    }


@dataclass(frozen=True)
class DestroyInstanceReply(OperationReply):
    status: str

    WIRE_FIELDS: ClassVar[Dict[str, str]] = {"status": "status"}


@dataclass(frozen=True)
class OutputReply(OperationReply):
    """Free-text reply of the deployment and module services."""

    output: str

    WIRE_FIELDS: ClassVar[Dict[str, str]] = {"output": "output"}


@dataclass(frozen=True)
class DispatchOutcome:
    """
    Terminal result of one dispatch: ``Success(reply)`` or
    ``Failure(kind, detail)``.

    ``app_done`` and ``db_done`` are set only by a successful application or
    database deployment; the dispatcher never reads them.
    """

    operation: Optional[OperationSelector] = None
    reply: Optional[OperationReply] = None
    failure_kind: Optional[FailureKind] = None
    detail: str = ""
    request: Optional[OperationRequest] = None
    selector_value: Optional[str] = None
    app_done: bool = False
    db_done: bool = False

    @classmethod
    def success(
        cls,
        operation: OperationSelector,
        reply: OperationReply,
        request: Optional[OperationRequest] = None,
        **flags: bool,
    ) -> "DispatchOutcome":
        return cls(
            operation=operation,
            reply=reply,
            request=request,
            selector_value=operation.value,
            app_done=bool(flags.get("app_done", False)),
            db_done=bool(flags.get("db_done", False)),
        )

    @classmethod
    def failure(
        cls,
        failure_kind: FailureKind,
        detail: str,
        operation: Optional[OperationSelector] = None,
        request: Optional[OperationRequest] = None,
        selector_value: Optional[str] = None,
    ) -> "DispatchOutcome":
        if selector_value is None and operation is not None:
            selector_value = operation.value
        return cls(
            operation=operation,
            failure_kind=failure_kind,
            detail=detail,
            request=request,
            selector_value=selector_value,
        )

    @property
    def ok(self) -> bool:
        return self.failure_kind is None


__all__ = [
    "OperationSelector",
    "ServiceGroup",
    "FailureKind",
    "ParameterSet",
    "OperationRequest",
    "OperationReply",
    "CreateInstanceRequest",
    "DestroyInstanceRequest",
    "DeploymentRequest",
    "DeployApplicationRequest",
    "DeployDatabaseRequest",
    "ConnectAppToDatabaseRequest",
    "RunModuleRequest",
    "CreateInstanceReply",
    "DestroyInstanceReply",
    "OutputReply",
    "DispatchOutcome",
]
