#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Operation invokers.

An invoker performs exactly one synchronous unary call over a
``ConnectionHandle`` and turns the result into a ``DispatchOutcome``. Every
failure of the call, whether a gRPC status, an exceeded deadline or a closed
channel, becomes ``Failure(RpcError, "<STATUS>: <details>")``; nothing raises
past ``__call__``. There are no retries.
"""

import time
from typing import Optional, Type

import grpc

from ..connection import SERVICE_NAMES, ConnectionHandle
from ..data.models import (
    CreateInstanceReply,
    DestroyInstanceReply,
    DispatchOutcome,
    FailureKind,
    OperationReply,
    OperationRequest,
    OperationSelector,
    OutputReply,
    ServiceGroup,
)
from ..protos.stubs import method_path
from ..utils.exceptions import ConnectionError, ExceptionTranslator
from ..utils.logger import ModernLogger

APP_DONE = "app_done"
DB_DONE = "db_done"


class OperationInvoker(ModernLogger):
    """
    Callable binding an operation to one remote method.

    Args:
        operation: Operation this invoker serves
        service: Service group whose stub carries the method
        method_name: Remote method name on the stub (e.g. ``createVM``)
        reply_type: Reply value built from the wire reply
        completion_flag: Outcome flag (``app_done``/``db_done``) set on success
    """

    def __init__(
        self,
        operation: OperationSelector,
        service: ServiceGroup,
        method_name: str,
        reply_type: Type[OperationReply],
        completion_flag: Optional[str] = None,
    ) -> None:
        super().__init__(name=f"OperationInvoker.{operation.value}")
        if completion_flag not in (None, APP_DONE, DB_DONE):
            raise ValueError(f"Unknown completion flag: {completion_flag}")
        self.operation = operation
        self.service = service
        self.method_name = method_name
        self.reply_type = reply_type
        self.completion_flag = completion_flag

    @property
    def method_path(self) -> str:
        return method_path(SERVICE_NAMES[self.service], self.method_name)

    def __call__(
        self,
        handle: ConnectionHandle,
        request: OperationRequest,
        timeout: Optional[float] = None,
    ) -> DispatchOutcome:
        started = time.monotonic()
        try:
            with handle.call_scope():
                rpc = getattr(handle.stub(self.service), self.method_name)
                wire_reply = rpc(request.to_message(), timeout=timeout)
            reply = self.reply_type.from_message(wire_reply)
        except (grpc.RpcError, ConnectionError) as e:
            return self._failure(e, request)
        except Exception as e:
            self.error(f"Unexpected error calling {self.method_path}: {e}", exc_info=True)
            return self._failure(e, request)

        self.debug(
            f"{self.method_path} returned in {time.monotonic() - started:.3f}s"
        )
        flags = {self.completion_flag: True} if self.completion_flag else {}
        return DispatchOutcome.success(self.operation, reply, request=request, **flags)

    def _failure(self, exc: BaseException, request: OperationRequest) -> DispatchOutcome:
        translated = ExceptionTranslator.as_remote_call_error(exc, method=self.method_path)
        self.warning("RPC failed: %s", translated.summary)
        return DispatchOutcome.failure(
            FailureKind.RPC_ERROR,
            translated.summary,
            operation=self.operation,
            request=request,
        )

    def __repr__(self) -> str:
        return f"OperationInvoker({self.operation.value} -> {self.method_path})"


invoke_create_instance = OperationInvoker(
    OperationSelector.CREATE_INSTANCE,
    ServiceGroup.COMPUTE,
    "createVM",
    CreateInstanceReply,
)

invoke_destroy_instance = OperationInvoker(
    OperationSelector.DESTROY_INSTANCE,
    ServiceGroup.COMPUTE,
    "destroyVM",
    DestroyInstanceReply,
)

invoke_deploy_application = OperationInvoker(
    OperationSelector.DEPLOY_APPLICATION,
    ServiceGroup.DEPLOYMENT,
    "deployApp",
    OutputReply,
    completion_flag=APP_DONE,
)

invoke_deploy_database = OperationInvoker(
    OperationSelector.DEPLOY_DATABASE,
    ServiceGroup.DEPLOYMENT,
    "deployDB",
    OutputReply,
    completion_flag=DB_DONE,
)

invoke_connect_app_to_database = OperationInvoker(
    OperationSelector.CONNECT_APP_TO_DATABASE,
    ServiceGroup.DEPLOYMENT,
    "connectAppToDB",
    OutputReply,
)

invoke_run_module = OperationInvoker(
    OperationSelector.RUN_MODULE,
    ServiceGroup.MODULE,
    "create",
    OutputReply,
)


__all__ = [
    "APP_DONE",
    "DB_DONE",
    "OperationInvoker",
    "invoke_create_instance",
    "invoke_destroy_instance",
    "invoke_deploy_application",
    "invoke_deploy_database",
    "invoke_connect_app_to_database",
    "invoke_run_module",
]
