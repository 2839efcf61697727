#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Operation registry.

Maps each ``OperationSelector`` to the triple the dispatcher needs: the
parameters the operation declares, its request builder and its invoker.
Adding an operation means registering an ``OperationSpec``; the dispatcher
itself has no per-operation branches.
"""

import threading
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..data.models import OperationSelector, ServiceGroup
from ..utils.exceptions import UnsupportedOperationError
from .builders import (
    CREATE_INSTANCE_PARAMETERS,
    DEPLOYMENT_PARAMETERS,
    DESTROY_INSTANCE_PARAMETERS,
    RUN_MODULE_PARAMETERS,
    ParameterSpec,
    RequestBuilder,
    build_connect_app_to_database,
    build_create_instance,
    build_deploy_application,
    build_deploy_database,
    build_destroy_instance,
    build_run_module,
)
from .invokers import (
    OperationInvoker,
    invoke_connect_app_to_database,
    invoke_create_instance,
    invoke_deploy_application,
    invoke_deploy_database,
    invoke_destroy_instance,
    invoke_run_module,
)


@dataclass(frozen=True)
class OperationSpec:
    """
    Declarative description of one dispatchable operation.
    """

    selector: OperationSelector
    title: str
    parameters: Tuple[ParameterSpec, ...]
    builder: RequestBuilder
    invoker: OperationInvoker

    @property
    def service(self) -> ServiceGroup:
        return self.invoker.service

    @property
    def parameter_names(self) -> List[str]:
        return [spec.name for spec in self.parameters]


class OperationRegistry:
    """
    Thread-safe selector -> ``OperationSpec`` table.
    """

    def __init__(self, specs: Optional[List[OperationSpec]] = None) -> None:
        self._specs: Dict[OperationSelector, OperationSpec] = {}
        self._lock = threading.Lock()
        for spec in specs or []:
            self.register(spec)

    def register(self, spec: OperationSpec, replace: bool = False) -> OperationSpec:
        if spec.invoker.operation is not spec.selector:
            raise ValueError(
                f"Invoker for {spec.invoker.operation.value} cannot serve {spec.selector.value}"
            )
        with self._lock:
            if spec.selector in self._specs and not replace:
                raise ValueError(f"Operation {spec.selector.value} is already registered")
            self._specs[spec.selector] = spec
        return spec

    def resolve(self, selector: Union[OperationSelector, str]) -> OperationSpec:
        """
        Look up the spec for a selector value.

        Raises:
            UnsupportedOperationError: If the selector names no registered operation
        """
        parsed = OperationSelector.from_value(selector)
        with self._lock:
            spec = self._specs.get(parsed)
        if spec is None:
            raise UnsupportedOperationError(selector=str(getattr(selector, "value", selector)))
        return spec

    def __contains__(self, selector: object) -> bool:
        try:
            self.resolve(selector)  # type: ignore[arg-type]
        except UnsupportedOperationError:
            return False
        return True

    def __iter__(self) -> Iterator[OperationSpec]:
        with self._lock:
            specs = list(self._specs.values())
        return iter(specs)

    def __len__(self) -> int:
        with self._lock:
            return len(self._specs)


def default_operation_specs() -> List[OperationSpec]:
    return [
        OperationSpec(
            selector=OperationSelector.CREATE_INSTANCE,
            title="Create VM",
            parameters=CREATE_INSTANCE_PARAMETERS,
            builder=build_create_instance,
            invoker=invoke_create_instance,
        ),
        OperationSpec(
            selector=OperationSelector.DESTROY_INSTANCE,
            title="Delete VM",
            parameters=DESTROY_INSTANCE_PARAMETERS,
            builder=build_destroy_instance,
            invoker=invoke_destroy_instance,
        ),
        OperationSpec(
            selector=OperationSelector.DEPLOY_APPLICATION,
            title="Deploy App",
            parameters=DEPLOYMENT_PARAMETERS,
            builder=build_deploy_application,
            invoker=invoke_deploy_application,
        ),
        OperationSpec(
            selector=OperationSelector.DEPLOY_DATABASE,
            title="Deploy DB",
            parameters=DEPLOYMENT_PARAMETERS,
            builder=build_deploy_database,
            invoker=invoke_deploy_database,
        ),
        OperationSpec(
            selector=OperationSelector.CONNECT_APP_TO_DATABASE,
            title="Connect App to DB",
            parameters=DEPLOYMENT_PARAMETERS,
            builder=build_connect_app_to_database,
            invoker=invoke_connect_app_to_database,
        ),
        OperationSpec(
            selector=OperationSelector.RUN_MODULE,
            title="Run Module",
            parameters=RUN_MODULE_PARAMETERS,
            builder=build_run_module,
            invoker=invoke_run_module,
        ),
    ]


def create_default_registry() -> OperationRegistry:
    return OperationRegistry(default_operation_specs())


__all__ = [
    "OperationSpec",
    "OperationRegistry",
    "default_operation_specs",
    "create_default_registry",
]
