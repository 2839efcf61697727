#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Request builders.

Each builder is a pure function ``ParameterSet -> OperationRequest``. Builders
read only the parameters they declare, ignore everything else and raise
``InvalidParametersError`` (naming every missing parameter) before any I/O.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..data.models import (
    ConnectAppToDatabaseRequest,
    CreateInstanceRequest,
    DeployApplicationRequest,
    DeployDatabaseRequest,
    DestroyInstanceRequest,
    OperationRequest,
    OperationSelector,
    ParameterSet,
    RunModuleRequest,
)
from ..utils.exceptions import InvalidParametersError


@dataclass(frozen=True)
class ParameterSpec:
    """
    One required parameter: its key, a display label and accepted fallbacks.
    """

    name: str
    label: str
    alternatives: Tuple[str, ...] = ()

    @property
    def keys(self) -> Tuple[str, ...]:
        return (self.name,) + self.alternatives

    def describe(self) -> str:
        if not self.alternatives:
            return self.name
        return "{0} (or {1})".format(self.name, ", ".join(self.alternatives))


RequestBuilder = Callable[[ParameterSet], OperationRequest]


def collect_parameters(
    parameters: ParameterSet,
    specs: Sequence[ParameterSpec],
    operation: Optional[OperationSelector] = None,
) -> Dict[str, str]:
    """
    Resolve every spec against ``parameters`` keyed by spec name.

    Raises:
        InvalidParametersError: Listing all specs with no present value
    """
    values: Dict[str, str] = {}
    missing: List[str] = []
    for spec in specs:
        value = parameters.first_present(spec.keys)
        if value is None:
            missing.append(spec.describe())
        else:
            values[spec.name] = value
    if missing:
        raise InvalidParametersError(
            missing=missing,
            operation=operation.value if operation is not None else None,
        )
    return values


KEY_PAIR = ParameterSpec("keyPair", "Key pair file name")
BUCKET_NAME = ParameterSpec("bucketName", "S3 bucket name (holds the pem file)")
REGION = ParameterSpec("region", "Region of instance")

CREATE_INSTANCE_PARAMETERS: Tuple[ParameterSpec, ...] = (
    REGION,
    ParameterSpec("os", "OS (machine ID)"),
    ParameterSpec("machineSize", "Machine size"),
    KEY_PAIR,
    BUCKET_NAME,
)

DESTROY_INSTANCE_PARAMETERS: Tuple[ParameterSpec, ...] = (
    ParameterSpec("instanceID", "Instance ID"),
    REGION,
)

# The deployment services take the key pair name as their credentials field.
DEPLOYMENT_PARAMETERS: Tuple[ParameterSpec, ...] = (
    ParameterSpec("keyPair", "Key pair file name", alternatives=("credentials",)),
    BUCKET_NAME,
    ParameterSpec("username", "Username"),
    ParameterSpec("publicIP", "Public IP of instance"),
)

RUN_MODULE_PARAMETERS: Tuple[ParameterSpec, ...] = DEPLOYMENT_PARAMETERS + (
    ParameterSpec("moduleName", "Puppet module name"),
    ParameterSpec("installFile", "Installation file git url"),
)


def build_create_instance(parameters: ParameterSet) -> CreateInstanceRequest:
    values = collect_parameters(
        parameters, CREATE_INSTANCE_PARAMETERS, OperationSelector.CREATE_INSTANCE
    )
    return CreateInstanceRequest(
        region=values["region"],
        os=values["os"],
        machine_size=values["machineSize"],
        key_pair=values["keyPair"],
        bucket_name=values["bucketName"],
    )


def build_destroy_instance(parameters: ParameterSet) -> DestroyInstanceRequest:
    values = collect_parameters(
        parameters, DESTROY_INSTANCE_PARAMETERS, OperationSelector.DESTROY_INSTANCE
    )
    return DestroyInstanceRequest(instance_id=values["instanceID"], region=values["region"])


def _deployment_fields(parameters: ParameterSet, operation: OperationSelector) -> Dict[str, str]:
    values = collect_parameters(parameters, DEPLOYMENT_PARAMETERS, operation)
    return {
        "credentials": values["keyPair"],
        "bucket_name": values["bucketName"],
        "username": values["username"],
        "public_ip": values["publicIP"],
    }


def build_deploy_application(parameters: ParameterSet) -> DeployApplicationRequest:
    return DeployApplicationRequest(
        **_deployment_fields(parameters, OperationSelector.DEPLOY_APPLICATION)
    )


def build_deploy_database(parameters: ParameterSet) -> DeployDatabaseRequest:
    return DeployDatabaseRequest(
        **_deployment_fields(parameters, OperationSelector.DEPLOY_DATABASE)
    )


def build_connect_app_to_database(parameters: ParameterSet) -> ConnectAppToDatabaseRequest:
    return ConnectAppToDatabaseRequest(
        **_deployment_fields(parameters, OperationSelector.CONNECT_APP_TO_DATABASE)
    )


def build_run_module(parameters: ParameterSet) -> RunModuleRequest:
    values = collect_parameters(
        parameters, RUN_MODULE_PARAMETERS, OperationSelector.RUN_MODULE
    )
    return RunModuleRequest(
        credentials=values["keyPair"],
        bucket_name=values["bucketName"],
        username=values["username"],
        public_ip=values["publicIP"],
        module_name=values["moduleName"],
        install_file=values["installFile"],
    )


__all__ = [
    "ParameterSpec",
    "RequestBuilder",
    "collect_parameters",
    "CREATE_INSTANCE_PARAMETERS",
    "DESTROY_INSTANCE_PARAMETERS",
    "DEPLOYMENT_PARAMETERS",
    "RUN_MODULE_PARAMETERS",
    "build_create_instance",
    "build_destroy_instance",
    "build_deploy_application",
    "build_deploy_database",
    "build_connect_app_to_database",
    "build_run_module",
]
