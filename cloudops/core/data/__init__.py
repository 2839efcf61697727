#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data models for CloudOps dispatch.
"""

from .models import (
    ConnectAppToDatabaseRequest,
    CreateInstanceReply,
    CreateInstanceRequest,
    DeployApplicationRequest,
    DeployDatabaseRequest,
    DeploymentRequest,
    DestroyInstanceReply,
    DestroyInstanceRequest,
    DispatchOutcome,
    FailureKind,
    OperationReply,
    OperationRequest,
    OperationSelector,
    OutputReply,
    ParameterSet,
    RunModuleRequest,
    ServiceGroup,
)
from .properties import load_properties, read_properties_file

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
    "load_properties",
    "read_properties_file",
]
