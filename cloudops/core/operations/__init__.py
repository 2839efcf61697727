#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Request builders, invokers and the operation registry.
"""

from .builders import ParameterSpec, collect_parameters
from .invokers import APP_DONE, DB_DONE, OperationInvoker
from .registry import (
    OperationRegistry,
    OperationSpec,
    create_default_registry,
    default_operation_specs,
)

__all__ = [
    "ParameterSpec",
    "collect_parameters",
    "OperationInvoker",
    "APP_DONE",
    "DB_DONE",
    "OperationSpec",
    "OperationRegistry",
    "default_operation_specs",
    "create_default_registry",
]
