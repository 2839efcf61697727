#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CloudOps public API with lazy imports.

This avoids importing gRPC/protobuf modules unless the corresponding API
objects are actually requested.
"""

from importlib import import_module
from typing import Any, Dict, Tuple

from ._version import __version__

_EXPORT_MAP: Dict[str, Tuple[str, str]] = {
    "run_dispatch": ("cloudops.core.dispatcher", "run_dispatch"),
    "OperationDispatcher": ("cloudops.core.dispatcher", "OperationDispatcher"),
    "ConnectionHandle": ("cloudops.core.connection", "ConnectionHandle"),
    "OutcomeReporter": ("cloudops.core.reporter", "OutcomeReporter"),
    "render_outcome": ("cloudops.core.reporter", "render_outcome"),
    "DispatcherConfig": ("cloudops.core.config", "DispatcherConfig"),
    "OperationSelector": ("cloudops.core.data", "OperationSelector"),
    "ParameterSet": ("cloudops.core.data", "ParameterSet"),
    "DispatchOutcome": ("cloudops.core.data", "DispatchOutcome"),
    "FailureKind": ("cloudops.core.data", "FailureKind"),
}

__all__ = ["__version__", *sorted(_EXPORT_MAP.keys())]


def __getattr__(name: str) -> Any:
    """
    Resolve public API symbols lazily.
    """
    if name not in _EXPORT_MAP:
        raise AttributeError("module 'cloudops' has no attribute '{0}'".format(name))

    module_name, attr_name = _EXPORT_MAP[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
