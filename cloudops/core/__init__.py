#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CloudOps core module exports (lazy-loaded).
"""

from importlib import import_module
from typing import Any, Dict, Tuple

_EXPORT_MAP: Dict[str, Tuple[str, str]] = {
    "ConnectionHandle": ("cloudops.core.connection", "ConnectionHandle"),
    "OperationDispatcher": ("cloudops.core.dispatcher", "OperationDispatcher"),
    "DispatchState": ("cloudops.core.dispatcher", "DispatchState"),
    "run_dispatch": ("cloudops.core.dispatcher", "run_dispatch"),
    "OutcomeReporter": ("cloudops.core.reporter", "OutcomeReporter"),
    "RenderedRecord": ("cloudops.core.reporter", "RenderedRecord"),
    "render_outcome": ("cloudops.core.reporter", "render_outcome"),
    "OperationRegistry": ("cloudops.core.operations", "OperationRegistry"),
    "OperationSpec": ("cloudops.core.operations", "OperationSpec"),
    "create_default_registry": ("cloudops.core.operations", "create_default_registry"),
    "DispatcherConfig": ("cloudops.core.config", "DispatcherConfig"),
    "get_config": ("cloudops.core.config", "get_config"),
    "create_config": ("cloudops.core.config", "create_config"),
}

__all__ = sorted(_EXPORT_MAP.keys())


def __getattr__(name: str) -> Any:
    if name not in _EXPORT_MAP:
        raise AttributeError("module 'cloudops.core' has no attribute '{0}'".format(name))

    module_name, attr_name = _EXPORT_MAP[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
