#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Client stubs for the cloudlab services.

The stub classes are the grpcio-tools output in the ``*_pb2_grpc`` modules;
this module gathers them and resolves fully qualified method paths from the
service descriptors.
"""

from .ec2_ops_pb2_grpc import EC2OpsStub
from .generic_ops_pb2_grpc import GenericOpsStub
from .messages import SERVICES
from .wordpress_ops_pb2_grpc import WordPressOpsStub


def method_path(service_name: str, method_name: str) -> str:
    """
    Return ``/cloudlab.<Service>/<method>``.

    Raises:
        KeyError: The service or method is not part of the wire contract.
    """
    service = SERVICES[service_name]
    method = service.methods_by_name[method_name]
    return f"/{service.full_name}/{method.name}"


__all__ = ["method_path", "EC2OpsStub", "WordPressOpsStub", "GenericOpsStub"]
