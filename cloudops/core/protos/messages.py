#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Protobuf message classes for the cloudlab remote services.

The wire contract is three proto3 files in package ``cloudlab`` whose messages
contain only ``string`` fields. The classes come from the checked-in
``*_pb2`` modules generated from the ``.proto`` files next to this module:

    EC2Ops        createVM(Request) -> Reply
                  destroyVM(DestroyRequest) -> DestroyReply
    WordPressOps  deployApp(DeployAppRequest) -> DeployAppReply
                  deployDB(DeployDBRequest) -> DeployDBReply
                  connectAppToDB(ConnectRequest) -> ConnectReply
    GenericOps    create(GenericRequest) -> GenericReply

Regenerate after editing a ``.proto`` file (needs the ``build`` extra):

    python -m grpc_tools.protoc -I . --python_out=. --grpc_python_out=. \\
        cloudops/core/protos/*.proto
"""

from typing import Dict, List, Type

from google.protobuf import descriptor, message

from . import ec2_ops_pb2, generic_ops_pb2, wordpress_ops_pb2
from .ec2_ops_pb2 import DestroyReply, DestroyRequest, Reply, Request
from .generic_ops_pb2 import GenericReply, GenericRequest
from .wordpress_ops_pb2 import (
    ConnectReply,
    ConnectRequest,
    DeployAppReply,
    DeployAppRequest,
    DeployDBReply,
    DeployDBRequest,
)

PROTO_PACKAGE = "cloudlab"

# Service descriptors keyed by short service name.
SERVICES: Dict[str, descriptor.ServiceDescriptor] = {
    "EC2Ops": ec2_ops_pb2.DESCRIPTOR.services_by_name["EC2Ops"],
    "WordPressOps": wordpress_ops_pb2.DESCRIPTOR.services_by_name["WordPressOps"],
    "GenericOps": generic_ops_pb2.DESCRIPTOR.services_by_name["GenericOps"],
}


def message_field_names(message_type: Type[message.Message]) -> List[str]:
    """Field names of a message type in declaration order."""
    return [field.name for field in message_type.DESCRIPTOR.fields]


__all__ = [
    "PROTO_PACKAGE",
    "SERVICES",
    "message_field_names",
    "Request",
    "Reply",
    "DestroyRequest",
    "DestroyReply",
    "DeployAppRequest",
    "DeployAppReply",
    "DeployDBRequest",
    "DeployDBReply",
    "ConnectRequest",
    "ConnectReply",
    "GenericRequest",
    "GenericReply",
]
