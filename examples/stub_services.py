#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Canned EC2Ops / WordPressOps / GenericOps services for trying the dispatcher locally.

Run this, then in another shell:

    cloudops -c examples/properties/create_vm.properties --module-address 127.0.0.1:50051
"""

import os
import uuid
from concurrent import futures

import grpc

from cloudops.core.protos import messages
from cloudops.core.protos.ec2_ops_pb2_grpc import EC2OpsServicer, add_EC2OpsServicer_to_server
from cloudops.core.protos.generic_ops_pb2_grpc import GenericOpsServicer, add_GenericOpsServicer_to_server
from cloudops.core.protos.wordpress_ops_pb2_grpc import (
    WordPressOpsServicer,
    add_WordPressOpsServicer_to_server,
)
from cloudops.core.utils.logger import ModernLogger, configure_logging

LISTEN_ADDRESS = os.getenv("CLOUDOPS_STUB_ADDRESS", "127.0.0.1:50051")


class StubServices(ModernLogger, EC2OpsServicer, WordPressOpsServicer, GenericOpsServicer):
    """
    Answers every operation with a fixed, plausible reply.
    """

    def __init__(self) -> None:
        super().__init__(name="StubServices")

    def createVM(self, request, context):
        instance_id = f"i-{uuid.uuid4().hex[:17]}"
        self.info(f"createVM {request.machineSize} in {request.region} -> {instance_id}")
        return messages.Reply(instanceID=instance_id, publicIP="203.0.113.10")

    def destroyVM(self, request, context):
        self.info(f"destroyVM {request.instanceID}")
        return messages.DestroyReply(status="shutting-down")

    def deployApp(self, request, context):
        return messages.DeployAppReply(output=f"wordpress installed on {request.publicIP}")

    def deployDB(self, request, context):
        return messages.DeployDBReply(output=f"mysql installed on {request.publicIP}")

    def connectAppToDB(self, request, context):
        return messages.ConnectReply(output=f"wp-config.php now points at {request.publicIP}")

    def create(self, request, context):
        return messages.GenericReply(output=f"{request.moduleName} applied on {request.publicIP}")

    def serve(self, address: str = LISTEN_ADDRESS) -> None:
        server = grpc.server(futures.ThreadPoolExecutor(max_workers=4))
        add_EC2OpsServicer_to_server(self, server)
        add_WordPressOpsServicer_to_server(self, server)
        add_GenericOpsServicer_to_server(self, server)
        server.add_insecure_port(address)
        server.start()
        self.info(f"Stub services listening on {address}")
        try:
            server.wait_for_termination()
        except KeyboardInterrupt:
            server.stop(grace=2.0)


if __name__ == "__main__":
    configure_logging("info")
    StubServices().serve()
