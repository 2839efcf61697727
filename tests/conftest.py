#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Pytest bootstrap for local package imports and shared gRPC fakes.
"""

import sys
from pathlib import Path

import grpc
import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cloudops.core.protos import messages  # noqa: E402


class FakeRpcError(grpc.RpcError):
    """
    Stand-in for the ``grpc.Call``-flavoured errors raised by blocking stubs.
    """

    def __init__(self, code=grpc.StatusCode.UNAVAILABLE, details="failed to connect to all addresses"):
        super().__init__(details)
        self._code = code
        self._details = details

    def code(self):
        return self._code

    def details(self):
        return self._details


def default_wire_replies():
    return {
        "/cloudlab.EC2Ops/createVM": messages.Reply(instanceID="i-abcdef", publicIP="1.2.3.4"),
        "/cloudlab.EC2Ops/destroyVM": messages.DestroyReply(status="shutting-down"),
        "/cloudlab.WordPressOps/deployApp": messages.DeployAppReply(output="wordpress installed"),
        "/cloudlab.WordPressOps/deployDB": messages.DeployDBReply(output="mysql installed"),
        "/cloudlab.WordPressOps/connectAppToDB": messages.ConnectReply(output="wp-config updated"),
        "/cloudlab.GenericOps/create": messages.GenericReply(output="module applied"),
    }


class FakeChannel:
    """
    Channel double: every call goes through the real serializers and is counted.
    """

    def __init__(self, replies=None, error=None):
        self.replies = default_wire_replies() if replies is None else replies
        self.error = error
        self.calls = []
        self.close_calls = 0

    @property
    def closed(self):
        return self.close_calls > 0

    def unary_unary(self, path, request_serializer=None, response_deserializer=None, **kwargs):
        def invoke(request, timeout=None, **call_kwargs):
            payload = request_serializer(request)
            self.calls.append({"path": path, "payload": payload, "timeout": timeout})
            if self.error is not None:
                raise self.error
            return response_deserializer(self.replies[path].SerializeToString())

        return invoke

    def close(self):
        self.close_calls += 1


class FakeChannelFactory:
    def __init__(self, channel):
        self.channel = channel
        self.addresses = []

    def __call__(self, address, options):
        self.addresses.append(address)
        return self.channel


@pytest.fixture
def fake_channel():
    return FakeChannel()


@pytest.fixture
def failing_channel():
    return FakeChannel(error=FakeRpcError())


@pytest.fixture
def complete_parameters():
    """
    A complete parameter set per canonical selector.
    """
    deployment = {
        "keyPair": "k1",
        "bucketName": "b1",
        "username": "ubuntu",
        "publicIP": "1.2.3.4",
    }
    return {
        "CreateInstance": {
            "region": "us-east-1",
            "os": "ami-123",
            "machineSize": "t2.micro",
            "keyPair": "k1",
            "bucketName": "b1",
        },
        "DestroyInstance": {"instanceID": "i-abcdef", "region": "us-east-1"},
        "DeployApplication": dict(deployment),
        "DeployDatabase": dict(deployment),
        "ConnectAppToDatabase": dict(deployment),
        "RunModule": dict(
            deployment,
            moduleName="puppetlabs-apache",
            installFile="https://example.org/apache.git",
        ),
    }


@pytest.fixture
def rpc_error():
    """
    Factory for fake gRPC errors: ``rpc_error(grpc.StatusCode.X, "details")``.
    """
    return FakeRpcError


@pytest.fixture
def make_channel():
    """
    Factory for ``FakeChannel`` instances with custom replies or errors.
    """
    return FakeChannel


@pytest.fixture
def channel_factory_for():
    """
    Wrap a channel into a ``channel_factory`` accepted by ``ConnectionHandle.open``.
    """
    return FakeChannelFactory
