#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the cloudlab wire contract and request/reply value objects.
"""

import dataclasses

import pytest

from cloudops.core.data.models import (
    CreateInstanceReply,
    CreateInstanceRequest,
    DeployDatabaseRequest,
    DestroyInstanceReply,
    OutputReply,
    RunModuleRequest,
)
from cloudops.core.protos import messages
from cloudops.core.protos.messages import message_field_names
from cloudops.core.protos.stubs import EC2OpsStub, GenericOpsStub, WordPressOpsStub, method_path


def test_message_field_names_match_remote_contract():
    assert message_field_names(messages.Request) == [
        "region", "OS", "machineSize", "keyPair", "bucketName",
    ]
    assert message_field_names(messages.Reply) == ["instanceID", "publicIP"]
    assert message_field_names(messages.DestroyRequest) == ["instanceID", "region"]
    assert message_field_names(messages.DestroyReply) == ["status"]
    for request_type in (messages.DeployAppRequest, messages.DeployDBRequest, messages.ConnectRequest):
        assert message_field_names(request_type) == ["credentials", "bucketName", "username", "publicIP"]
    assert message_field_names(messages.GenericRequest) == [
        "credentials", "bucketName", "username", "publicIP", "moduleName", "installFile",
    ]
    assert messages.Request.DESCRIPTOR.full_name == "cloudlab.Request"


def test_service_descriptors_declare_every_remote_method():
    ec2 = messages.SERVICES["EC2Ops"]
    wordpress = messages.SERVICES["WordPressOps"]
    generic = messages.SERVICES["GenericOps"]

    assert ec2.full_name == "cloudlab.EC2Ops"
    assert ec2.file.name == "cloudops/core/protos/ec2_ops.proto"

    assert [m.name for m in ec2.methods] == ["createVM", "destroyVM"]
    assert [m.name for m in wordpress.methods] == ["deployApp", "deployDB", "connectAppToDB"]
    assert [m.name for m in generic.methods] == ["create"]
    assert ec2.methods_by_name["createVM"].input_type.full_name == "cloudlab.Request"


def test_method_path_resolves_from_service_descriptors():
    assert method_path("EC2Ops", "createVM") == "/cloudlab.EC2Ops/createVM"
    assert method_path("WordPressOps", "connectAppToDB") == "/cloudlab.WordPressOps/connectAppToDB"
    with pytest.raises(KeyError):
        method_path("EC2Ops", "rebootVM")


def test_generated_stubs_call_fully_qualified_paths(fake_channel):
    EC2OpsStub(fake_channel).destroyVM(messages.DestroyRequest(instanceID="i-1", region="us-east-1"))
    WordPressOpsStub(fake_channel).connectAppToDB(messages.ConnectRequest(publicIP="1.2.3.4"))
    GenericOpsStub(fake_channel).create(messages.GenericRequest(moduleName="ntp"))

    assert [call["path"] for call in fake_channel.calls] == [
        "/cloudlab.EC2Ops/destroyVM",
        "/cloudlab.WordPressOps/connectAppToDB",
        "/cloudlab.GenericOps/create",
    ]
    assert messages.DestroyRequest.FromString(fake_channel.calls[0]["payload"]).instanceID == "i-1"


def test_create_instance_request_maps_to_wire_field_names():
    request = CreateInstanceRequest(
        region="us-east-1",
        os="ami-123",
        machine_size="t2.micro",
        key_pair="k1",
        bucket_name="b1",
    )

    wire = request.to_message()

    assert isinstance(wire, messages.Request)
    assert wire.OS == "ami-123"
    assert wire.machineSize == "t2.micro"
    assert messages.Request.FromString(wire.SerializeToString()) == wire


def test_requests_are_immutable():
    request = DeployDatabaseRequest(
        credentials="k1", bucket_name="b1", username="ubuntu", public_ip="1.2.3.4"
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.username = "root"  # type: ignore[misc]

    assert isinstance(request.to_message(), messages.DeployDBRequest)


def test_run_module_request_carries_module_fields():
    request = RunModuleRequest(
        credentials="k1",
        bucket_name="b1",
        username="ubuntu",
        public_ip="1.2.3.4",
        module_name="puppetlabs-mysql",
        install_file="https://example.org/mysql.git",
    )

    wire = request.to_message()

    assert wire.moduleName == "puppetlabs-mysql"
    assert wire.installFile == "https://example.org/mysql.git"
    assert wire.credentials == "k1"


def test_replies_copy_wire_fields_verbatim():
    assert CreateInstanceReply.from_message(
        messages.Reply(instanceID="i-1", publicIP="10.0.0.1")
    ) == CreateInstanceReply(instance_id="i-1", public_ip="10.0.0.1")
    assert DestroyInstanceReply.from_message(
        messages.DestroyReply(status="terminated")
    ).status == "terminated"
    assert OutputReply.from_message(messages.GenericReply(output="  raw\ntext ")).output == "  raw\ntext "
