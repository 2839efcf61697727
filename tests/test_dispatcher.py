#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the operation dispatcher and the run lifecycle.
"""

import pytest

from cloudops.core.config import create_config
from cloudops.core.connection import ConnectionHandle
from cloudops.core.data.models import (
    CreateInstanceReply,
    DestroyInstanceReply,
    DispatchOutcome,
    FailureKind,
    OperationSelector,
    OutputReply,
    ServiceGroup,
)
from cloudops.core.dispatcher import DispatchState, OperationDispatcher, run_dispatch
from cloudops.core.operations.builders import ParameterSpec
from cloudops.core.operations.invokers import OperationInvoker
from cloudops.core.operations.registry import (
    OperationRegistry,
    OperationSpec,
    create_default_registry,
)
from cloudops.core.reporter import render_outcome


EXPECTED_REPLIES = {
    "CreateInstance": CreateInstanceReply(instance_id="i-abcdef", public_ip="1.2.3.4"),
    "DestroyInstance": DestroyInstanceReply(status="shutting-down"),
    "DeployApplication": OutputReply(output="wordpress installed"),
    "DeployDatabase": OutputReply(output="mysql installed"),
    "ConnectAppToDatabase": OutputReply(output="wp-config updated"),
    "RunModule": OutputReply(output="module applied"),
}

ALL_SELECTORS = sorted(EXPECTED_REPLIES)


def _missing_parameter_cases():
    for spec in create_default_registry():
        for parameter in spec.parameters:
            yield spec.selector.value, parameter.name


@pytest.mark.parametrize("selector", ALL_SELECTORS)
def test_every_selector_succeeds_with_complete_parameters(selector, complete_parameters, fake_channel):
    handle = ConnectionHandle("localhost:50051", fake_channel)
    dispatcher = OperationDispatcher(handle)

    outcome = dispatcher.dispatch(dict(complete_parameters[selector], serviceCase=selector))

    assert outcome.ok
    assert outcome.operation is OperationSelector(selector)
    assert outcome.reply == EXPECTED_REPLIES[selector]
    assert len(fake_channel.calls) == 1
    assert dispatcher.history == [
        DispatchState.IDLE,
        DispatchState.RESOLVING,
        DispatchState.BUILDING,
        DispatchState.INVOKING,
        DispatchState.REPORTED,
    ]


@pytest.mark.parametrize("selector,missing", list(_missing_parameter_cases()))
def test_missing_parameter_fails_before_any_remote_call(selector, missing, complete_parameters, fake_channel):
    params = dict(complete_parameters[selector], serviceCase=selector)
    params.pop(missing)
    dispatcher = OperationDispatcher(ConnectionHandle("localhost:50051", fake_channel))

    outcome = dispatcher.dispatch(params)

    assert outcome.failure_kind is FailureKind.INVALID_PARAMETERS
    assert missing in outcome.detail
    assert outcome.request is None
    assert fake_channel.calls == []
    assert DispatchState.INVOKING not in dispatcher.history
    assert dispatcher.state is DispatchState.REPORTED


def test_unknown_selector_is_unsupported_operation(fake_channel):
    dispatcher = OperationDispatcher(ConnectionHandle("localhost:50051", fake_channel))

    outcome = dispatcher.dispatch({"serviceCase": "Frobnicate", "region": "us-east-1"})

    assert outcome.failure_kind is FailureKind.UNSUPPORTED_OPERATION
    assert outcome.detail == "Frobnicate"
    assert outcome.selector_value == "Frobnicate"
    assert fake_channel.calls == []
    assert dispatcher.history == [DispatchState.IDLE, DispatchState.RESOLVING, DispatchState.REPORTED]


def test_missing_selector_is_invalid_parameters(fake_channel):
    dispatcher = OperationDispatcher(ConnectionHandle("localhost:50051", fake_channel))

    outcome = dispatcher.dispatch({"region": "us-east-1"})

    assert outcome.failure_kind is FailureKind.INVALID_PARAMETERS
    assert "serviceCase" in outcome.detail
    assert fake_channel.calls == []


def test_legacy_selector_and_explicit_selector_argument(complete_parameters, fake_channel):
    dispatcher = OperationDispatcher(ConnectionHandle("localhost:50051", fake_channel))
    params = dict(complete_parameters["DestroyInstance"], serviceCase="DeleteVM")

    legacy = dispatcher.dispatch(params)
    explicit = dispatcher.dispatch(complete_parameters["DestroyInstance"], selector="DestroyInstance")

    assert legacy.operation is OperationSelector.DESTROY_INSTANCE
    assert explicit.operation is OperationSelector.DESTROY_INSTANCE
    assert len(fake_channel.calls) == 2


def test_custom_selector_key(complete_parameters, fake_channel):
    dispatcher = OperationDispatcher(
        ConnectionHandle("localhost:50051", fake_channel), selector_key="operation"
    )

    outcome = dispatcher.dispatch(dict(complete_parameters["RunModule"], operation="Generic"))

    assert outcome.operation is OperationSelector.RUN_MODULE


def test_rpc_failure_still_closes_the_handle(complete_parameters, failing_channel, channel_factory_for):
    factory = channel_factory_for(failing_channel)
    config = create_config(close_timeout=0.5)

    outcome = run_dispatch(
        dict(complete_parameters["CreateInstance"], serviceCase="CreateInstance"),
        config=config,
        channel_factory=factory,
    )

    assert outcome.failure_kind is FailureKind.RPC_ERROR
    assert outcome.detail.startswith("UNAVAILABLE")
    assert failing_channel.close_calls == 1
    assert len(failing_channel.calls) == 1


def test_run_dispatch_opens_no_channel_for_unsupported_operation(fake_channel, channel_factory_for):
    factory = channel_factory_for(fake_channel)

    outcome = run_dispatch({"serviceCase": "Frobnicate"}, config=create_config(), channel_factory=factory)

    assert outcome.failure_kind is FailureKind.UNSUPPORTED_OPERATION
    assert factory.addresses == []
    assert fake_channel.close_calls == 0


def _broken_factory(address, options):
    raise OSError("no route")


def test_channel_failure_does_not_mask_unsupported_operation():
    outcome = run_dispatch({"serviceCase": "Frobnicate"}, config=create_config(), channel_factory=_broken_factory)

    assert outcome.failure_kind is FailureKind.UNSUPPORTED_OPERATION
    assert outcome.detail == "Frobnicate"


def test_channel_failure_does_not_mask_missing_parameters():
    outcome = run_dispatch(
        {"serviceCase": "DeployDatabase", "bucketName": "b1"},
        config=create_config(),
        channel_factory=_broken_factory,
    )

    assert outcome.failure_kind is FailureKind.INVALID_PARAMETERS
    assert outcome.operation is OperationSelector.DEPLOY_DATABASE


def test_dispatcher_needs_a_handle_or_a_factory():
    with pytest.raises(ValueError):
        OperationDispatcher()


def test_run_dispatch_routes_module_operations_to_module_endpoint(complete_parameters, fake_channel, channel_factory_for):
    factory = channel_factory_for(fake_channel)
    config = create_config(address="compute.internal:50051", module_address="modules.internal:50052")

    outcome = run_dispatch(
        dict(complete_parameters["RunModule"], serviceCase="Generic"),
        config=config,
        channel_factory=factory,
    )

    assert outcome.ok
    assert factory.addresses == ["modules.internal:50052"]
    assert fake_channel.calls[0]["path"] == "/cloudlab.GenericOps/create"


def test_run_dispatch_applies_configured_deadline(complete_parameters, fake_channel, channel_factory_for):
    config = create_config(call_timeout=12.5)

    run_dispatch(
        dict(complete_parameters["DeployDatabase"], serviceCase="DeployDB"),
        config=config,
        channel_factory=channel_factory_for(fake_channel),
    )

    assert fake_channel.calls[0]["timeout"] == 12.5


def test_run_dispatch_reports_channel_construction_failure(complete_parameters):
    outcome = run_dispatch(
        dict(complete_parameters["CreateInstance"], serviceCase="CreateInstance"),
        config=create_config(),
        channel_factory=_broken_factory,
    )

    assert outcome.failure_kind is FailureKind.RPC_ERROR
    assert outcome.detail.startswith("UNAVAILABLE")
    assert outcome.selector_value == "CreateInstance"


def test_create_instance_example_renders_both_fields(fake_channel, channel_factory_for):
    params = {
        "serviceCase": "CreateInstance",
        "region": "us-east-1",
        "os": "ami-123",
        "machineSize": "t2.micro",
        "keyPair": "k1",
        "bucketName": "b1",
    }

    outcome = run_dispatch(params, config=create_config(), channel_factory=channel_factory_for(fake_channel))
    text = render_outcome(outcome).text

    assert "i-abcdef" in text
    assert "1.2.3.4" in text


def test_registry_entries_are_data_not_branches(fake_channel):
    calls = []

    class RecordingInvoker(OperationInvoker):
        def __call__(self, handle, request, timeout=None):
            calls.append(request)
            return DispatchOutcome.success(self.operation, OutputReply(output="custom"), request=request)

    registry = OperationRegistry()
    registry.register(
        OperationSpec(
            selector=OperationSelector.RUN_MODULE,
            title="Run Module",
            parameters=(ParameterSpec("moduleName", "Module"),),
            builder=lambda params: params["moduleName"],
            invoker=RecordingInvoker(
                OperationSelector.RUN_MODULE, ServiceGroup.MODULE, "create", OutputReply
            ),
        )
    )
    dispatcher = OperationDispatcher(ConnectionHandle("localhost:50051", fake_channel), registry=registry)

    ok = dispatcher.dispatch({"serviceCase": "RunModule", "moduleName": "nginx"})
    unknown = dispatcher.dispatch({"serviceCase": "CreateInstance"})

    assert ok.reply == OutputReply(output="custom")
    assert calls == ["nginx"]
    assert unknown.failure_kind is FailureKind.UNSUPPORTED_OPERATION
    assert unknown.detail == "CreateInstance"


def test_registry_rejects_duplicate_and_mismatched_specs():
    registry = create_default_registry()
    spec = next(iter(registry))

    with pytest.raises(ValueError):
        registry.register(spec)
    registry.register(spec, replace=True)

    other = next(s for s in registry if s.selector is not spec.selector)
    with pytest.raises(ValueError):
        registry.register(
            OperationSpec(
                selector=spec.selector,
                title="mismatch",
                parameters=(),
                builder=spec.builder,
                invoker=other.invoker,
            ),
            replace=True,
        )
    assert len(registry) == 6
