#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the connection handle lifecycle.
"""

import threading
import time

import pytest

from cloudops.core.connection import ConnectionHandle, default_channel_options
from cloudops.core.data.models import ServiceGroup
from cloudops.core.protos.stubs import EC2OpsStub, GenericOpsStub, WordPressOpsStub
from cloudops.core.utils.exceptions import ConnectionError


def test_open_builds_stubs_without_any_round_trip(fake_channel, channel_factory_for):
    factory = channel_factory_for(fake_channel)

    handle = ConnectionHandle.open("localhost:50051", channel_factory=factory)

    assert factory.addresses == ["localhost:50051"]
    assert fake_channel.calls == []
    assert isinstance(handle.stub(ServiceGroup.COMPUTE), EC2OpsStub)
    assert isinstance(handle.stub(ServiceGroup.DEPLOYMENT), WordPressOpsStub)
    assert isinstance(handle.stub(ServiceGroup.MODULE), GenericOpsStub)


def test_open_translates_channel_construction_failure():
    def broken_factory(address, options):
        raise ValueError("bad target")

    with pytest.raises(ConnectionError) as excinfo:
        ConnectionHandle.open("nowhere:1", channel_factory=broken_factory)

    assert excinfo.value.address == "nowhere:1"
    assert isinstance(excinfo.value.cause, ValueError)


def test_default_channel_options_enable_keepalive():
    options = dict(default_channel_options())
    assert options["grpc.keepalive_time_ms"] == 30000


def test_close_is_idempotent(fake_channel):
    handle = ConnectionHandle("localhost:50051", fake_channel)

    assert handle.close(timeout=0.1) is True
    assert handle.close(timeout=0.1) is True
    assert fake_channel.close_calls == 1
    assert handle.closed is True


def test_closed_handle_refuses_new_calls(fake_channel):
    handle = ConnectionHandle("localhost:50051", fake_channel)
    handle.close()

    with pytest.raises(ConnectionError):
        handle.stub(ServiceGroup.COMPUTE)
    with pytest.raises(ConnectionError):
        with handle.call_scope():
            pass


def test_close_waits_for_in_flight_call_to_drain(fake_channel):
    handle = ConnectionHandle("localhost:50051", fake_channel)
    entered = threading.Event()
    release = threading.Event()

    def worker():
        with handle.call_scope():
            entered.set()
            release.wait(timeout=2.0)

    thread = threading.Thread(target=worker)
    thread.start()
    assert entered.wait(timeout=2.0)
    assert handle.in_flight == 1

    threading.Timer(0.1, release.set).start()
    drained = handle.close(timeout=2.0)
    thread.join(timeout=2.0)

    assert drained is True
    assert handle.in_flight == 0
    assert fake_channel.close_calls == 1


def test_close_releases_channel_after_timeout(fake_channel):
    handle = ConnectionHandle("localhost:50051", fake_channel)
    entered = threading.Event()
    release = threading.Event()

    def worker():
        with handle.call_scope():
            entered.set()
            release.wait(timeout=5.0)

    thread = threading.Thread(target=worker)
    thread.start()
    assert entered.wait(timeout=2.0)

    started = time.monotonic()
    drained = handle.close(timeout=0.2)
    elapsed = time.monotonic() - started
    release.set()
    thread.join(timeout=2.0)

    assert drained is False
    assert 0.15 <= elapsed < 2.0
    assert fake_channel.close_calls == 1


def test_context_manager_closes_handle(fake_channel):
    with ConnectionHandle("localhost:50051", fake_channel, close_timeout=0.1) as handle:
        assert not handle.closed

    assert handle.closed
    assert fake_channel.close_calls == 1
