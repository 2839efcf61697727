#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the error hierarchy formatting helpers.
"""

import pytest

from cloudops.core.utils import format_exception, format_exception_chain
from cloudops.core.utils.exceptions import (
    CloudOpsError,
    ExceptionFormatter,
    PropertiesFormatError,
    RemoteCallError,
)


def test_summary_prefers_status_then_message_then_type():
    remote = RemoteCallError(status_code="UNAVAILABLE", details="endpoint down")

    assert ExceptionFormatter.format_exception_summary(remote) == "UNAVAILABLE: endpoint down"
    assert ExceptionFormatter.format_exception_summary(CloudOpsError("boom")) == "boom"
    assert ExceptionFormatter.format_exception_summary(ValueError("bad")) == "ValueError: bad"


def test_chain_follows_cause_attribute_and_dunder_cause():
    refused = ConnectionRefusedError("refused")
    remote = RemoteCallError(status_code="UNAVAILABLE", details="endpoint down", cause=refused)
    outer = CloudOpsError("dispatch aborted", cause=remote)

    assert format_exception_chain(outer) == (
        "dispatch aborted <- UNAVAILABLE: endpoint down <- ConnectionRefusedError: refused"
    )

    try:
        try:
            raise KeyError("region")
        except KeyError as e:
            raise PropertiesFormatError(message="config.properties: bad entry") from e
    except PropertiesFormatError as e:
        assert format_exception_chain(e) == "config.properties: bad entry <- KeyError: 'region'"


def test_chain_stops_on_cycles():
    first = CloudOpsError("first")
    second = CloudOpsError("second", cause=first)
    first.cause = second

    assert format_exception_chain(first) == "first <- second"


def test_format_exception_includes_traceback():
    with pytest.raises(CloudOpsError) as excinfo:
        raise CloudOpsError("boom")

    text = format_exception(excinfo.value)

    assert text.startswith("Traceback (most recent call last)")
    assert "CloudOpsError: boom" in text


def test_to_dict_drops_empty_context():
    error = PropertiesFormatError(message="bad", source="a.properties", cause=OSError("gone"))

    assert error.to_dict() == {
        "error": "PropertiesFormatError",
        "message": "bad",
        "context": {"source": "a.properties"},
        "cause": "OSError: gone",
    }
