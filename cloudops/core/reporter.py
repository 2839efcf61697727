#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Outcome reporter: renders a ``DispatchOutcome`` as a structured record.

Rendering is pure and deterministic, so rendering the same outcome twice
yields equal records, and it never raises.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .data.models import (
    CreateInstanceReply,
    DestroyInstanceReply,
    DestroyInstanceRequest,
    DispatchOutcome,
    FailureKind,
    OperationSelector,
    OutputReply,
    ParameterSet,
)
from .operations.builders import ParameterSpec

_FAILURE_TITLES = {
    FailureKind.INVALID_PARAMETERS: "Invalid parameters",
    FailureKind.UNSUPPORTED_OPERATION: "Wrong service option",
    FailureKind.RPC_ERROR: "RPC failed",
}

_FLAG_LABELS = (
    ("app_done", "App deployment complete", OperationSelector.DEPLOY_APPLICATION),
    ("db_done", "DB deployment complete", OperationSelector.DEPLOY_DATABASE),
)


@dataclass(frozen=True)
class RenderedRecord:
    """
    Human-readable rendering of one outcome.
    """

    ok: bool
    title: str
    fields: Tuple[Tuple[str, str], ...] = ()
    lines: Tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return "\n".join((self.title,) + self.lines)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "title": self.title,
            "fields": {label: value for label, value in self.fields},
            "lines": list(self.lines),
        }

    def __str__(self) -> str:
        return self.text


def _record(
    ok: bool,
    title: str,
    fields: Sequence[Tuple[str, str]],
    extra_lines: Sequence[str] = (),
) -> RenderedRecord:
    lines = [f"{label}: {value}" for label, value in fields]
    lines.extend(extra_lines)
    return RenderedRecord(ok=ok, title=title, fields=tuple(fields), lines=tuple(lines))


class OutcomeReporter:
    """
    Turns outcomes into ``RenderedRecord`` values.
    """

    def render(self, outcome: DispatchOutcome) -> RenderedRecord:
        try:
            if outcome.ok:
                return self._render_success(outcome)
            return self._render_failure(outcome)
        except Exception as e:
            return RenderedRecord(
                ok=bool(getattr(outcome, "ok", False)),
                title="Unrenderable outcome",
                fields=(("error", f"{type(e).__name__}: {e}"),),
                lines=(repr(outcome),),
            )

    def _operation_title(self, outcome: DispatchOutcome) -> str:
        if outcome.operation is not None:
            return outcome.operation.value
        return outcome.selector_value or "unknown"

    def _render_success(self, outcome: DispatchOutcome) -> RenderedRecord:
        reply = outcome.reply
        fields: List[Tuple[str, str]] = []
        extra: List[str] = []

        if isinstance(reply, CreateInstanceReply):
            fields.append(("Instance ID", reply.instance_id))
            fields.append(("Public IP", reply.public_ip))
        elif isinstance(reply, DestroyInstanceReply):
            fields.append(("Status", reply.status))
            if isinstance(outcome.request, DestroyInstanceRequest):
                fields.insert(0, ("Instance ID", outcome.request.instance_id))
                extra.append(f"{outcome.request.instance_id} status is: {reply.status}")
        elif isinstance(reply, OutputReply):
            fields.append(("Output", reply.output))
        elif reply is not None:
            fields.extend((key, str(value)) for key, value in sorted(reply.to_dict().items()))

        for attribute, label, operation in _FLAG_LABELS:
            if outcome.operation is operation:
                fields.append((label, "yes" if getattr(outcome, attribute) else "no"))

        return _record(True, f"{self._operation_title(outcome)} succeeded", fields, extra)

    def _render_failure(self, outcome: DispatchOutcome) -> RenderedRecord:
        kind = outcome.failure_kind
        title = _FAILURE_TITLES.get(kind, "Failed") if kind is not None else "Failed"
        fields: List[Tuple[str, str]] = [
            ("Operation", self._operation_title(outcome)),
            ("Failure", kind.value if kind is not None else "unknown"),
            ("Detail", outcome.detail),
        ]
        return _record(False, f"{title}: {outcome.detail}", fields)

    def render_parameters(
        self,
        title: str,
        specs: Sequence[ParameterSpec],
        parameters: ParameterSet,
    ) -> RenderedRecord:
        """
        Label/value echo of the parameters an operation is about to use.
        """
        fields: List[Tuple[str, str]] = []
        for spec in specs:
            value: Optional[str] = parameters.first_present(spec.keys)
            fields.append((spec.label, value if value is not None else "<missing>"))
        return _record(True, title, fields)


def render_outcome(outcome: DispatchOutcome) -> RenderedRecord:
    return OutcomeReporter().render(outcome)


__all__ = ["RenderedRecord", "OutcomeReporter", "render_outcome"]
