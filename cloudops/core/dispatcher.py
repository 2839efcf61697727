#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CloudOps Operation Dispatcher

Maps one selector plus a flat ``ParameterSet`` to exactly one remote call:

    Idle -> Resolving -> Building -> Invoking -> Reported

- Resolving: read the selector and look it up in the ``OperationRegistry``.
  An unknown selector goes straight to Reported with
  ``Failure(UnsupportedOperation, <selector>)``.
- Building: run the operation's request builder. Missing parameters go
  straight to Reported with ``Failure(InvalidParameters, ...)``; the invoker is
  never touched.
- Invoking: call the invoker exactly once and forward its outcome unchanged.

``run_dispatch`` wraps a single run in the connection lifecycle. The handle is
opened only on entering Invoking, against the endpoint of the resolved
operation, so a run that fails in Resolving or Building touches no channel.
An opened handle is closed with a bounded wait on every exit path.

Usage Example:
    >>> outcome = run_dispatch(
    ...     {"serviceCase": "DestroyInstance", "instanceID": "i-1", "region": "us-east-1"}
    ... )
    >>> print(render_outcome(outcome).text)
"""

from enum import Enum
from typing import Callable, List, Mapping, Optional, Union

from .config import DEFAULT_CALL_TIMEOUT, DEFAULT_SELECTOR_KEY, DispatcherConfig, get_config
from .connection import ChannelFactory, ConnectionHandle
from .data.models import (
    DispatchOutcome,
    FailureKind,
    OperationRequest,
    OperationSelector,
    ParameterSet,
    ServiceGroup,
)
from .operations.registry import OperationRegistry, OperationSpec, create_default_registry
from .reporter import OutcomeReporter
from .utils.exceptions import (
    ConnectionError,
    ExceptionTranslator,
    InvalidParametersError,
    UnsupportedOperationError,
)
from .utils.logger import ModernLogger

_SERVICE_TITLES = {
    ServiceGroup.COMPUTE: "EC2 Ops",
    ServiceGroup.DEPLOYMENT: "WordPress Ops",
    ServiceGroup.MODULE: "Generic Service",
}


class DispatchState(Enum):
    """
    States of a single dispatch run.
    """
    IDLE = "idle"
    RESOLVING = "resolving"
    BUILDING = "building"
    INVOKING = "invoking"
    REPORTED = "reported"


ParameterSource = Union[ParameterSet, Mapping[str, str]]
HandleFactory = Callable[[OperationSpec], ConnectionHandle]


class OperationDispatcher(ModernLogger):
    """
    Table-driven dispatcher over a shared ``ConnectionHandle``.

    The handle may be shared between dispatchers; a dispatcher instance itself
    tracks the state of its current run and belongs to one thread. Without a
    handle, ``handle_factory`` is asked for one once the request is built.
    """

    def __init__(
        self,
        handle: Optional[ConnectionHandle] = None,
        registry: Optional[OperationRegistry] = None,
        call_timeout: Optional[float] = DEFAULT_CALL_TIMEOUT,
        selector_key: str = DEFAULT_SELECTOR_KEY,
        reporter: Optional[OutcomeReporter] = None,
        handle_factory: Optional[HandleFactory] = None,
    ) -> None:
        super().__init__(name="OperationDispatcher")
        if handle is None and handle_factory is None:
            raise ValueError("OperationDispatcher needs a handle or a handle_factory")
        self.handle = handle
        self.handle_factory = handle_factory
        self.registry = registry if registry is not None else create_default_registry()
        self.call_timeout = call_timeout
        self.selector_key = selector_key
        self.reporter = reporter or OutcomeReporter()
        self._state = DispatchState.IDLE
        self._history: List[DispatchState] = [DispatchState.IDLE]

    @property
    def state(self) -> DispatchState:
        return self._state

    @property
    def history(self) -> List[DispatchState]:
        """
        States visited by the most recent run, in order.
        """
        return list(self._history)

    def _transition(self, state: DispatchState) -> None:
        self.debug(f"{self._state.value} -> {state.value}")
        self._state = state
        self._history.append(state)

    def _report(self, outcome: DispatchOutcome) -> DispatchOutcome:
        self._transition(DispatchState.REPORTED)
        return outcome

    def dispatch(
        self,
        parameters: ParameterSource,
        selector: Optional[Union[OperationSelector, str]] = None,
    ) -> DispatchOutcome:
        """
        Run one dispatch.

        Args:
            parameters: Flat parameter set; extra keys are ignored
            selector: Operation to run; defaults to ``parameters[selector_key]``

        Returns:
            The terminal ``DispatchOutcome``; this method does not raise for
            invalid parameters, unknown selectors or failed calls.
        """
        self._state = DispatchState.IDLE
        self._history = [DispatchState.IDLE]
        params = parameters if isinstance(parameters, ParameterSet) else ParameterSet(parameters)

        self._transition(DispatchState.RESOLVING)
        raw_selector = selector if selector is not None else params.get(self.selector_key)
        if raw_selector is None or not str(getattr(raw_selector, "value", raw_selector)).strip():
            error = InvalidParametersError(missing=[self.selector_key])
            self.warning(f"No operation selected: {error.message}")
            return self._report(
                DispatchOutcome.failure(FailureKind.INVALID_PARAMETERS, error.message)
            )

        try:
            spec = self.registry.resolve(raw_selector)
        except UnsupportedOperationError as e:
            self.warning(f"Wrong service option: {e.selector}")
            return self._report(
                DispatchOutcome.failure(
                    FailureKind.UNSUPPORTED_OPERATION,
                    e.selector,
                    selector_value=e.selector,
                )
            )

        self._transition(DispatchState.BUILDING)
        self._echo_parameters(spec, params)
        try:
            request = spec.builder(params)
        except InvalidParametersError as e:
            self.warning(f"{spec.selector.value}: {e.message}")
            return self._report(
                DispatchOutcome.failure(
                    FailureKind.INVALID_PARAMETERS,
                    e.message,
                    operation=spec.selector,
                )
            )

        self._transition(DispatchState.INVOKING)
        try:
            handle = self._handle_for(spec)
        except ConnectionError as e:
            return self._report(self._connection_failure(spec, request, e))
        outcome = spec.invoker(handle, request, timeout=self.call_timeout)
        return self._report(outcome)

    def _handle_for(self, spec: OperationSpec) -> ConnectionHandle:
        if self.handle is not None:
            return self.handle
        return self.handle_factory(spec)

    def _connection_failure(
        self, spec: OperationSpec, request: OperationRequest, exc: ConnectionError
    ) -> DispatchOutcome:
        translated = ExceptionTranslator.as_remote_call_error(exc)
        self.warning("RPC failed: %s", translated.summary)
        return DispatchOutcome.failure(
            FailureKind.RPC_ERROR,
            translated.summary,
            operation=spec.selector,
            request=request,
        )

    def _echo_parameters(self, spec: OperationSpec, params: ParameterSet) -> None:
        title = f"{_SERVICE_TITLES[spec.service]}: {spec.title}"
        record = self.reporter.render_parameters(title, spec.parameters, params)
        self.info(record.title)
        for line in record.lines:
            self.info(f"  {line}")


def run_dispatch(
    parameters: ParameterSource,
    config: Optional[DispatcherConfig] = None,
    selector: Optional[Union[OperationSelector, str]] = None,
    registry: Optional[OperationRegistry] = None,
    channel_factory: Optional[ChannelFactory] = None,
) -> DispatchOutcome:
    """
    One complete dispatcher run: resolve, build, open the handle, call once, close.

    The handle is opened against the endpoint of the selected operation's
    service group only after the request is built, and is always closed with
    ``config.close_timeout``.
    """
    config = config or get_config()
    opened: List[ConnectionHandle] = []

    def open_handle(spec: OperationSpec) -> ConnectionHandle:
        handle = ConnectionHandle.open(
            config.address_for(spec.service),
            close_timeout=config.close_timeout,
            channel_factory=channel_factory,
        )
        opened.append(handle)
        return handle

    dispatcher = OperationDispatcher(
        registry=registry,
        call_timeout=config.call_timeout,
        selector_key=config.selector_key,
        handle_factory=open_handle,
    )
    try:
        return dispatcher.dispatch(parameters, selector=selector)
    finally:
        for handle in opened:
            handle.close(config.close_timeout)


__all__ = [
    "DispatchState",
    "OperationDispatcher",
    "run_dispatch",
]
