# ============================================================================
# PROBE OUTCOMES
# ============================================================================
# STATUS: Core - Remote call classification
# PURPOSE: Turn a single remote call into data, then into a verdict
# CREATED: 19 OCT 2026
# ============================================================================
"""
Probe Outcomes

A remote call made by a probe is run through attempt(), which never raises
for ordinary errors. It returns a ProbeOutcome tagged AVAILABLE, NOT_FOUND
or FAILED; to_result() then maps the tag to a verdict:

    AVAILABLE  -> healthy   "OK. '<resource>' is available."
    NOT_FOUND  -> unhealthy "Failed. '<resource>' is unavailable."
    FAILED     -> unhealthy "Failed. '<resource>' is unavailable."

Only the log line differs between NOT_FOUND and FAILED.

Usage:
    probe = availability_check(
        name="orders",
        resource="orders-queue",
        call=lambda: queue_client.get_queue_properties(),
        not_found=(ResourceNotFoundError,),
    )
    result = await probe()
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Tuple, Type, Union

from azure.core.exceptions import ResourceNotFoundError

from core.logging import log_context
from health.core import HealthCheckResult, Probe

logger = logging.getLogger(__name__)

# Errors treated as "resource absent" unless a probe family says otherwise.
DEFAULT_NOT_FOUND: Tuple[Type[BaseException], ...] = (ResourceNotFoundError,)

RemoteCall = Callable[[], Awaitable[Any]]
Predicate = Callable[[Any], bool]


class OutcomeKind(str, Enum):
    """Classification of a single remote call."""
    AVAILABLE = "available"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of attempt(): a tag plus the value or the error."""
    kind: OutcomeKind
    error: Optional[BaseException] = None
    value: Any = None

    @classmethod
    def available(cls, value: Any = None) -> "ProbeOutcome":
        return cls(kind=OutcomeKind.AVAILABLE, value=value)

    @classmethod
    def not_found(cls, error: Optional[BaseException] = None) -> "ProbeOutcome":
        return cls(kind=OutcomeKind.NOT_FOUND, error=error)

    @classmethod
    def failed(cls, error: Optional[BaseException] = None) -> "ProbeOutcome":
        return cls(kind=OutcomeKind.FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.AVAILABLE


def is_not_found(
    error: BaseException,
    not_found: Tuple[Type[BaseException], ...] = DEFAULT_NOT_FOUND,
) -> bool:
    """True for the given not-found types or any error carrying HTTP 404."""
    if isinstance(error, not_found):
        return True
    return getattr(error, "status_code", None) == 404


async def attempt(
    call: RemoteCall,
    not_found: Tuple[Type[BaseException], ...] = DEFAULT_NOT_FOUND,
    expect: Optional[Predicate] = None,
) -> ProbeOutcome:
    """
    Run one remote call and classify what happened.

    Args:
        call: Zero-argument coroutine function performing the remote call
        not_found: Exception types meaning "resource absent"
        expect: Optional check on the returned value; a falsy verdict
            classifies the call as NOT_FOUND (e.g. an exists() returning False)

    Returns:
        ProbeOutcome; cancellation is the only thing that propagates
    """
    try:
        value = await call()
    except Exception as e:
        if is_not_found(e, not_found):
            return ProbeOutcome.not_found(e)
        return ProbeOutcome.failed(e)

    if expect is not None and not expect(value):
        return ProbeOutcome.not_found()
    return ProbeOutcome.available(value)


def available_message(resource: str) -> str:
    return f"OK. '{resource}' is available."


def unavailable_message(resource: str) -> str:
    return f"Failed. '{resource}' is unavailable."


def to_result(
    outcome: ProbeOutcome,
    name: str,
    resource: str,
    log: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
) -> HealthCheckResult:
    """Map an outcome to a verdict, logging failures on the injected logger."""
    log = log or logger

    if outcome.kind == OutcomeKind.AVAILABLE:
        return HealthCheckResult.healthy(available_message(resource))

    if outcome.kind == OutcomeKind.NOT_FOUND:
        log.error(f"{resource} was not found.", exc_info=outcome.error)
    else:
        log.error(f"{name} failed.", exc_info=outcome.error)

    return HealthCheckResult.unhealthy(
        unavailable_message(resource),
        exception=outcome.error,
        outcome=outcome.kind.value,
    )


def availability_check(
    name: str,
    resource: str,
    call: RemoteCall,
    not_found: Tuple[Type[BaseException], ...] = DEFAULT_NOT_FOUND,
    expect: Optional[Predicate] = None,
    log: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
) -> Probe:
    """
    Build a probe that performs `call` and reports on `resource`.

    The returned coroutine function never raises for remote failures.
    """
    async def probe() -> HealthCheckResult:
        with log_context(check_name=name, resource=resource):
            outcome = await attempt(call, not_found=not_found, expect=expect)
            return to_result(outcome, name=name, resource=resource, log=log)

    return probe


__all__ = [
    "OutcomeKind",
    "ProbeOutcome",
    "DEFAULT_NOT_FOUND",
    "is_not_found",
    "attempt",
    "available_message",
    "unavailable_message",
    "to_result",
    "availability_check",
]
