"""Ordered fallback chains.

A data source that may fail is wrapped in an :class:`Attempt`. Running a chain
tries each attempt in order and keeps the first success. Failures are
collected as values, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable, Generic, Sequence, TypeVar

from dexhub.domain.exceptions import UpstreamUnavailableError


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Raised while reading upstream payloads whose shape drifted.
PAYLOAD_SHAPE_ERRORS = (TypeError, AttributeError, KeyError, ValueError, ArithmeticError)


@dataclass(frozen=True)
class AttemptResult(Generic[T]):
    source: str
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, source: str, value: T) -> "AttemptResult[T]":
        return cls(source=source, value=value)

    @classmethod
    def failure(cls, source: str, error: str) -> "AttemptResult[T]":
        return cls(source=source, error=error)


@dataclass(frozen=True)
class Attempt(Generic[T]):
    """Named data source. ``run`` returns a result and must not raise."""

    source: str
    run: Callable[[], AttemptResult[T]]


@dataclass(frozen=True)
class FallbackOutcome(Generic[T]):
    value: T | None
    source: str | None
    failures: tuple[AttemptResult[T], ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.source is not None

    @property
    def error(self) -> str | None:
        if self.ok:
            return None
        if not self.failures:
            return "no data source configured"
        return "; ".join(f"{item.source}: {item.error}" for item in self.failures)


def run_fallback_chain(attempts: Sequence[Attempt[T]], *, label: str) -> FallbackOutcome[T]:
    failures: list[AttemptResult[T]] = []
    for attempt in attempts:
        result = attempt.run()
        if result.ok:
            if failures:
                logger.info(
                    "fallback: %s served_by=%s after_failures=%s",
                    label,
                    attempt.source,
                    len(failures),
                )
            return FallbackOutcome(value=result.value, source=attempt.source, failures=tuple(failures))
        logger.warning("fallback: %s source_failed=%s error=%s", label, attempt.source, result.error)
        failures.append(result)
    return FallbackOutcome(value=None, source=None, failures=tuple(failures))


def guarded_attempt(
    source: str,
    fetch: Callable[[], T | None],
    *,
    empty_is_failure: bool = True,
) -> Attempt[T]:
    """Wrap a fetch that raises ``UpstreamUnavailableError`` or returns nothing.

    Shape errors from reading a drifted payload also count as a failure.

    An empty list counts as a failure unless ``empty_is_failure`` is off, which
    is how the last source of a chain reports a genuinely empty answer.
    """

    def _run() -> AttemptResult[T]:
        try:
            value = fetch()
        except UpstreamUnavailableError as exc:
            return AttemptResult.failure(source, str(exc))
        except PAYLOAD_SHAPE_ERRORS as exc:
            logger.warning("fallback: malformed_payload source=%s error=%r", source, exc)
            return AttemptResult.failure(source, f"malformed payload: {exc}")
        if value is None:
            return AttemptResult.failure(source, "no data")
        if empty_is_failure and isinstance(value, (list, tuple)) and not value:
            return AttemptResult.failure(source, "no data")
        return AttemptResult.success(source, value)

    return Attempt(source=source, run=_run)
