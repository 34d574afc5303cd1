"""Higher-order retry policy for provider calls.

The streaming core never retries; it only raises :class:`ProviderError`
instances whose ``code`` says what went wrong. This module takes an operation
plus a :class:`RetryConfig` and returns a wrapped operation that reattempts
the whole call on retryable codes with exponential backoff.

Two shapes are supported:

* ``retry(config)`` for plain callables returning a value.
* ``retry_stream(config)`` / ``with_retry(op, config)`` for generator
  operations. An attempt is only retried when it failed before yielding
  anything; once an event reached the caller the error propagates, so events
  are never duplicated.
"""
from __future__ import annotations

import contextlib
import functools
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Protocol, TypeVar

from ..errors import RETRYABLE_CODES, ErrorCode, ProviderError

T = TypeVar("T")


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: ProviderError | None,
    ) -> None: ...


@dataclass(frozen=True)
class RetryConfig:
    """Retry/backoff settings.

    Backoff for attempt ``n`` (0-based) is ``min(max_delay, base_delay * 2**n)``.
    A ``retry_after`` hint on the error (from an HTTP ``Retry-After`` header)
    replaces the computed delay, still capped by ``max_delay``.
    """

    max_attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 10.0
    retryable_codes: tuple[ErrorCode, ...] = RETRYABLE_CODES
    attempt_logger: AttemptLogger | None = None

    def delays(self) -> Iterable[float]:
        for attempt in range(self.max_attempts - 1):
            yield min(self.max_delay, self.base_delay * 2**attempt)

    def delay_for(self, attempt: int, error: ProviderError) -> float:
        retry_after = getattr(error, "retry_after", None)
        if isinstance(retry_after, (int, float)) and retry_after >= 0:
            return min(self.max_delay, float(retry_after))
        return min(self.max_delay, self.base_delay * 2**attempt)

    def is_retryable(self, error: ProviderError) -> bool:
        return error.code in self.retryable_codes


DEFAULT_RETRY_CONFIG = RetryConfig()


def _next_delay(config: RetryConfig, attempt: int, error: ProviderError) -> Optional[float]:
    """Delay before the next attempt, or ``None`` when the error is final."""
    if attempt >= config.max_attempts - 1 or not config.is_retryable(error):
        return None
    return config.delay_for(attempt, error)


def _log_attempt(config: RetryConfig, attempt: int, delay: float | None, error: ProviderError | None) -> None:
    if config.attempt_logger:
        config.attempt_logger(
            attempt=attempt,
            max_attempts=config.max_attempts,
            delay=delay,
            error=error,
        )


def retry(config: RetryConfig = DEFAULT_RETRY_CONFIG):
    """Return a decorator applying the retry policy to a plain callable."""

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            attempt = 0
            while True:
                try:
                    result = func(*args, **kwargs)
                except ProviderError as e:
                    delay = _next_delay(config, attempt, e)
                    _log_attempt(config, attempt, delay, e)
                    if delay is None:
                        raise
                    time.sleep(delay)
                    attempt += 1
                    continue
                _log_attempt(config, attempt, None, None)
                return result

        return wrapper

    return decorator


def retry_stream(config: RetryConfig = DEFAULT_RETRY_CONFIG):
    """Return a decorator applying the retry policy to a generator function.

    Closing the wrapped generator early closes the current attempt's
    generator too, so the underlying connection is released.
    """

    def decorator(func: Callable[..., Iterator[T]]) -> Callable[..., Iterator[T]]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Iterator[T]:
            attempt = 0
            while True:
                emitted = False
                try:
                    with contextlib.closing(func(*args, **kwargs)) as stream:
                        for item in stream:
                            emitted = True
                            yield item
                except ProviderError as e:
                    delay = None if emitted else _next_delay(config, attempt, e)
                    _log_attempt(config, attempt, delay, e)
                    if delay is None:
                        raise
                    time.sleep(delay)
                    attempt += 1
                    continue
                _log_attempt(config, attempt, None, None)
                return

        return wrapper

    return decorator


def with_retry(
    operation: Callable[..., Iterator[T]],
    config: RetryConfig = DEFAULT_RETRY_CONFIG,
) -> Callable[..., Iterator[T]]:
    """Wrap a streaming operation (e.g. ``provider.create_message``) with retries."""
    return retry_stream(config)(operation)


__all__ = [
    "AttemptLogger",
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "retry",
    "retry_stream",
    "with_retry",
]
