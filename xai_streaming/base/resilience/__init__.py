"""Resilience helpers: the retry policy wrapped around provider calls."""

from .retry import DEFAULT_RETRY_CONFIG, RetryConfig, retry, retry_stream, with_retry

__all__ = ["RetryConfig", "DEFAULT_RETRY_CONFIG", "retry", "retry_stream", "with_retry"]
