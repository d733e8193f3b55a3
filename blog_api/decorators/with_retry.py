"""
Bounded retry for CPU-bound work pushed onto a worker pool.

Only failures that a second attempt can plausibly cure are retried: the
hasher's own ``PasswordHashingError`` and a worker pool that momentarily
refuses new jobs. Everything else propagates on the first attempt.
"""

from collections.abc import Awaitable, Callable
from concurrent.futures import BrokenExecutor
from logging import getLogger
from typing import ParamSpec, TypeAlias, TypeVar

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from blog_api.configs import file_logger
from blog_api.errors.password_hasher import PasswordHashingError

logger = file_logger(getLogger(__name__))

RETRIABLE_EXCEPTIONS: tuple[type[Exception], ...] = (PasswordHashingError, BrokenExecutor)

P = ParamSpec("P")
T = TypeVar("T")

AsyncFunc: TypeAlias = Callable[P, Awaitable[T]]


def _log_attempt(max_attempts: int) -> Callable[[RetryCallState], None]:
    def before_sleep(retry_state: RetryCallState) -> None:
        exception = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0
        name = getattr(retry_state.fn, "__name__", "unknown")
        logger.warning(
            f"{name} failed on attempt {retry_state.attempt_number}/{max_attempts}, "
            f"retrying in {delay:.2f}s: {exception!r}",
        )

    return before_sleep


def with_retry(
    max_retries: int = 3,
    base_delay: float = 0.1,
    max_delay: float = 2.0,
    exec_retry: type[Exception] | tuple[type[Exception], ...] = RETRIABLE_EXCEPTIONS,
) -> Callable[[AsyncFunc[P, T]], AsyncFunc[P, T]]:
    """
    Retry an async function with exponential backoff.

    Args:
        max_retries: Maximum number of attempts, the first call included.
        base_delay: Delay before the second attempt, doubled after each failure.
        max_delay: Upper bound for a single delay.
        exec_retry: Exception type(s) worth another attempt.

    Returns:
        Decorator that re-raises the last exception once attempts run out.
    """
    return retry(
        stop=stop_after_attempt(max_retries),
        wait=wait_exponential(multiplier=base_delay, min=base_delay, max=max_delay),
        retry=retry_if_exception_type(exec_retry),
        before_sleep=_log_attempt(max_retries),
        reraise=True,
    )
