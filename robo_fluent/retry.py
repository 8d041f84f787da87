import logging
from contextlib import contextmanager
from typing import Callable, Optional, TypeVar

from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_delay,
    wait_fixed,
)

from .config import Settings, settings as default_settings
from .context import Context
from .period import Period
from .utils import is_transient, logger


T = TypeVar("T")

# A zero-argument primitive driver action, e.g. ``element.click``.
Execution = Callable[[], T]


@contextmanager
def implicit_wait(driver, period: Period):
    """Hold the driver's implicit wait at ``period`` for the duration of the block.

    The wait goes back to zero on every exit, so later eager calls never
    inherit a retrying call's budget.
    """
    driver.implicitly_wait(period.seconds)
    try:
        yield
    finally:
        driver.implicitly_wait(0)


def decorate_execution(
    execution: Execution[T],
    context: Context,
    driver,
    period: Optional[Period] = None,
    config: Optional[Settings] = None,
) -> T:
    """Run ``execution`` once (eager) or until it succeeds within ``period``.

    Any failure that reaches the caller is a FluentExecutionError naming the
    whole call chain, with the driver's exception as its cause.
    """
    if period is None:
        try:
            return execution()
        except Exception as exc:
            raise context.as_exception(exc) from exc

    config = config or default_settings
    retrying = Retrying(
        stop=stop_after_delay(period.seconds),
        wait=wait_fixed(config.poll_interval_ms / 1000),
        retry=retry_if_exception(is_transient),
        before_sleep=before_sleep_log(logger, logging.DEBUG),
        reraise=True,
    )
    with implicit_wait(driver, period):
        try:
            return retrying(execution)
        except Exception as exc:
            if is_transient(exc):
                logger.warning("Gave up after %s: %s", period, context)
            else:
                logger.debug("Not retrying %s: %r", context, exc)
            raise context.as_exception(exc) from exc
