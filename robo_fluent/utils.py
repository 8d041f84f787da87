import logging
from enum import Enum

from playwright.sync_api import TimeoutError as PWTimeout


LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(message)s"

logger = logging.getLogger("robo_fluent")


def configure_logging(level=logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT)


class DriverError(Exception):
    """A primitive driver operation failed."""


class RecoverableError(DriverError):
    """Raised for transient/browser timing issues that warrant a retry."""


class NoSuchElementError(RecoverableError):
    """Nothing matched the selector (yet)."""


class ElementNotInteractableError(RecoverableError):
    """The element exists but cannot take the action right now."""


class StaleElementError(RecoverableError):
    """The element was detached from the page."""


class InvalidSelectorError(DriverError):
    pass


class UnsupportedOperationError(DriverError):
    pass


class UnexpectedTagError(DriverError):
    """A tag shortcut such as ``div()`` matched an element of another tag."""


class Outcome(Enum):
    TRANSIENT = "transient"
    NON_TRANSIENT = "non-transient"


TRANSIENT_ERRORS = (RecoverableError, PWTimeout)


def classify(exc: BaseException) -> Outcome:
    if isinstance(exc, TRANSIENT_ERRORS):
        return Outcome.TRANSIENT
    return Outcome.NON_TRANSIENT


def is_transient(exc: BaseException) -> bool:
    return classify(exc) is Outcome.TRANSIENT
