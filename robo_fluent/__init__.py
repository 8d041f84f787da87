from .config import Settings, settings
from .context import Context, FluentExecutionError
from .fluent import FluentWebDriver, FluentWebElement, FluentWebElements
from .period import Period, TimeUnit, millis, mins, secs
from .playwright_driver import Dimension, PlaywrightDriver, PlaywrightElement, Point
from .retry import decorate_execution, implicit_wait
from .utils import (
    DriverError,
    ElementNotInteractableError,
    InvalidSelectorError,
    NoSuchElementError,
    Outcome,
    RecoverableError,
    StaleElementError,
    UnexpectedTagError,
    UnsupportedOperationError,
    classify,
    configure_logging,
    logger,
)
from .values import TestableString, WebElementValue
