from typing import Generic, Optional, TypeVar

from .context import Context
from .period import Period
from .retry import Execution, decorate_execution


T = TypeVar("T")


class WebElementValue(Generic[T]):
    """A value read from the page at the moment it was asked for."""

    def __init__(self, value: T, context: Context):
        self.value = value
        self.context = context

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"WebElementValue({self.value!r}, {self.context})"


class TestableString:
    """Text that is only read from the page when asked for.

    The read goes through the retry engine with whatever period the string
    carries, so ``element.within(secs(5)).get_text()`` keeps re-reading for up
    to five seconds while the element is not ready.
    """

    # keeps pytest from collecting this as a test class
    __test__ = False

    def __init__(
        self,
        execution: Execution[str],
        context: Context,
        driver,
        period: Optional[Period] = None,
        config=None,
    ):
        self._execution = execution
        self.context = context
        self._driver = driver
        self.period = period
        self._config = config

    def within(self, period: Optional[Period]) -> "TestableString":
        return TestableString(
            self._execution, self.context, self._driver, period, self._config
        )

    @property
    def value(self) -> Optional[str]:
        return decorate_execution(
            self._execution, self.context, self._driver, self.period, self._config
        )

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"TestableString({self.context})"
