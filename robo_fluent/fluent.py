"""Fluent handles over a driver session.

Every chained call records itself in a new Context and hands the primitive
action to the retry engine. A handle is eager when its ``period`` is None
and retrying otherwise; ``within()`` and ``without()`` switch between the two.
"""
from typing import Iterator, List, Optional

from .config import Settings
from .context import Context
from .period import Period
from .retry import Execution, decorate_execution
from .utils import NoSuchElementError, UnexpectedTagError
from .values import TestableString, WebElementValue


def keys_as_human_string(keys) -> str:
    return ", ".join(repr(str(k)) for k in keys)


class BaseFluent:
    def __init__(
        self,
        driver,
        context: Optional[Context],
        period: Optional[Period] = None,
        config: Optional[Settings] = None,
    ):
        self._driver = driver
        self.context = context
        self.period = period
        self._config = config

    @property
    def retrying(self) -> bool:
        return self.period is not None

    def _search_root(self):
        raise NotImplementedError

    def _decorate(self, execution: Execution, ctx: Context):
        return decorate_execution(
            execution, ctx, self._driver, self.period, self._config
        )

    def _find_it(self, selector: str, ctx: Context, tag: Optional[str] = None):
        root = self._search_root()

        def find():
            found = root.find_element(selector)
            if tag is not None and found.tag_name.lower() != tag:
                raise UnexpectedTagError(
                    f"expected <{tag}> for {selector!r}, found <{found.tag_name.lower()}>"
                )
            return found

        return self._decorate(find, ctx)

    def _find_them(self, selector: str, ctx: Context) -> list:
        root = self._search_root()

        def find():
            found = list(root.find_elements(selector))
            # a retrying lookup waits for at least one match
            if not found and self.retrying:
                raise NoSuchElementError(f"no elements match {selector!r}")
            return found

        return self._decorate(find, ctx)

    def _element(self, ctx: Context, element) -> "FluentWebElement":
        return FluentWebElement(self._driver, element, ctx, self.period, self._config)

    def element(self, selector: str) -> "FluentWebElement":
        ctx = Context.singular(self.context, "element", repr(selector))
        return self._element(ctx, self._find_it(selector, ctx))

    def elements(self, selector: str) -> "FluentWebElements":
        ctx = Context.singular(self.context, "elements", repr(selector))
        return FluentWebElements(
            self._driver, self._find_them(selector, ctx), ctx, self.period, self._config
        )

    def _tag(
        self, tag: str, selector: Optional[str], name: Optional[str] = None
    ) -> "FluentWebElement":
        ctx = Context.singular(
            self.context, name or tag, repr(selector) if selector is not None else None
        )
        if selector is None:
            return self._element(ctx, self._find_it(tag, ctx))
        return self._element(ctx, self._find_it(selector, ctx, tag=tag))

    def div(self, selector: Optional[str] = None) -> "FluentWebElement":
        return self._tag("div", selector)

    def span(self, selector: Optional[str] = None) -> "FluentWebElement":
        return self._tag("span", selector)

    def button(self, selector: Optional[str] = None) -> "FluentWebElement":
        return self._tag("button", selector)

    def input(self, selector: Optional[str] = None) -> "FluentWebElement":
        return self._tag("input", selector)

    def link(self, selector: Optional[str] = None) -> "FluentWebElement":
        return self._tag("a", selector, name="link")

    def form(self, selector: Optional[str] = None) -> "FluentWebElement":
        return self._tag("form", selector)

    def label(self, selector: Optional[str] = None) -> "FluentWebElement":
        return self._tag("label", selector)

    def li(self, selector: Optional[str] = None) -> "FluentWebElement":
        return self._tag("li", selector)


class FluentWebDriver(BaseFluent):
    """Entry point: ``FluentWebDriver(driver).element('#login').click()``."""

    def __init__(
        self,
        driver,
        context: Optional[Context] = None,
        period: Optional[Period] = None,
        config: Optional[Settings] = None,
    ):
        super().__init__(driver, context, period, config)

    def _search_root(self):
        return self._driver

    def within(self, period: Period) -> "FluentWebDriver":
        ctx = Context.singular(self.context, "within", None, str(period))
        return FluentWebDriver(self._driver, ctx, period, self._config)

    def without(self, period: Optional[Period] = None) -> "FluentWebDriver":
        ctx = Context.singular(
            self.context, "without", None, str(period) if period is not None else None
        )
        return FluentWebDriver(self._driver, ctx, None, self._config)


class FluentWebElement(BaseFluent):
    def __init__(
        self,
        driver,
        element,
        context: Context,
        period: Optional[Period] = None,
        config: Optional[Settings] = None,
    ):
        super().__init__(driver, context, period, config)
        self.web_element = element

    def _search_root(self):
        return self.web_element

    def _chained(self, ctx: Context) -> "FluentWebElement":
        return FluentWebElement(
            self._driver, self.web_element, ctx, self.period, self._config
        )

    def _testable(self, execution: Execution, ctx: Context) -> TestableString:
        return TestableString(execution, ctx, self._driver, self.period, self._config)

    def _read_now(self, execution: Execution, ctx: Context) -> WebElementValue:
        # reads what is on the page right now, whatever the handle's period
        return WebElementValue(decorate_execution(execution, ctx, self._driver), ctx)

    # Actions

    def click(self) -> "FluentWebElement":
        ctx = Context.singular(self.context, "click")
        self._decorate(self.web_element.click, ctx)
        return self._chained(ctx)

    def clear_field(self) -> "FluentWebElement":
        """Use this instead of clear() to empty a text field."""
        ctx = Context.singular(self.context, "clear_field")
        self._decorate(self.web_element.clear, ctx)
        return self._chained(ctx)

    def submit(self) -> "FluentWebElement":
        ctx = Context.singular(self.context, "submit")
        self._decorate(self.web_element.submit, ctx)
        return self._chained(ctx)

    def send_keys(self, *keys) -> "FluentWebElement":
        ctx = Context.singular(
            self.context, "send_keys", None, keys_as_human_string(keys)
        )
        self._decorate(lambda: self.web_element.send_keys(*keys), ctx)
        return self._chained(ctx)

    # Reads through the retry engine

    def get_tag_name(self) -> TestableString:
        return self._testable(
            lambda: self.web_element.tag_name,
            Context.singular(self.context, "get_tag_name"),
        )

    def get_text(self) -> TestableString:
        return self._testable(
            lambda: self.web_element.text, Context.singular(self.context, "get_text")
        )

    def attribute(self, name: str) -> TestableString:
        return self._testable(
            lambda: self.web_element.get_attribute(name),
            Context.singular(self.context, "attribute", None, repr(name)),
        )

    def css_value(self, name: str) -> TestableString:
        return self._testable(
            lambda: self.web_element.value_of_css_property(name),
            Context.singular(self.context, "css_value", None, repr(name)),
        )

    def is_selected(self) -> bool:
        return self._decorate(
            self.web_element.is_selected, Context.singular(self.context, "is_selected")
        )

    def is_enabled(self) -> bool:
        return self._decorate(
            self.web_element.is_enabled, Context.singular(self.context, "is_enabled")
        )

    def is_displayed(self) -> bool:
        return self._decorate(
            self.web_element.is_displayed,
            Context.singular(self.context, "is_displayed"),
        )

    def get_location(self):
        return self._decorate(
            lambda: self.web_element.location,
            Context.singular(self.context, "get_location"),
        )

    def get_size(self):
        return self._decorate(
            lambda: self.web_element.size, Context.singular(self.context, "get_size")
        )

    # Values read once, never retried

    def tag_name(self) -> WebElementValue:
        return self._read_now(
            lambda: self.web_element.tag_name, Context.singular(self.context, "tag_name")
        )

    def text(self) -> WebElementValue:
        return self._read_now(
            lambda: self.web_element.text, Context.singular(self.context, "text")
        )

    def location(self) -> WebElementValue:
        return self._read_now(
            lambda: self.web_element.location, Context.singular(self.context, "location")
        )

    def size(self) -> WebElementValue:
        return self._read_now(
            lambda: self.web_element.size, Context.singular(self.context, "size")
        )

    def selected(self) -> WebElementValue:
        return self._read_now(
            self.web_element.is_selected, Context.singular(self.context, "selected")
        )

    def enabled(self) -> WebElementValue:
        return self._read_now(
            self.web_element.is_enabled, Context.singular(self.context, "enabled")
        )

    def displayed(self) -> WebElementValue:
        return self._read_now(
            self.web_element.is_displayed, Context.singular(self.context, "displayed")
        )

    # Mode switches

    def within(self, period: Period) -> "FluentWebElement":
        ctx = Context.singular(self.context, "within", None, str(period))
        return FluentWebElement(self._driver, self.web_element, ctx, period, self._config)

    def without(self, period: Optional[Period] = None) -> "FluentWebElement":
        ctx = Context.singular(
            self.context, "without", None, str(period) if period is not None else None
        )
        return FluentWebElement(self._driver, self.web_element, ctx, None, self._config)


class FluentWebElements:
    """The elements matched by a plural lookup, sharing one context."""

    def __init__(
        self,
        driver,
        elements: List,
        context: Context,
        period: Optional[Period] = None,
        config: Optional[Settings] = None,
    ):
        self._driver = driver
        self._elements = list(elements)
        self.context = context
        self.period = period
        self._config = config

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index: int) -> FluentWebElement:
        ctx = Context.singular(self.context, "get", None, str(index))
        element = decorate_execution(
            lambda: self._elements[index], ctx, self._driver, None, self._config
        )
        return FluentWebElement(self._driver, element, ctx, self.period, self._config)

    def __iter__(self) -> Iterator[FluentWebElement]:
        for index in range(len(self._elements)):
            yield self[index]

    def first(self) -> FluentWebElement:
        return self[0]

    def last(self) -> FluentWebElement:
        return self[-1]

    def _each(self, name: str, action, argument: Optional[str] = None):
        ctx = Context.singular(self.context, name, None, argument)
        for index, element in enumerate(self._elements):
            item = Context.singular(self.context, "get", None, str(index))
            decorate_execution(
                lambda: action(element),
                Context.singular(item, name, None, argument),
                self._driver,
                self.period,
                self._config,
            )
        return FluentWebElements(
            self._driver, self._elements, ctx, self.period, self._config
        )

    def click(self) -> "FluentWebElements":
        return self._each("click", lambda e: e.click())

    def clear_field(self) -> "FluentWebElements":
        return self._each("clear_field", lambda e: e.clear())

    def send_keys(self, *keys) -> "FluentWebElements":
        return self._each(
            "send_keys", lambda e: e.send_keys(*keys), keys_as_human_string(keys)
        )

    def within(self, period: Period) -> "FluentWebElements":
        ctx = Context.singular(self.context, "within", None, str(period))
        return FluentWebElements(self._driver, self._elements, ctx, period, self._config)
