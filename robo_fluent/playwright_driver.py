"""Playwright sync API exposed as the driver the fluent handles expect.

Playwright has no implicit wait. ``implicitly_wait`` emulates it: lookups
poll with ``wait_for_selector`` for as long as the wait allows, and the page
default timeout (which bounds actionability checks on click, fill, ...)
follows the same budget. With no wait set, lookups return at once and the
page falls back to the configured action timeout, because Playwright reads
a timeout of 0 as "wait forever".
"""
from contextlib import contextmanager
from dataclasses import dataclass
from typing import List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PWTimeout

from .config import Settings, settings as default_settings
from .utils import (
    DriverError,
    ElementNotInteractableError,
    InvalidSelectorError,
    NoSuchElementError,
    StaleElementError,
    UnsupportedOperationError,
)


_STALE_MARKERS = ("not attached to the dom", "element is detached", "execution context was destroyed")
_SELECTOR_MARKERS = ("is not a valid selector", "unexpected token", "unknown engine")

_SUBMIT_JS = """el => {
    const form = el.form || el.closest('form');
    if (!form) return false;
    form.requestSubmit();
    return true;
}"""


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Dimension:
    width: float
    height: float


@contextmanager
def translated_errors(timeout_error=ElementNotInteractableError):
    """Re-raise Playwright failures as transient or non-transient DriverErrors."""
    try:
        yield
    except PWTimeout as exc:
        raise timeout_error(str(exc)) from exc
    except PlaywrightError as exc:
        message = str(exc)
        lowered = message.lower()
        if any(marker in lowered for marker in _STALE_MARKERS):
            raise StaleElementError(message) from exc
        if any(marker in lowered for marker in _SELECTOR_MARKERS):
            raise InvalidSelectorError(message) from exc
        raise DriverError(message) from exc


class PlaywrightDriver:
    def __init__(self, page, config: Optional[Settings] = None):
        self.page = page
        self._config = config or default_settings
        self._wait_ms = 0
        page.set_default_navigation_timeout(self._config.nav_timeout_ms)
        page.set_default_timeout(self._config.action_timeout_ms)

    @property
    def wait_ms(self) -> int:
        return self._wait_ms

    def implicitly_wait(self, seconds: float):
        self._wait_ms = int(seconds * 1000)
        self.page.set_default_timeout(self._wait_ms or self._config.action_timeout_ms)

    def get(self, url: str):
        with translated_errors(DriverError):
            self.page.goto(url)

    @property
    def title(self) -> str:
        return self.page.title()

    def find_element(self, selector: str) -> "PlaywrightElement":
        return self.find_in(self.page, selector)

    def find_elements(self, selector: str) -> List["PlaywrightElement"]:
        return self.find_all_in(self.page, selector)

    def find_in(self, root, selector: str) -> "PlaywrightElement":
        with translated_errors(NoSuchElementError):
            if self._wait_ms > 0:
                handle = root.wait_for_selector(
                    selector, state="attached", timeout=self._wait_ms
                )
            else:
                handle = root.query_selector(selector)
        if handle is None:
            raise NoSuchElementError(f"no element matches {selector!r}")
        return PlaywrightElement(handle, self)

    def find_all_in(self, root, selector: str) -> List["PlaywrightElement"]:
        with translated_errors(NoSuchElementError):
            if self._wait_ms > 0:
                # like a single lookup, wait for the first match; none is an empty result
                try:
                    root.wait_for_selector(
                        selector, state="attached", timeout=self._wait_ms
                    )
                except PWTimeout:
                    return []
            handles = root.query_selector_all(selector)
        return [PlaywrightElement(handle, self) for handle in handles]


class PlaywrightElement:
    def __init__(self, handle, driver: PlaywrightDriver):
        self.handle = handle
        self._driver = driver

    def find_element(self, selector: str) -> "PlaywrightElement":
        return self._driver.find_in(self.handle, selector)

    def find_elements(self, selector: str) -> List["PlaywrightElement"]:
        return self._driver.find_all_in(self.handle, selector)

    def click(self):
        with translated_errors():
            self.handle.click()

    def clear(self):
        with translated_errors():
            self.handle.fill("")

    def submit(self):
        with translated_errors():
            submitted = self.handle.evaluate(_SUBMIT_JS)
        if not submitted:
            raise UnsupportedOperationError("element is not inside a form")

    def send_keys(self, *keys):
        # ElementHandle.type is deprecated; focus and type through the page keyboard
        with translated_errors():
            self.handle.focus()
            self._driver.page.keyboard.type("".join(str(k) for k in keys))

    def get_attribute(self, name: str) -> Optional[str]:
        with translated_errors():
            return self.handle.get_attribute(name)

    def value_of_css_property(self, name: str) -> str:
        with translated_errors():
            return self.handle.evaluate(
                "(el, name) => getComputedStyle(el).getPropertyValue(name)", name
            )

    @property
    def text(self) -> str:
        with translated_errors():
            return self.handle.inner_text()

    @property
    def tag_name(self) -> str:
        with translated_errors():
            return self.handle.evaluate("el => el.tagName.toLowerCase()")

    def is_selected(self) -> bool:
        with translated_errors():
            return self.handle.evaluate("el => !!(el.checked || el.selected)")

    def is_enabled(self) -> bool:
        with translated_errors():
            return self.handle.is_enabled()

    def is_displayed(self) -> bool:
        with translated_errors():
            return self.handle.is_visible()

    def _bounding_box(self) -> dict:
        with translated_errors():
            box = self.handle.bounding_box()
        if box is None:
            raise ElementNotInteractableError("element is not rendered")
        return box

    @property
    def location(self) -> Point:
        box = self._bounding_box()
        return Point(box["x"], box["y"])

    @property
    def size(self) -> Dimension:
        box = self._bounding_box()
        return Dimension(box["width"], box["height"])
