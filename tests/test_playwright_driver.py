from unittest.mock import MagicMock, call

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PWTimeout

from robo_fluent import (
    Dimension,
    DriverError,
    ElementNotInteractableError,
    FluentExecutionError,
    FluentWebDriver,
    InvalidSelectorError,
    NoSuchElementError,
    Outcome,
    PlaywrightDriver,
    Point,
    Settings,
    StaleElementError,
    UnsupportedOperationError,
    classify,
    millis,
    secs,
)


@pytest.fixture
def config():
    return Settings(nav_timeout_ms=3000, action_timeout_ms=1500)


@pytest.fixture
def page():
    return MagicMock(name="page")


@pytest.fixture
def driver(page, config):
    return PlaywrightDriver(page, config)


def test_applies_configured_timeouts(page, driver):
    page.set_default_navigation_timeout.assert_called_once_with(3000)
    page.set_default_timeout.assert_called_once_with(1500)


def test_implicit_wait_drives_the_page_timeout(page, driver):
    driver.implicitly_wait(5)
    assert driver.wait_ms == 5000
    page.set_default_timeout.assert_called_with(5000)

    driver.implicitly_wait(0)
    assert driver.wait_ms == 0
    page.set_default_timeout.assert_called_with(1500)


def test_lookup_without_wait_does_not_block(page, driver):
    page.query_selector.return_value = None

    with pytest.raises(NoSuchElementError):
        driver.find_element("#missing")

    page.query_selector.assert_called_once_with("#missing")
    page.wait_for_selector.assert_not_called()


def test_lookup_with_wait_polls_for_the_selector(page, driver):
    handle = MagicMock(name="handle")
    page.wait_for_selector.return_value = handle
    driver.implicitly_wait(2)

    found = driver.find_element("#late")

    assert found.handle is handle
    page.wait_for_selector.assert_called_once_with("#late", state="attached", timeout=2000)


def test_lookup_timeout_is_a_missing_element(page, driver):
    page.wait_for_selector.side_effect = PWTimeout("Timeout 2000ms exceeded.")
    driver.implicitly_wait(2)

    with pytest.raises(NoSuchElementError) as raised:
        driver.find_element("#late")

    assert classify(raised.value) is Outcome.TRANSIENT


def test_find_elements_wraps_every_handle(page, driver):
    page.query_selector_all.return_value = [MagicMock(), MagicMock()]

    found = driver.find_elements("li")

    assert len(found) == 2
    assert found[0].handle is page.query_selector_all.return_value[0]


def _element(driver):
    handle = MagicMock(name="handle")
    driver.page.query_selector.return_value = handle
    return driver.find_element("#x"), handle


@pytest.mark.parametrize(
    "error, expected",
    [
        (PWTimeout("Timeout 1500ms exceeded."), ElementNotInteractableError),
        (PlaywrightError("Element is not attached to the DOM"), StaleElementError),
        (PlaywrightError("'##' is not a valid selector"), InvalidSelectorError),
        (PlaywrightError("Target page, context or browser has been closed"), DriverError),
    ],
)
def test_click_errors_are_translated(driver, error, expected):
    element, handle = _element(driver)
    handle.click.side_effect = error

    with pytest.raises(expected) as raised:
        element.click()

    assert type(raised.value) is expected
    assert raised.value.__cause__ is error


def test_closed_page_is_not_retried(driver):
    element, handle = _element(driver)
    handle.click.side_effect = PlaywrightError("Target page, context or browser has been closed")

    with pytest.raises(DriverError) as raised:
        element.click()

    assert classify(raised.value) is Outcome.NON_TRANSIENT


def test_element_primitives(driver):
    element, handle = _element(driver)
    handle.inner_text.return_value = "Hi"
    handle.get_attribute.return_value = "user"
    handle.is_visible.return_value = True
    handle.bounding_box.return_value = {"x": 1, "y": 2, "width": 30, "height": 40}

    element.send_keys("ab", "c")
    element.clear()

    handle.focus.assert_called_once_with()
    driver.page.keyboard.type.assert_called_once_with("abc")
    handle.fill.assert_called_once_with("")
    assert element.text == "Hi"
    assert element.get_attribute("name") == "user"
    assert element.is_displayed() is True
    assert element.location == Point(1, 2)
    assert element.size == Dimension(30, 40)


def test_unrendered_element_has_no_location(driver):
    element, handle = _element(driver)
    handle.bounding_box.return_value = None

    with pytest.raises(ElementNotInteractableError):
        element.location


def test_submit_outside_a_form(driver):
    element, handle = _element(driver)
    handle.evaluate.return_value = False

    with pytest.raises(UnsupportedOperationError):
        element.submit()


def test_nested_lookup_uses_the_element_as_root(driver):
    element, handle = _element(driver)
    child = MagicMock(name="child")
    handle.query_selector.return_value = child

    assert element.find_element("span").handle is child
    handle.query_selector.assert_called_once_with("span")


def test_fluent_chain_over_playwright(page, driver):
    handle = MagicMock(name="handle")
    page.wait_for_selector.side_effect = [PWTimeout("Timeout 2000ms exceeded."), handle]

    FluentWebDriver(driver).within(secs(2)).element("#login").click()

    assert page.wait_for_selector.call_count == 2
    handle.click.assert_called_once_with()
    assert page.set_default_timeout.call_args_list == [
        call(1500),
        call(2000), call(1500),
        call(2000), call(1500),
    ]
    assert driver.wait_ms == 0


def test_plural_lookup_with_wait_waits_for_a_first_match(page, driver):
    page.query_selector_all.return_value = [MagicMock(), MagicMock()]
    driver.implicitly_wait(2)

    found = driver.find_elements("li")

    assert len(found) == 2
    page.wait_for_selector.assert_called_once_with("li", state="attached", timeout=2000)


def test_plural_lookup_timeout_is_an_empty_result(page, driver):
    page.wait_for_selector.side_effect = PWTimeout("Timeout 2000ms exceeded.")
    driver.implicitly_wait(2)

    assert driver.find_elements("li") == []
    page.query_selector_all.assert_not_called()


def test_plural_lookup_without_wait_does_not_block(page, driver):
    page.query_selector_all.return_value = []

    assert driver.find_elements("li") == []
    page.wait_for_selector.assert_not_called()


def test_retrying_elements_lets_the_page_do_the_waiting(page, driver):
    page.wait_for_selector.side_effect = PWTimeout("Timeout 200ms exceeded.")

    with pytest.raises(FluentExecutionError) as raised:
        FluentWebDriver(driver).within(millis(200)).elements(".late")

    assert isinstance(raised.value.cause, NoSuchElementError)
    page.query_selector_all.assert_not_called()
    assert page.wait_for_selector.call_args == call(".late", state="attached", timeout=200)
