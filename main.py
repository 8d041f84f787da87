# main.py
import sys
import argparse
import logging
from playwright.sync_api import sync_playwright

from robo_fluent import (
    FluentExecutionError,
    FluentWebDriver,
    PlaywrightDriver,
    configure_logging,
    logger,
    secs,
    settings,
)


def _login(fluent, username, password):
    fluent.input("#user-name").clear_field().send_keys(username)
    fluent.input("#password").clear_field().send_keys(password)
    fluent.input("#login-button").click()


def _first_item(fluent, wait):
    """
    The inventory renders after the login redirect, so look it up
    within the wait rather than eagerly.
    """
    card = fluent.within(wait).elements(".inventory_item").first()
    title = card.div(".inventory_item_name").get_text()
    price = card.div(".inventory_item_price").get_text()
    return card, str(title).strip(), str(price).strip()


def _add_to_cart(fluent, card, wait):
    card.button().click()
    badge = fluent.within(wait).span(".shopping_cart_badge")
    return str(badge.get_text()).strip()


def run(item_wait: int) -> str:
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=settings.headless)
        context = browser.new_context(viewport={"width": 1440, "height": 900}, locale="en-US")
        page = context.new_page()
        driver = PlaywrightDriver(page, settings)

        try:
            driver.get(settings.base_url)
            fluent = FluentWebDriver(driver, config=settings)
            wait = secs(item_wait)

            _login(fluent, settings.username, settings.password)
            card, title, price = _first_item(fluent, wait)
            in_cart = _add_to_cart(fluent, card, wait)

            msg = f'Success! First item is "{title}" priced at {price} ({in_cart} in cart)'
            print(msg)
            return msg

        except FluentExecutionError as fe:
            logger.debug("Underlying failure", exc_info=fe.cause)
            err = f"Run failed: {fe}"
            print(err)
            return err
        finally:
            context.close()
            browser.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="SauceDemo login + cart robot")
    parser.add_argument("--wait", type=int, default=5, help="Seconds to wait for the inventory")
    parser.add_argument("--headed", action="store_true", help="Show the browser")
    parser.add_argument("--verbose", action="store_true", help="Log retry attempts")
    args = parser.parse_args()

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    if args.headed:
        settings.headless = False

    sys.exit(0 if run(args.wait).startswith("Success!") else 1)
