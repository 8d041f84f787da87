import pytest

from robo_fluent import Dimension, NoSuchElementError, Point


class Script:
    """Callable that plays back outcomes in order, repeating the last one.

    Exception instances are raised, anything else is returned.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = 0

    def __call__(self, *args, **kwargs):
        outcome = self.outcomes[min(self.calls, len(self.outcomes) - 1)]
        self.calls += 1
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def _resolve(value):
    return value() if callable(value) else value


class FakeElement:
    def __init__(self, tag="div", text="", attributes=None, css=None, children=None):
        self._tag = tag
        self._text = text
        self.attributes = attributes or {}
        self.css = css or {}
        self.children = children or {}
        self.actions = []
        self.typed = []

    def find_element(self, selector):
        found = self.find_elements(selector)
        if not found:
            raise NoSuchElementError(selector)
        return found[0]

    def find_elements(self, selector):
        return list(self.children.get(selector, []))

    def click(self):
        self.actions.append("click")

    def clear(self):
        self.actions.append("clear")

    def submit(self):
        self.actions.append("submit")

    def send_keys(self, *keys):
        self.typed.extend(keys)

    def get_attribute(self, name):
        return self.attributes.get(name)

    def value_of_css_property(self, name):
        return self.css.get(name, "")

    @property
    def text(self):
        return _resolve(self._text)

    @property
    def tag_name(self):
        return _resolve(self._tag)

    def is_selected(self):
        return False

    def is_enabled(self):
        return True

    def is_displayed(self):
        return True

    @property
    def location(self):
        return Point(10, 20)

    @property
    def size(self):
        return Dimension(100, 30)


class FakeDriver:
    """Driver session that records every implicit wait it is given."""

    def __init__(self, elements=None):
        self.elements = elements or {}
        self.waits = []

    def implicitly_wait(self, seconds):
        self.waits.append(seconds)

    def find_element(self, selector):
        found = self.find_elements(selector)
        if not found:
            raise NoSuchElementError(selector)
        return found[0]

    def find_elements(self, selector):
        return list(self.elements.get(selector, []))


@pytest.fixture
def element():
    return FakeElement(tag="input", text="Hello", attributes={"name": "user"})


@pytest.fixture
def driver(element):
    return FakeDriver({"#user": [element]})
