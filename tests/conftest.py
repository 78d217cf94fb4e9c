"""Fakes for the Playwright page surface the bot touches"""

from contextlib import contextmanager

import pytest

from dvsa_booking.config import BookingSettings


class FakeElement:
    def __init__(self, children=0):
        self.value = ""
        self.checked = False
        self.clicks = 0
        self.children = children

    def fill(self, value):
        self.value = value

    def check(self):
        self.checked = True

    def click(self):
        self.clicks += 1

    def locator(self, selector):
        assert selector == ":scope > *"
        return FakeChildren(self.children)


class FakeChildren:
    def __init__(self, n):
        self._n = n

    def count(self):
        return self._n


class FakeLocator:
    def __init__(self, page, selector):
        self.page = page
        self.selector = selector

    def count(self):
        if self.page.locator_error is not None:
            raise self.page.locator_error
        return 1 if self.selector in self.page.elements else 0

    @property
    def first(self):
        return self.page.elements[self.selector]


class FakePage:
    def __init__(self, elements=None, title="", ready_state="complete"):
        self.elements = dict(elements or {})
        self._title = title
        self.ready_state = ready_state
        self.visited = []
        self.load_state_waits = []
        self.evaluated = []
        self.expected_events = []
        self.locator_error = None

    def add(self, selector, children=0):
        element = FakeElement(children=children)
        self.elements[selector] = element
        return element

    def locator(self, selector):
        return FakeLocator(self, selector)

    def title(self):
        return self._title

    def goto(self, url, **kwargs):
        self.visited.append(url)

    def evaluate(self, expression, arg=None):
        if expression == "document.readyState":
            return self.ready_state
        self.evaluated.append((expression, arg))
        return None

    def wait_for_load_state(self, state="load"):
        self.load_state_waits.append(state)
        self.ready_state = "interactive"

    @contextmanager
    def expect_event(self, event, timeout=None):
        self.expected_events.append(event)
        yield


class MemoryStore:
    def __init__(self, values=None):
        self.values = dict(values or {})
        self.writes = []

    def get(self, key, default=None):
        return self.values.get(key, default)

    def set(self, key, value):
        self.values[key] = value
        self.writes.append((key, value))


class ScriptedPrompter:
    """Answers prompts from a list; None means the user cancelled"""

    def __init__(self, answers, confirm_answer=False):
        self.answers = list(answers)
        self.asked = []
        self.confirm_answer = confirm_answer
        self.confirmations = []

    def prompt(self, message, default=""):
        self.asked.append((message, default))
        return self.answers.pop(0)

    def confirm(self, message):
        self.confirmations.append(message)
        return self.confirm_answer


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    def notify(self, message):
        self.messages.append(message)


class RecordingScheduler:
    """Scheduler stand-in that runs actions immediately and records delays"""

    def __init__(self, fixed_int=None):
        self.scheduled = []
        self.random_delays = 0
        self.fixed_int = fixed_int

    def random_int(self, min_value, max_value):
        if self.fixed_int is not None:
            return self.fixed_int
        return min_value

    def schedule(self, delay_ms, action):
        self.scheduled.append(delay_ms)
        return action()

    def random_delay(self, action):
        self.random_delays += 1
        return action()


VALID_LICENCE = "MORGA657054SM9IJ"


@pytest.fixture(autouse=True)
def _run_in_tmp(tmp_path, monkeypatch):
    # log_result appends to log.jsonl in the working directory
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return BookingSettings(
        licence=VALID_LICENCE,
        test_date="15/08/2025",
        postcode="SW1A 1AA",
        instructor_reference="123456",
    )


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def scheduler():
    return RecordingScheduler()
