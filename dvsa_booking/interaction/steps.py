"""Step actions, one per booking page

Every action takes (page, settings, scheduler, notifier). None of them retry;
the reload loop in check_results is the only retry mechanism.
"""

from dvsa_booking.config import APPLICATION_URL
from dvsa_booking.interaction.elements import (
    check_if_present,
    click_if_present,
    count_children,
    fill_if_present,
)
from dvsa_booking.state.signatures import (
    CAR_TEST_BUTTON,
    DATE_INPUT,
    FETCH_MORE,
    INSTRUCTOR_INPUT,
    LICENCE_INPUT,
    LICENCE_SUBMIT,
    POSTCODE_INPUT,
    POSTCODE_SUBMIT,
    RESULTS_CONTAINER,
    SPECIAL_NEEDS_NONE,
)
from dvsa_booking.utils.logging import log_result


def select_test_type(page, settings, scheduler, notifier):
    print("Selecting car test...")
    click_if_present(page, CAR_TEST_BUTTON, "Car test")


def enter_licence_details(page, settings, scheduler, notifier):
    print("Entering licence details...")
    fill_if_present(page, LICENCE_INPUT, settings.licence, "driving licence number")
    check_if_present(page, SPECIAL_NEEDS_NONE, "no special needs")
    click_if_present(page, LICENCE_SUBMIT, "Continue")


def enter_test_date(page, settings, scheduler, notifier):
    print("Entering preferred test date...")
    fill_if_present(page, DATE_INPUT, settings.test_date, "test date")
    if settings.instructor_reference:
        fill_if_present(
            page, INSTRUCTOR_INPUT, settings.instructor_reference, "instructor reference"
        )
    # The date page reuses the licence page's submit id
    click_if_present(page, LICENCE_SUBMIT, "Continue")


def enter_postcode(page, settings, scheduler, notifier):
    print("Entering postcode and searching for test centres...")
    fill_if_present(page, POSTCODE_INPUT, settings.postcode, "postcode")
    click_if_present(page, POSTCODE_SUBMIT, "Find test centres")


def reload_application(page):
    print(f"Reloading {APPLICATION_URL}")
    page.goto(APPLICATION_URL)


def check_results(page, settings, scheduler, notifier):
    """
    Poll the test centre results.

    With no results on the page this falls back to a postcode search. With
    results, asks for more centres while below the threshold, then always
    reloads the application after 30-60s so the whole flow starts again on
    a fresh page.
    """
    found = count_children(page, RESULTS_CONTAINER)
    if found is None:
        print("No results yet")
        enter_postcode(page, settings, scheduler, notifier)
        return None

    threshold = settings.nearest_num_of_centres
    print(f"Found {found} test centres (want {threshold})")
    if found < threshold:
        click_if_present(page, FETCH_MORE, "Show more test centres")
    else:
        notifier.notify(f"Found {found} test centres near {settings.postcode}")

    interval = scheduler.random_int(settings.min_reload_ms, settings.max_reload_ms)
    log_result("POLLED", f"{found}/{threshold} centres", centres_found=found, reload_ms=interval)
    print(f"Sleeping for {interval / 1000}s")
    scheduler.schedule(interval, lambda: reload_application(page))
    return interval
