"""Page routing: detect the page, then run its step once"""

from dvsa_booking.interaction.steps import (
    check_results,
    enter_licence_details,
    enter_postcode,
    enter_test_date,
    select_test_type,
)
from dvsa_booking.state.detector import detect_page
from dvsa_booking.state.signatures import (
    LICENCE_DETAILS,
    POSTCODE_SEARCH,
    TEST_CENTRE_RESULTS,
    TEST_DATE,
    TEST_TYPE,
    UNKNOWN,
)

STEP_ACTIONS = {
    TEST_TYPE: select_test_type,
    LICENCE_DETAILS: enter_licence_details,
    TEST_DATE: enter_test_date,
    POSTCODE_SEARCH: enter_postcode,
    TEST_CENTRE_RESULTS: check_results,
}


def handle_page(page, settings, scheduler, notifier, actions=STEP_ACTIONS):
    """Route the loaded page to its step action. Returns the detected state."""
    state = detect_page(page)
    if state == UNKNOWN:
        print(f"Unknown page title: {page.title()!r}, waiting for next page load")
        return state

    print(f"\n📄 Page: {state}")
    action = actions[state]
    scheduler.random_delay(lambda: action(page, settings, scheduler, notifier))
    return state
