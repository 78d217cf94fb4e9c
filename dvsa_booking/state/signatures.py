"""Page markers on driverpracticaltest.dvsa.gov.uk

These selectors and titles are what the booking site renders today. They
must match the live markup exactly.
"""

# Page states
TEST_TYPE = "TEST_TYPE"
LICENCE_DETAILS = "LICENCE_DETAILS"
TEST_DATE = "TEST_DATE"
TEST_CENTRE_RESULTS = "TEST_CENTRE_RESULTS"
POSTCODE_SEARCH = "POSTCODE_SEARCH"
UNKNOWN = "UNKNOWN"

# Page titles
TITLE_TEST_TYPE = "Type of test"
TITLE_LICENCE_DETAILS = "Licence details"
TITLE_TEST_DATE = "Test date"
TITLE_TEST_CENTRE = "Test centre"

# Selectors
CAR_TEST_BUTTON = "#test-type-car"
LICENCE_INPUT = "#driving-licence"
SPECIAL_NEEDS_NONE = "#special-needs-none"
LICENCE_SUBMIT = "#driving-licence-submit"
DATE_INPUT = "#test-choice-calendar"
INSTRUCTOR_INPUT = "#instructor-prn"
POSTCODE_INPUT = "#test-centres-input"
POSTCODE_SUBMIT = "#test-centres-submit"
RESULTS_CONTAINER = ".test-centre-results"
FETCH_MORE = "#fetch-more-centres"

# (state, marker, title) in probe order. The results container can share a
# page with the postcode input while results are rendering, so it goes first.
PAGE_SIGNATURES = [
    (TEST_CENTRE_RESULTS, RESULTS_CONTAINER, TITLE_TEST_CENTRE),
    (POSTCODE_SEARCH, POSTCODE_INPUT, TITLE_TEST_CENTRE),
    (TEST_DATE, DATE_INPUT, TITLE_TEST_DATE),
    (LICENCE_DETAILS, LICENCE_INPUT, TITLE_LICENCE_DETAILS),
    (TEST_TYPE, CAR_TEST_BUTTON, TITLE_TEST_TYPE),
]
