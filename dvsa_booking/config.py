"""Configuration and timing profiles for DVSA booking automation"""

from dataclasses import dataclass, replace

from dvsa_booking.utils.logging import warn
from dvsa_booking.validation.fields import (
    is_valid_date,
    is_valid_instructor,
    is_valid_licence,
    is_valid_postcode,
)

# ========================================
# TARGET SITE
# ========================================
APPLICATION_URL = "https://driverpracticaltest.dvsa.gov.uk/application"

# Number of test centres to find before we stop asking for more
NEAREST_NUM_OF_CENTRES = 12

# ========================================
# STORE KEYS AND DEFAULTS
# ========================================
LICENCE_KEY = "drivingLicenceNumber"
TEST_DATE_KEY = "testDate"
POSTCODE_KEY = "postcode"
INSTRUCTOR_KEY = "instructorReferenceNumber"

DEFAULT_LICENCE = "Your_Driver_Licence_Here"
DEFAULT_TEST_DATE = "DD/MM/YYYY"
DEFAULT_POSTCODE = "Your_Postcode"
DEFAULT_INSTRUCTOR = ""

DEFAULTS = {
    LICENCE_KEY: DEFAULT_LICENCE,
    TEST_DATE_KEY: DEFAULT_TEST_DATE,
    POSTCODE_KEY: DEFAULT_POSTCODE,
    INSTRUCTOR_KEY: DEFAULT_INSTRUCTOR,
}

DEFAULT_STORE_PATH = "dvsa_config.json"

# ========================================
# TIMING PROFILES
# ========================================
# All delays are in milliseconds (ms)
# step_delay_*: jitter before every step action
# reload_*: wait before reloading the results page

TIMING_PROFILES = {
    "default": {
        "step_delay_min": 2000,
        "step_delay_max": 4000,
        "reload_min": 30000,
        "reload_max": 60000,
    },
    "dev_test": {
        # Faster loop for trying selectors against a saved page
        "step_delay_min": 500,
        "step_delay_max": 1000,
        "reload_min": 5000,
        "reload_max": 10000,
    },
}

# ========================================
# SAFETY VALIDATIONS
# ========================================
_MIN_STEP_DELAY_MS = 250
_MIN_RELOAD_MS = 5000


def get_timing(profile_name="default"):
    """Return a timing profile, falling back to default if it breaks the safety floors"""
    timing = TIMING_PROFILES.get(profile_name)
    if timing is None:
        warn(f"Unknown timing profile '{profile_name}', using default")
        return TIMING_PROFILES["default"]

    violations = []
    for key, value in timing.items():
        if key.startswith("step_delay") and value < _MIN_STEP_DELAY_MS:
            violations.append(f"{key}={value}ms < {_MIN_STEP_DELAY_MS}ms minimum")
        if key.startswith("reload") and value < _MIN_RELOAD_MS:
            violations.append(f"{key}={value}ms < {_MIN_RELOAD_MS}ms minimum")
    if timing["step_delay_min"] > timing["step_delay_max"]:
        violations.append("step_delay_min > step_delay_max")
    if timing["reload_min"] > timing["reload_max"]:
        violations.append("reload_min > reload_max")

    if violations:
        warn("TIMING PROFILE VIOLATIONS - Falling back to default profile:")
        for violation in violations:
            print(f"  - {violation}")
        return TIMING_PROFILES["default"]

    return timing


# ========================================
# BOOKING SETTINGS
# ========================================


@dataclass(frozen=True)
class BookingSettings:
    """Validated values the step actions work from. Built once per run."""

    licence: str = DEFAULT_LICENCE
    test_date: str = DEFAULT_TEST_DATE
    postcode: str = DEFAULT_POSTCODE
    instructor_reference: str = DEFAULT_INSTRUCTOR
    nearest_num_of_centres: int = NEAREST_NUM_OF_CENTRES
    min_delay_ms: int = TIMING_PROFILES["default"]["step_delay_min"]
    max_delay_ms: int = TIMING_PROFILES["default"]["step_delay_max"]
    min_reload_ms: int = TIMING_PROFILES["default"]["reload_min"]
    max_reload_ms: int = TIMING_PROFILES["default"]["reload_max"]

    def with_timing(self, timing):
        """Copy of these settings using the windows from a timing profile"""
        return replace(
            self,
            min_delay_ms=timing["step_delay_min"],
            max_delay_ms=timing["step_delay_max"],
            min_reload_ms=timing["reload_min"],
            max_reload_ms=timing["reload_max"],
        )


# (store key, label, validator) - instructor reference is optional and
# only validated when something was stored
_VALIDATED_FIELDS = [
    (LICENCE_KEY, "driving licence number", is_valid_licence),
    (TEST_DATE_KEY, "test date", is_valid_date),
    (POSTCODE_KEY, "postcode", is_valid_postcode),
    (INSTRUCTOR_KEY, "instructor reference number", is_valid_instructor),
]


def load_settings(store, timing=None):
    """
    Read the four booking fields from the store and build BookingSettings.

    A stored value that fails its validator is replaced by the hard-coded
    default and reported with one warning per field. Nothing here is fatal.
    """
    values = {}
    for key, label, validator in _VALIDATED_FIELDS:
        default = DEFAULTS[key]
        value = store.get(key, default)
        if key == INSTRUCTOR_KEY and not value:
            values[key] = DEFAULT_INSTRUCTOR
            continue
        if not validator(value):
            warn(f"Invalid {label} in config ({value!r}), using default {default!r}")
            value = default
        values[key] = value

    settings = BookingSettings(
        licence=values[LICENCE_KEY],
        test_date=values[TEST_DATE_KEY],
        postcode=values[POSTCODE_KEY],
        instructor_reference=values[INSTRUCTOR_KEY],
    )
    if timing is not None:
        settings = settings.with_timing(timing)
    return settings
