"""Interactive reconfiguration of the stored booking details"""

from dvsa_booking.config import (
    DEFAULT_LICENCE,
    DEFAULT_POSTCODE,
    DEFAULT_TEST_DATE,
    DEFAULTS,
    INSTRUCTOR_KEY,
    LICENCE_KEY,
    POSTCODE_KEY,
    TEST_DATE_KEY,
)
from dvsa_booking.validation.fields import (
    is_valid_date,
    is_valid_instructor,
    is_valid_licence,
    is_valid_postcode,
)


def _optional_instructor(value):
    return value == "" or is_valid_instructor(value)


# (store key, prompt, validator, error shown when the answer is rejected)
CONFIG_FIELDS = [
    (
        LICENCE_KEY,
        "Enter your Driving Licence Number",
        is_valid_licence,
        "Invalid driving licence number: must be exactly 16 letters or digits. Not saved.",
    ),
    (
        TEST_DATE_KEY,
        "Enter desired test date (DD/MM/YYYY)",
        is_valid_date,
        "Invalid test date: must be a real date in DD/MM/YYYY format. Not saved.",
    ),
    (
        POSTCODE_KEY,
        "Enter your Postcode",
        is_valid_postcode,
        "Invalid postcode: must be a UK postcode such as SW1A 1AA. Not saved.",
    ),
    (
        INSTRUCTOR_KEY,
        "Enter Instructor Reference Number (optional, - to clear)",
        _optional_instructor,
        "Invalid instructor reference number: digits only. Not saved.",
    ),
]

# Fields a run cannot start without
_REQUIRED = {
    LICENCE_KEY: (DEFAULT_LICENCE, is_valid_licence),
    TEST_DATE_KEY: (DEFAULT_TEST_DATE, is_valid_date),
    POSTCODE_KEY: (DEFAULT_POSTCODE, is_valid_postcode),
}


def reconfigure(store, prompter, notifier):
    """
    Prompt for each field in turn and persist the answers that validate.

    A cancelled prompt leaves the field alone without comment. A rejected
    answer is reported and the stored value is kept; the remaining fields
    are still asked. Returns the keys that were saved.
    """
    saved = []
    for key, message, validator, error in CONFIG_FIELDS:
        current = store.get(key, DEFAULTS[key])
        # Hand-edited stores can hold numbers
        answer = prompter.prompt(message, "" if current is None else str(current))
        if answer is None:
            continue

        answer = answer.strip()
        if not validator(answer):
            notifier.notify(error)
            continue

        store.set(key, answer)
        saved.append(key)

    notifier.notify("Configuration saved! Restart the run to apply changes.")
    return saved


def is_configured(store):
    """True once licence, date and postcode hold values that pass their validators

    The placeholders fail validation, so an untouched install is not configured.
    Neither is one whose stored value load_settings would swap for a placeholder.
    """
    for key, (default, validator) in _REQUIRED.items():
        if not validator(store.get(key, default)):
            return False
    instructor = store.get(INSTRUCTOR_KEY, "")
    return not instructor or is_valid_instructor(instructor)


def ensure_configured(store, prompter, notifier):
    """
    Check the required fields are set before a run.

    Offers to run the reconfiguration flow when they are not. Returns False
    in that case either way, so the caller does not start on stale settings.
    """
    if is_configured(store):
        return True
    if prompter.confirm("Configuration is missing or incomplete. Would you like to set it now?"):
        reconfigure(store, prompter, notifier)
    return False
