"""State detection logic"""

from playwright.sync_api import Error as PlaywrightError

from dvsa_booking.state.signatures import PAGE_SIGNATURES, UNKNOWN


def detect_page(page, signatures=PAGE_SIGNATURES):
    """Detect which booking page is loaded - NO ACTIONS, only detection

    Markers are probed in signature order and the first one present wins.
    Page titles are not used for the decision; the site has retitled pages
    before while the form ids stayed put.
    """
    try:
        for state, marker, _title in signatures:
            if page.locator(marker).count() > 0:
                return state
        return UNKNOWN
    except PlaywrightError as e:
        print(f"  ⚠️ State detection error: {e}")
        return UNKNOWN


def present_markers(page, signatures=PAGE_SIGNATURES):
    """Every state whose marker is on the page, in probe order (diagnostics)"""
    return [state for state, marker, _title in signatures if page.locator(marker).count() > 0]
