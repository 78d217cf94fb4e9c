#!/usr/bin/env python3
"""Quick script to see which booking page markers are present on a page."""

import sys

from dvsa_booking.browser.session import launch_browser
from dvsa_booking.config import APPLICATION_URL
from dvsa_booking.state.detector import detect_page
from dvsa_booking.state.signatures import PAGE_SIGNATURES


def main():
    url = sys.argv[1] if len(sys.argv) > 1 else APPLICATION_URL

    p, context, page = launch_browser()

    print(f"Navigating to {url}...")
    page.goto(url, wait_until="domcontentloaded", timeout=60000)

    print("\n" + "=" * 80)
    print(f"PAGE TITLE: {page.title()!r}")
    print("=" * 80)

    for state, marker, title in PAGE_SIGNATURES:
        count = page.locator(marker).count()
        flag = "🎯 " if count else "   "
        print(f"{flag}{state:<20} {marker:<24} count={count}  (expected title: {title!r})")

    print(f"\nRouter would pick: {detect_page(page)}")

    print("\n" + "=" * 80)
    print("Navigate around in the browser, press Ctrl+C to exit...")
    print("=" * 80)

    try:
        page.wait_for_timeout(300000)
    except KeyboardInterrupt:
        print("\nExiting...")

    context.close()
    p.stop()


if __name__ == "__main__":
    main()
