#!/usr/bin/env python3
"""
DVSA Driving Test Booking - Main Orchestration
Walks the booking pages and polls the test centre results until stopped.
"""

import sys
import argparse

from playwright.sync_api import TimeoutError as PlaywrightTimeout

from dvsa_booking.browser.session import launch_browser
from dvsa_booking.config import (
    APPLICATION_URL,
    DEFAULT_STORE_PATH,
    get_timing,
    load_settings,
)
from dvsa_booking.data.store import ConfigStoreError, JsonConfigStore
from dvsa_booking.interaction.menu import CommandMenu
from dvsa_booking.interaction.notify import ConsoleNotifier, PageToastNotifier
from dvsa_booking.interaction.prompts import ConsolePrompter
from dvsa_booking.reconfigure import ensure_configured, reconfigure
from dvsa_booking.state.router import handle_page
from dvsa_booking.utils.timing import Scheduler

CONFIGURE_COMMAND = "Configure Script"

# How long to wait for the next page load before routing the current page again
PAGE_LOAD_TIMEOUT_MS = 180000


def init(store, menu, prompter, notifier, timing=None):
    """Register the configure command and load settings. Call once per process."""
    menu.register(CONFIGURE_COMMAND, lambda: reconfigure(store, prompter, notifier))
    return load_settings(store, timing=timing)


def when_page_ready(page, callback):
    """Run callback once the DOM is parsed; straight away if it already is"""
    if page.evaluate("document.readyState") == "loading":
        page.wait_for_load_state("domcontentloaded")
    return callback()


def run_session(page, settings, scheduler, notifier, max_cycles=None,
                page_load_timeout_ms=PAGE_LOAD_TIMEOUT_MS):
    """
    Route one step per page load until max_cycles page loads have been handled.

    Each step either submits a form or schedules a reload, and either way the
    next cycle starts on the page load that follows. Unknown pages dispatch
    nothing and simply wait for the next load.
    """
    print(f"Navigating to {APPLICATION_URL}...")
    page.goto(APPLICATION_URL)

    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        cycles += 1
        try:
            with page.expect_event("domcontentloaded", timeout=page_load_timeout_ms):
                when_page_ready(
                    page, lambda: handle_page(page, settings, scheduler, notifier)
                )
        except PlaywrightTimeout:
            print(f"  ⚠️ No page load within {page_load_timeout_ms / 1000:.0f}s, checking page again")
    return cycles


def build_parser():
    parser = argparse.ArgumentParser(
        description="DVSA driving test booking automation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Set licence, date, postcode and instructor reference
  dvsa-booking configure

  # Run the booking loop in a visible browser
  dvsa-booking run
        """,
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["run", "configure"],
        default="run",
        help="run the booking loop (default) or edit the stored configuration",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_STORE_PATH,
        help=f"path to the JSON config store (default: {DEFAULT_STORE_PATH})",
    )
    parser.add_argument(
        "--headless", action="store_true", help="run the browser without a window"
    )
    parser.add_argument(
        "--max-cycles",
        type=int,
        default=None,
        help="stop after this many page loads (default: run until interrupted)",
    )
    parser.add_argument(
        "--dev-speed",
        action="store_true",
        help="use the dev_test timing profile (shorter delays)",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    store = JsonConfigStore(args.config)
    prompter = ConsolePrompter()
    console = ConsoleNotifier()
    menu = CommandMenu()
    timing = get_timing("dev_test" if args.dev_speed else "default")

    try:
        settings = init(store, menu, prompter, console, timing=timing)

        if args.command == "configure":
            menu.run(CONFIGURE_COMMAND)
            return 0

        if not ensure_configured(store, prompter, console):
            print("Configuration incomplete - run again once it is set.")
            return 1
    except ConfigStoreError as e:
        print(f"✗ {e}")
        return 1

    p, context, page = launch_browser(headless=args.headless)
    try:
        run_session(
            page,
            settings,
            Scheduler.from_settings(settings),
            PageToastNotifier(page),
            max_cycles=args.max_cycles,
        )
    except KeyboardInterrupt:
        print("\nStopped by user")
    finally:
        print("Closing browser...")
        context.close()
        p.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
