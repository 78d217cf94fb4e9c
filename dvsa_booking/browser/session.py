"""Browser session management"""

from playwright.sync_api import sync_playwright

BROWSER_DATA_DIR = "./browser_data"
USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"


def launch_browser(headless=False, user_data_dir=BROWSER_DATA_DIR):
    """
    Launch persistent browser context and return (playwright, context, page).
    Reuses cookies across runs so the booking site sees a returning browser.
    """
    print("Launching browser...")

    p = sync_playwright().start()

    context = p.chromium.launch_persistent_context(
        user_data_dir=user_data_dir,
        headless=headless,
        args=[
            "--disable-blink-features=AutomationControlled",
            "--disable-features=IsolateOrigins,site-per-process",
        ],
        viewport={"width": 1280, "height": 720},
        user_agent=USER_AGENT,
        locale="en-GB",
        timezone_id="Europe/London",
        ignore_default_args=["--enable-automation"],
    )

    page = context.pages[0] if context.pages else context.new_page()

    return p, context, page
