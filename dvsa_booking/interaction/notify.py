"""User notifications"""

from playwright.sync_api import Error as PlaywrightError

TOAST_ID = "dvsa-booking-toast"
TOAST_STYLE_ID = "dvsa-booking-toast-style"
TOAST_DURATION_MS = 3000

TOAST_CSS = """
#dvsa-booking-toast {
    visibility: hidden;
    min-width: 250px;
    margin-left: -125px;
    background-color: #333;
    color: #fff;
    text-align: center;
    border-radius: 2px;
    padding: 16px;
    position: fixed;
    z-index: 10000;
    left: 50%;
    bottom: 30px;
    font-size: 17px;
}
#dvsa-booking-toast.show {
    visibility: visible;
    animation: dvsa-fadein 0.5s, dvsa-fadeout 0.5s 2.5s;
}
@keyframes dvsa-fadein {
    from {bottom: 0; opacity: 0;}
    to {bottom: 30px; opacity: 1;}
}
@keyframes dvsa-fadeout {
    from {bottom: 30px; opacity: 1;}
    to {bottom: 0; opacity: 0;}
}
"""

# Styles and the toast element are created on first use and reused after
SHOW_TOAST_JS = """
([message, css, toastId, styleId, durationMs]) => {
    if (!document.getElementById(styleId)) {
        const style = document.createElement('style');
        style.id = styleId;
        style.textContent = css;
        document.head.appendChild(style);
    }
    let toast = document.getElementById(toastId);
    if (!toast) {
        toast = document.createElement('div');
        toast.id = toastId;
        document.body.appendChild(toast);
    }
    toast.textContent = message;
    toast.classList.remove('show');
    setTimeout(() => toast.classList.add('show'), 10);
    clearTimeout(window.__dvsaToastTimer);
    window.__dvsaToastTimer = setTimeout(() => toast.classList.remove('show'), durationMs);
}
"""


class ConsoleNotifier:
    def notify(self, message):
        print(f"🔔 {message}")


class PageToastNotifier:
    """Shows a toast inside the booking page and echoes it to the console"""

    def __init__(self, page):
        self.page = page

    def notify(self, message):
        print(f"🔔 {message}")
        try:
            self.page.evaluate(
                SHOW_TOAST_JS,
                [message, TOAST_CSS, TOAST_ID, TOAST_STYLE_ID, TOAST_DURATION_MS],
            )
        except PlaywrightError as e:
            # The page can navigate away mid-call; the console line is enough
            print(f"  ⚠️ Could not show toast: {e}")
