"""Element interactions

Each helper tolerates a missing element: it logs, returns False and lets the
calling step carry on with the rest of its work.
"""


def fill_if_present(page, selector, value, label="field"):
    """Set an input's value if the input is on the page"""
    element = page.locator(selector)
    if element.count() == 0:
        print(f"  ⚠️ {label} not found ({selector}), skipping")
        return False
    element.first.fill(value)
    print(f"  ✓ Filled {label}")
    return True


def check_if_present(page, selector, label="checkbox"):
    element = page.locator(selector)
    if element.count() == 0:
        print(f"  ⚠️ {label} not found ({selector}), skipping")
        return False
    element.first.check()
    print(f"  ✓ Checked {label}")
    return True


def click_if_present(page, selector, label="button"):
    element = page.locator(selector)
    if element.count() == 0:
        print(f"  ⚠️ '{label}' not found ({selector}), nothing clicked")
        return False
    element.first.click()
    print(f"  ✓ Clicked '{label}'")
    return True


def count_children(page, selector):
    """Number of direct children of the first element matching selector, or None if absent"""
    container = page.locator(selector)
    if container.count() == 0:
        return None
    return container.first.locator(":scope > *").count()
