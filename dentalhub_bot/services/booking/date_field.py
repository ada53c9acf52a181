"""Date entry for the booking form's masked date-of-birth widget.

The widget drops fast keystrokes (the year is often truncated), so the value
is written with three strategies of increasing force and verified after each.
"""

from typing import List

from loguru import logger
from playwright.async_api import Page

from ...constants import Delays, Timeouts, TypingDelays
from ...core.exceptions import FieldInteractionError
from ...utils.page_helpers import pause
from .field_interaction import WriteStrategy, wait_for_selector_with_retry, write_with_escalation

_VISIBLE_JS = """
(selector) => {
    const el = document.querySelector(selector);
    return !!el && el.offsetParent !== null;
}
"""

_BLUR_JS = "(el) => el.blur()"

_FORCE_VALUE_JS = """
(el, value) => {
    el.value = value;
    ['input', 'change', 'blur'].forEach((type) => {
        el.dispatchEvent(new Event(type, { bubbles: true }));
    });
}
"""


async def _press_paced(page: Page, text: str, delay_ms: int) -> None:
    for char in text:
        await page.keyboard.press(char)
        await pause(delay_ms / 1000)


async def type_date_segments(page: Page, selector: str, value: str) -> None:
    """Type day, month and year separately; the year gets the slowest pacing."""
    day, month, year = value.split("/")
    logger.info(f"Typing date segments Day: {day}, Month: {month}, Year: {year}")

    for segment in (day, month):
        await _press_paced(page, segment, TypingDelays.DATE_SEGMENT_KEY)
        await page.keyboard.press("/")
        await pause(TypingDelays.DATE_SEPARATOR / 1000)

    await _press_paced(page, year, TypingDelays.DATE_YEAR_KEY)
    # Tab triggers the widget's blur validation
    await page.keyboard.press("Tab")


async def retype_slowly(page: Page, selector: str, value: str) -> None:
    """Select all, delete, and retype the whole value with long key delays."""
    await page.click(selector, click_count=3)
    await page.keyboard.press("Backspace")
    await page.type(selector, value, delay=TypingDelays.DATE_RETYPE_KEY)
    await page.eval_on_selector(selector, _BLUR_JS)


async def force_value(page: Page, selector: str, value: str) -> None:
    """Assign the value property and dispatch input/change/blur for bound listeners."""
    await page.eval_on_selector(selector, _FORCE_VALUE_JS, value)


DATE_WRITE_STRATEGIES: List[WriteStrategy] = [
    WriteStrategy("segment typing", type_date_segments),
    WriteStrategy("slow retype", retype_slowly),
    WriteStrategy("forced value", force_value),
]


async def fill_date_field(
    page: Page,
    selector: str,
    value: str,
    field_name: str = "Date of Birth",
) -> str:
    """
    Fill a DD/MM/YYYY date field, escalating only on readback mismatch.

    Args:
        page: Playwright page
        selector: Date input selector
        value: Date in DD/MM/YYYY format
        field_name: Human-readable field name for logs

    Returns:
        The final value read back from the field. A mismatch is logged with
        the field state but not raised; the form's own validation then keeps
        the next button disabled.

    Raises:
        FieldInteractionError: If the field cannot be located or written to
    """
    try:
        await wait_for_selector_with_retry(page, selector)
        await page.wait_for_function(_VISIBLE_JS, arg=selector, timeout=Timeouts.FIELD_VISIBLE)
        await page.focus(selector)
        await page.fill(selector, "")

        filled = await write_with_escalation(
            page, selector, value, DATE_WRITE_STRATEGIES, field_name
        )
        await pause(Delays.AFTER_DATE_FIELD)
        return filled
    except Exception as e:
        logger.error(f"Failed to fill {field_name} with selector {selector}: {e}")
        raise FieldInteractionError(field_name, selector, str(e)) from e
