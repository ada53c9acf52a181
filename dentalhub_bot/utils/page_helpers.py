"""Shared page interaction helpers for Playwright-based operations."""

import asyncio
from typing import Any, Dict

from loguru import logger
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..constants import PipelineSelectors, Timeouts
from ..core.exceptions import ControlDisabledError

_NOT_CLASS_DISABLED_JS = """
([selector, disabledClass]) => {
    const el = document.querySelector(selector);
    return !!el && !el.classList.contains(disabledClass);
}
"""

_NOT_ATTR_DISABLED_JS = """
(selector) => {
    const el = document.querySelector(selector);
    return !!el && !el.hasAttribute('disabled');
}
"""

_FIELD_STATE_JS = """
(el) => ({
    value: el.value,
    disabled: el.disabled,
    readOnly: el.readOnly,
    ariaInvalid: el.getAttribute('aria-invalid'),
})
"""


async def pause(seconds: float) -> None:
    """Fixed UI settle delay."""
    await asyncio.sleep(seconds)


async def wait_until_enabled(
    page: Page, selector: str, timeout: int = Timeouts.CONTROL_ENABLED
) -> None:
    """
    Wait until an MUI control loses its ``Mui-disabled`` class.

    Args:
        page: Playwright page
        selector: Control selector
        timeout: Maximum wait time in ms

    Raises:
        ControlDisabledError: If the control is still disabled after timeout
    """
    try:
        await page.wait_for_function(
            _NOT_CLASS_DISABLED_JS,
            arg=[selector, PipelineSelectors.DISABLED_CLASS],
            timeout=timeout,
        )
    except PlaywrightTimeoutError as e:
        logger.error(f"Control {selector} stayed disabled for {timeout}ms")
        raise ControlDisabledError(selector, timeout) from e


async def wait_until_clickable(page: Page, selector: str, timeout: int) -> None:
    """
    Wait until a button no longer carries the ``disabled`` attribute.

    Raises:
        ControlDisabledError: If the button is still disabled after timeout
    """
    try:
        await page.wait_for_function(_NOT_ATTR_DISABLED_JS, arg=selector, timeout=timeout)
    except PlaywrightTimeoutError as e:
        logger.error(f"Button {selector} stayed disabled for {timeout}ms")
        raise ControlDisabledError(selector, timeout) from e


async def read_input_value(page: Page, selector: str) -> str:
    """Read back the current value of an input element."""
    return await page.input_value(selector)


async def describe_field_state(page: Page, selector: str) -> Dict[str, Any]:
    """Snapshot of value/disabled/readOnly/aria-invalid for diagnostics."""
    state: Dict[str, Any] = await page.eval_on_selector(selector, _FIELD_STATE_JS)
    return state
