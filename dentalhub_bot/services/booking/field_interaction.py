"""Resilient field interaction primitives for the booking UI."""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence

from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from ...constants import Delays, LogEmoji, Retries, Timeouts, TypingDelays
from ...core.exceptions import FieldInteractionError, SelectorNotFoundError
from ...utils.page_helpers import describe_field_state, read_input_value

WriteFn = Callable[[Page, str, str], Awaitable[None]]


async def _retry_sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


def _log_selector_retry(selector: str, retries: int) -> Callable[[RetryCallState], None]:
    def before_sleep(retry_state: RetryCallState) -> None:
        logger.warning(
            f"{LogEmoji.RETRY} Retry {retry_state.attempt_number}/{retries} "
            f"for selector: {selector}"
        )

    return before_sleep


async def wait_for_selector_with_retry(
    page: Page,
    selector: str,
    timeout: int = Timeouts.SELECTOR_WAIT,
    retries: int = Retries.SELECTOR_WAIT,
    delay: float = Delays.SELECTOR_RETRY,
) -> None:
    """
    Wait for a visible element, retrying on timeout with a fixed delay.

    Args:
        page: Playwright page
        selector: CSS selector to wait for
        timeout: Per-attempt timeout in ms
        retries: Total number of attempts
        delay: Seconds between attempts

    Raises:
        SelectorNotFoundError: If the element never became visible
    """
    retrying = AsyncRetrying(
        stop=stop_after_attempt(retries),
        wait=wait_fixed(delay),
        retry=retry_if_exception_type(PlaywrightError),
        before_sleep=_log_selector_retry(selector, retries),
        sleep=_retry_sleep,
        reraise=True,
    )
    try:
        async for attempt in retrying:
            with attempt:
                await page.wait_for_selector(selector, state="visible", timeout=timeout)
    except PlaywrightError as e:
        logger.error(f"Selector {selector} not found after {retries} retries")
        raise SelectorNotFoundError(selector, attempts=retries) from e


async def type_field(
    page: Page,
    selector: str,
    value: str,
    field_name: str,
    key_delay: int = TypingDelays.DEFAULT_KEY,
) -> str:
    """
    Clear a field and type the value key by key, then read it back.

    Key-by-key entry fires the page's JS validation listeners the way a
    person typing would.

    Args:
        page: Playwright page
        selector: Input selector
        value: Text to type
        field_name: Human-readable field name for logs and errors
        key_delay: Delay between keystrokes in ms

    Returns:
        The value read back from the field

    Raises:
        FieldInteractionError: If any step fails
    """
    try:
        await wait_for_selector_with_retry(page, selector)
        await page.focus(selector)
        await page.fill(selector, "")
        await page.type(selector, value, delay=key_delay)
        filled = await read_input_value(page, selector)
        logger.info(f'{field_name} filled with "{filled}" using selector: {selector}')
        return filled
    except Exception as e:
        logger.error(f"Failed to fill {field_name} with selector {selector}: {e}")
        raise FieldInteractionError(field_name, selector, str(e)) from e


@dataclass(frozen=True)
class WriteStrategy:
    """One way of writing a value into a field."""

    name: str
    write: WriteFn


async def write_with_escalation(
    page: Page,
    selector: str,
    value: str,
    strategies: Sequence[WriteStrategy],
    field_name: str,
) -> str:
    """
    Write a value with progressively more forceful strategies.

    Each strategy runs only if the readback after the previous one does not
    equal ``value``.

    Args:
        page: Playwright page
        selector: Input selector
        value: Intended value
        strategies: Strategies ordered from least to most forceful
        field_name: Human-readable field name for logs

    Returns:
        The final readback (equal to ``value`` on success)
    """
    filled = ""
    for index, strategy in enumerate(strategies):
        if index > 0:
            logger.info(
                f'{field_name}: "{filled}" doesn\'t match "{value}", trying {strategy.name}...'
            )
        await strategy.write(page, selector, value)
        filled = await read_input_value(page, selector)
        logger.debug(f'{field_name} after {strategy.name}: "{filled}"')
        if filled == value:
            logger.info(f'{field_name} successfully filled with "{filled}" ({strategy.name})')
            return filled

    logger.error(f'{field_name} failed: expected "{value}", got "{filled}"')
    try:
        logger.error(f"Field state: {await describe_field_state(page, selector)}")
    except PlaywrightError as e:
        logger.warning(f"Could not read field state for {field_name}: {e}")
    return filled
