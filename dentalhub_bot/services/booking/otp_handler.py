"""One-time passcode verification step."""

from typing import Callable

from loguru import logger
from playwright.async_api import Page

from ...constants import BookingFormSelectors, Delays, LogEmoji, Timeouts, TypingDelays
from ...utils.page_helpers import pause
from .field_interaction import wait_for_selector_with_retry
from .form_filler import click_next_when_enabled

OTPProvider = Callable[[], str]


class OTPVerifier:
    """Enters the SMS code and confirms the deposit step."""

    async def verify(self, page: Page, otp_provider: OTPProvider) -> str:
        """
        Enter the OTP, confirm and wait for the confirmation page.

        Args:
            page: Playwright page showing the OTP step
            otp_provider: Returns a validated 4-digit code (blocks on the operator)

        Returns:
            URL of the booking confirmation page
        """
        selector = BookingFormSelectors.OTP_INPUT
        await wait_for_selector_with_retry(page, selector, timeout=Timeouts.OTP_INPUT)

        otp = otp_provider()
        logger.info(f"{LogEmoji.KEY} Entering OTP")
        await page.type(selector, otp, delay=TypingDelays.DEFAULT_KEY)
        await pause(Delays.AFTER_OTP)

        async with page.expect_navigation(
            wait_until="networkidle", timeout=Timeouts.CONFIRMATION_NAVIGATION
        ):
            await click_next_when_enabled(page)

        logger.info(f"{LogEmoji.SUCCESS} Booking confirmation URL: {page.url}")
        return page.url
