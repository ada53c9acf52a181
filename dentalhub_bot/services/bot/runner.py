"""Top-level entry that ties the browser session to the booking flow."""

import traceback
from typing import Optional

from loguru import logger

from ...constants import LogEmoji
from ...core.config import AppConfig
from ...utils.error_capture import ErrorCapture
from ..intake import IntakeService
from .booking_flow import BookingContext, BookingFlow
from .browser_manager import BrowserSession


async def run_booking(
    config: AppConfig,
    intake: IntakeService,
    error_capture: Optional[ErrorCapture] = None,
) -> BookingContext:
    """
    Run one booking inside a browser session.

    On failure the error and stack trace are logged and a screenshot is
    captured before the session closes; the error is then re-raised.

    Args:
        config: Application configuration
        intake: Operator intake service
        error_capture: Screenshot capture (built from config when omitted)

    Returns:
        The finished booking context
    """
    capture = error_capture or ErrorCapture(config.booking.screenshot_path)

    async with BrowserSession(config.browser) as session:
        flow = BookingFlow(session.page, config, intake)
        try:
            return await flow.run()
        except Exception as e:
            logger.error(f"{LogEmoji.ERROR} Error occurred: {e}")
            logger.error(f"Stack trace:\n{traceback.format_exc()}")
            failed_in = flow.context.failed_in
            await capture.capture(
                session.page,
                e,
                {"state": failed_in.value if failed_in else None},
            )
            raise
