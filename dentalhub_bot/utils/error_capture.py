"""Error capture with a failure screenshot and context."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger
from playwright.async_api import Page

from ..core.exceptions import DentalHubBotError


class ErrorCapture:
    """Capture a diagnostic screenshot when the booking flow fails."""

    def __init__(self, screenshot_path: str = "error-screenshot.png"):
        """
        Initialize error capture.

        Args:
            screenshot_path: Fixed path of the failure screenshot (overwritten each time)
        """
        self.screenshot_path = Path(screenshot_path)

    async def capture(
        self,
        page: Optional[Page],
        error: BaseException,
        context: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Capture the error with a screenshot. Never raises.

        Args:
            page: Playwright page object, or None if the page never opened
            error: Exception that occurred
            context: Additional context (state, step, ...)

        Returns:
            Error record with captured data
        """
        error_record: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "error_type": type(error).__name__,
            "error_message": str(error),
            "context": context or {},
        }
        if isinstance(error, DentalHubBotError):
            error_record["error"] = error.to_dict()

        if page is None:
            return error_record

        try:
            error_record["url"] = page.url
            self.screenshot_path.parent.mkdir(parents=True, exist_ok=True)
            await page.screenshot(path=str(self.screenshot_path))
            error_record["screenshot"] = str(self.screenshot_path)
            logger.info(f"Screenshot saved as '{self.screenshot_path}'")
        except Exception as e:
            logger.error(f"Failed to capture error screenshot: {e}")
            error_record["capture_error"] = str(e)

        return error_record
