"""Browser lifecycle for a single booking run."""

from typing import Any, Dict, Optional

from loguru import logger
from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from ...core.config import BrowserConfig


class BrowserSession:
    """Owns Playwright, the browser, its context and the one page of a run."""

    def __init__(self, config: BrowserConfig):
        """
        Initialize browser session.

        Args:
            config: Browser launch configuration
        """
        self.config = config
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    @property
    def page(self) -> Page:
        """
        The session page.

        Raises:
            RuntimeError: If the session has not been started
        """
        if self._page is None:
            raise RuntimeError("Browser session is not started. Call start() first.")
        return self._page

    @property
    def is_started(self) -> bool:
        return self._page is not None

    def _launch_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "headless": self.config.headless,
            "args": list(self.config.args),
        }
        if self.config.executable_path:
            options["executable_path"] = self.config.executable_path
        return options

    async def start(self) -> Page:
        """Launch the browser and open the page."""
        if self.browser is not None:
            logger.warning("Browser already started")
            return self.page

        try:
            self.playwright = await async_playwright().start()
            self.browser = await self.playwright.chromium.launch(**self._launch_options())
            self.context = await self.browser.new_context(
                viewport={
                    "width": self.config.viewport.width,
                    "height": self.config.viewport.height,
                }
            )
            self._page = await self.context.new_page()
            logger.info(
                f"Browser started (headless={self.config.headless}, "
                f"viewport={self.config.viewport.width}x{self.config.viewport.height})"
            )
            return self._page
        except Exception:
            await self.close()
            raise

    async def close(self) -> None:
        """Release the page, context, browser and Playwright."""
        self._page = None

        if self.context:
            try:
                await self.context.close()
                logger.debug("Browser context closed")
            except Exception as e:
                logger.error(f"Error closing browser context: {e}")
            finally:
                self.context = None

        if self.browser:
            try:
                await self.browser.close()
                logger.debug("Browser closed")
            except Exception as e:
                logger.error(f"Error closing browser: {e}")
            finally:
                self.browser = None

        if self.playwright:
            try:
                await self.playwright.stop()
            except Exception as e:
                logger.error(f"Error stopping Playwright: {e}")
            finally:
                self.playwright = None

        logger.info("Browser resources cleaned up")

    async def __aenter__(self) -> "BrowserSession":
        """Async context manager entry."""
        await self.start()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
