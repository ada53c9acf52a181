"""Sequenced selector pipeline: cookies, patient type, insurance, reason, provider."""

from typing import List, Optional

from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from ...constants import CookieSelectors, Delays, LogEmoji, PipelineSelectors, Timeouts
from ...core.enums import InsuranceType, PatientType
from ...core.exceptions import BookingError
from ...models import BookingPreferences
from ...utils.page_helpers import pause, wait_until_enabled
from .field_interaction import wait_for_selector_with_retry

ANY_PROVIDER = "any provider"


def choose_option_index(
    texts: List[str],
    preference: str,
    fallback_text: Optional[str] = None,
    exact: bool = False,
) -> Optional[int]:
    """
    Pick the option matching an operator preference.

    Matching is case-insensitive on stripped text; the first match wins.

    Args:
        texts: Option texts in display order
        preference: Wanted text
        fallback_text: Exact text to use if nothing matches the preference
        exact: Require equality instead of substring containment

    Returns:
        Index of the chosen option, or None if neither preference nor
        fallback matched
    """
    wanted = preference.strip().lower()
    normalized = [text.strip().lower() for text in texts]

    for index, text in enumerate(normalized):
        if (text == wanted) if exact else (wanted in text):
            return index

    if fallback_text is not None:
        fallback = fallback_text.strip().lower()
        for index, text in enumerate(normalized):
            if text == fallback:
                return index

    return None


async def click_matching_option(
    page: Page,
    option_selector: str,
    preference: str,
    fallback_text: Optional[str] = None,
    exact: bool = False,
) -> Optional[str]:
    """
    Click the option matching ``preference`` in an open list.

    Returns:
        Text of the clicked option, or None if nothing matched
    """
    options = page.locator(option_selector)
    texts = await options.all_text_contents()
    index = choose_option_index(texts, preference, fallback_text, exact)
    if index is None:
        return None
    await options.nth(index).click()
    return texts[index].strip()


async def open_select(page: Page, control: str, option_selector: str) -> None:
    """Wait for an MUI select to become enabled, open it and wait for its options."""
    await wait_for_selector_with_retry(page, control)
    await wait_until_enabled(page, control, Timeouts.CONTROL_ENABLED)
    await page.click(PipelineSelectors.SELECT_TRIGGER.format(control=control))
    await wait_for_selector_with_retry(page, option_selector, timeout=Timeouts.OPTION_LIST)


class SelectorPipeline:
    """Drives the reservation UI controls in their required order."""

    def __init__(self, reason_fallback_value: Optional[str] = None):
        """
        Initialize selector pipeline.

        Args:
            reason_fallback_value: data-value of the reason option used when no
                option text matches the requested appointment type
        """
        self.reason_fallback_value = reason_fallback_value

    async def accept_cookies(self, page: Page) -> bool:
        """
        Accept the cookie banner if it shows up.

        Returns:
            True if the banner was accepted, False if it never appeared
        """
        try:
            await wait_for_selector_with_retry(page, CookieSelectors.ACCEPT_BUTTON)
            await page.click(CookieSelectors.ACCEPT_BUTTON)
            logger.info(f"{LogEmoji.SUCCESS} Accepted cookies")
            await pause(Delays.AFTER_COOKIES)
            return True
        except Exception as e:
            logger.info(f"Cookie consent not found or already accepted: {e}")
            return False

    async def select_patient_type(self, page: Page, patient_type: PatientType) -> None:
        selector = (
            PipelineSelectors.PATIENT_TYPE_NEW
            if patient_type == PatientType.NEW
            else PipelineSelectors.PATIENT_TYPE_EXISTING
        )
        logger.info(f"Selecting patient type: {patient_type.value}")
        await wait_for_selector_with_retry(page, selector, timeout=Timeouts.PATIENT_TYPE)
        await page.click(selector)
        logger.info(f"{LogEmoji.SUCCESS} Selected {patient_type.value} patient")

    async def select_insurance(self, page: Page, insurance: InsuranceType) -> None:
        selector = PipelineSelectors.INSURANCE_BUTTON.format(insurance=insurance.value)
        logger.info(f"Selecting insurance: {insurance.value}")
        await wait_for_selector_with_retry(page, selector, timeout=Timeouts.INSURANCE)
        await page.click(selector)
        logger.info(f"{LogEmoji.SUCCESS} Selected insurance: {insurance.value}")
        await pause(Delays.AFTER_SELECT_OPTION)

    async def select_reason(self, page: Page, appointment_type: str) -> str:
        """
        Select the appointment reason.

        Falls back to the configured option value, then to the first option.

        Returns:
            Text of the selected reason
        """
        logger.info(f"Setting appointment reason: {appointment_type}")
        await open_select(page, PipelineSelectors.REASON_CONTROL, PipelineSelectors.OPTION)

        chosen = await click_matching_option(page, PipelineSelectors.OPTION, appointment_type)
        if chosen is None:
            chosen = await self._click_reason_fallback(page)

        logger.info(f"{LogEmoji.SUCCESS} Selected reason: {chosen}")
        await pause(Delays.AFTER_SELECT_OPTION)
        return chosen

    async def _click_reason_fallback(self, page: Page) -> str:
        if self.reason_fallback_value:
            fallback = page.locator(
                PipelineSelectors.OPTION_BY_VALUE.format(value=self.reason_fallback_value)
            )
            if await fallback.count() > 0:
                logger.warning(
                    f"{LogEmoji.WARNING} No reason matches, using fallback option "
                    f"{self.reason_fallback_value}"
                )
                await fallback.first.click()
                return (await fallback.first.text_content() or self.reason_fallback_value).strip()

        logger.warning(
            f"{LogEmoji.WARNING} No reason matches and no fallback option, using first option"
        )
        first = page.locator(PipelineSelectors.OPTION).first
        await first.click()
        return (await first.text_content() or "").strip()

    async def select_provider(self, page: Page, provider: str) -> str:
        """
        Select the provider, falling back to "Any Provider" then the first option.

        Returns:
            Text of the selected provider
        """
        logger.info(f"Setting provider: {provider}")
        await open_select(
            page, PipelineSelectors.PROVIDER_CONTROL, PipelineSelectors.PROVIDER_OPTION
        )

        chosen = await click_matching_option(
            page, PipelineSelectors.PROVIDER_OPTION, provider, fallback_text=ANY_PROVIDER
        )
        if chosen is None:
            logger.warning(f"{LogEmoji.WARNING} Provider {provider} not listed, using first option")
            first = page.locator(PipelineSelectors.PROVIDER_OPTION).first
            await first.click()
            chosen = (await first.text_content() or "").strip()

        logger.info(f"{LogEmoji.SUCCESS} Selected provider: {chosen}")
        await pause(Delays.AFTER_SELECT_OPTION)
        return chosen

    async def run(self, page: Page, preferences: BookingPreferences) -> None:
        """
        Run the pipeline in order. Each step waits for the UI the previous
        step enabled.

        Raises:
            BookingError: If a control fails for a Playwright-level reason
        """
        try:
            await self.select_patient_type(page, preferences.patient_type)
            await self.select_insurance(page, preferences.insurance)
            await self.select_reason(page, preferences.appointment_type)
            await self.select_provider(page, preferences.provider)
        except PlaywrightError as e:
            raise BookingError(
                f"Reservation selector pipeline failed: {e}",
                details={"preferences": preferences.model_dump(mode="json")},
            ) from e
