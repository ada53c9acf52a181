"""Patient details form filling for DentalHub booking."""

from loguru import logger
from playwright.async_api import Page

from ...constants import BookingFormSelectors, Delays, LogEmoji, PipelineSelectors, Timeouts
from ...core.enums import Sex
from ...core.exceptions import BookingError
from ...models import PatientProfile
from ...utils.page_helpers import pause, wait_until_clickable
from .date_field import fill_date_field
from .field_interaction import type_field, wait_for_selector_with_retry
from .selector_pipeline import click_matching_option


async def click_next_when_enabled(page: Page) -> None:
    """Click the shared next button once it no longer carries ``disabled``."""
    selector = BookingFormSelectors.NEXT_BUTTON
    await wait_for_selector_with_retry(page, selector, timeout=Timeouts.NEXT_BUTTON)
    await wait_until_clickable(page, selector, Timeouts.NEXT_BUTTON)
    await page.click(selector)


class BookingFormFiller:
    """Fills the consent step and the patient details form."""

    async def accept_consents(self, page: Page) -> None:
        """Tick both GDPR consents and continue to the patient form."""
        await page.click(BookingFormSelectors.TERMS_CONSENT)
        await page.click(BookingFormSelectors.CONTACT_CONSENT)
        await pause(Delays.AFTER_CONSENT)

        await wait_for_selector_with_retry(
            page, BookingFormSelectors.NEXT_BUTTON, timeout=Timeouts.NEXT_BUTTON
        )
        await page.click(BookingFormSelectors.NEXT_BUTTON)
        await pause(Delays.AFTER_CONTINUE_CLICK)

    async def select_sex(self, page: Page, sex: Sex) -> None:
        """
        Pick the sex option whose text equals the capitalized value.

        Raises:
            BookingError: If no option matches
        """
        await wait_for_selector_with_retry(page, BookingFormSelectors.SEX_CONTROL)
        await page.click(BookingFormSelectors.SEX_CONTROL)
        await wait_for_selector_with_retry(
            page, PipelineSelectors.OPTION, timeout=Timeouts.OPTION_LIST
        )
        chosen = await click_matching_option(page, PipelineSelectors.OPTION, sex.label, exact=True)
        if chosen is None:
            raise BookingError(f"Sex option {sex.label} not offered", details={"sex": sex.value})
        logger.info(f"Sex selected: {chosen}")
        await pause(Delays.AFTER_FIELD)

    async def fill_patient_details(self, page: Page, profile: PatientProfile) -> None:
        """Fill every patient field in form order."""
        logger.info("Filling patient information...")
        await type_field(page, BookingFormSelectors.FIRST_NAME, profile.first_name, "First Name")
        await type_field(page, BookingFormSelectors.LAST_NAME, profile.last_name, "Last Name")
        await fill_date_field(page, BookingFormSelectors.DATE_OF_BIRTH, profile.date_of_birth)
        await self.select_sex(page, profile.sex)
        await type_field(page, BookingFormSelectors.PHONE, profile.phone, "Phone Number")
        await type_field(page, BookingFormSelectors.EMAIL, profile.email, "Email")

        if profile.callback:
            await wait_for_selector_with_retry(page, BookingFormSelectors.CALLBACK_CHECKBOX)
            await page.click(BookingFormSelectors.CALLBACK_CHECKBOX)
            await pause(Delays.AFTER_FIELD)

        if profile.medical_notes:
            await type_field(
                page, BookingFormSelectors.MEDICAL_NOTES, profile.medical_notes, "Medical Info"
            )

    async def submit_patient_details(self, page: Page, profile: PatientProfile) -> None:
        """
        Run the booking step: consents, patient form, then next.

        Args:
            page: Playwright page showing the appointment summary
            profile: Patient data collected at intake
        """
        await self.accept_consents(page)
        await self.fill_patient_details(page, profile)
        await click_next_when_enabled(page)
        logger.info(f"{LogEmoji.SUCCESS} Patient details submitted for {profile.full_name}")
