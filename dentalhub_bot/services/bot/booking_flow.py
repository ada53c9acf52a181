"""Booking controller expressed as an explicit state machine."""

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Optional

from loguru import logger
from playwright.async_api import Page

from ...constants import Delays, LogEmoji, Timeouts
from ...core.config import AppConfig
from ...core.enums import BookingState, WeekNavigation
from ...models import (
    AppointmentSummary,
    AvailabilityGrid,
    BookingPreferences,
    PatientProfile,
    TimeSlot,
)
from ...utils.page_helpers import pause
from ..booking import BookingFormFiller, OTPVerifier, SelectorPipeline, SlotSelector
from ..intake import IntakeService


@dataclass
class BookingContext:
    """Everything a run has gathered so far."""

    state: BookingState = BookingState.BOOTSTRAP
    profile: Optional[PatientProfile] = None
    preferences: Optional[BookingPreferences] = None
    grid: Optional[AvailabilityGrid] = None
    slot: Optional[TimeSlot] = None
    summary: Optional[AppointmentSummary] = None
    confirmation_url: Optional[str] = None
    skipped: bool = False
    failed_in: Optional[BookingState] = None
    history: List[BookingState] = field(default_factory=list)

    @property
    def booked(self) -> bool:
        return self.confirmation_url is not None


StateHandler = Callable[[BookingContext], Awaitable[BookingState]]


class BookingFlow:
    """Runs one booking from the start page to the confirmation URL."""

    def __init__(
        self,
        page: Page,
        config: AppConfig,
        intake: IntakeService,
        pipeline: Optional[SelectorPipeline] = None,
        slot_selector: Optional[SlotSelector] = None,
        form_filler: Optional[BookingFormFiller] = None,
        otp_verifier: Optional[OTPVerifier] = None,
    ):
        """
        Initialize booking flow.

        Args:
            page: Page owned by the caller's BrowserSession
            config: Application configuration
            intake: Operator intake service
            pipeline: Selector pipeline (built from config when omitted)
            slot_selector: Slot selector
            form_filler: Patient form filler
            otp_verifier: OTP verifier
        """
        self.page = page
        self.config = config
        self.intake = intake
        self.pipeline = pipeline or SelectorPipeline(config.booking.reason_fallback_value)
        self.slot_selector = slot_selector or SlotSelector()
        self.form_filler = form_filler or BookingFormFiller()
        self.otp_verifier = otp_verifier or OTPVerifier()
        self.context = BookingContext()

        self._handlers: Dict[BookingState, StateHandler] = {
            BookingState.BOOTSTRAP: self._bootstrap,
            BookingState.INTAKE: self._intake,
            BookingState.SELECTOR_PIPELINE: self._selector_pipeline,
            BookingState.SLOT_SEARCH: self._slot_search,
            BookingState.SLOT_PREVIEW: self._slot_preview,
            BookingState.BOOKING: self._booking,
            BookingState.VERIFICATION: self._verification,
        }

    async def run(self) -> BookingContext:
        """
        Drive the state machine until DONE.

        Returns:
            The finished booking context

        Raises:
            Exception: Any failure, after the context is marked FAILED
        """
        ctx = self.context
        while not ctx.state.is_terminal:
            ctx.history.append(ctx.state)
            logger.debug(f"Booking state: {ctx.state.value}")
            try:
                ctx.state = await self._handlers[ctx.state](ctx)
            except Exception:
                ctx.failed_in = ctx.state
                ctx.state = BookingState.FAILED
                raise

        logger.info(f"{LogEmoji.SUCCESS} Process completed successfully!")
        await pause(Delays.AFTER_COMPLETION)
        return ctx

    async def _bootstrap(self, ctx: BookingContext) -> BookingState:
        start_url = self.config.site.start_url
        logger.info(f"{LogEmoji.START} Opening {start_url}")
        await self.page.goto(start_url, wait_until="networkidle", timeout=Timeouts.PAGE_LOAD)
        await self.pipeline.accept_cookies(self.page)
        return BookingState.INTAKE

    async def _intake(self, ctx: BookingContext) -> BookingState:
        ctx.profile = self.intake.collect_patient_profile()
        ctx.preferences = self.intake.collect_preferences()
        logger.info(
            f"Booking for {ctx.profile.full_name}: {ctx.preferences.patient_type.value}, "
            f"{ctx.preferences.insurance.value}, {ctx.preferences.appointment_type}, "
            f"{ctx.preferences.provider}"
        )
        return BookingState.SELECTOR_PIPELINE

    async def _selector_pipeline(self, ctx: BookingContext) -> BookingState:
        assert ctx.preferences is not None
        await self.pipeline.run(self.page, ctx.preferences)
        return BookingState.SLOT_SEARCH

    async def _slot_search(self, ctx: BookingContext) -> BookingState:
        grid = await self.slot_selector.extract_availability(self.page)
        ctx.grid = grid

        if grid.is_empty:
            self.intake.prompter.say("No available slots this week.")
            return await self._browse_weeks(ctx)

        self.intake.show_slots(grid)
        choice = self.intake.prompt_slot_choice(len(grid))
        if choice is None:
            logger.warning("Invalid slot choice, showing the week again")
            return BookingState.SLOT_SEARCH
        if choice == 0:
            return await self._browse_weeks(ctx)

        ctx.slot = grid.slot_at(choice)
        return BookingState.SLOT_PREVIEW

    async def _browse_weeks(self, ctx: BookingContext) -> BookingState:
        direction = self.intake.prompt_week_navigation()
        if direction is None:
            return BookingState.SLOT_SEARCH
        if direction == WeekNavigation.SKIP:
            logger.info("Operator skipped booking")
            ctx.skipped = True
            return BookingState.DONE
        await self.slot_selector.navigate_week(self.page, direction)
        return BookingState.SLOT_SEARCH

    async def _slot_preview(self, ctx: BookingContext) -> BookingState:
        assert ctx.slot is not None
        ctx.summary = await self.slot_selector.select_slot(self.page, ctx.slot)
        self.intake.show_summary(ctx.summary)
        if self.intake.confirm():
            logger.info(f"{LogEmoji.FOUND} Slot confirmed: {ctx.slot.label}")
            return BookingState.BOOKING
        logger.info(f"Slot declined: {ctx.slot.label}")
        return BookingState.SLOT_SEARCH

    async def _booking(self, ctx: BookingContext) -> BookingState:
        assert ctx.profile is not None
        await self.form_filler.submit_patient_details(self.page, ctx.profile)
        return BookingState.VERIFICATION

    async def _verification(self, ctx: BookingContext) -> BookingState:
        ctx.confirmation_url = await self.otp_verifier.verify(self.page, self.intake.prompt_otp)
        return BookingState.DONE
