"""Tests for the reservation selector pipeline."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from dentalhub_bot.core.enums import InsuranceType, PatientType
from dentalhub_bot.core.exceptions import BookingError, ControlDisabledError
from dentalhub_bot.models import BookingPreferences
from dentalhub_bot.services.booking.selector_pipeline import (
    SelectorPipeline,
    choose_option_index,
)


class TestChooseOptionIndex:
    """Tests for the pure option matching rule."""

    def test_substring_case_insensitive(self):
        assert choose_option_index(["Check-up", "AIR POLISH (30 min)"], "air polish") == 1

    def test_first_match_wins(self):
        assert choose_option_index(["Hygiene", "Hygiene Plus"], "hygiene") == 0

    def test_fallback_text_is_exact(self):
        texts = ["Edward", "Meenakshi", " Any Provider "]
        assert choose_option_index(texts, "Nobody", fallback_text="any provider") == 2

    def test_no_match_returns_none(self):
        assert choose_option_index(["Edward"], "Nobody", fallback_text="any provider") is None
        assert choose_option_index([], "anything") is None

    def test_exact_mode(self):
        texts = ["Female", "Male", "Other"]
        assert choose_option_index(texts, "Male", exact=True) == 1
        assert choose_option_index(texts, "male") == 0


@pytest.fixture
def make_locator(locator_factory):
    return locator_factory


def locator_router(routes, make_locator):
    """page.locator side effect returning a mock locator per selector."""
    return MagicMock(side_effect=lambda selector: routes.get(selector) or make_locator())


class TestSelectorPipeline:
    """Tests for SelectorPipeline steps."""

    @pytest.mark.asyncio
    async def test_accept_cookies(self, mock_page, no_sleep):
        accepted = await SelectorPipeline().accept_cookies(mock_page)

        assert accepted is True
        mock_page.click.assert_awaited_once_with("#onetrust-accept-btn-handler")

    @pytest.mark.asyncio
    async def test_missing_cookie_banner_is_not_an_error(self, mock_page, no_sleep):
        mock_page.wait_for_selector = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout"))

        accepted = await SelectorPipeline().accept_cookies(mock_page)

        assert accepted is False
        mock_page.click.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_patient_type_and_insurance_selectors(self, mock_page, no_sleep):
        pipeline = SelectorPipeline()

        await pipeline.select_patient_type(mock_page, PatientType.NEW)
        await pipeline.select_insurance(mock_page, InsuranceType.NHS)

        clicked = [c.args[0] for c in mock_page.click.await_args_list]
        assert clicked == [
            '[data-testid="t-appointmenttype-selector-new"]',
            'button[value="NHS"]',
        ]
        mock_page.wait_for_selector.assert_any_await(
            'button[value="NHS"]', state="visible", timeout=60000
        )

    @pytest.mark.asyncio
    async def test_reason_matches_text(self, mock_page, no_sleep, make_locator):
        options = make_locator(["Check-up", "Air Polish"])
        mock_page.locator = locator_router({'[role="option"]': options}, make_locator)

        chosen = await SelectorPipeline("0-54-418").select_reason(mock_page, "air polish")

        assert chosen == "Air Polish"
        options.items[1].click.assert_awaited_once()
        mock_page.click.assert_awaited_once_with(
            '[data-testid="t-reason-selector"] .MuiSelect-select'
        )

    @pytest.mark.asyncio
    async def test_reason_falls_back_to_configured_value(self, mock_page, no_sleep, make_locator):
        options = make_locator(["Check-up", "Whitening"])
        fallback = make_locator(["Hygienist"])
        mock_page.locator = locator_router(
            {'[role="option"]': options, '[data-value="0-54-418"]': fallback},
            make_locator,
        )

        chosen = await SelectorPipeline("0-54-418").select_reason(mock_page, "Air Polish")

        assert chosen == "Hygienist"
        fallback.first.click.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_reason_falls_back_to_first_option(
        self, mock_page, no_sleep, make_locator, log_messages
    ):
        options = make_locator(["Check-up", "Whitening"])
        mock_page.locator = locator_router({'[role="option"]': options}, make_locator)

        chosen = await SelectorPipeline("0-54-418").select_reason(mock_page, "Air Polish")

        assert chosen == "Check-up"
        options.first.click.assert_awaited_once()
        assert (
            "⚠️ No reason matches and no fallback option, using first option" in log_messages
        )

    @pytest.mark.asyncio
    async def test_disabled_reason_control_raises(self, mock_page, no_sleep):
        mock_page.wait_for_function = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout"))

        with pytest.raises(ControlDisabledError) as exc_info:
            await SelectorPipeline().select_reason(mock_page, "Air Polish")

        assert exc_info.value.timeout_ms == 90000

    @pytest.mark.asyncio
    async def test_provider_falls_back_to_any_provider(self, mock_page, no_sleep, make_locator):
        providers = make_locator(["Edward", "Any Provider", "Meenakshi"])
        mock_page.locator = locator_router(
            {'[data-testid^="t-provider-selector-item-"]': providers},
            make_locator,
        )

        chosen = await SelectorPipeline().select_provider(mock_page, "Nobody")

        assert chosen == "Any Provider"
        providers.items[1].click.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_run_wraps_playwright_errors(self, mock_page, no_sleep):
        mock_page.click = AsyncMock(side_effect=PlaywrightTimeoutError("detached"))
        preferences = BookingPreferences(
            patient_type=PatientType.EXISTING,
            insurance=InsuranceType.PRIVATE,
            appointment_type="Air Polish",
            provider="Any Provider",
        )

        with pytest.raises(BookingError) as exc_info:
            await SelectorPipeline().run(mock_page, preferences)

        assert exc_info.value.details["preferences"]["insurance"] == "Private"
