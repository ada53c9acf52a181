"""Tests for the escalating date-of-birth entry."""

from unittest.mock import AsyncMock, call

import pytest

from dentalhub_bot.core.exceptions import FieldInteractionError, SelectorNotFoundError
from dentalhub_bot.services.booking.date_field import (
    DATE_WRITE_STRATEGIES,
    fill_date_field,
    type_date_segments,
)

DOB_SELECTOR = "input#mui-3"
DOB = "20/10/2002"


class TestTypeDateSegments:
    """Tests for the segment typing strategy."""

    @pytest.mark.asyncio
    async def test_key_sequence(self, mock_page, no_sleep):
        await type_date_segments(mock_page, DOB_SELECTOR, DOB)

        keys = [c.args[0] for c in mock_page.keyboard.press.await_args_list]
        assert keys == list("20/10/2002") + ["Tab"]

    @pytest.mark.asyncio
    async def test_pacing(self, mock_page, no_sleep):
        await type_date_segments(mock_page, DOB_SELECTOR, DOB)

        delays = [c.args[0] for c in no_sleep.await_args_list]
        assert delays == [0.15, 0.15, 0.2, 0.15, 0.15, 0.2, 0.25, 0.25, 0.25, 0.25]


class TestFillDateField:
    """Tests for fill_date_field."""

    def test_strategies_ordered_by_force(self):
        assert [s.name for s in DATE_WRITE_STRATEGIES] == [
            "segment typing",
            "slow retype",
            "forced value",
        ]

    @pytest.mark.asyncio
    async def test_first_tier_match_skips_later_tiers(self, mock_page, no_sleep):
        mock_page.input_value = AsyncMock(return_value=DOB)

        filled = await fill_date_field(mock_page, DOB_SELECTOR, DOB)

        assert filled == DOB
        mock_page.focus.assert_awaited_once_with(DOB_SELECTOR)
        mock_page.fill.assert_awaited_once_with(DOB_SELECTOR, "")
        mock_page.type.assert_not_awaited()
        mock_page.click.assert_not_awaited()
        mock_page.eval_on_selector.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_visibility_checked_before_typing(self, mock_page, no_sleep):
        mock_page.input_value = AsyncMock(return_value=DOB)

        await fill_date_field(mock_page, DOB_SELECTOR, DOB)

        mock_page.wait_for_function.assert_awaited_once()
        assert mock_page.wait_for_function.await_args.kwargs == {
            "arg": DOB_SELECTOR,
            "timeout": 10000,
        }

    @pytest.mark.asyncio
    async def test_truncated_year_escalates_to_retype(self, mock_page, no_sleep):
        mock_page.input_value = AsyncMock(side_effect=["20/10/2", DOB])

        filled = await fill_date_field(mock_page, DOB_SELECTOR, DOB)

        assert filled == DOB
        mock_page.click.assert_awaited_once_with(DOB_SELECTOR, click_count=3)
        mock_page.keyboard.press.assert_has_awaits([call("Backspace")])
        mock_page.type.assert_awaited_once_with(DOB_SELECTOR, DOB, delay=300)
        # Only the blur after retyping, never the forced write
        mock_page.eval_on_selector.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_forced_value_is_last_resort(self, mock_page, no_sleep):
        mock_page.input_value = AsyncMock(side_effect=["", "20/10/20", DOB])

        filled = await fill_date_field(mock_page, DOB_SELECTOR, DOB)

        assert filled == DOB
        forced = mock_page.eval_on_selector.await_args_list[-1]
        assert forced.args[0] == DOB_SELECTOR
        assert forced.args[2] == DOB

    @pytest.mark.asyncio
    async def test_all_tiers_fail_returns_readback(self, mock_page, no_sleep):
        mock_page.input_value = AsyncMock(return_value="20/10/20")
        mock_page.eval_on_selector = AsyncMock(return_value=None)

        filled = await fill_date_field(mock_page, DOB_SELECTOR, DOB)

        assert filled == "20/10/20"
        # blur, forced write, field state
        assert mock_page.eval_on_selector.await_count == 3

    @pytest.mark.asyncio
    async def test_missing_field_raises(self, mock_page, no_sleep):
        mock_page.wait_for_selector = AsyncMock(
            side_effect=SelectorNotFoundError(DOB_SELECTOR, attempts=3)
        )

        with pytest.raises(FieldInteractionError) as exc_info:
            await fill_date_field(mock_page, DOB_SELECTOR, DOB)

        assert exc_info.value.field_name == "Date of Birth"
