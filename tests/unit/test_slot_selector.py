"""Tests for availability extraction and slot preview."""

from unittest.mock import AsyncMock

import pytest

from dentalhub_bot.core.enums import WeekNavigation
from dentalhub_bot.models import TimeSlot
from dentalhub_bot.services.booking.slot_selector import (
    AVAILABILITY_SCRIPT,
    SlotSelector,
    build_availability,
    header_label,
)


def cell(text, available=True):
    return {"text": text, "available": available}


class TestBuildAvailability:
    """Tests for build_availability."""

    def test_grid_from_snapshot(self, availability_snapshot):
        grid = build_availability(
            availability_snapshot["headers"], availability_snapshot["rows"]
        )

        assert grid.as_mapping() == {"Mon 01 Sep": ["10:00am"], "Tue 02 Sep": []}

    def test_excludes_cells_without_available_class(self):
        grid = build_availability(
            [["Mon", "01 Sep"]],
            [[cell("9:00am", available=False)], [cell("9:30am")]],
        )

        assert grid.as_mapping() == {"Mon 01 Sep": ["9:30am"]}

    def test_excludes_non_time_text(self):
        grid = build_availability([["Mon", "01 Sep"]], [[cell("Closed")], [cell("")]])

        assert grid.is_empty

    def test_time_index_counts_only_available_times(self):
        grid = build_availability(
            [["Mon", "01 Sep"], ["Tue", "02 Sep"]],
            [
                [cell("9:00am", False), cell("9:00am")],
                [cell("9:30am", False), cell("9:30am", False)],
                [cell("10:00am"), cell("10:00am")],
            ],
        )

        assert grid.flatten() == [
            TimeSlot("Mon 01 Sep", "10:00am", day_index=0, time_index=0),
            TimeSlot("Tue 02 Sep", "9:00am", day_index=1, time_index=0),
            TimeSlot("Tue 02 Sep", "10:00am", day_index=1, time_index=1),
        ]

    def test_short_rows_are_skipped(self):
        grid = build_availability(
            [["Mon", "01 Sep"], ["Tue", "02 Sep"]],
            [[cell("9:00am")]],
        )

        assert grid.as_mapping() == {"Mon 01 Sep": ["9:00am"], "Tue 02 Sep": []}

    def test_header_label_normalizes_whitespace(self):
        assert header_label(["  Mon ", "01\n   Sep"]) == "Mon 01 Sep"


class TestSlotSelector:
    """Tests for SlotSelector page operations."""

    @pytest.mark.asyncio
    async def test_extract_availability(self, mock_page, availability_snapshot, no_sleep):
        mock_page.evaluate = AsyncMock(return_value=availability_snapshot)

        grid = await SlotSelector().extract_availability(mock_page)

        mock_page.wait_for_selector.assert_awaited_once_with(
            ".MuiTable-root", state="visible", timeout=30000
        )
        assert mock_page.evaluate.await_args.args[0] == AVAILABILITY_SCRIPT
        assert grid.labels() == ["Mon 01 Sep at 10:00am"]

    @pytest.mark.asyncio
    async def test_select_slot_clicks_cell_by_time_and_day(self, mock_page, no_sleep):
        mock_page.evaluate = AsyncMock(
            return_value={
                "month": "Sep",
                "day": "02",
                "time": "9:30am",
                "price": "£60.00",
                "deposit": "£20.00",
                "summary_text": "Air Polish with Edward",
            }
        )
        slot = TimeSlot("Tue 02 Sep", "9:30am", day_index=1, time_index=3)

        summary = await SlotSelector().select_slot(mock_page, slot)

        mock_page.click.assert_awaited_once_with('[data-testid="t-availability-3-1"]')
        assert summary.time == "9:30am"
        assert summary.deposit == "£20.00"

    @pytest.mark.asyncio
    async def test_booked_cell_before_free_one_is_not_counted(self, mock_page, no_sleep):
        mock_page.evaluate = AsyncMock(return_value={"time": "9:30am"})
        grid = build_availability([["Mon", "01 Sep"]], [[cell("9:00am", False)], [cell("9:30am")]])

        await SlotSelector().select_slot(mock_page, grid.slot_at(1))

        mock_page.click.assert_awaited_once_with('[data-testid="t-availability-0-0"]')

    @pytest.mark.asyncio
    async def test_summary_missing_elements_read_not_found(self, mock_page):
        mock_page.evaluate = AsyncMock(
            return_value={
                "month": None,
                "day": None,
                "time": None,
                "price": "£60.00",
                "deposit": None,
                "summary_text": None,
            }
        )

        summary = await SlotSelector().read_summary(mock_page)

        assert summary.month == "Not found"
        assert summary.price == "£60.00"
        assert summary.summary_text == "Not found"

    @pytest.mark.asyncio
    async def test_navigate_week(self, mock_page, no_sleep):
        await SlotSelector().navigate_week(mock_page, WeekNavigation.NEXT)

        mock_page.click.assert_awaited_once_with(
            '[data-testid="t-availability-next"]', timeout=30000
        )
        no_sleep.assert_awaited_once_with(2.0)

    @pytest.mark.asyncio
    async def test_navigate_skip_does_nothing(self, mock_page):
        await SlotSelector().navigate_week(mock_page, WeekNavigation.SKIP)

        mock_page.click.assert_not_awaited()
