"""Availability extraction, week navigation and slot preview."""

import json
from typing import Any, Dict, List, Sequence

from loguru import logger
from playwright.async_api import Page

from ...constants import AvailabilitySelectors, Delays, LogEmoji, SummarySelectors, Timeouts
from ...core.enums import WeekNavigation
from ...models import AppointmentSummary, AvailabilityGrid, TimeSlot
from ...models.availability import NOT_FOUND
from ...utils.page_helpers import pause
from ...utils.validators import is_time_slot_text, normalize_whitespace
from .field_interaction import wait_for_selector_with_retry

# Raw table snapshot; filtering happens in build_availability
AVAILABILITY_SCRIPT = """
(sel) => {
    const headers = Array.from(document.querySelectorAll(sel.header)).map((th) => {
        const first = th.querySelector('span:first-child');
        const last = th.querySelector('span:last-child');
        return [first ? first.textContent : '', last ? last.textContent : ''];
    });
    const rows = Array.from(document.querySelectorAll(sel.row)).map((row) =>
        Array.from(row.querySelectorAll('td')).map((td) => {
            const p = td.querySelector('p');
            return {
                text: p ? p.textContent.trim() : '',
                available: td.classList.contains(sel.availableClass),
            };
        })
    );
    return { headers, rows };
}
"""

SUMMARY_SCRIPT = """
(sel) => {
    const text = (el) => (el && el.textContent ? el.textContent.trim() : null);
    const time = document.querySelector(sel.time);
    const sales = document.querySelector(sel.sales);
    const summary = document.querySelector(sel.summary);
    return {
        month: time ? text(time.querySelector('.mon')) : null,
        day: time ? text(time.querySelector('.day')) : null,
        time: time ? text(time.querySelector('.time')) : null,
        price: sales ? text(sales.children[1]) : null,
        deposit: sales ? text(sales.children[3]) : null,
        summary_text: text(summary),
    };
}
"""


def header_label(spans: Sequence[str]) -> str:
    """Join the first and last header spans into a day label like "Mon 01 Sep"."""
    return normalize_whitespace(" ".join(spans))


def build_availability(
    headers: Sequence[Sequence[str]], rows: Sequence[Sequence[Dict[str, Any]]]
) -> AvailabilityGrid:
    """
    Build the grid from a raw table snapshot.

    A cell yields a slot only when its text looks like a time and the cell is
    marked available. Cells missing from short rows are skipped. A slot's
    ``time_index`` is its position among the day's available times, which is
    how the page numbers its slot cells.

    Args:
        headers: Per column, the header span texts
        rows: Per body row, per column, ``{"text": str, "available": bool}``

    Returns:
        AvailabilityGrid keyed by day label in column order
    """
    grid = AvailabilityGrid()
    for day_index, spans in enumerate(headers):
        day = header_label(spans)
        slots: List[TimeSlot] = []
        for row in rows:
            if day_index >= len(row):
                continue
            cell = row[day_index]
            text = normalize_whitespace(cell.get("text") or "")
            if cell.get("available") and is_time_slot_text(text):
                slots.append(
                    TimeSlot(day=day, time=text, day_index=day_index, time_index=len(slots))
                )
        grid.days[day] = slots
    return grid


class SlotSelector:
    """Reads the displayed week and previews operator-chosen slots."""

    async def extract_availability(self, page: Page) -> AvailabilityGrid:
        """
        Snapshot the visible week's free slots.

        Returns:
            AvailabilityGrid for the week currently on screen
        """
        await wait_for_selector_with_retry(
            page, AvailabilitySelectors.TABLE, timeout=Timeouts.AVAILABILITY_TABLE
        )
        snapshot = await page.evaluate(
            AVAILABILITY_SCRIPT,
            {
                "header": AvailabilitySelectors.HEADER_CELL,
                "row": AvailabilitySelectors.BODY_ROW,
                "availableClass": AvailabilitySelectors.AVAILABLE_CLASS,
            },
        )
        grid = build_availability(snapshot.get("headers", []), snapshot.get("rows", []))
        logger.info(
            f"{LogEmoji.CALENDAR} Available slots: {json.dumps(grid.as_mapping(), indent=2)}"
        )
        return grid

    async def navigate_week(self, page: Page, direction: WeekNavigation) -> None:
        """Page the calendar one week back or forward."""
        if direction == WeekNavigation.SKIP:
            return
        selector = (
            AvailabilitySelectors.PREVIOUS_WEEK
            if direction == WeekNavigation.PREVIOUS
            else AvailabilitySelectors.NEXT_WEEK
        )
        logger.info(f"Navigating to {direction.value} week")
        await page.click(selector, timeout=Timeouts.WEEK_NAVIGATION)
        await pause(Delays.AFTER_WEEK_NAVIGATION)

    async def select_slot(self, page: Page, slot: TimeSlot) -> AppointmentSummary:
        """
        Click a slot cell and read the appointment summary it opens.

        Args:
            page: Playwright page
            slot: Slot from the current grid

        Returns:
            The summary panel contents
        """
        logger.info(f"Previewing: {slot.label}")
        selector = AvailabilitySelectors.SLOT_CELL.format(
            time=slot.time_index, day=slot.day_index
        )
        await wait_for_selector_with_retry(page, selector, timeout=Timeouts.SLOT_CELL)
        await page.click(selector)

        logger.info("Fetching appointment summary...")
        await wait_for_selector_with_retry(
            page, SummarySelectors.TIME, timeout=Timeouts.APPOINTMENT_SUMMARY
        )
        return await self.read_summary(page)

    async def read_summary(self, page: Page) -> AppointmentSummary:
        raw = await page.evaluate(
            SUMMARY_SCRIPT,
            {
                "time": SummarySelectors.TIME_DATE,
                "sales": SummarySelectors.SALES_DATE,
                "summary": SummarySelectors.SUMMARY_TEXT,
            },
        )
        summary = AppointmentSummary(**{key: value or NOT_FOUND for key, value in raw.items()})
        logger.info(f"{LogEmoji.FOUND} Appointment summary: {summary}")
        return summary
