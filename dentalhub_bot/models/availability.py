"""Availability grid and appointment summary models."""

from dataclasses import dataclass, field
from typing import Dict, List

NOT_FOUND = "Not found"


@dataclass(frozen=True)
class TimeSlot:
    """One bookable cell of the displayed week."""

    day: str
    time: str
    day_index: int
    time_index: int

    @property
    def label(self) -> str:
        return f"{self.day} at {self.time}"


@dataclass
class AvailabilityGrid:
    """Available times per day label for the week currently on screen.

    Day order follows the table header order; times keep row order, so a
    slot's ``time_index`` is its position in its day's list.
    """

    days: Dict[str, List[TimeSlot]] = field(default_factory=dict)

    def as_mapping(self) -> Dict[str, List[str]]:
        """Return {day: [time, ...]} for logging and display."""
        return {day: [slot.time for slot in slots] for day, slots in self.days.items()}

    def flatten(self) -> List[TimeSlot]:
        """All slots in display order (day by day, top to bottom)."""
        return [slot for slots in self.days.values() for slot in slots]

    def labels(self) -> List[str]:
        return [slot.label for slot in self.flatten()]

    def slot_at(self, number: int) -> TimeSlot:
        """
        Resolve a 1-based operator choice into a slot.

        Raises:
            IndexError: If number is outside 1..len(flatten())
        """
        slots = self.flatten()
        if number < 1 or number > len(slots):
            raise IndexError(f"Slot number {number} out of range 1..{len(slots)}")
        return slots[number - 1]

    @property
    def is_empty(self) -> bool:
        return not any(self.days.values())

    def __len__(self) -> int:
        return len(self.flatten())


@dataclass(frozen=True)
class AppointmentSummary:
    """Read-only snapshot of the summary panel after picking a slot."""

    month: str = NOT_FOUND
    day: str = NOT_FOUND
    time: str = NOT_FOUND
    price: str = NOT_FOUND
    deposit: str = NOT_FOUND
    summary_text: str = NOT_FOUND

    def lines(self) -> List[str]:
        """Lines displayed to the operator before confirming."""
        return [
            f"- Date: {self.month} {self.day}",
            f"- Time: {self.time}",
            f"- Price: {self.price}",
            f"- Deposit: {self.deposit}",
            f"- Summary: {self.summary_text}",
        ]
