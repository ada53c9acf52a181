"""Interactive console intake of patient data and operator decisions."""

from typing import Callable, Optional, TypeVar

from loguru import logger

from ...core.config import IntakeDefaults
from ...core.enums import InsuranceType, PatientType, Sex, WeekNavigation
from ...core.exceptions import ValidationError
from ...models import AppointmentSummary, AvailabilityGrid, BookingPreferences, PatientProfile
from ...utils.validators import validate_date_of_birth, validate_otp, validate_phone

T = TypeVar("T")

InputFunc = Callable[[str], str]
EchoFunc = Callable[[str], None]

YES = "yes"


def parse_date_of_birth(raw: str) -> str:
    value = raw.strip()
    if not validate_date_of_birth(value):
        raise ValidationError("Invalid format. Use DD/MM/YYYY (e.g., 20/10/2002).", "date_of_birth")
    return value


def parse_sex(raw: str) -> Sex:
    value = raw.strip().lower()
    if value not in Sex.values():
        raise ValidationError("Invalid input. Enter 'Male', 'Female', or 'Other'.", "sex")
    return Sex(value)


def parse_phone(raw: str) -> str:
    value = raw.strip()
    if not validate_phone(value):
        raise ValidationError(
            "Invalid number. Enter 10-12 digits, optionally with '+' (e.g., +14155550132).",
            "phone",
        )
    return value


def parse_insurance(raw: str) -> InsuranceType:
    value = raw.strip()
    if value not in InsuranceType.values():
        raise ValidationError("Invalid type. Enter 'Private' or 'NHS'.", "insurance")
    return InsuranceType(value)


def parse_otp(raw: str) -> str:
    value = raw.strip()
    if not validate_otp(value):
        raise ValidationError("Invalid OTP. Please enter a 4-digit code.", "otp")
    return value


def parse_patient_type(raw: str) -> PatientType:
    """``new`` or ``newpatient`` selects a new patient; anything else is existing."""
    value = raw.strip().lower()
    return PatientType.NEW if value in ("new", "newpatient") else PatientType.EXISTING


def parse_yes(raw: str) -> bool:
    return raw.strip().lower() == YES


class ConsolePrompter:
    """Line-based console I/O with injectable input and output."""

    def __init__(self, input_func: InputFunc = input, echo: EchoFunc = print):
        """
        Initialize prompter.

        Args:
            input_func: Reads one answer for a prompt (default: builtin input)
            echo: Writes a line for the operator (default: builtin print)
        """
        self.input_func = input_func
        self.echo = echo

    def ask(self, prompt: str, default: str = "") -> str:
        """Ask once; an empty answer returns ``default``."""
        answer = self.input_func(prompt).strip()
        return answer or default

    def ask_until_valid(self, prompt: str, parse: Callable[[str], T]) -> T:
        """
        Re-prompt until ``parse`` accepts the answer.

        Args:
            prompt: Prompt text
            parse: Converts the raw answer, raising ValidationError when invalid

        Returns:
            The parsed value
        """
        while True:
            try:
                return parse(self.input_func(prompt))
            except ValidationError as e:
                logger.debug(f"Rejected input for {e.field}")
                self.echo(e.message)

    def say(self, message: str) -> None:
        self.echo(message)


class IntakeService:
    """Collects booking data and in-flow decisions from the operator."""

    def __init__(self, prompter: ConsolePrompter, defaults: Optional[IntakeDefaults] = None):
        self.prompter = prompter
        self.defaults = defaults or IntakeDefaults()

    def collect_patient_profile(self) -> PatientProfile:
        """Prompt for the patient details in form order."""
        p = self.prompter
        p.say("Collecting patient information...")

        first_name = p.ask("Enter First Name: ", self.defaults.first_name)
        last_name = p.ask("Enter Last Name: ", self.defaults.last_name)
        date_of_birth = p.ask_until_valid("Enter Date of Birth (DD/MM/YYYY): ", parse_date_of_birth)
        sex = p.ask_until_valid("Enter Sex (Male/Female/Other): ", parse_sex)
        phone = p.ask_until_valid(
            "Enter Mobile Number (e.g., +14155550132 or 07123456789): ", parse_phone
        )
        email = p.ask(
            "Enter E-mail Address: ", f"{first_name.lower()}.{last_name.lower()}@example.com"
        )
        callback = parse_yes(p.ask("Would you like an appointment confirmation call? (yes/no): "))
        medical_notes = p.ask("Enter Medical Considerations (or press Enter to skip): ")

        return PatientProfile(
            first_name=first_name,
            last_name=last_name,
            date_of_birth=date_of_birth,
            sex=sex,
            phone=phone,
            email=email,
            callback=callback,
            medical_notes=medical_notes,
        )

    def collect_preferences(self) -> BookingPreferences:
        """Prompt for the reservation choices."""
        p = self.prompter
        patient_type = parse_patient_type(
            p.ask("Enter patient type (NewPatient/ExistingPatient): ")
        )
        insurance = p.ask_until_valid("Enter insurance type (Private/NHS): ", parse_insurance)
        appointment_type = p.ask(
            "Enter appointment type (e.g., Air Polish): ", self.defaults.appointment_type
        )
        provider = p.ask(
            "Enter provider (e.g., Any Provider, Edward, Meenakshi): ", self.defaults.provider
        )
        return BookingPreferences(
            patient_type=patient_type,
            insurance=insurance,
            appointment_type=appointment_type,
            provider=provider,
        )

    def show_slots(self, grid: AvailabilityGrid) -> None:
        self.prompter.say("Available time slots (select a number to see details):")
        for number, label in enumerate(grid.labels(), start=1):
            self.prompter.say(f"{number}: {label}")

    def prompt_slot_choice(self, count: int) -> Optional[int]:
        """
        Ask for a 1-based slot number.

        Returns:
            The slot number, 0 to browse weeks, or None for an invalid answer
        """
        answer = self.prompter.ask("Enter slot number to preview (or '0' to browse): ")
        try:
            number = int(answer)
        except ValueError:
            return None
        if number == 0 or 1 <= number <= count:
            return number
        return None

    def prompt_week_navigation(self) -> Optional[WeekNavigation]:
        """
        Ask how to move through the calendar.

        Returns:
            The chosen direction, or None for an unrecognized answer
        """
        answer = self.prompter.ask("Choose week navigation (previous/next/skip): ").lower()
        try:
            return WeekNavigation(answer)
        except ValueError:
            return None

    def show_summary(self, summary: AppointmentSummary) -> None:
        self.prompter.say("Appointment Summary:")
        for line in summary.lines():
            self.prompter.say(line)

    def confirm(self, question: str = "Confirm this slot? (yes/no): ") -> bool:
        return parse_yes(self.prompter.ask(question))

    def prompt_otp(self) -> str:
        return self.prompter.ask_until_valid(
            "Enter the 4-digit OTP received on your phone: ", parse_otp
        )
