"""CSS selectors for the DentalHub booking UI."""

from typing import Final


class CookieSelectors:
    """OneTrust consent banner."""

    ACCEPT_BUTTON: Final[str] = "#onetrust-accept-btn-handler"


class PipelineSelectors:
    """Patient type, insurance, reason and provider controls."""

    PATIENT_TYPE_NEW: Final[str] = '[data-testid="t-appointmenttype-selector-new"]'
    PATIENT_TYPE_EXISTING: Final[str] = '[data-testid="t-appointmenttype-selector-existing"]'
    INSURANCE_BUTTON: Final[str] = 'button[value="{insurance}"]'
    REASON_CONTROL: Final[str] = '[data-testid="t-reason-selector"]'
    PROVIDER_CONTROL: Final[str] = '[data-testid="t-provider-selector"]'
    PROVIDER_OPTION: Final[str] = '[data-testid^="t-provider-selector-item-"]'
    SELECT_TRIGGER: Final[str] = "{control} .MuiSelect-select"
    OPTION: Final[str] = '[role="option"]'
    OPTION_BY_VALUE: Final[str] = '[data-value="{value}"]'
    DISABLED_CLASS: Final[str] = "Mui-disabled"


class AvailabilitySelectors:
    """Week availability table and navigation."""

    TABLE: Final[str] = ".MuiTable-root"
    HEADER_CELL: Final[str] = ".MuiTableHead-root th"
    BODY_ROW: Final[str] = ".MuiTableBody-root tr"
    AVAILABLE_CLASS: Final[str] = "available-time"
    PREVIOUS_WEEK: Final[str] = '[data-testid="t-availability-previous"]'
    NEXT_WEEK: Final[str] = '[data-testid="t-availability-next"]'
    SLOT_CELL: Final[str] = '[data-testid="t-availability-{time}-{day}"]'


class SummarySelectors:
    """Appointment summary panel shown after picking a slot."""

    TIME: Final[str] = '[data-testid="t-appointmentsummary-time"]'
    TIME_DATE: Final[str] = '[data-testid="t-appointmentsummary-time"] .date'
    SALES_DATE: Final[str] = '[data-testid="t-appointmentsummary-salesinformation"] .date'
    SUMMARY_TEXT: Final[str] = '[data-testid="t-appointmentsummary-summarytext"] div'


class BookingFormSelectors:
    """Patient details form, consents and the shared next button."""

    TERMS_CONSENT: Final[str] = '[data-testid="t-tpd-gdpr-terms-of-use"]'
    CONTACT_CONSENT: Final[str] = '[data-testid="t-tpd-gdpr-contact-consent"]'
    NEXT_BUTTON: Final[str] = '[data-testid="t-book-next"]'
    FIRST_NAME: Final[str] = "input#givenname"
    LAST_NAME: Final[str] = "input#familyname"
    DATE_OF_BIRTH: Final[str] = "input#mui-3"
    SEX_CONTROL: Final[str] = '[data-testid="t-patient-sex"]'
    PHONE: Final[str] = "input#mui-5"
    EMAIL: Final[str] = "input#mui-6"
    CALLBACK_CHECKBOX: Final[str] = '[data-testid="t-patient-callback"] input'
    MEDICAL_NOTES: Final[str] = "textarea#mui-7"
    OTP_INPUT: Final[str] = ".MuiInputBase-input.MuiOutlinedInput-input"
