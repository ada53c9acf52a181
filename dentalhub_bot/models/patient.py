"""Patient and booking preference models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.enums import InsuranceType, PatientType, Sex
from ..utils.validators import validate_date_of_birth, validate_phone


class PatientProfile(BaseModel):
    """Patient details entered into the booking form."""

    model_config = ConfigDict(frozen=True)

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    date_of_birth: str
    sex: Sex
    phone: str
    email: str
    callback: bool = False
    medical_notes: str = ""

    @field_validator("date_of_birth")
    @classmethod
    def check_date_of_birth(cls, v: str) -> str:
        if not validate_date_of_birth(v):
            raise ValueError("date_of_birth must use DD/MM/YYYY")
        return v

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        if not validate_phone(v):
            raise ValueError("phone must be 10-12 digits, optionally prefixed with '+'")
        return v

    @field_validator("sex", mode="before")
    @classmethod
    def lowercase_sex(cls, v):
        return v.lower() if isinstance(v, str) else v

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class BookingPreferences(BaseModel):
    """Choices driving the reservation selector pipeline."""

    model_config = ConfigDict(frozen=True)

    patient_type: PatientType
    insurance: InsuranceType
    appointment_type: str = Field(min_length=1)
    provider: str = Field(min_length=1)
