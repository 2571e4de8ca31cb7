from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..app.config import COMMON_PASSWORDS, PASSWORD_SPECIAL_CHARACTERS
from .types import NonNegativeInt, PositiveInt


class ImmutableModel(BaseModel):
    """Base class for immutable Pydantic models."""
    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
        extra="forbid",
    )


class ValidationRules(ImmutableModel):
    """
    Limits applied by the validation service.

    Defaults reproduce the rules the referral app ships with; tighter or looser
    limits can be supplied per deployment.
    """
    # Contact details
    email_max_length: PositiveInt = 254
    phone_min_digits: PositiveInt = 10
    phone_max_digits: PositiveInt = 15
    address_min_length: NonNegativeInt = 10
    address_max_length: PositiveInt = 200

    # Credentials
    password_min_length: PositiveInt = 8
    password_max_length: PositiveInt = 128
    password_special_characters: str = Field(PASSWORD_SPECIAL_CHARACTERS, min_length=1)
    common_passwords: frozenset[str] = COMMON_PASSWORDS

    # Patient identity
    name_min_length: NonNegativeInt = 2
    name_max_length: PositiveInt = 50
    mrn_min_length: NonNegativeInt = 3
    mrn_max_length: PositiveInt = 20
    max_age: PositiveInt = 150

    # Prescriptions
    medication_min_length: NonNegativeInt = 2
    medication_max_length: PositiveInt = 100
    dosage_max_length: PositiveInt = 50
    frequency_max_length: PositiveInt = 50

    # Uploads
    max_file_size_mb: PositiveInt = 10

    @model_validator(mode="after")
    def _check_ranges(self) -> "ValidationRules":
        pairs = {
            "phone digits": (self.phone_min_digits, self.phone_max_digits),
            "address length": (self.address_min_length, self.address_max_length),
            "password length": (self.password_min_length, self.password_max_length),
            "name length": (self.name_min_length, self.name_max_length),
            "mrn length": (self.mrn_min_length, self.mrn_max_length),
            "medication length": (self.medication_min_length, self.medication_max_length),
        }
        for label, (low, high) in pairs.items():
            if low > high:
                raise ValueError(f"{label}: minimum {low} exceeds maximum {high}")
        return self
