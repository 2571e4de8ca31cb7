"""
Input validation for patient, prescription and account forms.

Every validator returns an `Outcome`: `Success` holds the cleaned value that
should be stored, `Error` holds a message that can be shown to the user as-is.
Validators never raise for bad input.
"""

import logging
import math
import re
from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime
from pathlib import Path
from typing import Any, TypeAlias, TypeVar
from urllib.parse import urlsplit

from ..app.config import BYTES_PER_MEGABYTE, PENDING_FAILURE_MESSAGE
from ..core.config import ValidationRules
from ..functional_types import Outcome, error, success

logger = logging.getLogger(__name__)

_EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)+[A-Za-z]{2,}"
)
_PHONE_DIGITS_PATTERN = re.compile(r"\+?[1-9]\d{1,14}")
# Letters in any script, plus spaces, hyphens and apostrophes.
_NAME_PATTERN = re.compile(r"(?:[^\W\d_]|[\s'-])+")
_MRN_PATTERN = re.compile(r"[A-Za-z0-9-]+")
_ICD10_PATTERN = re.compile(r"[A-Z]\d{2,3}(?:\.\d{1,4})?")
_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_HTML_TAG = re.compile(r"<[^>]*>")
_DANGEROUS_CHARACTERS = re.compile(r"""[<>"']""")
_JAVASCRIPT_PROTOCOL = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER = re.compile(r"on\w+\s*=", re.IGNORECASE)

Validator: TypeAlias = Callable[[str], Outcome[Any]]

N = TypeVar("N", int, float)


def sanitize_input(value: str) -> str:
    """Strips markup and script vectors from free text."""
    value = _HTML_TAG.sub("", value)
    value = _DANGEROUS_CHARACTERS.sub("", value)
    value = _JAVASCRIPT_PROTOCOL.sub("", value)
    value = _EVENT_HANDLER.sub("", value)
    return value.strip()


class ValidationService:
    """Validates raw form input according to a set of `ValidationRules`."""

    def __init__(self, rules: ValidationRules | None = None):
        self.rules = rules or ValidationRules()

    def _reject(self, field: str, message: str) -> Outcome[Any]:
        logger.debug("Validation error on %s: %s", field, message)
        return error(message)

    # --- Contact details ---

    def validate_email(self, email: str) -> Outcome[str]:
        email = email.strip()
        if not email:
            return self._reject("email", "Email is required")
        if not _EMAIL_PATTERN.fullmatch(email):
            return self._reject("email", "Please enter a valid email address")
        if len(email) > self.rules.email_max_length:
            return self._reject("email", "Email address is too long")
        return success(email.lower())

    def validate_phone_number(self, phone: str) -> Outcome[str]:
        """Accepts any punctuation and returns the digits only."""
        if not phone.strip():
            return self._reject("phone", "Phone number is required")

        digits = re.sub(r"\D", "", phone)
        if len(digits) < self.rules.phone_min_digits:
            return self._reject(
                "phone", f"Phone number must be at least {self.rules.phone_min_digits} digits"
            )
        if len(digits) > self.rules.phone_max_digits:
            return self._reject("phone", "Phone number is too long")
        if not _PHONE_DIGITS_PATTERN.fullmatch(digits):
            return self._reject("phone", "Please enter a valid phone number")
        return success(digits)

    def validate_address(self, address: str) -> Outcome[str]:
        address = address.strip()
        if not address:
            return self._reject("address", "Address is required")
        if len(address) < self.rules.address_min_length:
            return self._reject(
                "address",
                f"Address must be at least {self.rules.address_min_length} characters long",
            )
        if len(address) > self.rules.address_max_length:
            return self._reject("address", "Address is too long")
        return success(address)

    def validate_url(self, url: str) -> Outcome[str]:
        url = url.strip()
        if not url:
            return self._reject("url", "URL is required")
        try:
            parts = urlsplit(url)
        except ValueError:
            return self._reject("url", "Please enter a valid URL")
        if parts.scheme not in ("http", "https"):
            return self._reject("url", "URL must start with http:// or https://")
        if not parts.netloc:
            return self._reject("url", "Please enter a valid URL")
        return success(url)

    # --- Credentials ---

    def validate_password(self, password: str) -> Outcome[str]:
        rules = self.rules
        if not password:
            return self._reject("password", "Password is required")
        if len(password) < rules.password_min_length:
            return self._reject(
                "password",
                f"Password must be at least {rules.password_min_length} characters long",
            )
        if len(password) > rules.password_max_length:
            return self._reject("password", "Password is too long")
        if not any(ch.isupper() for ch in password):
            return self._reject("password", "Password must contain at least one uppercase letter")
        if not any(ch.islower() for ch in password):
            return self._reject("password", "Password must contain at least one lowercase letter")
        if not any(ch.isdigit() for ch in password):
            return self._reject("password", "Password must contain at least one number")
        if not any(ch in rules.password_special_characters for ch in password):
            return self._reject(
                "password", "Password must contain at least one special character"
            )
        if password.lower() in rules.common_passwords:
            return self._reject(
                "password", "Password is too common. Please choose a more secure password"
            )
        return success(password)

    # --- Patient identity ---

    def validate_name(self, name: str, field_name: str = "Name") -> Outcome[str]:
        rules = self.rules
        if not name.strip():
            return self._reject(field_name, f"{field_name} is required")
        if len(name) < rules.name_min_length:
            return self._reject(
                field_name, f"{field_name} must be at least {rules.name_min_length} characters long"
            )
        if len(name) > rules.name_max_length:
            return self._reject(field_name, f"{field_name} is too long")
        if not _NAME_PATTERN.fullmatch(name):
            return self._reject(
                field_name,
                f"{field_name} can only contain letters, spaces, hyphens, and apostrophes",
            )
        if "  " in name:
            return self._reject(field_name, f"{field_name} cannot contain consecutive spaces")
        return success(name.strip())

    def validate_medical_record_number(self, mrn: str) -> Outcome[str]:
        rules = self.rules
        mrn = mrn.strip()
        if not mrn:
            return self._reject("mrn", "Medical record number is required")
        if len(mrn) < rules.mrn_min_length:
            return self._reject(
                "mrn",
                f"Medical record number must be at least {rules.mrn_min_length} characters long",
            )
        if len(mrn) > rules.mrn_max_length:
            return self._reject("mrn", "Medical record number is too long")
        if not _MRN_PATTERN.fullmatch(mrn):
            return self._reject(
                "mrn", "Medical record number can only contain letters, numbers, and hyphens"
            )
        return success(mrn.upper())

    def validate_age(self, age: int) -> Outcome[int]:
        if age < 0:
            return self._reject("age", "Age cannot be negative")
        if age > self.rules.max_age:
            return self._reject("age", f"Age cannot be greater than {self.rules.max_age}")
        return success(age)

    def validate_date_of_birth(
        self, date_of_birth: date, today: date | None = None
    ) -> Outcome[date]:
        """`today` defaults to the current local date."""
        today = today or date.today()
        born = date_of_birth.date() if isinstance(date_of_birth, datetime) else date_of_birth
        if born > today:
            return self._reject("date_of_birth", "Date of birth cannot be in the future")
        if today.year - born.year > self.rules.max_age:
            return self._reject("date_of_birth", "Date of birth is too far in the past")
        return success(date_of_birth)

    def validate_icd10_code(self, code: str) -> Outcome[str]:
        code = code.strip().upper()
        if not code:
            return self._reject("icd10", "ICD-10 code is required")
        if not _ICD10_PATTERN.fullmatch(code):
            return self._reject(
                "icd10", "Please enter a valid ICD-10 code (e.g., A00, B01.1, C78.01)"
            )
        return success(code)

    # --- Prescriptions ---

    def validate_medication_name(self, name: str) -> Outcome[str]:
        rules = self.rules
        name = name.strip()
        if not name:
            return self._reject("medication", "Medication name is required")
        if len(name) < rules.medication_min_length:
            return self._reject(
                "medication",
                f"Medication name must be at least {rules.medication_min_length} characters long",
            )
        if len(name) > rules.medication_max_length:
            return self._reject("medication", "Medication name is too long")
        return success(name)

    def validate_dosage(self, dosage: str) -> Outcome[str]:
        return self._bounded_text("Dosage", dosage, self.rules.dosage_max_length)

    def validate_frequency(self, frequency: str) -> Outcome[str]:
        return self._bounded_text("Frequency", frequency, self.rules.frequency_max_length)

    def _bounded_text(self, label: str, value: str, max_length: int) -> Outcome[str]:
        value = value.strip()
        if not value:
            return self._reject(label, f"{label} is required")
        if len(value) > max_length:
            return self._reject(label, f"{label} is too long")
        return success(value)

    # --- Uploads ---

    def validate_file_size(self, path: Path, max_size_mb: int | None = None) -> Outcome[Path]:
        limit_mb = max_size_mb if max_size_mb is not None else self.rules.max_file_size_mb
        if not path.is_file():
            return self._reject("file", "File does not exist")
        if path.stat().st_size > limit_mb * BYTES_PER_MEGABYTE:
            return self._reject("file", f"File size cannot exceed {limit_mb}MB")
        return success(path)

    def validate_file_type(self, path: Path, allowed_extensions: Iterable[str]) -> Outcome[Path]:
        allowed = [ext.lower() for ext in allowed_extensions]
        if not path.is_file():
            return self._reject("file", "File does not exist")
        if not any(path.name.lower().endswith(ext) for ext in allowed):
            return self._reject(
                "file", f"File type not allowed. Allowed types: {', '.join(allowed)}"
            )
        return success(path)

    # --- Numbers ---

    def validate_numeric(self, value: str, field_name: str = "Value") -> Outcome[float]:
        if not value.strip():
            return self._reject(field_name, f"{field_name} is required")
        if not _DECIMAL_PATTERN.fullmatch(value.strip()):
            return self._reject(field_name, f"{field_name} must be a valid number")
        try:
            number = float(value)
        except ValueError:
            return self._reject(field_name, f"{field_name} must be a valid number")
        if not math.isfinite(number):
            return self._reject(field_name, f"{field_name} must be a valid number")
        return success(number)

    def validate_positive_numeric(self, value: str, field_name: str = "Value") -> Outcome[float]:
        return self.validate_numeric(value, field_name).and_then_sync(
            lambda number: self._positive(field_name, number)
        )

    def validate_integer(self, value: str, field_name: str = "Value") -> Outcome[int]:
        if not value.strip():
            return self._reject(field_name, f"{field_name} is required")
        if not _INTEGER_PATTERN.fullmatch(value.strip()):
            return self._reject(field_name, f"{field_name} must be a valid integer")
        return success(int(value))

    def validate_positive_integer(self, value: str, field_name: str = "Value") -> Outcome[int]:
        return self.validate_integer(value, field_name).and_then_sync(
            lambda number: self._positive(field_name, number)
        )

    def _positive(self, field_name: str, number: N) -> Outcome[N]:
        if number <= 0:
            return self._reject(field_name, f"{field_name} must be greater than 0")
        return success(number)

    # --- Generic fields ---

    def validate_required(self, value: str, field_name: str = "Field") -> Outcome[str]:
        value = value.strip()
        if not value:
            return self._reject(field_name, f"{field_name} is required")
        return success(value)

    def validate_length(
        self,
        value: str,
        min_length: int = 0,
        max_length: int = 255,
        field_name: str = "Field",
    ) -> Outcome[str]:
        if len(value) < min_length:
            return self._reject(
                field_name, f"{field_name} must be at least {min_length} characters long"
            )
        if len(value) > max_length:
            return self._reject(field_name, f"{field_name} cannot exceed {max_length} characters")
        return success(value)

    def validate_and_sanitize(self, value: str, field_name: str = "Field") -> Outcome[str]:
        return self.validate_required(sanitize_input(value), field_name)

    def validate_multiple(
        self, fields: Mapping[str, str], validators: Mapping[str, Validator]
    ) -> Outcome[dict[str, Any]]:
        """
        Validates a whole form at once.

        Fields without a validator are passed through unchanged. All failures
        are reported together as ``"field: message"`` joined by ``"; "``.
        """
        cleaned: dict[str, Any] = {}
        problems: list[str] = []

        for name, raw in fields.items():
            validator = validators.get(name)
            if validator is None:
                cleaned[name] = raw
                continue
            validator(raw).on_success(
                lambda value, name=name: cleaned.__setitem__(name, value)
            ).on_error(
                lambda message, _cause, name=name: problems.append(f"{name}: {message}")
            ).on_loading(lambda name=name: problems.append(f"{name}: {PENDING_FAILURE_MESSAGE}"))

        if problems:
            return error("; ".join(problems))
        return success(cleaned)


__all__ = ["ValidationService", "Validator", "sanitize_input"]
