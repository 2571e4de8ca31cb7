"""
Configuration for the MedRefer outcome toolkit.
"""

from typing import Final

# --- Package Metadata ---
APP_NAME: Final[str] = "MedRefer"
VERSION: Final[str] = "0.1.0"

# --- Runtime Type Checking ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "MEDREFER_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "MEDREFER_BEARTYPE_ALL"

# --- Interop Configuration ---
PENDING_FAILURE_MESSAGE: Final[str] = "Operation is still in progress"

# --- Validation Defaults ---
COMMON_PASSWORDS: Final[frozenset[str]] = frozenset(
    {
        "password",
        "123456",
        "password123",
        "admin",
        "qwerty",
        "letmein",
        "welcome",
        "monkey",
        "1234567890",
        "password1",
    }
)
PASSWORD_SPECIAL_CHARACTERS: Final[str] = '!@#$%^&*(),.?":{}|<>'
DOCUMENT_EXTENSIONS: Final[tuple[str, ...]] = (".pdf", ".jpg", ".jpeg", ".png", ".doc", ".docx")
BYTES_PER_MEGABYTE: Final[int] = 1024 * 1024

# --- UI Configuration ---
LOG_FORMAT: Final[str] = "%(message)s"
LOG_DATE_FORMAT: Final[str] = "[%X]"

# --- SSoT Enforcement ---
__all__ = [
    "APP_NAME",
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "BYTES_PER_MEGABYTE",
    "COMMON_PASSWORDS",
    "DOCUMENT_EXTENSIONS",
    "LOG_DATE_FORMAT",
    "LOG_FORMAT",
    "PASSWORD_SPECIAL_CHARACTERS",
    "PENDING_FAILURE_MESSAGE",
    "VERSION",
]
