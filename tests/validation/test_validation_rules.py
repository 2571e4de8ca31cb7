import pytest
from pydantic import ValidationError

from medrefer.core.config import ValidationRules
from medrefer.validation import ValidationService


def test_defaults() -> None:
    rules = ValidationRules()
    assert rules.password_min_length == 8
    assert rules.max_file_size_mb == 10
    assert "qwerty" in rules.common_passwords


def test_rules_are_immutable() -> None:
    rules = ValidationRules()
    with pytest.raises(ValidationError):
        rules.max_age = 10  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"password_min_length": 0},
        {"password_min_length": 20, "password_max_length": 10},
        {"unknown_rule": 1},
        {"password_special_characters": ""},
    ],
)
def test_invalid_rules_are_rejected(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        ValidationRules(**overrides)


def test_service_applies_custom_rules() -> None:
    service = ValidationService(ValidationRules(max_age=120, password_min_length=12))
    assert service.validate_age(130).error_message == "Age cannot be greater than 120"
    assert "at least 12" in service.validate_password("Short1!aA").error_message
