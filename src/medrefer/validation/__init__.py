from ..core.config import ValidationRules
from .service import ValidationService, Validator, sanitize_input

__all__: list[str] = ["ValidationRules", "ValidationService", "Validator", "sanitize_input"]
