import re
from typing import Any, Dict

DIGITS = re.compile(r"[0-9]+")


class BibleAPIError(Exception):
    """Base error carrying an HTTP status and a machine-readable code."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "code": self.code, "status_code": self.status_code}


class NotFoundError(BibleAPIError):
    def __init__(self, resource: str):
        super().__init__(f"{resource} not found", 404, "NOT_FOUND")


class ValidationError(BibleAPIError):
    def __init__(self, message: str):
        super().__init__(message, 400, "VALIDATION_ERROR")


def validate_number(value: str, name: str) -> int:
    """Parse a positive integer supplied as text (path segment or query value)."""
    text = "" if value is None else str(value).strip()
    if not DIGITS.fullmatch(text):
        raise ValidationError(f"{name} must be a positive number")
    number = int(text)
    if number < 1:
        raise ValidationError(f"{name} must be a positive number")
    return number
