import pytest

from backend.reader.errors import NotFoundError, ValidationError, validate_number


class TestValidateNumber:
    """Unit tests for numeric path and query values."""

    @pytest.mark.parametrize("value, expected", [("1", 1), (" 12 ", 12), ("007", 7)])
    def test_positive_numbers(self, value, expected):
        assert validate_number(value, "chapter") == expected

    @pytest.mark.parametrize("value", ["0", "-1", "+3", "abc", "", "1.5", "1_0", "٢", "²", None])
    def test_rejected_values(self, value):
        with pytest.raises(ValidationError) as excinfo:
            validate_number(value, "chapter")
        assert excinfo.value.message == "chapter must be a positive number"
        assert excinfo.value.status_code == 400


class TestErrorBodies:
    def test_not_found(self):
        assert NotFoundError("Book 'x'").to_dict() == {
            "error": "Book 'x' not found",
            "code": "NOT_FOUND",
            "status_code": 404,
        }
