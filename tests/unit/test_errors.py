"""
Unit tests for the error taxonomy and error rendering.
"""

import pytest

from handler_builder.errors import (
    ConfigurationError,
    ErrorCategory,
    HandlerError,
    HandlerPipelineError,
    InputMappingError,
    OutputMappingError,
    ValidationError,
    format_error_response,
    get_http_status_code,
)


class TestTaxonomy:

    @pytest.mark.parametrize("error, code, category", [
        (ValidationError("bad"), "VALIDATION_ERROR", ErrorCategory.VALIDATION),
        (ConfigurationError("bad"), "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION),
        (InputMappingError("bad"), "INPUT_MAPPING_ERROR", ErrorCategory.INPUT_MAPPING),
        (HandlerError("bad"), "HANDLER_ERROR", ErrorCategory.HANDLER),
        (OutputMappingError("bad"), "OUTPUT_MAPPING_ERROR", ErrorCategory.OUTPUT_MAPPING),
    ])
    def test_codes_and_categories(self, error, code, category):
        assert isinstance(error, HandlerPipelineError)
        assert error.error_code == code
        assert error.category == category
        assert str(error) == "bad"

    def test_original_error_is_cause(self):
        original = ValueError("root cause")

        error = HandlerError("wrapped", original_error=original)

        assert error.original_error is original
        assert error.__cause__ is original

    def test_error_ids_are_unique(self):
        assert HandlerError("a").error_id != HandlerError("a").error_id

    def test_to_dict(self):
        error = ValidationError("bad", field_errors=[{"field": "id", "message": "required"}],
                                original_error=KeyError("id"))

        data = error.to_dict()

        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["category"] == "VALIDATION"
        assert data["field_errors"] == [{"field": "id", "message": "required"}]
        assert data["original_error"] == "KeyError('id')"
        assert "timestamp" in data


class TestFormatErrorResponse:

    def test_basic_fields(self):
        error = HandlerError("internal detail")

        response = format_error_response(error)

        assert response["error"]["code"] == "HANDLER_ERROR"
        assert response["error"]["error_id"] == error.error_id
        assert "internal detail" not in str(response)

    def test_details_included_on_request(self):
        response = format_error_response(HandlerError("internal detail"), include_details=True)

        assert response["error"]["details"] == {"category": "HANDLER", "message": "internal detail"}

    def test_field_errors(self):
        error = ValidationError("bad", field_errors=[{"field": "id", "message": "required"}])

        assert format_error_response(error)["error"]["field_errors"] == [{"field": "id", "message": "required"}]


@pytest.mark.parametrize("error, status", [
    (ValidationError("bad"), 400),
    (InputMappingError("bad"), 400),
    (HandlerError("bad"), 500),
    (OutputMappingError("bad"), 500),
    (ConfigurationError("bad"), 500),
])
def test_http_status_codes(error, status):
    assert get_http_status_code(error) == status
