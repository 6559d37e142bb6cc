"""
Schema checkers for mapped handler input.

Two kinds of schema are understood: JSON schema documents, validated with the
Powertools validation utility, and pydantic model classes.
"""

from typing import Any, Callable, Dict, List

from aws_lambda_powertools.utilities.validation import SchemaValidationError, validate
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from handler_builder.errors import ValidationError

SchemaChecker = Callable[[Any, bool], bool]


def _json_schema_field_errors(error: SchemaValidationError) -> List[Dict[str, str]]:
    field = error.name or ''
    # Powertools reports the offending value as "data.<path>"
    if field.startswith('data.'):
        field = field[len('data.'):]
    elif field == 'data':
        field = ''
    return [{"field": field, "message": error.validation_message or error.message or str(error)}]


def _pydantic_field_errors(error: PydanticValidationError) -> List[Dict[str, str]]:
    return [
        {"field": '.'.join(str(loc) for loc in item["loc"]), "message": item["msg"]}
        for item in error.errors()
    ]


def _json_schema_checker(schema: Dict[str, Any]) -> SchemaChecker:
    def check(value: Any, throw_on_error: bool = False) -> bool:
        try:
            validate(event=value, schema=schema)
        except SchemaValidationError as e:
            if not throw_on_error:
                return False
            raise ValidationError(
                message=f"Schema validation failed: {e.validation_message or e.message}",
                field_errors=_json_schema_field_errors(e),
                original_error=e,
            ) from e
        return True

    return check


def _model_checker(model: type) -> SchemaChecker:
    def check(value: Any, throw_on_error: bool = False) -> bool:
        try:
            model.model_validate(value)
        except PydanticValidationError as e:
            if not throw_on_error:
                return False
            raise ValidationError(
                message=f"Schema validation failed with {e.error_count()} error(s)",
                field_errors=_pydantic_field_errors(e),
                original_error=e,
            ) from e
        return True

    return check


def create_schema_checker(schema: Any) -> SchemaChecker:
    """
    Create a checker for ``schema``.

    Args:
        schema: JSON schema dict or pydantic model class

    Returns:
        Function ``(value, throw_on_error) -> bool``. With ``throw_on_error`` a
        violation raises ValidationError instead of returning False.
    """
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return _model_checker(schema)
    if isinstance(schema, dict):
        return _json_schema_checker(schema)
    raise TypeError(f"Unsupported schema type: {type(schema).__name__}")
