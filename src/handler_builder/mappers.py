"""
Default input and output mappers, and the compiler for declarative input mappings.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict

from handler_builder.errors import ConfigurationError
from handler_builder.models.descriptor import InputMapper
from handler_builder.utils.dot_path import get_path, set_path, split_path


def default_input_mapper(request: Any) -> Dict[str, Any]:
    """Ignore the request and hand the handler an empty input."""
    return {}


def default_output_mapper(output: Any, response: Any, next_fn: Callable[[BaseException], None]) -> None:
    """Write the handler output as the JSON body of a 200 response."""
    response.json(output)


def compile_input_mapping(mapping: Mapping) -> InputMapper:
    """
    Compile a property -> request path table into an input mapper.

    Example:
        ``{"id": "params.id", "user.name": "body.name"}`` maps a request with
        ``params = {"id": "42"}`` and ``body = {"name": "Ada"}`` to
        ``{"id": "42", "user": {"name": "Ada"}}``. Missing source values are
        written as None.

    Raises:
        ConfigurationError: if a property or path is not a non-empty dotted string
    """
    table = []
    for prop, path in mapping.items():
        if not isinstance(prop, str) or not isinstance(path, str):
            raise ConfigurationError(f"Input mapping entries must be strings (got {prop!r}: {path!r})")
        try:
            split_path(prop)
            split_path(path)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        table.append((prop, path))

    def map_input(request: Any) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for prop, path in table:
            set_path(result, prop, get_path(request, path))
        return result

    return map_input
