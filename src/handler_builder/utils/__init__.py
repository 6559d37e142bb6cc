"""Helpers used by the builder and the pipeline executor."""

from handler_builder.utils.dot_path import get_path, set_path
from handler_builder.utils.observability import ScopedLogger, get_logger, logger
from handler_builder.utils.request_id import generate_request_id
from handler_builder.utils.schema import create_schema_checker

__all__ = [
    "ScopedLogger",
    "create_schema_checker",
    "generate_request_id",
    "get_logger",
    "get_path",
    "logger",
    "set_path",
]
