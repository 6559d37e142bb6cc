"""
Declarative HTTP request handlers.

A handler is assembled from replaceable phases (input mapping, schema
validation, business logic, output mapping) with HandlerBuilder, and executed
by the PipelineExecutor returned from ``build()``:

    handler = (
        HandlerBuilder('get_user', get_user)
        .set_input_mapper({'id': 'params.id'})
        .set_schema(GET_USER_SCHEMA)
        .build()
    )
"""

__version__ = "1.0.0"

from handler_builder.builder import HandlerBuilder
from handler_builder.errors import (
    ConfigurationError,
    HandlerError,
    HandlerPipelineError,
    InputMappingError,
    OutputMappingError,
    ValidationError,
)
from handler_builder.mappers import default_input_mapper, default_output_mapper
from handler_builder.models import HandlerDescriptor, InvocationEnvironment, InvocationIdentity
from handler_builder.pipeline import PipelineExecutor

__all__ = [
    "ConfigurationError",
    "HandlerBuilder",
    "HandlerDescriptor",
    "HandlerError",
    "HandlerPipelineError",
    "InputMappingError",
    "InvocationEnvironment",
    "InvocationIdentity",
    "OutputMappingError",
    "PipelineExecutor",
    "ValidationError",
    "default_input_mapper",
    "default_output_mapper",
]
