"""Data models shared by the builder and the pipeline executor."""

from handler_builder.models.context import InvocationContext, InvocationEnvironment, InvocationIdentity
from handler_builder.models.descriptor import HandlerDescriptor, InputMapper, OutputMapper, RequestHandler
from handler_builder.models.env_vars import DEFAULT_ALIAS, HandlerEnvVars, get_handler_env_vars

__all__ = [
    "DEFAULT_ALIAS",
    "HandlerDescriptor",
    "HandlerEnvVars",
    "InputMapper",
    "InvocationContext",
    "InvocationEnvironment",
    "InvocationIdentity",
    "OutputMapper",
    "RequestHandler",
    "get_handler_env_vars",
]
