"""
Builder for HTTP request handlers.

A handler is broken down into distinct phases:

(1) Request mapping: generate a plain input object from the incoming request

(2) Schema validation: optionally check the input against a schema

(3) Request processing: run the business logic on the input

(4) Response mapping: write the output onto the outgoing response

The builder only collects configuration. ``build()`` snapshots it into an
immutable HandlerDescriptor, so reconfiguring a builder never changes handlers
that were already built from it.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional

from handler_builder.errors import ConfigurationError
from handler_builder.mappers import compile_input_mapping, default_input_mapper, default_output_mapper
from handler_builder.models.descriptor import HandlerDescriptor, InputMapper, OutputMapper, RequestHandler
from handler_builder.models.env_vars import get_handler_env_vars
from handler_builder.pipeline import PipelineExecutor
from handler_builder.utils.observability import LoggerProvider


class HandlerBuilder:
    """Fluent configuration for a single request handler."""

    def __init__(self, name: str, handler: RequestHandler):
        """
        Args:
            name: Identifying string for the handler, used in log scopes
            handler: Business logic ``(input, identity, environment) -> output``,
                may return an awaitable

        Raises:
            ConfigurationError: if name is not a non-empty string or handler is not callable
        """
        if not isinstance(name, str) or len(name) < 1:
            raise ConfigurationError('name cannot be empty (arg #1)')
        if not callable(handler):
            raise ConfigurationError('handler must be callable (arg #2)')
        self._name = name
        self._handler = handler
        self._input_mapper: InputMapper = default_input_mapper
        self._output_mapper: OutputMapper = default_output_mapper
        self._schema: Optional[Any] = None
        self._alias: Optional[str] = None

    @classmethod
    def create(cls, name: str, handler: RequestHandler) -> 'HandlerBuilder':
        return cls(name, handler)

    @property
    def name(self) -> str:
        return self._name

    def set_input_mapper(self, mapping: InputMapper | Mapping) -> 'HandlerBuilder':
        """
        Sets the input mapping for the handler.

        Args:
            mapping: A function that maps the request to an input object, or a
                mapping of input property -> dotted request path, for example
                ``{"id": "params.id", "name": "body.name"}``

        Returns:
            The builder, for chaining
        """
        if callable(mapping):
            self._input_mapper = mapping
        elif isinstance(mapping, Mapping):
            self._input_mapper = compile_input_mapping(mapping)
        else:
            raise ConfigurationError('Input mapping must be a function or a mapping of property paths')
        return self

    def set_schema(self, schema: Any) -> 'HandlerBuilder':
        """
        Sets the schema used to validate mapped input.

        Args:
            schema: JSON schema dict or pydantic model class. Not inspected until build.

        Returns:
            The builder, for chaining
        """
        self._schema = schema
        return self

    def set_output_mapper(self, mapping: OutputMapper) -> 'HandlerBuilder':
        """
        Sets the output mapping for the handler.

        Args:
            mapping: A function ``(output, response, next)`` that writes the
                handler output onto the response

        Returns:
            The builder, for chaining
        """
        if not callable(mapping):
            raise ConfigurationError('Output mapping must be a function')
        self._output_mapper = mapping
        return self

    def set_alias(self, alias: str) -> 'HandlerBuilder':
        """Sets the deployment environment alias handed to the handler."""
        if not isinstance(alias, str) or len(alias) < 1:
            raise ConfigurationError('alias cannot be empty')
        self._alias = alias
        return self

    def describe(self, alias: Optional[str] = None) -> HandlerDescriptor:
        """
        Snapshot the current configuration.

        Raises:
            ConfigurationError: if the alias has to come from the environment and
                the environment variables fail validation
        """
        alias = alias or self._alias
        if not alias:
            try:
                alias = get_handler_env_vars().alias
            except ValueError as e:
                raise ConfigurationError(f"Invalid handler environment: {e}") from e
        return HandlerDescriptor(
            name=self._name,
            handler=self._handler,
            input_mapper=self._input_mapper,
            output_mapper=self._output_mapper,
            schema=self._schema,
            alias=alias,
        )

    def build(
        self,
        alias: Optional[str] = None,
        logger_provider: Optional[LoggerProvider] = None,
        request_id_factory: Optional[Callable[[], str]] = None,
    ) -> PipelineExecutor:
        """
        Builds a request handler that can be invoked as ``await handler(request, response, next)``.

        Args:
            alias: Deployment alias, overrides set_alias() and the ENVIRONMENT variable
            logger_provider: ``(scope, **fields) -> logger``, defaults to the Powertools logger
            request_id_factory: Generator of per-invocation request ids

        Returns:
            A PipelineExecutor bound to a snapshot of this builder
        """
        return PipelineExecutor(
            self.describe(alias),
            logger_provider=logger_provider,
            request_id_factory=request_id_factory,
        )
