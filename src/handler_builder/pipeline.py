"""
Pipeline executor: the handler produced by HandlerBuilder.build().

Each invocation runs input mapping, schema validation, the handler function and
output mapping strictly in that order. The first failure skips every remaining
phase and is handed to the hosting framework's ``next`` callback. The handler
function is the only phase that may suspend.
"""

import inspect
from typing import Any, Callable, Optional

from handler_builder.errors import (
    ConfigurationError,
    HandlerError,
    HandlerPipelineError,
    InputMappingError,
    OutputMappingError,
    ValidationError,
)
from handler_builder.models.context import InvocationContext, InvocationEnvironment, InvocationIdentity
from handler_builder.models.descriptor import HandlerDescriptor
from handler_builder.utils.observability import LoggerProvider, get_logger
from handler_builder.utils.request_id import generate_request_id
from handler_builder.utils.schema import SchemaChecker, create_schema_checker

NextFunction = Callable[[BaseException], None]


class PipelineExecutor:
    """Awaitable request handler ``(request, response, next)`` bound to a descriptor."""

    def __init__(
        self,
        descriptor: HandlerDescriptor,
        logger_provider: Optional[LoggerProvider] = None,
        request_id_factory: Optional[Callable[[], str]] = None,
    ):
        self.descriptor = descriptor
        self._logger_provider = logger_provider or get_logger
        self._request_id_factory = request_id_factory or generate_request_id
        self._schema_checker: Optional[SchemaChecker] = None
        if descriptor.has_schema:
            try:
                self._schema_checker = create_schema_checker(descriptor.schema)
            except TypeError as e:
                raise ConfigurationError(str(e)) from e

    @property
    def name(self) -> str:
        return self.descriptor.name

    def create_context(self) -> InvocationContext:
        request_id = self._request_id_factory()
        logger = self._logger_provider(f"handler:{self.descriptor.name}", request_id=request_id)
        return InvocationContext(
            handler_name=self.descriptor.name,
            identity=InvocationIdentity(request_id=request_id),
            environment=InvocationEnvironment(logger=logger, alias=self.descriptor.alias),
        )

    def _map_input(self, request: Any, context: InvocationContext) -> Any:
        context.logger.info('Mapping request to input')
        try:
            input_data = self.descriptor.input_mapper(request)
        except Exception as e:
            raise InputMappingError(f"Input mapping failed: {e}", original_error=e) from e
        context.logger.trace('Handler input', {"input": input_data})
        return input_data

    def _validate(self, input_data: Any, context: InvocationContext) -> None:
        if self._schema_checker is None:
            context.logger.info('No schema specified. Skipping schema validation')
            return
        context.logger.info('Validating input schema')
        try:
            self._schema_checker(input_data, True)
        except ValidationError:
            raise
        except Exception as e:
            raise ValidationError(f"Schema validation failed: {e}", original_error=e) from e

    async def _execute(self, input_data: Any, context: InvocationContext) -> Any:
        context.logger.info('Executing handler')
        try:
            output = self.descriptor.handler(input_data, context.identity, context.environment)
            if inspect.isawaitable(output):
                output = await output
        except Exception as e:
            raise HandlerError(f"Handler '{self.descriptor.name}' failed: {e}", original_error=e) from e
        return output

    async def __call__(self, request: Any, response: Any, next_fn: NextFunction) -> None:
        context = self.create_context()
        logger = context.logger
        logger.info('HANDLER START')

        try:
            input_data = self._map_input(request, context)
            self._validate(input_data, context)
            output = await self._execute(input_data, context)
        except HandlerPipelineError as error:
            logger.error(error, 'Error executing handler', {"error_code": error.error_code})
            logger.info('HANDLER END')
            next_fn(error)
            return

        logger.trace('Handler output', {"output": output})
        logger.info('HANDLER END')
        try:
            self.descriptor.output_mapper(output, response, next_fn)
        except Exception as e:
            error = OutputMappingError(f"Output mapping failed: {e}", original_error=e)
            logger.error(error, 'Error mapping handler output', {"error_code": error.error_code})
            next_fn(error)
