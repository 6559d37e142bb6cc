"""
AWS Lambda Powertools event handler integration.

Binds built handlers to an ``APIGatewayRestResolver`` (or any other Powertools
resolver). Successful invocations return the Response written by the output
mapper. Failures are raised into the resolver, whose exception handlers act as
the centralized error handler: ``register_error_handler`` renders pipeline
errors, and a Powertools ServiceError raised by business logic keeps its own
status code.
"""

import asyncio
import json
from typing import Any, Callable, Dict, Optional

from aws_lambda_powertools.event_handler import Response, content_types
from aws_lambda_powertools.event_handler.api_gateway import ApiGatewayResolver
from aws_lambda_powertools.event_handler.exceptions import ServiceError
from pydantic import BaseModel

from handler_builder.errors import HandlerPipelineError, OutputMappingError, format_error_response, get_http_status_code
from handler_builder.pipeline import PipelineExecutor
from handler_builder.utils.observability import logger


class ResolverRequest:
    """Request view over the resolver's current event."""

    def __init__(self, event: Any, params: Optional[Dict[str, str]] = None):
        self.event = event
        self.params = dict(params or {})

    @property
    def body(self) -> Any:
        # Decoded on access so malformed JSON fails inside input mapping
        if not self.event.body:
            return None
        return self.event.json_body

    @property
    def query(self) -> Dict[str, str]:
        return self.event.query_string_parameters or {}

    @property
    def headers(self) -> Dict[str, str]:
        return self.event.headers or {}


class ResolverResponse:
    """Response sink that collects what the output mapper writes."""

    def __init__(self):
        self.status_code = 200
        self.headers: Dict[str, str] = {}
        self.body: Optional[str] = None
        self.content_type: Optional[str] = None
        self.written = False

    def status(self, status_code: int) -> 'ResolverResponse':
        self.status_code = status_code
        return self

    def set_header(self, name: str, value: str) -> 'ResolverResponse':
        self.headers[name] = value
        return self

    def send(self, body: Optional[str], content_type: str = content_types.TEXT_PLAIN) -> None:
        self.body = body
        self.content_type = content_type
        self.written = True

    def json(self, data: Any) -> None:
        if isinstance(data, BaseModel):
            self.send(data.model_dump_json(), content_types.APPLICATION_JSON)
        else:
            self.send(json.dumps(data, default=str), content_types.APPLICATION_JSON)

    def to_response(self) -> Response:
        if not self.written:
            raise OutputMappingError("Output mapper did not write a response")
        return Response(
            status_code=self.status_code,
            content_type=self.content_type,
            body=self.body,
            headers=self.headers,
        )


class ResolverContinuation:
    """``next`` callback handed to the pipeline; records the propagated error."""

    def __init__(self):
        self.error: Optional[BaseException] = None

    def __call__(self, error: BaseException) -> None:
        self.error = error

    def propagated_error(self) -> BaseException:
        original = getattr(self.error, 'original_error', None)
        if isinstance(original, ServiceError):
            return original
        return self.error


def as_route(app: ApiGatewayResolver, handler: PipelineExecutor) -> Callable[..., Response]:
    """
    Wrap a built handler as a resolver route function.

    Example:
        ``app.get("/users/<id>")(as_route(app, builder.build()))``

    Args:
        app: Resolver whose current event is mapped into the request
        handler: Built handler

    Returns:
        Route function receiving path parameters as keyword arguments
    """

    def route(**params: str) -> Response:
        request = ResolverRequest(app.current_event, params)
        response = ResolverResponse()
        continuation = ResolverContinuation()
        asyncio.run(handler(request, response, continuation))
        if continuation.error is not None:
            raise continuation.propagated_error()
        return response.to_response()

    route.__name__ = f"route_{handler.name}"
    return route


def register_error_handler(app: ApiGatewayResolver, include_details: bool = False) -> None:
    """Render every HandlerPipelineError raised into ``app`` as a JSON error response."""

    @app.exception_handler(HandlerPipelineError)
    def handle_pipeline_error(error: HandlerPipelineError) -> Response:
        status_code = get_http_status_code(error)
        logger.info("Rendering handler error", extra={
            "error_code": error.error_code,
            "error_id": error.error_id,
            "status_code": status_code,
        })
        return Response(
            status_code=status_code,
            content_type=content_types.APPLICATION_JSON,
            body=json.dumps(format_error_response(error, include_details=include_details)),
        )
