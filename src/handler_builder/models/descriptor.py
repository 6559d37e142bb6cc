"""Immutable configuration captured by a built handler."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

InputMapper = Callable[[Any], Any]
OutputMapper = Callable[[Any, Any, Callable[[BaseException], None]], None]
RequestHandler = Callable[..., Any]


@dataclass(frozen=True)
class HandlerDescriptor:
    """Snapshot of a HandlerBuilder taken at build time."""

    name: str
    handler: RequestHandler
    input_mapper: InputMapper
    output_mapper: OutputMapper
    schema: Optional[Any] = None
    alias: str = 'default'

    @property
    def has_schema(self) -> bool:
        return self.schema is not None
