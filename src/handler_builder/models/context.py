"""
Per-invocation context models.

A fresh InvocationContext is created for every request served by a built
handler and is never shared between invocations.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from handler_builder.utils.observability import ScopedLogger


class InvocationIdentity(BaseModel):
    """Correlation token passed to the handler function as its second argument."""

    model_config = ConfigDict(frozen=True)

    request_id: str = Field(min_length=1, description="Random identifier of this invocation")


@dataclass(frozen=True)
class InvocationEnvironment:
    """Execution environment passed to the handler function as its third argument."""

    logger: ScopedLogger
    alias: str


@dataclass(frozen=True)
class InvocationContext:
    """Everything owned by a single invocation."""

    handler_name: str
    identity: InvocationIdentity
    environment: InvocationEnvironment

    @property
    def request_id(self) -> str:
        return self.identity.request_id

    @property
    def logger(self) -> ScopedLogger:
        return self.environment.logger
