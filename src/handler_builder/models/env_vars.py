"""
Environment variable models for type-safe configuration.

The deployment alias is only read from the environment when it was not
supplied to the builder explicitly. Log level and service name are read by the
Powertools Logger itself and are not modelled here.
"""

from typing import Annotated

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ALIAS = 'default'


class HandlerEnvVars(BaseModel):
    """Environment variables read by built handlers."""

    model_config = ConfigDict(frozen=True)

    # Deployment environment alias handed to every handler invocation
    ENVIRONMENT: Annotated[str, Field(
        default=DEFAULT_ALIAS,
        description='Deployment environment alias',
        min_length=1
    )] = DEFAULT_ALIAS

    @property
    def alias(self) -> str:
        return self.ENVIRONMENT


def get_handler_env_vars() -> HandlerEnvVars:
    """
    Get typed environment variables for built handlers.

    Returns:
        Validated environment variables model instance

    Raises:
        ValueError: if a variable fails validation
    """
    return get_environment_variables(model=HandlerEnvVars)
