"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for environment variables read by the
resource handler: observability settings and the retry/timeout policy handed
to the botocore client.
"""

from typing import Annotated

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class HandlerEnvVars(BaseModel):
    """Environment variables for the resource handler."""

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='qbusiness-application',
        description='Service name for AWS Powertools'
    )] = 'qbusiness-application'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    # Enable/disable X-Ray tracing
    POWERTOOLS_TRACE_DISABLED: Annotated[str, Field(
        default='false',
        description='Disable X-Ray tracing (true/false)',
        pattern=r'^(true|false)$'
    )] = 'false'

    # Override for the Q Business endpoint, used against local stubs
    QBUSINESS_ENDPOINT_URL: Annotated[str | None, Field(
        default=None,
        description='Custom endpoint URL for the Q Business API'
    )] = None

    # botocore retry policy
    BOTO_MAX_ATTEMPTS: Annotated[int, Field(
        default=3,
        description='Maximum number of attempts per Q Business API call',
        ge=1,
        le=10
    )] = 3

    BOTO_RETRY_MODE: Annotated[str, Field(
        default='adaptive',
        description='botocore retry mode',
        pattern=r'^(legacy|standard|adaptive)$'
    )] = 'adaptive'

    # botocore timeouts, in seconds
    BOTO_CONNECT_TIMEOUT: Annotated[int, Field(
        default=10,
        description='Connection timeout for Q Business API calls in seconds',
        ge=1,
        le=300
    )] = 10

    BOTO_READ_TIMEOUT: Annotated[int, Field(
        default=30,
        description='Read timeout for Q Business API calls in seconds',
        ge=1,
        le=300
    )] = 30

    @property
    def tracing_enabled(self) -> bool:
        """Check if X-Ray tracing is enabled."""
        return self.POWERTOOLS_TRACE_DISABLED.lower() == 'false'


def get_handler_env_vars() -> HandlerEnvVars:
    """
    Get typed environment variables for the resource handler.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=HandlerEnvVars)
