"""
Invocation envelope models: handler request, progress event and error codes.

The progress event is the terminal outcome of a handler invocation. A
successful read carries exactly one resource model; a failed one carries an
error code and message and never a model.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from qbusiness_application.models.resource import ResourceModel


class OperationStatus(str, Enum):
    """Status of a handler invocation."""

    IN_PROGRESS = 'IN_PROGRESS'
    SUCCESS = 'SUCCESS'
    FAILED = 'FAILED'


class HandlerErrorCode(str, Enum):
    """Caller-facing failure classification, independent of the remote service's exceptions."""

    NOT_UPDATABLE = 'NotUpdatable'
    INVALID_REQUEST = 'InvalidRequest'
    ACCESS_DENIED = 'AccessDenied'
    INVALID_CREDENTIALS = 'InvalidCredentials'
    ALREADY_EXISTS = 'AlreadyExists'
    NOT_FOUND = 'NotFound'
    RESOURCE_CONFLICT = 'ResourceConflict'
    THROTTLING = 'Throttling'
    SERVICE_LIMIT_EXCEEDED = 'ServiceLimitExceeded'
    NOT_STABILIZED = 'NotStabilized'
    GENERAL_SERVICE_EXCEPTION = 'GeneralServiceException'
    SERVICE_INTERNAL_ERROR = 'ServiceInternalError'
    NETWORK_FAILURE = 'NetworkFailure'
    INTERNAL_FAILURE = 'InternalFailure'


class EnvelopeModel(BaseModel):
    """Base for envelope models (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResourceHandlerRequest(EnvelopeModel):
    """Request handed to a resource handler by the invocation envelope."""

    client_request_token: Annotated[str | None, Field(
        default=None,
        description='Token correlating retries of the same request'
    )] = None

    desired_resource_state: Annotated[ResourceModel | None, Field(
        default=None,
        description='Resource model as described in the template'
    )] = None

    previous_resource_state: Annotated[ResourceModel | None, Field(
        default=None,
        description='Resource model before the current operation'
    )] = None

    logical_resource_identifier: Annotated[str | None, Field(
        default=None,
        description='Logical ID of the resource in the stack'
    )] = None

    aws_account_id: Annotated[str, Field(
        min_length=1,
        description='Account owning the resource',
        examples=['123456789012']
    )]

    aws_partition: Annotated[str, Field(
        default='aws',
        description='AWS partition',
        examples=['aws', 'aws-cn', 'aws-us-gov']
    )] = 'aws'

    region: Annotated[str, Field(
        min_length=1,
        pattern=r'^[a-z]{2}(-[a-z]+)+-\d+$',
        description='Region the resource lives in',
        examples=['us-east-1']
    )]

    stack_id: Annotated[str | None, Field(
        default=None,
        description='Stack the resource belongs to'
    )] = None


class ProgressEvent(EnvelopeModel):
    """Terminal outcome of a handler invocation."""

    status: OperationStatus

    resource_model: Annotated[ResourceModel | None, Field(
        default=None,
        description='Resource model for single-resource operations'
    )] = None

    # Populated only by list-style operations, never by read
    resource_models: Annotated[list[ResourceModel] | None, Field(
        default=None,
        description='Resource models for list operations'
    )] = None

    message: Annotated[str | None, Field(
        default=None,
        description='Failure message'
    )] = None

    error_code: Annotated[HandlerErrorCode | None, Field(
        default=None,
        description='Failure classification'
    )] = None

    @classmethod
    def success(cls, resource_model: ResourceModel) -> 'ProgressEvent':
        """Create a successful outcome carrying a single resource model."""
        return cls(status=OperationStatus.SUCCESS, resource_model=resource_model)

    @classmethod
    def failed(cls, error_code: HandlerErrorCode, message: str | None = None) -> 'ProgressEvent':
        """Create a failed outcome. A failed outcome never carries a model."""
        return cls(status=OperationStatus.FAILED, error_code=error_code, message=message)

    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    def to_response(self) -> dict[str, Any]:
        """Serialize for the invocation envelope, omitting absent fields."""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)
