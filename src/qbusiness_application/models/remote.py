"""
Remote response models for the Q Business API.

These models parse the raw dictionaries returned by the boto3 client. Every
optional attribute defaults to None so that an attribute the service omitted
can be told apart from one it returned empty.
"""

from datetime import datetime
from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RemoteModel(BaseModel):
    """Base for models parsed from Q Business responses (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class CapacityUnitConfigurationResult(RemoteModel):
    """Chat capacity units provisioned for the application."""

    users: Annotated[int | None, Field(
        default=None,
        description='Number of user capacity units'
    )] = None


class ResponseConfigurationResult(RemoteModel):
    """Response controls applied to chat conversations."""

    blocked_phrases: Annotated[list[str] | None, Field(
        default=None,
        description='Phrases the assistant refuses to produce',
        examples=[['Guaranteed returns']]
    )] = None

    blocked_topics_prompt: Annotated[str | None, Field(
        default=None,
        description='Prompt describing blocked topics'
    )] = None

    default_message: Annotated[str | None, Field(
        default=None,
        description='Message shown when a response is blocked'
    )] = None

    non_retrieval_response_control_status: Annotated[str | None, Field(
        default=None,
        description='Whether non retrieval responses are allowed',
        examples=['ENABLED', 'DISABLED']
    )] = None

    retrieval_response_control_status: Annotated[str | None, Field(
        default=None,
        description='Whether retrieval responses are allowed',
        examples=['ENABLED', 'DISABLED']
    )] = None


class AppliedChatConfigurationResult(RemoteModel):
    """Chat configuration currently applied to the application."""

    response_configuration: Annotated[ResponseConfigurationResult | None, Field(
        default=None,
        description='Response controls'
    )] = None


class EncryptionConfigurationResult(RemoteModel):
    """Server side encryption settings."""

    kms_key_id: Annotated[str | None, Field(
        default=None,
        description='Identifier of the KMS key used to encrypt application data'
    )] = None


class DescribeApplicationResult(RemoteModel):
    """Authoritative snapshot of a Q Business application."""

    application_id: Annotated[str | None, Field(
        default=None,
        description='Identifier of the application',
        examples=['63451660-1596-4f1a-a3c8-e5f4b33d9fe5']
    )] = None

    application_arn: Annotated[str | None, Field(
        default=None,
        description='ARN of the application'
    )] = None

    role_arn: Annotated[str | None, Field(
        default=None,
        description='IAM role the application assumes'
    )] = None

    created_at: Annotated[datetime | None, Field(
        default=None,
        description='Creation timestamp'
    )] = None

    updated_at: Annotated[datetime | None, Field(
        default=None,
        description='Last update timestamp'
    )] = None

    description: Annotated[str | None, Field(
        default=None,
        description='Human readable description'
    )] = None

    # GetApplication returns displayName, DescribeApplication returned name
    name: Annotated[str | None, Field(
        default=None,
        validation_alias=AliasChoices('name', 'displayName'),
        description='Name of the application',
        examples=['Foobar']
    )] = None

    status: Annotated[str | None, Field(
        default=None,
        description='Lifecycle status',
        examples=['CREATING', 'ACTIVE', 'DELETING', 'FAILED', 'UPDATING']
    )] = None

    capacity_unit_configuration: Annotated[CapacityUnitConfigurationResult | None, Field(
        default=None,
        description='Provisioned chat capacity'
    )] = None

    chat_configuration: Annotated[AppliedChatConfigurationResult | None, Field(
        default=None,
        description='Applied chat configuration'
    )] = None

    server_side_encryption_configuration: Annotated[EncryptionConfigurationResult | None, Field(
        default=None,
        validation_alias=AliasChoices('serverSideEncryptionConfiguration', 'encryptionConfiguration'),
        description='Encryption settings'
    )] = None


class Tag(RemoteModel):
    """A key/value tag attached to a Q Business resource."""

    key: str
    value: str


class ListTagsResult(RemoteModel):
    """Tags attached to a resource, in the order the service returned them."""

    tags: Annotated[list[Tag], Field(
        default_factory=list,
        description='Tags attached to the resource'
    )]
