"""
Canonical resource model for AWS::QBusiness::Application.

This module defines the schema-shaped model handed back to the caller. Property
names follow the resource schema (PascalCase) on the wire and snake_case in
Python. Every property is optional: a property the service did not return is
left as None rather than filled with an empty value.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class SchemaModel(BaseModel):
    """Base for resource schema models (PascalCase property names)."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    def to_properties(self) -> dict:
        """Serialize to resource properties, omitting absent values."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ResourceTag(SchemaModel):
    """A resource tag."""

    key: Annotated[str, Field(
        description='Tag key',
        examples=['Category']
    )]

    value: Annotated[str, Field(
        description='Tag value',
        examples=['Chat Stuff']
    )]


class CapacityUnitConfiguration(SchemaModel):
    users: Annotated[int | None, Field(
        default=None,
        description='Number of user capacity units',
        examples=[10]
    )] = None


class ResponseConfiguration(SchemaModel):
    blocked_phrases: Annotated[list[str] | None, Field(
        default=None,
        description='Phrases blocked from chat responses'
    )] = None

    blocked_topics_prompt: Annotated[str | None, Field(
        default=None,
        description='Prompt describing blocked topics'
    )] = None

    default_message: Annotated[str | None, Field(
        default=None,
        description='Message returned for blocked responses'
    )] = None

    non_retrieval_response_control_status: Annotated[str | None, Field(
        default=None,
        description='ENABLED or DISABLED'
    )] = None

    retrieval_response_control_status: Annotated[str | None, Field(
        default=None,
        description='ENABLED or DISABLED'
    )] = None


class ChatConfiguration(SchemaModel):
    response_configuration: Annotated[ResponseConfiguration | None, Field(
        default=None,
        description='Response controls for chat'
    )] = None


class ServerSideEncryptionConfiguration(SchemaModel):
    kms_key_id: Annotated[str | None, Field(
        default=None,
        description='KMS key used for encryption at rest'
    )] = None


class ResourceModel(SchemaModel):
    """Canonical model of a Q Business application."""

    application_id: Annotated[str | None, Field(
        default=None,
        description='Primary identifier of the application',
        examples=['63451660-1596-4f1a-a3c8-e5f4b33d9fe5']
    )] = None

    application_arn: Annotated[str | None, Field(
        default=None,
        description='ARN of the application'
    )] = None

    role_arn: Annotated[str | None, Field(
        default=None,
        description='IAM role assumed by the application'
    )] = None

    created_at: Annotated[str | None, Field(
        default=None,
        description='Creation instant, ISO-8601 UTC with second precision',
        examples=['2023-10-20T18:02:15Z']
    )] = None

    updated_at: Annotated[str | None, Field(
        default=None,
        description='Last update instant, ISO-8601 UTC with second precision',
        examples=['2023-10-20T22:02:15Z']
    )] = None

    description: Annotated[str | None, Field(
        default=None,
        description='Description of the application'
    )] = None

    name: Annotated[str | None, Field(
        default=None,
        description='Name of the application',
        examples=['Foobar']
    )] = None

    status: Annotated[str | None, Field(
        default=None,
        description='Lifecycle status of the application',
        examples=['ACTIVE']
    )] = None

    capacity_unit_configuration: Annotated[CapacityUnitConfiguration | None, Field(
        default=None,
        description='Chat capacity'
    )] = None

    chat_configuration: Annotated[ChatConfiguration | None, Field(
        default=None,
        description='Chat configuration'
    )] = None

    server_side_encryption_configuration: Annotated[ServerSideEncryptionConfiguration | None, Field(
        default=None,
        description='Encryption settings'
    )] = None

    tags: Annotated[list[ResourceTag] | None, Field(
        default=None,
        description='Tags attached to the application'
    )] = None
