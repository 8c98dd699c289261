"""
Translation between Q Business responses and the canonical resource model.

Fields are copied one to one. An attribute the service omitted stays None in
the resource model; it is never replaced by an empty configuration.
"""

from datetime import datetime, timezone

from qbusiness_application.models.remote import (
    AppliedChatConfigurationResult,
    CapacityUnitConfigurationResult,
    DescribeApplicationResult,
    EncryptionConfigurationResult,
    ListTagsResult,
)
from qbusiness_application.models.resource import (
    CapacityUnitConfiguration,
    ChatConfiguration,
    ResourceModel,
    ResourceTag,
    ResponseConfiguration,
    ServerSideEncryptionConfiguration,
)

INSTANT_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


def instant_to_string(instant: datetime | None) -> str | None:
    """
    Format an instant as ISO-8601 UTC with second precision.

    Naive datetimes are taken to be UTC. Fractional seconds are truncated.

    Args:
        instant: Timestamp returned by the service

    Returns:
        Formatted instant, e.g. '2023-10-20T18:02:15Z', or None
    """
    if instant is None:
        return None
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc).strftime(INSTANT_FORMAT)


def build_application_arn(partition: str, region: str, account_id: str, application_id: str) -> str:
    """Build the ARN of an application from the request context."""
    return f'arn:{partition}:qbusiness:{region}:{account_id}:application/{application_id}'


def translate_from_read_response(
    application: DescribeApplicationResult,
    tags: ListTagsResult,
    application_arn: str,
) -> ResourceModel:
    """
    Merge the describe and list-tags responses into a resource model.

    Args:
        application: DescribeApplication result
        tags: ListTagsForResource result
        application_arn: ARN the tags were fetched for

    Returns:
        Canonical resource model
    """
    return ResourceModel(
        application_id=application.application_id,
        application_arn=application_arn,
        role_arn=application.role_arn,
        created_at=instant_to_string(application.created_at),
        updated_at=instant_to_string(application.updated_at),
        description=application.description,
        name=application.name,
        status=application.status,
        capacity_unit_configuration=_translate_capacity(application.capacity_unit_configuration),
        chat_configuration=_translate_chat_configuration(application.chat_configuration),
        server_side_encryption_configuration=_translate_encryption(
            application.server_side_encryption_configuration
        ),
        tags=translate_tags(tags),
    )


def translate_tags(tags: ListTagsResult) -> list[ResourceTag]:
    """Convert service tags to resource tags, keeping order and duplicates."""
    return [ResourceTag(key=tag.key, value=tag.value) for tag in tags.tags]


def _translate_capacity(capacity: CapacityUnitConfigurationResult | None) -> CapacityUnitConfiguration | None:
    if capacity is None:
        return None
    return CapacityUnitConfiguration(users=capacity.users)


def _translate_chat_configuration(chat: AppliedChatConfigurationResult | None) -> ChatConfiguration | None:
    # a chat configuration without response controls has nothing to carry
    if chat is None or chat.response_configuration is None:
        return None

    response = chat.response_configuration
    return ChatConfiguration(
        response_configuration=ResponseConfiguration(
            blocked_phrases=list(response.blocked_phrases) if response.blocked_phrases is not None else None,
            blocked_topics_prompt=response.blocked_topics_prompt,
            default_message=response.default_message,
            non_retrieval_response_control_status=response.non_retrieval_response_control_status,
            retrieval_response_control_status=response.retrieval_response_control_status,
        )
    )


def _translate_encryption(
    encryption: EncryptionConfigurationResult | None,
) -> ServerSideEncryptionConfiguration | None:
    if encryption is None:
        return None
    return ServerSideEncryptionConfiguration(kms_key_id=encryption.kms_key_id)
