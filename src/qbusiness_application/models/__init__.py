"""
Models Package

This package contains the Pydantic models used throughout the handler:
remote response models, the canonical resource model and envelope models.
"""

from .progress import HandlerErrorCode, OperationStatus, ProgressEvent, ResourceHandlerRequest
from .remote import DescribeApplicationResult, ListTagsResult, Tag
from .resource import (
    CapacityUnitConfiguration,
    ChatConfiguration,
    ResourceModel,
    ResourceTag,
    ResponseConfiguration,
    ServerSideEncryptionConfiguration,
)

__all__ = [
    # Envelope models
    "HandlerErrorCode",
    "OperationStatus",
    "ProgressEvent",
    "ResourceHandlerRequest",

    # Remote models
    "DescribeApplicationResult",
    "ListTagsResult",
    "Tag",

    # Resource models
    "CapacityUnitConfiguration",
    "ChatConfiguration",
    "ResourceModel",
    "ResourceTag",
    "ResponseConfiguration",
    "ServerSideEncryptionConfiguration",
]
