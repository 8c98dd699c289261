"""
Q Business Application resource handler.

This package implements the Read handler of the AWS::QBusiness::Application
resource type following a three-layer architecture:

- handlers: Lambda entry point, configuration and observability
- logic: read reconciliation, translation and error classification
- dal: Q Business client interface and its boto3 implementation
- models: remote responses, canonical resource model and envelope models
"""

__version__ = "1.0.0"

from qbusiness_application.handlers.utils.observability import logger, tracer, metrics
from qbusiness_application.models.progress import HandlerErrorCode, OperationStatus, ProgressEvent
from qbusiness_application.models.resource import ResourceModel

__all__ = [
    "HandlerErrorCode",
    "OperationStatus",
    "ProgressEvent",
    "ResourceModel",
    "logger",
    "tracer",
    "metrics",
]
