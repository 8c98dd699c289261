"""
Data Access Layer (DAL) for the Q Business API.

This module defines the client interface the resource handlers depend on and
the factory building its boto3-backed implementation. Implementations raise
botocore's ClientError for service errors and BotoCoreError for transport
errors; retries and timeouts belong to the botocore configuration.
"""

from typing import Protocol, runtime_checkable

from qbusiness_application.models.remote import DescribeApplicationResult, ListTagsResult


@runtime_checkable
class QBusinessClient(Protocol):
    """Protocol defining the Q Business calls used by the handlers."""

    def describe_application(self, application_id: str) -> DescribeApplicationResult:
        """Fetch the authoritative state of an application."""
        ...

    def list_tags_for_resource(self, resource_arn: str) -> ListTagsResult:
        """Fetch the tags attached to a resource."""
        ...


def get_qbusiness_client(region: str) -> QBusinessClient:
    """
    Factory function to get the Q Business client for a region.

    Args:
        region: AWS region of the resource

    Returns:
        Q Business client instance
    """
    # Import here to avoid circular imports
    from qbusiness_application.dal.qbusiness_client import BotoQBusinessClient
    from qbusiness_application.handlers.models.env_vars import get_handler_env_vars

    return BotoQBusinessClient.from_env(region=region, env_vars=get_handler_env_vars())


__all__ = [
    'QBusinessClient',
    'get_qbusiness_client',
]
