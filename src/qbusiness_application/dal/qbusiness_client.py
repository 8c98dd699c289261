"""
boto3 implementation of the Q Business client.

This module wraps a boto3 ``qbusiness`` client, parsing its responses into the
remote response models. Errors are logged and re-raised unchanged so the
logic layer can classify them.
"""

from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from qbusiness_application.handlers.models.env_vars import HandlerEnvVars
from qbusiness_application.handlers.utils.observability import logger, tracer
from qbusiness_application.models.remote import DescribeApplicationResult, ListTagsResult


class BotoQBusinessClient:
    """Q Business client backed by boto3."""

    def __init__(self, client: Any) -> None:
        """
        Initialize the client wrapper.

        Args:
            client: boto3 ``qbusiness`` client
        """
        self.client = client

    @classmethod
    def from_env(cls, region: str, env_vars: HandlerEnvVars) -> 'BotoQBusinessClient':
        """
        Build a client for a region with the retry policy from the environment.

        Args:
            region: AWS region of the resource
            env_vars: Handler environment variables

        Returns:
            Configured client wrapper
        """
        config = Config(
            region_name=region,
            retries={
                'max_attempts': env_vars.BOTO_MAX_ATTEMPTS,
                'mode': env_vars.BOTO_RETRY_MODE,
            },
            connect_timeout=env_vars.BOTO_CONNECT_TIMEOUT,
            read_timeout=env_vars.BOTO_READ_TIMEOUT,
        )
        client = boto3.client(
            'qbusiness',
            config=config,
            endpoint_url=env_vars.QBUSINESS_ENDPOINT_URL,
        )
        logger.debug(f'Q Business client initialized for region: {region}')
        return cls(client)

    @tracer.capture_method
    def describe_application(self, application_id: str) -> DescribeApplicationResult:
        """
        Fetch an application.

        Args:
            application_id: Identifier of the application

        Returns:
            Parsed application snapshot

        Raises:
            ClientError: If the service rejects the call
            BotoCoreError: If the call could not be completed
        """
        try:
            response = self.client.get_application(applicationId=application_id)
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            logger.error(f'Q Business error describing application {application_id}: {error_code}')
            raise
        except BotoCoreError as e:
            logger.error(f'Transport error describing application {application_id}: {e}')
            raise

        logger.debug(f'Successfully described application: {application_id}')
        return DescribeApplicationResult.model_validate(response)

    @tracer.capture_method
    def list_tags_for_resource(self, resource_arn: str) -> ListTagsResult:
        """
        Fetch the tags attached to a resource.

        Args:
            resource_arn: ARN of the resource

        Returns:
            Tags in service order

        Raises:
            ClientError: If the service rejects the call
            BotoCoreError: If the call could not be completed
        """
        try:
            response = self.client.list_tags_for_resource(resourceARN=resource_arn)
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            logger.error(f'Q Business error listing tags for {resource_arn}: {error_code}')
            raise
        except BotoCoreError as e:
            logger.error(f'Transport error listing tags for {resource_arn}: {e}')
            raise

        tags = ListTagsResult.model_validate(response)
        logger.debug(f'Listed {len(tags.tags)} tags for {resource_arn}')
        return tags
