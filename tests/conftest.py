"""
Pytest configuration and shared fixtures for the Q Business Application handler.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import os

# Environment must be in place before the observability singletons are imported
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "POWERTOOLS_SERVICE_NAME": "test-qbusiness-application",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",
})

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict
from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError

from qbusiness_application.dal import QBusinessClient
from qbusiness_application.handlers.utils.observability import metrics
from qbusiness_application.models.progress import ResourceHandlerRequest
from qbusiness_application.models.remote import DescribeApplicationResult, ListTagsResult
from qbusiness_application.models.resource import ResourceModel

APP_ID = "63451660-1596-4f1a-a3c8-e5f4b33d9fe5"
APP_ARN = f"arn:aws:qbusiness:us-east-1:123456:application/{APP_ID}"


def make_client_error(code: str, message: str, operation: str = "GetApplication") -> ClientError:
    """Build a botocore ClientError as raised by the qbusiness client."""
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


# Request fixtures
@pytest.fixture
def handler_request() -> ResourceHandlerRequest:
    """Read request for the test application."""
    return ResourceHandlerRequest(
        desired_resource_state=ResourceModel(application_id=APP_ID),
        aws_account_id="123456",
        aws_partition="aws",
        region="us-east-1",
        stack_id="Stack1",
    )


@pytest.fixture
def handler_event() -> Dict[str, Any]:
    """Serialized read request as delivered to the Lambda function."""
    return {
        "clientRequestToken": "4b90a7e4-b790-456b-a937-0cfdfa211dfe",
        "desiredResourceState": {"ApplicationId": APP_ID},
        "logicalResourceIdentifier": "MyApplication",
        "awsAccountId": "123456",
        "awsPartition": "aws",
        "region": "us-east-1",
        "stackId": "Stack1",
    }


# Remote response fixtures
@pytest.fixture
def get_application_response() -> Dict[str, Any]:
    """Full application response with every optional attribute present."""
    return {
        "applicationId": APP_ID,
        "roleArn": "role1",
        "createdAt": datetime.fromtimestamp(1697824935, tz=timezone.utc),
        "updatedAt": datetime.fromtimestamp(1697839335, tz=timezone.utc),
        "description": "this is a description, there are many like it but this one is mine.",
        "name": "Foobar",
        "status": "ACTIVE",
        "capacityUnitConfiguration": {"users": 10},
        "chatConfiguration": {
            "responseConfiguration": {
                "blockedPhrases": ["Guaranteed returns"],
                "blockedTopicsPrompt": "What is nifty?",
                "defaultMessage": "Welcome! Take a seat by the hearth.",
                "nonRetrievalResponseControlStatus": "ENABLED",
                "retrievalResponseControlStatus": "ENABLED",
            }
        },
        "serverSideEncryptionConfiguration": {"kmsKeyId": "keyblade"},
    }


@pytest.fixture
def minimal_application_response() -> Dict[str, Any]:
    """Application response without any optional configuration."""
    return {
        "applicationId": APP_ID,
        "roleArn": "role1",
        "createdAt": datetime.fromtimestamp(1697824935, tz=timezone.utc),
        "updatedAt": datetime.fromtimestamp(1697839335, tz=timezone.utc),
        "description": "desc",
        "name": "Foobar",
        "status": "ACTIVE",
    }


@pytest.fixture
def describe_result(get_application_response) -> DescribeApplicationResult:
    return DescribeApplicationResult.model_validate(get_application_response)


@pytest.fixture
def tags_result() -> ListTagsResult:
    return ListTagsResult.model_validate({"tags": [{"key": "Category", "value": "Chat Stuff"}]})


@pytest.fixture
def qbusiness_client() -> Mock:
    """Q Business client mock; configure return values per test."""
    return Mock(spec=QBusinessClient)


# Lambda context fixture
@dataclass
class FakeLambdaContext:
    function_name: str = "qbusiness-application-read"
    memory_limit_in_mb: int = 256
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:qbusiness-application-read"
    aws_request_id: str = "lambda-request-id"

    def get_remaining_time_in_millis(self) -> int:
        return 30000


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()


# Pytest configuration
def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset buffered metrics between tests."""
    metrics.clear_metrics()
    yield
    metrics.clear_metrics()
