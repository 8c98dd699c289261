"""
Integration tests for the boto3-backed Q Business client.

The underlying boto3 client is mocked; these tests cover request parameters,
response parsing, error propagation and client configuration.
"""

from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from conftest import APP_ARN, APP_ID, make_client_error
from qbusiness_application.dal import QBusinessClient, get_qbusiness_client
from qbusiness_application.dal.qbusiness_client import BotoQBusinessClient
from qbusiness_application.handlers.models.env_vars import HandlerEnvVars


@pytest.mark.integration
class TestBotoQBusinessClient:
    """Integration tests for BotoQBusinessClient."""

    def test_implements_protocol(self):
        assert isinstance(BotoQBusinessClient(Mock()), QBusinessClient)

    def test_describe_application(self, get_application_response):
        boto_client = Mock()
        boto_client.get_application.return_value = {
            **get_application_response,
            "ResponseMetadata": {"HTTPStatusCode": 200},
        }

        result = BotoQBusinessClient(boto_client).describe_application(APP_ID)

        boto_client.get_application.assert_called_once_with(applicationId=APP_ID)
        assert result.application_id == APP_ID
        assert result.name == "Foobar"
        assert result.capacity_unit_configuration.users == 10

    def test_describe_application_error_is_raised(self):
        boto_client = Mock()
        boto_client.get_application.side_effect = make_client_error("ResourceNotFoundException", "404")

        with pytest.raises(ClientError) as exc_info:
            BotoQBusinessClient(boto_client).describe_application(APP_ID)

        assert exc_info.value.response["Error"]["Code"] == "ResourceNotFoundException"

    def test_describe_application_transport_error_is_raised(self):
        boto_client = Mock()
        boto_client.get_application.side_effect = EndpointConnectionError(endpoint_url="https://localhost")

        with pytest.raises(EndpointConnectionError):
            BotoQBusinessClient(boto_client).describe_application(APP_ID)

    def test_list_tags_for_resource(self):
        boto_client = Mock()
        boto_client.list_tags_for_resource.return_value = {
            "tags": [{"key": "Category", "value": "Chat Stuff"}, {"key": "Team", "value": "Search"}],
        }

        result = BotoQBusinessClient(boto_client).list_tags_for_resource(APP_ARN)

        boto_client.list_tags_for_resource.assert_called_once_with(resourceARN=APP_ARN)
        assert [(tag.key, tag.value) for tag in result.tags] == [("Category", "Chat Stuff"), ("Team", "Search")]

    def test_list_tags_for_resource_without_tags(self):
        boto_client = Mock()
        boto_client.list_tags_for_resource.return_value = {"ResponseMetadata": {"HTTPStatusCode": 200}}

        assert BotoQBusinessClient(boto_client).list_tags_for_resource(APP_ARN).tags == []

    def test_list_tags_for_resource_error_is_raised(self):
        boto_client = Mock()
        boto_client.list_tags_for_resource.side_effect = make_client_error(
            "AccessDeniedException", "denied!", operation="ListTagsForResource"
        )

        with pytest.raises(ClientError):
            BotoQBusinessClient(boto_client).list_tags_for_resource(APP_ARN)


@pytest.mark.integration
class TestClientFactory:
    """Integration tests for client construction."""

    @patch("qbusiness_application.dal.qbusiness_client.boto3.client")
    def test_from_env(self, mock_boto_client):
        env_vars = HandlerEnvVars(
            BOTO_MAX_ATTEMPTS=4,
            BOTO_RETRY_MODE="standard",
            BOTO_READ_TIMEOUT=20,
            QBUSINESS_ENDPOINT_URL="http://localhost:4566",
        )

        client = BotoQBusinessClient.from_env(region="eu-west-1", env_vars=env_vars)

        assert client.client is mock_boto_client.return_value
        args, kwargs = mock_boto_client.call_args
        assert args == ("qbusiness",)
        assert kwargs["endpoint_url"] == "http://localhost:4566"
        config = kwargs["config"]
        assert config.region_name == "eu-west-1"
        assert config.retries == {"max_attempts": 4, "mode": "standard"}
        assert config.read_timeout == 20

    @patch("qbusiness_application.dal.qbusiness_client.boto3.client")
    def test_get_qbusiness_client(self, mock_boto_client):
        client = get_qbusiness_client(region="us-west-2")

        assert isinstance(client, BotoQBusinessClient)
        assert mock_boto_client.call_args.kwargs["config"].region_name == "us-west-2"
        assert mock_boto_client.call_args.kwargs["endpoint_url"] is None
