"""
Read handler for AWS::QBusiness::Application.

Reconciles the resource model against the live state of the application in
two sequential calls: DescribeApplication, then ListTagsForResource. The first
failing call ends the read with a FAILED progress event; no partial model is
ever returned.
"""

from qbusiness_application.dal import QBusinessClient
from qbusiness_application.handlers.utils.observability import logger, record_read_outcome, tracer
from qbusiness_application.logic.errors import get_error_message, get_service_error_code, to_handler_error_code
from qbusiness_application.logic.translator import build_application_arn, translate_from_read_response
from qbusiness_application.models.progress import ProgressEvent, ResourceHandlerRequest


class ReadHandler:
    """Reads an application and its tags into a resource model."""

    def __init__(self, client: QBusinessClient) -> None:
        self.client = client

    @tracer.capture_method
    def handle_request(self, request: ResourceHandlerRequest) -> ProgressEvent:
        """
        Read the application identified by the request's desired state.

        The application id must be present; the invocation envelope rejects
        requests without one before calling this method.

        Args:
            request: Handler request carrying the application id

        Returns:
            SUCCESS with the merged resource model, or FAILED with an error code
        """
        application_id = request.desired_resource_state.application_id
        application_arn = build_application_arn(
            partition=request.aws_partition,
            region=request.region,
            account_id=request.aws_account_id,
            application_id=application_id,
        )
        logger.append_keys(application_id=application_id)
        tracer.put_annotation('application_id', application_id)

        try:
            application = self.client.describe_application(application_id)
        except Exception as error:
            return self._failed('DescribeApplication', application_id, error)

        try:
            tags = self.client.list_tags_for_resource(application_arn)
        except Exception as error:
            return self._failed('ListTagsForResource', application_id, error)

        resource_model = translate_from_read_response(application, tags, application_arn)

        logger.info('Successfully read application', extra={
            'status': resource_model.status,
            'tag_count': len(resource_model.tags or []),
        })
        record_read_outcome(None)
        return ProgressEvent.success(resource_model)

    def _failed(self, operation: str, application_id: str, error: Exception) -> ProgressEvent:
        handler_error_code = to_handler_error_code(error)
        message = get_error_message(error)

        logger.error(f'{operation} failed for application {application_id}', extra={
            'operation': operation,
            'error_code': get_service_error_code(error),
            'handler_error_code': handler_error_code.value,
            'error': message,
        })
        record_read_outcome(handler_error_code.value)

        return ProgressEvent.failed(error_code=handler_error_code, message=message)
