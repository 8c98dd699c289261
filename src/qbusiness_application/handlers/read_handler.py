"""
Read Handler - Lambda entry point for AWS::QBusiness::Application reads.

This module implements the handler layer: it validates the invocation event,
builds the Q Business client for the request region, delegates to the logic
layer and serializes the resulting progress event.
"""

from typing import Any, Dict

from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from qbusiness_application.dal import get_qbusiness_client
from qbusiness_application.handlers.utils.observability import logger, metrics, tracer
from qbusiness_application.logic.read_handler import ReadHandler
from qbusiness_application.models.progress import HandlerErrorCode, ProgressEvent, ResourceHandlerRequest


@tracer.capture_method
def read_application(event: Dict[str, Any]) -> ProgressEvent:
    """
    Validate the invocation event and read the application it names.

    Args:
        event: Handler request in its serialized (camelCase) form

    Returns:
        Terminal progress event
    """
    try:
        request = ResourceHandlerRequest.model_validate(event)
    except ValidationError as e:
        logger.error("Request validation failed", extra={
            "validation_errors": str(e),
            "error_count": e.error_count(),
        })
        metrics.add_metric(name="ValidationError", unit=MetricUnit.Count, value=1)
        return ProgressEvent.failed(
            error_code=HandlerErrorCode.INVALID_REQUEST,
            message="Invalid handler request",
        )

    desired_state = request.desired_resource_state
    if desired_state is None or not (desired_state.application_id or "").strip():
        logger.error("Request is missing ApplicationId")
        metrics.add_metric(name="ValidationError", unit=MetricUnit.Count, value=1)
        return ProgressEvent.failed(
            error_code=HandlerErrorCode.INVALID_REQUEST,
            message="ApplicationId is required",
        )

    client = get_qbusiness_client(region=request.region)
    return ReadHandler(client).handle_request(request)


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path="clientRequestToken", clear_state=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for application reads.

    Args:
        event: Handler request payload
        context: Lambda context object

    Returns:
        Serialized progress event
    """
    logger.info("Processing read request", extra={
        "stack_id": event.get("stackId"),
        "logical_resource_identifier": event.get("logicalResourceIdentifier"),
    })

    progress = read_application(event)

    logger.info("Read request completed", extra={
        "status": progress.status.value,
        "error_code": progress.error_code.value if progress.error_code else None,
    })
    return progress.to_response()
