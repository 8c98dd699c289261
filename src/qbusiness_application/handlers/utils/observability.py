"""
Centralized observability utilities for the resource handlers.

Shared AWS Lambda Powertools instances for the handler, logic and client
layers, and the helper recording the outcome of a read.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics, MetricUnit
from aws_lambda_powertools.tracing import Tracer

# Explicit namespace, takes precedence over POWERTOOLS_METRICS_NAMESPACE
METRICS_NAMESPACE = 'QBusinessApplication'

# Service name from POWERTOOLS_SERVICE_NAME, level from LOG_LEVEL
logger: Logger = Logger()

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "true"
tracer: Tracer = Tracer()

metrics = Metrics(namespace=METRICS_NAMESPACE)


def record_read_outcome(handler_error_code: str | None) -> None:
    """
    Emit the metrics and trace annotation of a finished read.

    Args:
        handler_error_code: Error code of a failed read, None on success
    """
    if handler_error_code is None:
        metrics.add_metric(name='ReadSucceeded', unit=MetricUnit.Count, value=1)
        return

    metrics.add_metric(name='ReadFailed', unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f'ReadFailed{handler_error_code}', unit=MetricUnit.Count, value=1)
    tracer.put_annotation('handler_error_code', handler_error_code)
