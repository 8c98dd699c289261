"""
Lambda handlers for the Q Business Application resource.

Handlers parse the invocation event, delegate to the logic layer and
serialize the progress event returned to the caller. They use AWS Lambda
Powertools for structured logging, tracing and metrics.
"""

from qbusiness_application.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
