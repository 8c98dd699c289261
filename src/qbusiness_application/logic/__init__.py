"""
Business logic layer: reconciliation of the resource model with the live
application, translation of remote responses and error classification.
"""

from qbusiness_application.logic.errors import to_handler_error_code
from qbusiness_application.logic.read_handler import ReadHandler
from qbusiness_application.logic.translator import translate_from_read_response

__all__ = [
    "ReadHandler",
    "to_handler_error_code",
    "translate_from_read_response",
]
