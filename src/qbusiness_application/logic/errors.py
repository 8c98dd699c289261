"""
Classification of remote failures into handler error codes.

Every exception raised while talking to Q Business is reduced to one
HandlerErrorCode. Service errors are recognised by the error code botocore
parses from the response; anything unrecognised falls back to
GeneralServiceException.
"""

from botocore.exceptions import ClientError, ConnectTimeoutError, ReadTimeoutError

from qbusiness_application.models.progress import HandlerErrorCode


def get_service_error_code(error: Exception) -> str | None:
    """Return the service error code of a ClientError, None for other errors."""
    if isinstance(error, ClientError):
        return error.response.get('Error', {}).get('Code')
    return None


def get_error_message(error: Exception) -> str:
    """Return the remote message of an error, falling back to its string form."""
    if isinstance(error, ClientError):
        message = error.response.get('Error', {}).get('Message')
        if message:
            return message
    return str(error) or type(error).__name__


def to_handler_error_code(error: Exception) -> HandlerErrorCode:
    """
    Map a remote failure to its handler error code.

    Args:
        error: Exception raised by a Q Business client call

    Returns:
        Handler error code, GeneralServiceException when unclassified
    """
    match error:
        case ClientError():
            return _from_service_error_code(get_service_error_code(error))
        # deadlines are enforced by botocore and reported as throttling
        case ConnectTimeoutError() | ReadTimeoutError():
            return HandlerErrorCode.THROTTLING
        case _:
            return HandlerErrorCode.GENERAL_SERVICE_EXCEPTION


def _from_service_error_code(service_error_code: str | None) -> HandlerErrorCode:
    match service_error_code:
        case 'ValidationException':
            return HandlerErrorCode.INVALID_REQUEST
        case 'ResourceNotFoundException':
            return HandlerErrorCode.NOT_FOUND
        case 'ThrottlingException':
            return HandlerErrorCode.THROTTLING
        case 'AccessDeniedException':
            return HandlerErrorCode.ACCESS_DENIED
        case 'InternalServerException':
            return HandlerErrorCode.GENERAL_SERVICE_EXCEPTION
        case _:
            return HandlerErrorCode.GENERAL_SERVICE_EXCEPTION
