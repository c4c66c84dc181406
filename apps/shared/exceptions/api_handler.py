"""
DRF exception handler

- Translates business exceptions -> HTTP responses
- Provides a consistent error format across all APIs
- Handles both our business exceptions and DRF exceptions

Flow:
DAL (Django exceptions) -> Business exceptions -> API Handler -> HTTP responses
"""

import logging
import traceback
from datetime import datetime
from datetime import timezone

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.shared.exceptions import AppError
from apps.shared.exceptions import ResourceNotFoundError
from apps.shared.exceptions import ServiceUnavailableError
from apps.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Exception handler with business -> HTTP translation.

    Called for every exception raised inside a DRF view.

    Args:
        exc: The exception instance
        context: View context (request, view, args, kwargs)

    Returns:
        Response with error details and appropriate HTTP status
    """
    request_info = _extract_request_info(context.get('request'), context.get('view'))

    # Let DRF handle its standard exceptions first
    response = exception_handler(exc, context)
    if response is not None:
        logger.info(f'DRF exception in API: {type(exc).__name__}: {exc!s} | Request: {request_info}')
        return _format_drf_response(response, exc)

    if isinstance(exc, ResourceNotFoundError):
        return _handle_resource_not_found(exc, request_info)

    elif isinstance(exc, ValidationError):
        return _handle_validation_error(exc, request_info)

    elif isinstance(exc, ServiceUnavailableError):
        return _handle_service_unavailable(exc, request_info)

    elif isinstance(exc, AppError):
        return _handle_generic_app_error(exc, request_info)

    return _handle_unhandled_exception(exc, request_info)


# =============================================================================
# Business Exception Handlers
# =============================================================================


def _handle_resource_not_found(exc: ResourceNotFoundError, request_info: dict) -> Response:
    """Handle resource not found errors -> 404"""
    _log_business_exception(exc, request_info, level='info')

    # Context is not echoed back: a hidden resource must read exactly like a missing one
    return Response(
        {
            'error': 'Resource Not Found',
            'error_code': exc.error_code,
            'message': str(exc),
            'timestamp': _get_timestamp(),
        },
        status=status.HTTP_404_NOT_FOUND,
    )


def _handle_validation_error(exc: ValidationError, request_info: dict) -> Response:
    """Handle validation errors -> 400"""
    _log_business_exception(exc, request_info, level='info')

    response_data = {
        'error': 'Validation Error',
        'error_code': exc.error_code,
        'message': str(exc),
        'timestamp': _get_timestamp(),
    }
    if exc.field_errors:
        response_data['field_errors'] = exc.field_errors

    return Response(response_data, status=status.HTTP_400_BAD_REQUEST)


def _handle_service_unavailable(exc: ServiceUnavailableError, request_info: dict) -> Response:
    """Handle service unavailable errors -> 503"""
    _log_business_exception(exc, request_info, level='error')

    return Response(
        {
            'error': 'Service Unavailable',
            'error_code': exc.error_code,
            'message': 'A required service is temporarily unavailable',
            'timestamp': _get_timestamp(),
        },
        status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


def _handle_generic_app_error(exc: AppError, request_info: dict) -> Response:
    """Handle generic app errors -> 400"""
    _log_business_exception(exc, request_info, level='error')

    return Response(
        {
            'error': 'Application Error',
            'error_code': exc.error_code,
            'message': str(exc),
            'timestamp': _get_timestamp(),
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def _handle_unhandled_exception(exc, request_info: dict) -> Response:
    """Handle unexpected exceptions -> 500"""
    logger.error(
        f'UNHANDLED EXCEPTION in API: {type(exc).__name__}: {exc!s}\n'
        f'Request: {request_info}\n'
        f'Traceback: {traceback.format_exc()}'
    )

    return Response(
        {
            'error': 'Internal Server Error',
            'error_code': 'internal_server_error',
            'message': 'An unexpected error occurred. Please try again later.',
            'timestamp': _get_timestamp(),
            'details': _get_debug_details(exc) if settings.DEBUG else {},
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# =============================================================================
# Utility Functions
# =============================================================================


def _format_drf_response(response: Response, exc: Exception) -> Response:
    """Format DRF responses to match our consistent error format"""
    if isinstance(response.data, dict):
        response.data['timestamp'] = _get_timestamp()
        response.data['error_code'] = getattr(exc, 'default_code', type(exc).__name__)
    return response


def _extract_request_info(request, view) -> dict:
    """Extract useful request info for logging"""
    if not request:
        return {'method': 'unknown', 'path': 'unknown', 'user': 'unknown'}

    return {
        'method': getattr(request, 'method', 'unknown'),
        'path': getattr(request, 'path', 'unknown'),
        'user': getattr(request.user, 'id', 'anonymous') if hasattr(request, 'user') else 'unknown',
        'view': f'{view.__class__.__module__}.{view.__class__.__name__}' if view else 'unknown',
    }


def _log_business_exception(exc: AppError, request_info: dict, level: str = 'warning'):
    """Log business exceptions with appropriate level"""
    log_msg = f'Business exception in API: {type(exc).__name__}: {exc!s} | Request: {request_info}'

    if level == 'info':
        logger.info(log_msg)
    elif level == 'error':
        logger.error(log_msg)
    else:
        logger.warning(log_msg)


def _get_timestamp() -> str:
    """Get ISO timestamp for error responses"""
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


def _get_debug_details(exc: Exception) -> dict:
    """Get debug details for development"""
    return {
        'exception_type': type(exc).__name__,
        'exception_message': str(exc),
    }
