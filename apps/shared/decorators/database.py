import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError

from apps.shared.exceptions import ResourceNotFoundError
from apps.shared.exceptions import ServiceUnavailableError
from apps.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)


class DatabaseErrorHandler:
    """
    Translates Django/database exceptions raised inside DAL methods into
    business exceptions while keeping the original error in the context.
    """

    def __init__(self, operation_type: str = 'read'):
        self.operation_type = operation_type
        self.error_mappings = {
            ObjectDoesNotExist: self._handle_not_found_error,
            DjangoValidationError: self._handle_validation_error,
            DatabaseError: self._handle_database_error,
        }

    def _handle_not_found_error(self, error: ObjectDoesNotExist, context: dict[str, Any]) -> ResourceNotFoundError:
        model_name = context.get('model_name', 'Resource')
        logger.debug(f'{model_name} not found in {self.operation_type}: {error}')
        return ResourceNotFoundError(
            message=f'{model_name} not found',
            error_code=f'{model_name.lower()}_not_found',
            context=context,
        )

    def _handle_validation_error(self, error: DjangoValidationError, context: dict[str, Any]) -> ValidationError:
        logger.warning(
            f'Validation error in {self.operation_type}: {error}',
            extra={'operation': self.operation_type, 'context': context},
        )
        field_errors = getattr(error, 'message_dict', {}) if hasattr(error, 'error_dict') else {}
        return ValidationError(
            message=f'Validation failed: {error!s}',
            field_errors=field_errors,
            error_code=f'{self.operation_type}_validation_error',
            context={'original_error': str(error), **context},
        )

    def _handle_database_error(self, error: DatabaseError, context: dict[str, Any]) -> ServiceUnavailableError:
        logger.critical(
            f'Database infrastructure error in {self.operation_type}: {error}',
            extra={'operation': self.operation_type, 'context': context},
            exc_info=True,
        )
        return ServiceUnavailableError(
            message='Database service is temporarily unavailable',
            error_code=f'{self.operation_type}_database_error',
            context={'original_error': str(error), 'infrastructure_failure': True, **context},
        )

    def handle_exception(self, error: Exception, context: dict[str, Any]) -> Exception:
        """Map an exception to its business counterpart; unknown errors become ServiceUnavailableError."""
        for error_type, handler in self.error_mappings.items():
            if isinstance(error, error_type):
                return handler(error, context)

        logger.error(
            f'Unexpected error in {self.operation_type}: {error}',
            extra={'operation': self.operation_type, 'context': context},
            exc_info=True,
        )
        return ServiceUnavailableError(
            message=f'Unexpected database error: {error!s}',
            error_code=f'{self.operation_type}_unexpected_error',
            context={'original_error': str(error), 'unexpected': True, **context},
        )


def handle_db_errors(operation_type: str = 'read', model_name: str = None):
    """
    Decorator for centralized database error handling in DAL methods.

    Business exceptions raised by the wrapped method pass through untouched.

    Usage:
        @handle_db_errors(operation_type='read', model_name='Event')
        def get_event(self, event_id: int) -> EventRecord | None:
            ...
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs) -> Any:
            try:
                return func(self, *args, **kwargs)
            except (ResourceNotFoundError, ServiceUnavailableError, ValidationError):
                raise
            except Exception as e:
                context = {
                    'method': func.__name__,
                    'class': self.__class__.__name__,
                    'operation': operation_type,
                }
                if model_name:
                    context['model_name'] = model_name
                raise DatabaseErrorHandler(operation_type).handle_exception(e, context) from e

        return wrapper

    return decorator
