"""
Shared exceptions for the event access application.

Business exceptions live in core_exceptions.py; HTTP mapping happens in
api_handler.py.
"""

from apps.shared.exceptions.core_exceptions import AppError
from apps.shared.exceptions.core_exceptions import ResourceNotFoundError
from apps.shared.exceptions.core_exceptions import ServiceUnavailableError
from apps.shared.exceptions.core_exceptions import ValidationError

__all__ = [
    'AppError',
    'ResourceNotFoundError',
    'ServiceUnavailableError',
    'ValidationError',
]
