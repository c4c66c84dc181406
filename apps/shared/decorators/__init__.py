"""Shared decorators."""

from apps.shared.decorators.database import handle_db_errors

__all__ = [
    'handle_db_errors',
]
