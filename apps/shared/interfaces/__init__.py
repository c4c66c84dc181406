"""
Shared Interfaces Module

Abstract interfaces used for dependency injection, so services can be
tested against fakes instead of the database.
"""

from .access_store import IAccessStore

__all__ = [
    'IAccessStore',
]
