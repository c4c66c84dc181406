"""
Shared building blocks for the event access application

- Base classes (BaseModel, BaseAPIView)
- Exceptions (business exception hierarchy and the DRF handler)
- Interfaces (IAccessStore)
- Decorators (database error translation)
- Container (service wiring)

Import specific classes directly from their modules:
- from apps.shared.base.base_api_view import BaseAPIView
- from apps.shared.interfaces.access_store import IAccessStore
"""

# Empty init to avoid circular imports
